"""Rutas de tickets y check-in"""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import List
import logging

from shared.dependencies import get_validation_engine, get_stats_service
from shared.utils.rate_limiter import limiter, RATE_LIMITS
from services.checkin_validation.models.checkin import (
    Ticket,
    CheckInRecord,
    ValidationResult,
    EventStats,
    RegisterTicketRequest,
    CheckInRequest
)
from services.checkin_validation.services.validation_engine import ValidationEngine
from services.checkin_validation.services.stats_service import StatsService

logger = logging.getLogger(__name__)

router = APIRouter()


def _missing_fields(payload, fields: List[str]) -> List[str]:
    """Campos requeridos ausentes, nulos, vacíos o en cero"""
    return [f for f in fields if getattr(payload, f) in (None, "", 0)]


def _internal_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Error al {action}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(e)
    )


# ==================== TICKETS ====================

@router.post("/tickets", response_model=Ticket, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMITS["default"])
def register_ticket(
    request: Request,
    payload: RegisterTicketRequest,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Registrar un ticket ligado a un token NFT"""
    missing = _missing_fields(payload, ["event_id", "nft_token_id", "ticket_type", "expires_at"])
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required"
        )

    try:
        return engine.register_ticket(
            event_id=payload.event_id,
            nft_token_id=payload.nft_token_id,
            ticket_type=payload.ticket_type,
            expires_at=payload.expires_at
        )
    except Exception as e:
        raise _internal_error("registrar ticket", e)


@router.get("/tickets", response_model=List[Ticket])
@limiter.limit(RATE_LIMITS["public"])
def list_tickets(
    request: Request,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Listar todos los tickets en orden de registro"""
    try:
        return engine.list_tickets()
    except Exception as e:
        raise _internal_error("listar tickets", e)


@router.get("/tickets/by-token/{nft_token_id}", response_model=Ticket)
@limiter.limit(RATE_LIMITS["public"])
def get_ticket_by_token(
    request: Request,
    nft_token_id: str,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Obtener el primer ticket registrado para un token NFT"""
    try:
        ticket = engine.get_ticket_by_token(nft_token_id)
    except Exception as e:
        raise _internal_error("obtener ticket por token", e)

    if not ticket:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Ticket not found"
        )
    return ticket


@router.get("/tickets/{ticket_id}", response_model=Ticket)
@limiter.limit(RATE_LIMITS["public"])
def get_ticket(
    request: Request,
    ticket_id: str,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Obtener un ticket por ID"""
    try:
        ticket = engine.get_ticket(ticket_id)
    except Exception as e:
        raise _internal_error("obtener ticket", e)

    if not ticket:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Ticket not found"
        )
    return ticket


@router.get("/tickets/{ticket_id}/validate", response_model=ValidationResult)
@limiter.limit(RATE_LIMITS["validation"])
def validate_ticket(
    request: Request,
    ticket_id: str,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """
    Validar un ticket sin consumirlo

    Siempre responde 200; el resultado indica `valid` y el motivo.
    """
    try:
        return engine.validate_ticket(ticket_id)
    except Exception as e:
        raise _internal_error("validar ticket", e)


@router.get("/tickets/{ticket_id}/check-in", response_model=CheckInRecord)
@limiter.limit(RATE_LIMITS["public"])
def get_ticket_check_in(
    request: Request,
    ticket_id: str,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Obtener el check-in asociado a un ticket"""
    try:
        check_in = engine.get_check_in_by_ticket(ticket_id)
    except Exception as e:
        raise _internal_error("obtener check-in del ticket", e)

    if not check_in:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Check-in record not found"
        )
    return check_in


# ==================== CHECK-IN ====================

@router.post("/check-in", response_model=CheckInRecord, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMITS["checkin"])
def perform_check_in(
    request: Request,
    payload: CheckInRequest,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Consumir un ticket y registrar el check-in"""
    missing = _missing_fields(
        payload, ["ticket_id", "user_id", "nft_token_id", "event_id", "validation_method"]
    )
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Required fields are missing"
        )

    try:
        check_in = engine.perform_check_in(
            ticket_id=payload.ticket_id,
            user_id=payload.user_id,
            nft_token_id=payload.nft_token_id,
            event_id=payload.event_id,
            validation_method=payload.validation_method,
            location=payload.location,
            scanned_by=payload.scanned_by
        )
    except Exception as e:
        raise _internal_error("realizar check-in", e)

    if not check_in:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Check-in failed - invalid ticket"
        )
    return check_in


@router.get("/check-in/{check_in_id}", response_model=CheckInRecord)
@limiter.limit(RATE_LIMITS["public"])
def get_check_in(
    request: Request,
    check_in_id: str,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Obtener un registro de check-in por ID"""
    try:
        check_in = engine.get_check_in(check_in_id)
    except Exception as e:
        raise _internal_error("obtener check-in", e)

    if not check_in:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Check-in record not found"
        )
    return check_in


@router.get("/check-ins", response_model=List[CheckInRecord])
@limiter.limit(RATE_LIMITS["public"])
def list_check_ins(
    request: Request,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Listar todos los check-ins en orden de creación"""
    try:
        return engine.list_check_ins()
    except Exception as e:
        raise _internal_error("listar check-ins", e)


@router.get("/user/{user_id}/check-ins", response_model=List[CheckInRecord])
@limiter.limit(RATE_LIMITS["public"])
def get_user_check_ins(
    request: Request,
    user_id: str,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Check-ins de un usuario en orden de creación"""
    try:
        return engine.get_user_check_ins(user_id)
    except Exception as e:
        raise _internal_error("obtener check-ins del usuario", e)


# ==================== EVENTOS ====================

@router.get("/event/{event_id}/check-ins", response_model=List[CheckInRecord])
@limiter.limit(RATE_LIMITS["public"])
def get_event_check_ins(
    request: Request,
    event_id: str,
    engine: ValidationEngine = Depends(get_validation_engine)
):
    """Check-ins de un evento en orden de creación"""
    try:
        return engine.get_event_check_ins(event_id)
    except Exception as e:
        raise _internal_error("obtener check-ins del evento", e)


@router.get("/event/{event_id}/stats", response_model=EventStats)
@limiter.limit(RATE_LIMITS["public"])
def get_event_stats(
    request: Request,
    event_id: str,
    stats_service: StatsService = Depends(get_stats_service)
):
    """Estadísticas de check-in de un evento"""
    try:
        return stats_service.get_event_statistics(event_id)
    except Exception as e:
        raise _internal_error("obtener estadísticas del evento", e)
