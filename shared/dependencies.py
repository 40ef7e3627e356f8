"""Dependencies de FastAPI para acceder a los componentes del core"""
from fastapi import FastAPI, Request

from app.core.config import settings
from services.checkin_validation.services.checkin_store import CheckInStore
from services.checkin_validation.services.validation_engine import ValidationEngine
from services.checkin_validation.services.stats_service import StatsService


def init_core(app: FastAPI) -> None:
    """Crear el store en memoria y los servicios que operan sobre él"""
    store = CheckInStore()
    app.state.checkin_store = store
    app.state.validation_engine = ValidationEngine(
        store,
        max_validation_attempts=settings.MAX_VALIDATION_ATTEMPTS,
        qr_code_length=settings.QR_CODE_LENGTH
    )
    app.state.stats_service = StatsService(store)


def get_validation_engine(request: Request) -> ValidationEngine:
    """ValidationEngine creado en el lifespan de la aplicación"""
    return request.app.state.validation_engine


def get_stats_service(request: Request) -> StatsService:
    """StatsService creado en el lifespan de la aplicación"""
    return request.app.state.stats_service
