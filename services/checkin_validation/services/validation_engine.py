"""Motor de validación y check-in de tickets"""
import logging
import uuid
from typing import Callable, List, Optional

from services.checkin_validation.models.checkin import (
    Ticket,
    CheckInRecord,
    CheckInStatus,
    ValidationMethod,
    ValidationResult
)
from services.checkin_validation.services.checkin_store import CheckInStore
from shared.utils.clock import now_ms
from shared.utils.qr_generator import generate_check_in_qr_code, QR_CODE_LENGTH

logger = logging.getLogger(__name__)

MAX_VALIDATION_ATTEMPTS = 10

MSG_NOT_FOUND = "Ticket not found"
MSG_ALREADY_USED = "Ticket already used for check-in"
MSG_EXPIRED = "Ticket has expired"
MSG_TOO_MANY_ATTEMPTS = "Too many validation attempts"
MSG_VALID = "Ticket is valid"


class ValidationEngine:
    """
    Máquina de estados ticket / check-in

    Nunca lanza excepciones por tickets inexistentes o en estado inválido:
    responde con `valid=False` o `None` y el caller interpreta el resultado.
    """

    def __init__(
        self,
        store: CheckInStore,
        max_validation_attempts: int = MAX_VALIDATION_ATTEMPTS,
        qr_code_length: int = QR_CODE_LENGTH,
        clock: Callable[[], int] = now_ms
    ):
        self.store = store
        self.max_validation_attempts = max_validation_attempts
        self.qr_code_length = qr_code_length
        self.clock = clock

    # ==================== TICKETS ====================

    def register_ticket(
        self,
        event_id: str,
        nft_token_id: str,
        ticket_type: str,
        expires_at: int
    ) -> Ticket:
        """Registrar un ticket nuevo para un evento"""
        ticket = self.store.tickets.create(
            event_id=event_id,
            nft_token_id=nft_token_id,
            ticket_type=ticket_type,
            expires_at=expires_at,
            created_at=self.clock()
        )
        logger.info(f"Ticket registrado: {ticket.id} (evento {event_id}, token {nft_token_id})")
        return ticket.model_copy()

    def get_ticket(self, ticket_id: str) -> Optional[Ticket]:
        with self.store.lock:
            ticket = self.store.tickets.get_by_id(ticket_id)
            return ticket.model_copy() if ticket else None

    def get_ticket_by_token(self, nft_token_id: str) -> Optional[Ticket]:
        with self.store.lock:
            ticket = self.store.tickets.get_by_token(nft_token_id)
            return ticket.model_copy() if ticket else None

    def list_tickets(self) -> List[Ticket]:
        with self.store.lock:
            return [t.model_copy() for t in self.store.tickets.list_all()]

    # ==================== VALIDACIÓN ====================

    def _rejection_reason(self, ticket: Optional[Ticket], now: int) -> Optional[str]:
        """Primer motivo por el que el ticket no es elegible, o None"""
        if ticket is None:
            return MSG_NOT_FOUND
        if ticket.is_used:
            return MSG_ALREADY_USED
        if ticket.expires_at < now:
            return MSG_EXPIRED
        return None

    def validate_ticket(self, ticket_id: str) -> ValidationResult:
        """
        Validar un ticket sin consumirlo

        Cada validación exitosa incrementa validation_attempts. Cuando el
        contador ya supera el máximo, las siguientes validaciones se rechazan
        (rate limiting de sondeos repetidos sobre el mismo ticket).
        """
        with self.store.lock:
            now = self.clock()
            ticket = self.store.tickets.get_by_id(ticket_id)

            reason = self._rejection_reason(ticket, now)
            if reason is None and ticket.validation_attempts > self.max_validation_attempts:
                reason = MSG_TOO_MANY_ATTEMPTS

            if reason is not None:
                logger.debug(f"Validación rechazada para ticket {ticket_id}: {reason}")
                return ValidationResult(valid=False, message=reason)

            ticket.validation_attempts += 1
            ticket.last_validation_attempt = now

            return ValidationResult(
                valid=True,
                message=MSG_VALID,
                ticket_id=ticket.id,
                event_id=ticket.event_id
            )

    # ==================== CHECK-IN ====================

    def perform_check_in(
        self,
        ticket_id: str,
        user_id: str,
        nft_token_id: str,
        event_id: str,
        validation_method: ValidationMethod,
        location: Optional[str] = None,
        scanned_by: Optional[str] = None
    ) -> Optional[CheckInRecord]:
        """
        Consumir el ticket y crear su registro de check-in

        Marcar el ticket como usado y agregar el registro al ledger ocurre bajo
        el lock del store: ningún caller ve un ticket usado sin su registro.
        De dos check-ins concurrentes sobre el mismo ticket, solo uno gana.

        Returns:
            CheckInRecord creado, o None si el ticket no existe, ya fue usado
            o expiró (sin modificar ningún estado)
        """
        with self.store.lock:
            now = self.clock()
            ticket = self.store.tickets.get_by_id(ticket_id)

            reason = self._rejection_reason(ticket, now)
            if reason is not None:
                logger.warning(f"Check-in rechazado para ticket {ticket_id} (usuario {user_id}): {reason}")
                return None

            record = CheckInRecord(
                id=str(uuid.uuid4()),
                ticket_id=ticket_id,
                nft_token_id=nft_token_id,
                user_id=user_id,
                event_id=event_id,
                qr_code=generate_check_in_qr_code(
                    ticket_id, nft_token_id, now, length=self.qr_code_length
                ),
                status=CheckInStatus.VALID,
                check_in_time=now,
                validation_method=validation_method,
                location=location,
                scanned_by=scanned_by,
                created_at=now,
                updated_at=now
            )

            ticket.is_used = True
            ticket.used_at = now
            self.store.check_ins.append(record)

        logger.info(f"Check-in {record.id} registrado para ticket {ticket_id} (usuario {user_id})")
        return record.model_copy()

    def get_check_in(self, check_in_id: str) -> Optional[CheckInRecord]:
        record = self.store.check_ins.get_by_id(check_in_id)
        return record.model_copy() if record else None

    def get_check_in_by_ticket(self, ticket_id: str) -> Optional[CheckInRecord]:
        record = self.store.check_ins.get_by_ticket(ticket_id)
        return record.model_copy() if record else None

    def get_user_check_ins(self, user_id: str) -> List[CheckInRecord]:
        return [r.model_copy() for r in self.store.check_ins.list_by_user(user_id)]

    def get_event_check_ins(self, event_id: str) -> List[CheckInRecord]:
        return [r.model_copy() for r in self.store.check_ins.list_by_event(event_id)]

    def list_check_ins(self) -> List[CheckInRecord]:
        return [r.model_copy() for r in self.store.check_ins.list_all()]
