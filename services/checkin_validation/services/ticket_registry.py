"""Registro en memoria de tickets"""
import threading
import uuid
from typing import List, Optional

from services.checkin_validation.models.checkin import Ticket
from shared.utils.clock import now_ms


class TicketRegistry:
    """Colección de tickets en orden de inserción"""

    def __init__(self):
        self._tickets: List[Ticket] = []
        self._lock = threading.RLock()

    def create(
        self,
        event_id: str,
        nft_token_id: str,
        ticket_type: str,
        expires_at: int,
        created_at: Optional[int] = None
    ) -> Ticket:
        """
        Crear y guardar un ticket nuevo sin usar

        No se detectan tokens duplicados: varios tickets pueden compartir
        el mismo nft_token_id.
        """
        ticket = Ticket(
            id=str(uuid.uuid4()),
            event_id=event_id,
            nft_token_id=nft_token_id,
            ticket_type=ticket_type,
            is_used=False,
            expires_at=expires_at,
            validation_attempts=0,
            created_at=created_at if created_at is not None else now_ms()
        )
        with self._lock:
            self._tickets.append(ticket)
        return ticket

    def get_by_id(self, ticket_id: str) -> Optional[Ticket]:
        with self._lock:
            return next((t for t in self._tickets if t.id == ticket_id), None)

    def get_by_token(self, nft_token_id: str) -> Optional[Ticket]:
        """Primer ticket registrado con ese token"""
        with self._lock:
            return next((t for t in self._tickets if t.nft_token_id == nft_token_id), None)

    def list_by_event(self, event_id: str) -> List[Ticket]:
        with self._lock:
            return [t for t in self._tickets if t.event_id == event_id]

    def list_all(self) -> List[Ticket]:
        with self._lock:
            return list(self._tickets)
