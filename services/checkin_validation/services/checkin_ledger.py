"""Ledger en memoria de check-ins completados"""
import threading
from typing import List, Optional

from services.checkin_validation.models.checkin import CheckInRecord


class CheckInLedger:
    """
    Registros de check-in en orden de inserción

    No valida unicidad por ticket; eso es responsabilidad del ValidationEngine.
    """

    def __init__(self):
        self._records: List[CheckInRecord] = []
        self._lock = threading.RLock()

    def append(self, record: CheckInRecord) -> None:
        with self._lock:
            self._records.append(record)

    def get_by_id(self, check_in_id: str) -> Optional[CheckInRecord]:
        with self._lock:
            return next((r for r in self._records if r.id == check_in_id), None)

    def get_by_ticket(self, ticket_id: str) -> Optional[CheckInRecord]:
        with self._lock:
            return next((r for r in self._records if r.ticket_id == ticket_id), None)

    def list_by_user(self, user_id: str) -> List[CheckInRecord]:
        with self._lock:
            return [r for r in self._records if r.user_id == user_id]

    def list_by_event(self, event_id: str) -> List[CheckInRecord]:
        with self._lock:
            return [r for r in self._records if r.event_id == event_id]

    def list_all(self) -> List[CheckInRecord]:
        with self._lock:
            return list(self._records)
