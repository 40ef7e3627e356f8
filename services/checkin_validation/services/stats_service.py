"""Servicio para cálculo de estadísticas de check-in por evento"""
from services.checkin_validation.models.checkin import EventStats
from services.checkin_validation.services.checkin_store import CheckInStore


class StatsService:
    """Agregados de solo lectura sobre el store; no guarda estado propio"""

    def __init__(self, store: CheckInStore):
        self.store = store

    def get_event_statistics(self, event_id: str) -> EventStats:
        """
        Obtener estadísticas de check-in de un evento

        Args:
            event_id: ID del evento

        Returns:
            EventStats con total de tickets, check-ins, tasa (%) y tickets sin usar
        """
        with self.store.lock:
            event_tickets = self.store.tickets.list_by_event(event_id)
            checked_in_count = len(self.store.check_ins.list_by_event(event_id))
            unused_tickets = sum(1 for t in event_tickets if not t.is_used)

        total_tickets = len(event_tickets)
        check_in_rate = (checked_in_count / total_tickets) * 100 if total_tickets > 0 else 0

        return EventStats(
            total_tickets=total_tickets,
            checked_in_count=checked_in_count,
            check_in_rate=check_in_rate,
            unused_tickets=unused_tickets
        )
