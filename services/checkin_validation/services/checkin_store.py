"""Store en memoria dueño de las colecciones de tickets y check-ins"""
import logging
import threading

from services.checkin_validation.services.ticket_registry import TicketRegistry
from services.checkin_validation.services.checkin_ledger import CheckInLedger

logger = logging.getLogger(__name__)


class CheckInStore:
    """
    Agrupa el registro de tickets y el ledger de check-ins

    Se crea una sola vez al iniciar el proceso y se pasa por referencia al
    ValidationEngine y al StatsService. `lock` serializa las transiciones que
    leen y modifican ambas colecciones.

    Las colecciones crecen sin límite durante la vida del proceso: no hay
    expiración ni archivado de tickets vencidos.
    """

    def __init__(self):
        self.tickets = TicketRegistry()
        self.check_ins = CheckInLedger()
        self.lock = threading.RLock()
        logger.info("CheckInStore inicializado (memoria)")
