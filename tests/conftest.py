"""Fixtures compartidas para tests del servicio de check-in"""
import pytest
from fastapi.testclient import TestClient

from main import app
from shared.utils.rate_limiter import limiter
from services.checkin_validation.services.checkin_store import CheckInStore
from services.checkin_validation.services.validation_engine import ValidationEngine
from services.checkin_validation.services.stats_service import StatsService
from tests.constants import NOW


class FakeClock:
    """Reloj controlable en milisegundos"""

    def __init__(self, now: int = NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture(autouse=True)
def disable_rate_limiting():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return CheckInStore()


@pytest.fixture
def engine(store, clock):
    return ValidationEngine(store, clock=clock)


@pytest.fixture
def stats_service(store):
    return StatsService(store)


@pytest.fixture
def client():
    """TestClient con un store nuevo por test (el lifespan lo crea)"""
    with TestClient(app) as test_client:
        yield test_client
