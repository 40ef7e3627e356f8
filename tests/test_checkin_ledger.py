"""CheckInLedger tests."""
import pytest

from services.checkin_validation.models.checkin import CheckInRecord
from services.checkin_validation.services.checkin_ledger import CheckInLedger


def make_record(record_id: str, ticket_id: str, user_id: str, event_id: str) -> CheckInRecord:
    return CheckInRecord(
        id=record_id,
        ticket_id=ticket_id,
        nft_token_id=f"nft-{ticket_id}",
        user_id=user_id,
        event_id=event_id,
        qr_code="0" * 32,
        check_in_time=1_000,
        validation_method="qr",
        created_at=1_000,
        updated_at=1_000,
    )


@pytest.fixture
def ledger():
    ledger = CheckInLedger()
    ledger.append(make_record("c1", "t1", "alice", "event-1"))
    ledger.append(make_record("c2", "t2", "bob", "event-1"))
    ledger.append(make_record("c3", "t3", "alice", "event-2"))
    return ledger


def test_get_by_id(ledger):
    """Test lookup by id."""
    assert ledger.get_by_id("c2").user_id == "bob"
    assert ledger.get_by_id("missing") is None


def test_list_by_user_in_insertion_order(ledger):
    """Test only the user's records come back, oldest first."""
    assert [r.id for r in ledger.list_by_user("alice")] == ["c1", "c3"]
    assert ledger.list_by_user("carol") == []


def test_list_by_event_in_insertion_order(ledger):
    """Test only the event's records come back, oldest first."""
    assert [r.id for r in ledger.list_by_event("event-1")] == ["c1", "c2"]
    assert [r.id for r in ledger.list_by_event("event-2")] == ["c3"]


def test_get_by_ticket_returns_first_match(ledger):
    """Test the ledger itself does not enforce one record per ticket."""
    ledger.append(make_record("c4", "t1", "dave", "event-1"))

    assert ledger.get_by_ticket("t1").id == "c1"
    assert ledger.get_by_ticket("t9") is None
    assert len(ledger.list_all()) == 4


def test_list_all(ledger):
    assert [r.id for r in ledger.list_all()] == ["c1", "c2", "c3"]
