"""TicketRegistry tests."""
from services.checkin_validation.services.ticket_registry import TicketRegistry


def test_create_ticket_starts_unused():
    """Test a new ticket is unused with no validation attempts."""
    registry = TicketRegistry()

    ticket = registry.create("event-1", "nft-1", "VIP", expires_at=2_000, created_at=1_000)

    assert ticket.id
    assert ticket.event_id == "event-1"
    assert ticket.nft_token_id == "nft-1"
    assert ticket.ticket_type == "VIP"
    assert ticket.is_used is False
    assert ticket.validation_attempts == 0
    assert ticket.used_at is None
    assert ticket.last_validation_attempt is None
    assert ticket.expires_at == 2_000
    assert ticket.created_at == 1_000


def test_create_assigns_unique_ids():
    """Test every ticket gets its own id."""
    registry = TicketRegistry()

    ids = {registry.create("event-1", f"nft-{i}", "GA", 2_000).id for i in range(50)}

    assert len(ids) == 50
    assert len(registry.list_all()) == 50


def test_get_by_id():
    """Test lookup by id returns the stored ticket or None."""
    registry = TicketRegistry()
    ticket = registry.create("event-1", "nft-1", "GA", 2_000)

    assert registry.get_by_id(ticket.id) is ticket
    assert registry.get_by_id("missing") is None


def test_get_by_token_returns_first_match():
    """Test duplicate tokens are tolerated and the first ticket wins."""
    registry = TicketRegistry()
    first = registry.create("event-1", "nft-shared", "GA", 2_000)
    registry.create("event-2", "nft-shared", "VIP", 3_000)

    assert registry.get_by_token("nft-shared") is first
    assert registry.get_by_token("nft-unknown") is None


def test_list_by_event_and_list_all_keep_insertion_order():
    """Test listings preserve insertion order."""
    registry = TicketRegistry()
    a = registry.create("event-1", "nft-a", "GA", 2_000)
    b = registry.create("event-2", "nft-b", "GA", 2_000)
    c = registry.create("event-1", "nft-c", "GA", 2_000)

    assert registry.list_by_event("event-1") == [a, c]
    assert registry.list_all() == [a, b, c]
    assert registry.list_by_event("event-3") == []
