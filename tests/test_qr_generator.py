"""QR code token tests."""
import hashlib

from shared.utils.qr_generator import generate_check_in_qr_code


def test_qr_code_is_truncated_sha256():
    """Test the token is the first 32 hex chars of the digest."""
    expected = hashlib.sha256(b"ticket-1-nft-1-1700000000000").hexdigest()[:32]

    assert generate_check_in_qr_code("ticket-1", "nft-1", 1_700_000_000_000) == expected


def test_qr_code_depends_on_timestamp():
    """Test the same ticket checked in at another time gets another token."""
    a = generate_check_in_qr_code("ticket-1", "nft-1", 1)
    b = generate_check_in_qr_code("ticket-1", "nft-1", 2)

    assert a != b


def test_qr_code_custom_length():
    code = generate_check_in_qr_code("ticket-1", "nft-1", 1, length=16)

    assert len(code) == 16
    int(code, 16)


def test_qr_code_defaults_to_current_time():
    code = generate_check_in_qr_code("ticket-1", "nft-1")

    assert len(code) == 32
