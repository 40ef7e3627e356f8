"""Modelos Pydantic para tickets y registros de check-in"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ValidationMethod(str, Enum):
    QR = "qr"
    MANUAL = "manual"


class CheckInStatus(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    ALREADY_USED = "already_used"
    EXPIRED = "expired"


class CamelModel(BaseModel):
    """Base con alias camelCase en JSON y atributos snake_case en Python"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True


# ==================== ENTIDADES ====================

class Ticket(CamelModel):
    """Derecho de admisión para un evento, ligado a un token NFT"""
    id: str
    event_id: str
    nft_token_id: str
    ticket_type: str
    is_used: bool = False
    used_at: Optional[int] = None
    expires_at: int
    validation_attempts: int = 0
    last_validation_attempt: Optional[int] = None
    created_at: int


class CheckInRecord(CamelModel):
    """Registro de un check-in exitoso (uno por ticket)"""
    id: str
    ticket_id: str
    nft_token_id: str
    user_id: str
    event_id: str
    qr_code: str
    status: CheckInStatus = CheckInStatus.VALID
    check_in_time: Optional[int] = None
    validation_method: ValidationMethod
    location: Optional[str] = None
    scanned_by: Optional[str] = None
    created_at: int
    updated_at: int


# ==================== RESULTADOS ====================

class ValidationResult(CamelModel):
    valid: bool
    message: str
    ticket_id: Optional[str] = None
    user_id: Optional[str] = None
    event_id: Optional[str] = None


class EventStats(CamelModel):
    """Resumen de check-ins de un evento"""
    total_tickets: int
    checked_in_count: int
    check_in_rate: float
    unused_tickets: int


# ==================== REQUESTS ====================
# Los campos son opcionales para que las rutas respondan 400 cuando faltan

class RegisterTicketRequest(CamelModel):
    event_id: Optional[str] = None
    nft_token_id: Optional[str] = None
    ticket_type: Optional[str] = None
    expires_at: Optional[int] = None


class CheckInRequest(CamelModel):
    ticket_id: Optional[str] = None
    user_id: Optional[str] = None
    nft_token_id: Optional[str] = None
    event_id: Optional[str] = None
    validation_method: Optional[ValidationMethod] = None
    location: Optional[str] = None
    scanned_by: Optional[str] = None
