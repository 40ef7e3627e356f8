"""Utilidades para generar el código QR de un check-in"""
import hashlib
from typing import Optional

from shared.utils.clock import now_ms

QR_CODE_LENGTH = 32


def generate_check_in_qr_code(
    ticket_id: str,
    nft_token_id: str,
    timestamp: Optional[int] = None,
    length: int = QR_CODE_LENGTH
) -> str:
    """
    Generar el código QR de un check-in

    Digest SHA-256 de ticket_id, nft_token_id y el timestamp del check-in,
    truncado a `length` caracteres hexadecimales. Es un identificador opaco
    del comprobante, no una firma: no se puede verificar recalculándolo.
    La autenticidad se comprueba consultando el check-in por su ID.

    Args:
        ticket_id: ID del ticket
        nft_token_id: ID del token NFT asociado al ticket
        timestamp: Milisegundos desde epoch (default: ahora)
        length: Largo del código resultante

    Returns:
        String hexadecimal de `length` caracteres
    """
    if timestamp is None:
        timestamp = now_ms()

    message = f"{ticket_id}-{nft_token_id}-{timestamp}"
    digest = hashlib.sha256(message.encode('utf-8')).hexdigest()

    return digest[:length]
