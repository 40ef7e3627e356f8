"""Utilidades de tiempo en milisegundos desde epoch"""
import time


def now_ms() -> int:
    """Timestamp actual en milisegundos (formato usado en tickets y check-ins)"""
    return int(time.time() * 1000)
