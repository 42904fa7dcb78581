"""
Проверка доступности номеров отеля.

Отвечает на один вопрос: есть ли свободный номер на указанный период.
"""

from .booking.domain import NO_ROOM_AVAILABLE, BookingManager
from .bootstrap import bootstrap_app

__all__ = ["NO_ROOM_AVAILABLE", "BookingManager", "bootstrap_app"]
