"""
Модуль контекста бронирования (Booking Context).

Отвечает за проверку доступности номеров в отеле:
- Поиск свободного номера на период
- Определение дней полной загрузки
- Интерфейсы и реализации репозиториев
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
