"""
Общее ядро (Shared Kernel) для системы бронирования отеля.

Содержит общие типы данных и утилиты, используемые в контексте бронирования.
"""

from .domain import (
    # Базовые типы
    DateLike,
    EntityId,
    # Исключения
    BusinessRuleValidationException,
    DomainException,
    EntityAlreadyExistsException,
    EntityNotFoundException,
    InvalidBookingRequestException,
    # Утилиты
    as_date,
    iter_days,
    now,
    today,
)

__all__ = [
    # Базовые типы
    "EntityId",
    "DateLike",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "InvalidBookingRequestException",
    "EntityNotFoundException",
    "EntityAlreadyExistsException",
    # Утилиты
    "now",
    "today",
    "as_date",
    "iter_days",
]
