"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, datetime, timedelta
from typing import Iterator, Union

# Общие типы идентификаторов
EntityId = int

# Дата или дата со временем; время суток при сравнении не учитывается
DateLike = Union[date, datetime]


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class InvalidBookingRequestException(BusinessRuleValidationException, ValueError):
    """Некорректные даты в запросе на бронирование."""

    pass


class EntityNotFoundException(DomainException):
    """Сущность не найдена в репозитории."""

    pass


class EntityAlreadyExistsException(DomainException):
    """Сущность с таким идентификатором уже существует."""

    pass


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.now()


def today() -> date:
    """Возвращает текущую дату."""
    return date.today()


def as_date(value: DateLike) -> date:
    """Отбрасывает время суток, оставляя только календарную дату."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Ожидалась дата, получено {type(value).__name__}")


def iter_days(start: date, end: date) -> Iterator[date]:
    """Перебирает все дни диапазона [start, end] включительно."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
