"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев и логгера. Хранилище в памяти
используется в тестах и при локальном запуске; промышленное хранилище
подключается через тот же интерфейс IRepository.
"""

import json
import logging
import sys
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar

from ..shared_kernel import (
    EntityAlreadyExistsException,
    EntityId,
    EntityNotFoundException,
)
from . import interfaces as ports
from .domain import Booking, Customer, Room

T = TypeVar("T", Room, Booking, Customer)


class InMemoryRepository(Generic[T]):
    """Базовый репозиторий в памяти; сохраняет порядок добавления."""

    entity_name = "Entity"

    def __init__(self, entities: Optional[Iterable[T]] = None):
        self._entities: Dict[EntityId, T] = {}
        for entity in entities or ():
            self._add(entity)

    def _add(self, entity: T) -> None:
        if entity.id in self._entities:
            raise EntityAlreadyExistsException(
                f"{self.entity_name} with id {entity.id} already exists"
            )
        self._entities[entity.id] = entity

    async def get_all(self) -> List[T]:
        return list(self._entities.values())

    async def get(self, entity_id: EntityId) -> Optional[T]:
        return self._entities.get(entity_id)

    async def add(self, entity: T) -> None:
        self._add(entity)

    async def edit(self, entity: T) -> None:
        if entity.id not in self._entities:
            raise EntityNotFoundException(
                f"{self.entity_name} with id {entity.id} not found"
            )
        self._entities[entity.id] = entity

    async def remove(self, entity_id: EntityId) -> None:
        if entity_id not in self._entities:
            raise EntityNotFoundException(
                f"{self.entity_name} with id {entity_id} not found"
            )
        del self._entities[entity_id]


class InMemoryRoomRepository(InMemoryRepository[Room]):
    """Реализация репозитория номеров в памяти."""

    entity_name = "Room"


class InMemoryBookingRepository(InMemoryRepository[Booking]):
    """Реализация репозитория бронирований в памяти."""

    entity_name = "Booking"

    async def add(self, booking: Booking) -> None:
        # Бронированиям без id выдаем следующий свободный номер
        if booking.id == 0:
            booking.id = max(self._entities, default=0) + 1
        self._add(booking)


class InMemoryCustomerRepository(InMemoryRepository[Customer]):
    """Реализация репозитория клиентов в памяти."""

    entity_name = "Customer"


LOGGER_NAME = "hotel_booking"


def configure_console_logging(
    name: str = LOGGER_NAME, level: int = logging.INFO
) -> logging.Logger:
    """Настраивает вывод логов пакета в stderr.

    Вызывается приложением-хостом при запуске; библиотечный код
    обработчики не добавляет.
    """
    logger = logging.getLogger(name)

    # Настраиваем только один раз, чтобы не дублировать обработчики
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False

    return logger


class ConsoleLogger(ports.ILogger):
    """Логгер, выводящий сообщения через logging; контекст пишется в JSON."""

    def __init__(self, name: str = LOGGER_NAME):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, context: Dict[str, Any]) -> None:
        if context:
            message = f"{message} {json.dumps(context, default=str, ensure_ascii=False)}"
        self._logger.log(level, message)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)
