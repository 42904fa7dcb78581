"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, TypeVar

from ..shared_kernel import EntityId

T = TypeVar("T")


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IRepository(Protocol[T]):
    """Обобщенный интерфейс репозитория для сущностей одного вида.

    Менеджер бронирований использует только get_all; остальные методы
    нужны внешним сценариям (создание бронирований, администрирование).
    """

    async def get_all(self) -> List[T]: ...
    async def get(self, entity_id: EntityId) -> Optional[T]: ...
    async def add(self, entity: T) -> None: ...
    async def edit(self, entity: T) -> None: ...
    async def remove(self, entity_id: EntityId) -> None: ...
