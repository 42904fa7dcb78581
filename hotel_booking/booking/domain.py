"""
Доменная модель контекста бронирования.

Содержит сущности номеров, клиентов и бронирований, политику допустимых
периодов и доменный сервис поиска свободного номера.
"""

import asyncio
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Callable, List, Optional, Set

from pydantic import BaseModel, Field, field_validator, model_validator

from ..shared_kernel import (
    DateLike,
    EntityId,
    InvalidBookingRequestException,
    as_date,
    iter_days,
    today,
)
from .interfaces import ILogger, IRepository

# Результат поиска, когда ни один номер не свободен. Это не ошибка.
NO_ROOM_AVAILABLE: EntityId = -1


class Room(BaseModel):
    """Номер в отеле."""

    id: EntityId
    description: Optional[str] = None


class Customer(BaseModel):
    """Клиент отеля."""

    id: EntityId
    name: str
    email: str


class Booking(BaseModel):
    """Бронирование номера на период [start_date, end_date] включительно.

    Отмененное бронирование не удаляется, а помечается is_active=False.
    """

    id: EntityId = 0
    customer_id: EntityId = 0
    room_id: EntityId
    start_date: date
    end_date: date
    is_active: bool = True

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v):
        if isinstance(v, datetime):
            return v.date()
        return v

    @model_validator(mode="after")
    def end_not_before_start(self) -> "Booking":
        if self.end_date < self.start_date:
            raise ValueError("Дата окончания не может быть раньше даты начала")
        return self

    def overlaps(self, start_date: date, end_date: date) -> bool:
        """Проверяет пересечение с периодом; общие граничные дни тоже считаются."""
        return self.start_date <= end_date and start_date <= self.end_date

    def conflicts_with(self, start_date: date, end_date: date) -> bool:
        """Мешает ли бронирование заселению в указанный период."""
        return self.is_active and self.overlaps(start_date, end_date)

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def cancel(self) -> None:
        """Отменяет бронирование."""
        self.is_active = False


class RoomSelection(str, Enum):
    """Правило выбора среди нескольких свободных номеров."""

    FIRST_IN_ORDER = "first_in_order"  # порядок, в котором вернул репозиторий
    LOWEST_ID = "lowest_id"


class BookingPolicy(BaseModel):
    """Политики и бизнес-правила для поиска номеров."""

    min_advance_days: int = Field(1, ge=1)
    room_selection: RoomSelection = RoomSelection.FIRST_IN_ORDER

    def earliest_start_date(self, current_date: date) -> date:
        return current_date + timedelta(days=self.min_advance_days)

    def validate_search_period(
        self, start_date: date, end_date: date, current_date: date
    ) -> None:
        """Проверяет, что по периоду можно искать свободный номер."""
        # Заезд сегодня или в прошлом не допускается
        if start_date < self.earliest_start_date(current_date):
            raise InvalidBookingRequestException(
                "Дата начала бронирования должна быть позже сегодняшней"
            )

        if end_date < start_date:
            raise InvalidBookingRequestException(
                "Дата окончания бронирования не может быть раньше даты начала"
            )

    @staticmethod
    def validate_report_period(start_date: date, end_date: date) -> None:
        """Проверяет период отчета о загрузке; прошлые даты допустимы."""
        if start_date > end_date:
            raise InvalidBookingRequestException(
                "Дата начала периода не может быть позже даты окончания"
            )

    def order_rooms(self, rooms: List[Room]) -> List[Room]:
        if self.room_selection == RoomSelection.LOWEST_ID:
            return sorted(rooms, key=lambda room: room.id)
        return list(rooms)


class NullLogger(ILogger):
    """Логгер, который ничего не делает; используется, если логгер не передан."""

    def info(self, message: str, **kwargs: Any) -> None:
        pass

    def error(self, message: str, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    def debug(self, message: str, **kwargs: Any) -> None:
        pass


class BookingManager:
    """Доменный сервис для проверки доступности номеров."""

    def __init__(
        self,
        booking_repository: IRepository[Booking],
        room_repository: IRepository[Room],
        policy: Optional[BookingPolicy] = None,
        logger: Optional[ILogger] = None,
        clock: Callable[[], date] = today,
    ):
        self.booking_repository = booking_repository
        self.room_repository = room_repository
        self.policy = policy if policy is not None else BookingPolicy()
        self._logger = logger if logger is not None else NullLogger()
        self._clock = clock

    async def find_available_room(
        self, start_date: DateLike, end_date: DateLike
    ) -> EntityId:
        """Возвращает id свободного номера или NO_ROOM_AVAILABLE.

        Raises:
            InvalidBookingRequestException: начало периода не позже сегодняшнего
                дня или окончание раньше начала.
        """
        start, end = as_date(start_date), as_date(end_date)

        try:
            self.policy.validate_search_period(start, end, as_date(self._clock()))
        except InvalidBookingRequestException as e:
            self._logger.warning(
                "Запрос на поиск номера отклонен",
                start_date=start.isoformat(),
                end_date=end.isoformat(),
                reason=str(e),
            )
            raise

        rooms, bookings = await self._load(start, end)

        occupied = self._occupied_room_ids(bookings, start, end)
        for room in self.policy.order_rooms(rooms):
            if room.id not in occupied:
                self._logger.info(
                    "Найден свободный номер",
                    room_id=room.id,
                    start_date=start.isoformat(),
                    end_date=end.isoformat(),
                )
                return room.id

        self._logger.info(
            "Свободных номеров нет",
            start_date=start.isoformat(),
            end_date=end.isoformat(),
            rooms=len(rooms),
            occupied=len(occupied),
        )
        return NO_ROOM_AVAILABLE

    async def get_fully_occupied_dates(
        self, start_date: DateLike, end_date: DateLike
    ) -> List[date]:
        """Возвращает дни периода, в которые заняты все номера."""
        start, end = as_date(start_date), as_date(end_date)
        self.policy.validate_report_period(start, end)

        rooms, bookings = await self._load(start, end)
        if not rooms:
            return []

        # Бронирования номеров, которых нет в репозитории, не учитываются
        room_ids = {room.id for room in rooms}
        active = [
            b
            for b in bookings
            if b.conflicts_with(start, end) and b.room_id in room_ids
        ]
        if not active:
            return []

        # Считаются занятые номера, а не бронирования: две брони одного
        # номера не занимают второй
        return [
            day
            for day in iter_days(start, end)
            if len({b.room_id for b in active if b.covers(day)}) >= len(room_ids)
        ]

    async def _load(self, start: date, end: date):
        # Номера и бронирования читаются параллельно
        rooms, bookings = await asyncio.gather(
            self.room_repository.get_all(),
            self.booking_repository.get_all(),
        )
        self._logger.debug(
            "Загружены номера и бронирования",
            rooms=len(rooms),
            bookings=len(bookings),
            start_date=start.isoformat(),
            end_date=end.isoformat(),
        )
        return rooms, bookings

    @staticmethod
    def _occupied_room_ids(
        bookings: List[Booking], start: date, end: date
    ) -> Set[EntityId]:
        return {b.room_id for b in bookings if b.conflicts_with(start, end)}
