"""
Прикладной слой контекста бронирования.

Содержит DTO запросов и ответов и сервис приложения, который
координирует взаимодействие внешних клиентов с доменным сервисом.
"""

from datetime import date, datetime
from typing import List, Union

from pydantic import BaseModel, field_validator

from ..shared_kernel import EntityId, as_date
from .domain import NO_ROOM_AVAILABLE, BookingManager

# DTO (Data Transfer Objects) для входящих данных


class _PeriodQuery(BaseModel):
    start_date: date
    end_date: date

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v: Union[date, datetime, str]):
        if isinstance(v, (date, datetime)):
            return as_date(v)
        return v


class FindAvailableRoomQuery(_PeriodQuery):
    """Запрос на поиск свободного номера."""


class OccupiedDatesQuery(_PeriodQuery):
    """Запрос на получение дней полной загрузки отеля."""


# DTO для исходящих данных


class AvailableRoomDTO(BaseModel):
    """Результат поиска свободного номера."""

    room_id: EntityId
    is_available: bool
    start_date: date
    end_date: date


class OccupiedDatesDTO(BaseModel):
    """Дни, в которые свободных номеров нет."""

    start_date: date
    end_date: date
    dates: List[date]


class BookingApplicationService:
    """Сервис приложения для запросов о доступности номеров."""

    def __init__(self, booking_manager: BookingManager):
        self.booking_manager = booking_manager

    async def find_available_room(
        self, query: FindAvailableRoomQuery
    ) -> AvailableRoomDTO:
        room_id = await self.booking_manager.find_available_room(
            query.start_date, query.end_date
        )
        return AvailableRoomDTO(
            room_id=room_id,
            is_available=room_id != NO_ROOM_AVAILABLE,
            start_date=query.start_date,
            end_date=query.end_date,
        )

    async def get_fully_occupied_dates(
        self, query: OccupiedDatesQuery
    ) -> OccupiedDatesDTO:
        dates = await self.booking_manager.get_fully_occupied_dates(
            query.start_date, query.end_date
        )
        return OccupiedDatesDTO(
            start_date=query.start_date, end_date=query.end_date, dates=dates
        )
