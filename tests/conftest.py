"""
Конфигурация тестов для pytest.
Содержит фейковые репозитории и общие фикстуры.
"""
from datetime import date, timedelta
from unittest.mock import AsyncMock

import pytest

from hotel_booking.booking.domain import Booking, BookingManager, Room
from hotel_booking.booking.infrastructure import (
    ConsoleLogger,
    InMemoryBookingRepository,
    InMemoryRoomRepository,
)

# Период, в который заняты все номера фейкового отеля
OCCUPIED_FROM_DAYS = 10
OCCUPIED_TO_DAYS = 20


def days_from_today(days: int) -> date:
    return date.today() + timedelta(days=days)


class FakeRoomRepository(InMemoryRoomRepository):
    """Два номера: 1 и 2."""

    def __init__(self):
        super().__init__([Room(id=1, description="A"), Room(id=2, description="B")])


class FakeBookingRepository(InMemoryBookingRepository):
    """Оба номера заняты на период [start, end]."""

    def __init__(self, start: date, end: date):
        super().__init__(
            [
                Booking(id=1, customer_id=1, room_id=1, start_date=start, end_date=end),
                Booking(id=2, customer_id=2, room_id=2, start_date=start, end_date=end),
            ]
        )


@pytest.fixture
def room_repository() -> FakeRoomRepository:
    return FakeRoomRepository()


@pytest.fixture
def booking_repository() -> FakeBookingRepository:
    return FakeBookingRepository(
        days_from_today(OCCUPIED_FROM_DAYS), days_from_today(OCCUPIED_TO_DAYS)
    )


@pytest.fixture
def booking_manager(booking_repository, room_repository) -> BookingManager:
    """Менеджер бронирований поверх фейковых репозиториев."""
    return BookingManager(booking_repository, room_repository)


@pytest.fixture
def mock_booking_repository() -> AsyncMock:
    """Фикстура для мокированного репозитория бронирований."""
    return AsyncMock(spec=InMemoryBookingRepository)


@pytest.fixture
def mock_room_repository() -> AsyncMock:
    """Фикстура для мокированного репозитория номеров."""
    return AsyncMock(spec=InMemoryRoomRepository)


@pytest.fixture
def mocked_booking_manager(mock_booking_repository, mock_room_repository) -> BookingManager:
    return BookingManager(
        mock_booking_repository, mock_room_repository, logger=ConsoleLogger()
    )
