"""
Тесты репозиториев в памяти и логгера.
"""
import logging
from datetime import date

import pytest

from hotel_booking.booking.domain import Booking, Customer, Room
from hotel_booking.booking.infrastructure import (
    ConsoleLogger,
    InMemoryBookingRepository,
    InMemoryCustomerRepository,
    InMemoryRoomRepository,
    configure_console_logging,
)
from hotel_booking.shared_kernel import (
    EntityAlreadyExistsException,
    EntityNotFoundException,
)


@pytest.fixture
def room_repo() -> InMemoryRoomRepository:
    return InMemoryRoomRepository([Room(id=2), Room(id=1)])


class TestInMemoryRepository:
    async def test_get_all_keeps_insertion_order(self, room_repo):
        await room_repo.add(Room(id=3))

        assert [room.id for room in await room_repo.get_all()] == [2, 1, 3]

    async def test_get(self, room_repo):
        room = await room_repo.get(1)

        assert room is not None
        assert room.id == 1
        assert await room_repo.get(42) is None

    async def test_add_duplicate_raises(self, room_repo):
        with pytest.raises(EntityAlreadyExistsException, match="Room with id 1"):
            await room_repo.add(Room(id=1))

    async def test_duplicate_initial_data_raises(self):
        with pytest.raises(EntityAlreadyExistsException):
            InMemoryRoomRepository([Room(id=1), Room(id=1)])

    async def test_edit(self, room_repo):
        await room_repo.edit(Room(id=1, description="Люкс"))

        room = await room_repo.get(1)
        assert room.description == "Люкс"

    async def test_edit_unknown_raises(self, room_repo):
        with pytest.raises(EntityNotFoundException):
            await room_repo.edit(Room(id=99))

    async def test_remove(self, room_repo):
        await room_repo.remove(2)

        assert [room.id for room in await room_repo.get_all()] == [1]

    async def test_remove_unknown_raises(self, room_repo):
        with pytest.raises(EntityNotFoundException, match="Room with id 99 not found"):
            await room_repo.remove(99)

    async def test_get_all_returns_a_copy(self, room_repo):
        rooms = await room_repo.get_all()
        rooms.clear()

        assert len(await room_repo.get_all()) == 2


class TestInMemoryBookingRepository:
    async def test_booking_without_id_gets_next_id(self):
        repo = InMemoryBookingRepository(
            [Booking(id=5, room_id=1, start_date=date(2030, 1, 1), end_date=date(2030, 1, 2))]
        )
        booking = Booking(room_id=1, start_date=date(2030, 2, 1), end_date=date(2030, 2, 2))

        await repo.add(booking)

        assert booking.id == 6
        assert await repo.get(6) is booking

    async def test_first_booking_gets_id_one(self):
        repo = InMemoryBookingRepository()
        booking = Booking(room_id=1, start_date=date(2030, 2, 1), end_date=date(2030, 2, 2))

        await repo.add(booking)

        assert booking.id == 1


async def test_customer_repository():
    repo = InMemoryCustomerRepository()
    await repo.add(Customer(id=1, name="Иван Иванов", email="ivan@example.com"))

    customer = await repo.get(1)
    assert customer.email == "ivan@example.com"
    with pytest.raises(EntityAlreadyExistsException, match="Customer"):
        await repo.add(Customer(id=1, name="Петр", email="petr@example.com"))


class TestConsoleLogger:
    def test_context_is_written_as_json(self, caplog):
        logger = ConsoleLogger()

        with caplog.at_level(logging.INFO):
            logger.info("Найден свободный номер", room_id=3)

        assert 'Найден свободный номер {"room_id": 3}' in caplog.text

    def test_levels(self, caplog):
        logger = ConsoleLogger()

        with caplog.at_level(logging.DEBUG, logger="hotel_booking"):
            logger.debug("отладка")
            logger.warning("предупреждение")
            logger.error("ошибка", reason="тест")

        levels = [record.levelno for record in caplog.records]
        assert levels == [logging.DEBUG, logging.WARNING, logging.ERROR]
        assert "тест" in caplog.text

    def test_does_not_attach_handlers(self):
        ConsoleLogger(name="hotel_booking.tests.plain")

        plain = logging.getLogger("hotel_booking.tests.plain")
        assert plain.handlers == []
        assert plain.propagate is True


class TestConfigureConsoleLogging:
    def test_attaches_single_handler(self):
        name = "hotel_booking.tests.configured"

        first = configure_console_logging(name=name, level=logging.DEBUG)
        second = configure_console_logging(name=name)

        assert first is second
        assert len(first.handlers) == 1
        assert first.level == logging.DEBUG
        assert first.propagate is False
