from typing import Iterable, Optional

from .booking.application import BookingApplicationService
from .booking.domain import Booking, BookingManager, BookingPolicy, Room
from .booking.infrastructure import (
    ConsoleLogger,
    InMemoryBookingRepository,
    InMemoryCustomerRepository,
    InMemoryRoomRepository,
)


def bootstrap_app(
    policy: Optional[BookingPolicy] = None,
    rooms: Iterable[Room] = (),
    bookings: Iterable[Booking] = (),
):
    """Создает и настраивает все компоненты приложения."""
    # 1. Репозитории в памяти, заполненные начальными данными
    room_repo = InMemoryRoomRepository(rooms)
    booking_repo = InMemoryBookingRepository(bookings)
    customer_repo = InMemoryCustomerRepository()

    # 2. Доменный и прикладной сервисы
    logger = ConsoleLogger()
    booking_manager = BookingManager(
        booking_repository=booking_repo,
        room_repository=room_repo,
        policy=policy,
        logger=logger,
    )
    booking_service = BookingApplicationService(booking_manager)

    return {
        "room_repository": room_repo,
        "booking_repository": booking_repo,
        "customer_repository": customer_repo,
        "booking_manager": booking_manager,
        "booking_service": booking_service,
    }
