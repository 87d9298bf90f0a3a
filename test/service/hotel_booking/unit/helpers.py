from typing import List, Optional
from unittest.mock import AsyncMock, Mock

from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class UnitOfWorkMock:
    """
    Stand-in for AbstractUnitOfWork with AsyncMock repositories

    Args:
        ticket: returned by ticket_query_repo.get_by_user_id
        room_bookings: returned by booking_query_repo.list_by_room_id
        user_booking: returned by booking_query_repo.get_by_user_id
        booking_by_id: returned by booking_query_repo.get_by_id
        room: returned by room_query_repo.get_by_id
        created: returned by booking_command_repo.create
        updated: returned by booking_command_repo.update_room
    """

    def __init__(
        self,
        *,
        ticket: Optional[Ticket] = None,
        room_bookings: Optional[List[Booking]] = None,
        user_booking: Optional[Booking] = None,
        booking_by_id: Optional[Booking] = None,
        room: Optional[Room] = None,
        created: Optional[Booking] = None,
        updated: Optional[Booking] = None,
    ) -> None:
        self.ticket_query_repo: Mock = AsyncMock()
        self.ticket_query_repo.get_by_user_id = AsyncMock(return_value=ticket)

        self.booking_query_repo: Mock = AsyncMock()
        self.booking_query_repo.list_by_room_id = AsyncMock(return_value=room_bookings or [])
        self.booking_query_repo.get_by_user_id = AsyncMock(return_value=user_booking)
        self.booking_query_repo.get_by_id = AsyncMock(return_value=booking_by_id)

        self.room_query_repo: Mock = AsyncMock()
        self.room_query_repo.get_by_id = AsyncMock(return_value=room)

        self.booking_command_repo: Mock = AsyncMock()
        self.booking_command_repo.create = AsyncMock(return_value=created)
        self.booking_command_repo.update_room = AsyncMock(return_value=updated)

        self.commit = AsyncMock()
        self.rollback = AsyncMock()

    async def __aenter__(self) -> 'UnitOfWorkMock':
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()
