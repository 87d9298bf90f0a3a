"""
Booking Command Repository Implementation

Runs on the unit-of-work session only; the caller commits.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.driven_adapter.model.booking_model import BookingModel
from src.service.hotel_booking.driven_adapter.repo.entity_mapper import booking_to_entity


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, user_id: int, room_id: int) -> Optional[Booking]:
        db_booking = BookingModel(user_id=user_id, room_id=room_id)
        try:
            # Savepoint keeps the outer transaction usable after a unique violation
            async with self.session.begin_nested():
                self.session.add(db_booking)
        except IntegrityError as e:
            Logger.base.warning(
                f'⚠️ [BOOKING] insert rejected for user {user_id}, room {room_id}: {e.orig}'
            )
            return None

        await self.session.refresh(db_booking)
        return booking_to_entity(db_booking)

    @Logger.io
    async def update_room(self, *, booking_id: int, room_id: int) -> Optional[Booking]:
        db_booking = await self.session.get(BookingModel, booking_id)
        if not db_booking:
            return None

        db_booking.room_id = room_id
        await self.session.flush()
        await self.session.refresh(db_booking)
        return booking_to_entity(db_booking)
