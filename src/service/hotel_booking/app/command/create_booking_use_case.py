from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.command.booking_validator import BookingValidator


class CreateBookingUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.validator = BookingValidator(uow=uow)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_booking(self, *, user_id: int, room_id: int) -> int:
        """
        Book a room for the user and return the new booking id.

        Order of checks: ticket eligibility, room capacity, one booking per user.
        """
        async with self.uow:
            await self.validator.validate_ticket(user_id=user_id)
            await self.validator.validate_booking_by_room_id(room_id=room_id)
            await self.validator.validate_booking_by_user_id(user_id=user_id)

            booking = await self.uow.booking_command_repo.create(user_id=user_id, room_id=room_id)
            if not booking:
                raise ForbiddenError('Booking could not be created')

            await self.uow.commit()

        Logger.base.info(
            f'🛏️ [BOOKING] user {user_id} booked room {room_id} (booking {booking.id})'
        )
        return booking.id
