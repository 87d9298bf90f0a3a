from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.command.booking_validator import BookingValidator
from src.service.hotel_booking.domain.entity.booking_entity import Booking


class UpdateBookingRoomUseCase:
    """Move the caller's own booking to another room."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.validator = BookingValidator(uow=uow)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def update_booking_room(self, *, user_id: int, room_id: int, booking_id: int) -> Booking:
        async with self.uow:
            user_booking = await self.validator.check_user_has_booking(user_id=user_id)
            await self.validator.check_room_exists(room_id=room_id)
            await self.validator.check_booking_exists(booking_id=booking_id)

            if user_booking.id != booking_id:
                raise ForbiddenError('Booking does not belong to the user')

            await self.validator.validate_booking_by_room_id(room_id=room_id)

            booking = await self.uow.booking_command_repo.update_room(
                booking_id=booking_id, room_id=room_id
            )
            if not booking:
                raise NotFoundError('Booking not found')

            await self.uow.commit()

        Logger.base.info(f'🔁 [BOOKING] booking {booking_id} moved to room {room_id}')
        return booking
