"""
Guard checks shared by booking creation and booking room change.

Every check runs on the caller's unit of work, so the reads below and the
subsequent write share one transaction.
"""

from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class BookingValidator:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def validate_ticket(self, *, user_id: int) -> Ticket:
        ticket = await self.uow.ticket_query_repo.get_by_user_id(user_id=user_id)
        if not ticket:
            raise NotFoundError('Ticket not found')

        if not ticket.allows_hotel_booking():
            raise UnauthorizedError('Ticket does not include hotel accommodation')

        return ticket

    @Logger.io
    async def validate_booking_by_room_id(self, *, room_id: int) -> List[Booking]:
        """
        Capacity check. A room that no booking references yet is reported as
        not found, matching the behaviour clients already depend on.
        """
        bookings = await self.uow.booking_query_repo.list_by_room_id(
            room_id=room_id, lock_room=True
        )
        if not bookings:
            raise NotFoundError('Room not found')

        room = bookings[0].room
        if room is None or not room.has_vacancy_for(booking_count=len(bookings)):
            raise ForbiddenError('Room is full')

        return bookings

    @Logger.io
    async def validate_booking_by_user_id(self, *, user_id: int) -> None:
        booking = await self.uow.booking_query_repo.get_by_user_id(user_id=user_id)
        if booking:
            raise ForbiddenError('User already has a booking')

    @Logger.io
    async def check_user_has_booking(self, *, user_id: int) -> Booking:
        booking = await self.uow.booking_query_repo.get_by_user_id(user_id=user_id)
        if not booking:
            raise ForbiddenError('User has no booking')
        return booking

    @Logger.io
    async def check_room_exists(self, *, room_id: int) -> Room:
        room = await self.uow.room_query_repo.get_by_id(room_id=room_id)
        if not room:
            raise NotFoundError('Room not found')
        return room

    @Logger.io
    async def check_booking_exists(self, *, booking_id: int) -> Booking:
        booking = await self.uow.booking_query_repo.get_by_id(booking_id=booking_id)
        if not booking:
            raise NotFoundError('Booking not found')
        return booking
