"""
Unit of Work Pattern - one database session and transaction per request

Architecture:
- UoW owns commit/rollback
- Repositories share the UoW session, so every read and write of a booking
  command runs in the same transaction
- Use cases coordinate repositories through the UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.hotel_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
    from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Hotel Booking Service

    Usage:
        async with uow:
            booking = await uow.booking_command_repo.create(...)
            await uow.commit()

    Leaving the block without commit rolls back.
    """

    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo
    room_query_repo: IRoomQueryRepo
    ticket_query_repo: ITicketQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        from src.service.hotel_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.room_query_repo_impl import (
            RoomQueryRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.ticket_query_repo_impl import (
            TicketQueryRepoImpl,
        )

        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session_factory=None)
        self.booking_query_repo.session = self.session  # Inject session for UoW mode
        self.room_query_repo = RoomQueryRepoImpl(session=self.session)
        self.ticket_query_repo = TicketQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args):
        await super().__aexit__(*args)
        # Note: session cleanup handled by get_async_session context manager

    async def _commit(self):
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """FastAPI dependency for Unit of Work"""
    return SqlAlchemyUnitOfWork(session)
