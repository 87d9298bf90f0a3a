from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.driven_adapter.model.booking_model import BookingModel
from src.service.hotel_booking.driven_adapter.model.room_model import RoomModel
from src.service.hotel_booking.driven_adapter.repo.entity_mapper import booking_to_entity


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Get session for query execution.

        If session is injected (from UoW), yield it directly without context management.
        Otherwise, use session_factory context manager.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            db_booking = await session.get(BookingModel, booking_id)
            if not db_booking:
                return None
            return booking_to_entity(db_booking)

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.user_id == user_id).limit(1)
            )
            db_booking = result.scalars().first()
            if not db_booking:
                return None
            return booking_to_entity(db_booking)

    @Logger.io
    async def list_by_room_id(self, *, room_id: int, lock_room: bool = False) -> List[Booking]:
        stmt = (
            select(BookingModel)
            .join(RoomModel, BookingModel.room_id == RoomModel.id)
            .where(BookingModel.room_id == room_id)
            .order_by(BookingModel.id)
        )
        if lock_room:
            # FOR UPDATE OF room: serializes capacity checks on the same room
            stmt = stmt.with_for_update(of=RoomModel)

        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [booking_to_entity(db_booking) for db_booking in result.scalars().all()]
