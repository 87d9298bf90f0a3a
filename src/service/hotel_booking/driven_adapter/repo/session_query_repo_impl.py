from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel_booking.domain.entity.session_entity import Session
from src.service.hotel_booking.driven_adapter.model.session_model import SessionModel


class SessionQueryRepoImpl(ISessionQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_token(self, *, token: str) -> Optional[Session]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SessionModel).where(SessionModel.token == token).limit(1)
            )
            db_session = result.scalars().first()

            if not db_session:
                return None

            return Session(
                id=db_session.id,
                user_id=db_session.user_id,
                token=db_session.token,
                created_at=db_session.created_at,
            )
