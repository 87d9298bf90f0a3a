from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.driven_adapter.model.room_model import RoomModel
from src.service.hotel_booking.driven_adapter.repo.entity_mapper import room_to_entity


class RoomQueryRepoImpl(IRoomQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(self, *, room_id: int) -> Optional[Room]:
        db_room = await self.session.get(RoomModel, room_id)
        if not db_room:
            return None
        return room_to_entity(db_room)
