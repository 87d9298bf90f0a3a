from datetime import datetime
from typing import Optional

import attrs

from src.service.hotel_booking.domain.entity.room_entity import Room


@attrs.define
class Booking:
    id: int
    user_id: int
    room_id: int
    room: Optional[Room] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
