from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Room:
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_vacancy_for(self, *, booking_count: int) -> bool:
        return self.capacity - booking_count >= 1
