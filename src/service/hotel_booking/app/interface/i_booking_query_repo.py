from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.hotel_booking.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        """Get the user's booking with its room loaded"""
        pass

    @abstractmethod
    async def list_by_room_id(self, *, room_id: int, lock_room: bool = False) -> List[Booking]:
        """
        List bookings of a room, each carrying the room.

        lock_room=True holds a row lock on the room until the surrounding
        transaction ends, so concurrent capacity checks on one room serialize.
        """
        pass
