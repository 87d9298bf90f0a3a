from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, user_id: int, room_id: int) -> Optional[Booking]:
        """Insert a booking; None when the store rejects it (user already holds one)"""
        pass

    @abstractmethod
    async def update_room(self, *, booking_id: int, room_id: int) -> Optional[Booking]:
        pass
