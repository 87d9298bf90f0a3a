from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> Optional[Ticket]:
        """Resolve user -> enrollment -> ticket, with the ticket type loaded"""
        pass
