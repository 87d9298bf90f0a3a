from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.session_entity import Session


class ISessionQueryRepo(ABC):
    @abstractmethod
    async def get_by_token(self, *, token: str) -> Optional[Session]:
        pass
