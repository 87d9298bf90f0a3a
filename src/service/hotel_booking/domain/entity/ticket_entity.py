from datetime import datetime
from enum import StrEnum
from typing import Optional

import attrs


class TicketStatus(StrEnum):
    RESERVED = 'RESERVED'
    PAID = 'PAID'


@attrs.define
class TicketType:
    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class Ticket:
    id: int
    enrollment_id: int
    ticket_type_id: int
    status: TicketStatus
    ticket_type: TicketType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def allows_hotel_booking(self) -> bool:
        """Only a paid, in-person ticket with hotel included may book a room."""
        return (
            self.status == TicketStatus.PAID
            and self.ticket_type.includes_hotel
            and not self.ticket_type.is_remote
        )
