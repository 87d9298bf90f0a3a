from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket, TicketStatus, TicketType
from src.service.hotel_booking.driven_adapter.model.enrollment_model import EnrollmentModel
from src.service.hotel_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.hotel_booking.driven_adapter.model.ticket_type_model import TicketTypeModel


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Ticket]:
        result = await self.session.execute(
            select(TicketModel)
            .join(EnrollmentModel, TicketModel.enrollment_id == EnrollmentModel.id)
            .where(EnrollmentModel.user_id == user_id)
            .limit(1)
        )
        db_ticket = result.scalars().first()
        if not db_ticket:
            return None
        return self._to_entity(db_ticket)

    @staticmethod
    def _to_entity(db_ticket: TicketModel) -> Ticket:
        db_type: TicketTypeModel = db_ticket.ticket_type
        return Ticket(
            id=db_ticket.id,
            enrollment_id=db_ticket.enrollment_id,
            ticket_type_id=db_ticket.ticket_type_id,
            status=TicketStatus(db_ticket.status),
            ticket_type=TicketType(
                id=db_type.id,
                name=db_type.name,
                price=db_type.price,
                is_remote=db_type.is_remote,
                includes_hotel=db_type.includes_hotel,
                created_at=db_type.created_at,
                updated_at=db_type.updated_at,
            ),
            created_at=db_ticket.created_at,
            updated_at=db_ticket.updated_at,
        )
