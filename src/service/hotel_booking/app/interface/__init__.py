"""Application layer interfaces (Ports)"""

from src.service.hotel_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.hotel_booking.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo

__all__ = [
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'IRoomQueryRepo',
    'ISessionQueryRepo',
    'ITicketQueryRepo',
]
