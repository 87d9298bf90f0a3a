"""Model -> entity conversions shared by the repositories."""

from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.driven_adapter.model.booking_model import BookingModel
from src.service.hotel_booking.driven_adapter.model.room_model import RoomModel


def room_to_entity(db_room: RoomModel) -> Room:
    return Room(
        id=db_room.id,
        name=db_room.name,
        capacity=db_room.capacity,
        hotel_id=db_room.hotel_id,
        created_at=db_room.created_at,
        updated_at=db_room.updated_at,
    )


def booking_to_entity(db_booking: BookingModel) -> Booking:
    return Booking(
        id=db_booking.id,
        user_id=db_booking.user_id,
        room_id=db_booking.room_id,
        room=room_to_entity(db_booking.room) if db_booking.room is not None else None,
        created_at=db_booking.created_at,
        updated_at=db_booking.updated_at,
    )
