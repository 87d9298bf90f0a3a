from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.room_entity import Room


class BookingRoomRequest(BaseModel):
    """Body of POST /booking and PUT /booking/{booking_id}"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={'example': {'roomId': 1}},
    )

    room_id: int


class BookingIdResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={'example': {'bookingId': 1}},
    )

    booking_id: int


class RoomResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, room: Room) -> 'RoomResponse':
        return cls(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            hotel_id=room.hotel_id,
            created_at=room.created_at,
            updated_at=room.updated_at,
        )


class BookingWithRoomResponse(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'Room': {
                    'id': 3,
                    'name': '101',
                    'capacity': 2,
                    'hotelId': 1,
                    'createdAt': '2025-01-10T10:30:00Z',
                    'updatedAt': '2025-01-10T10:30:00Z',
                },
            }
        },
    )

    id: int
    room: RoomResponse = Field(alias='Room')

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingWithRoomResponse':
        if booking.room is None:
            raise ValueError('Booking room should be loaded before building the response.')
        return cls(id=booking.id, room=RoomResponse.from_entity(booking.room))
