from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.constant.route_constant import BOOKING_CREATE, BOOKING_GET, BOOKING_UPDATE
from src.platform.exception.not_found_fallback_route import NotFoundFallbackRoute
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import booking_metrics
from src.service.hotel_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.hotel_booking.app.command.update_booking_room_use_case import (
    UpdateBookingRoomUseCase,
)
from src.service.hotel_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.hotel_booking.driving_adapter.http_controller.auth.current_user import (
    get_current_user_id,
)
from src.service.hotel_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingIdResponse,
    BookingRoomRequest,
    BookingWithRoomResponse,
)


router = APIRouter(route_class=NotFoundFallbackRoute)
tracer = trace.get_tracer(__name__)


@router.get(BOOKING_GET, response_model=BookingWithRoomResponse)
@Logger.io
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingWithRoomResponse:
    with booking_metrics.track(operation='get'):
        booking = await use_case.get_booking_by_user_id(user_id=user_id)
    return BookingWithRoomResponse.from_entity(booking)


@router.post(BOOKING_CREATE, response_model=BookingIdResponse, status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: BookingRoomRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingIdResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('user_id', user_id)
        span.set_attribute('room_id', request.room_id)

        with booking_metrics.track(operation='create'):
            booking_id = await use_case.create_booking(user_id=user_id, room_id=request.room_id)

        span.set_attribute('booking.id', booking_id)
        return BookingIdResponse(booking_id=booking_id)


@router.put(BOOKING_UPDATE, response_model=BookingIdResponse, status_code=status.HTTP_200_OK)
@Logger.io
async def update_booking_room(
    booking_id: int,
    request: BookingRoomRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: UpdateBookingRoomUseCase = Depends(UpdateBookingRoomUseCase.depends),
) -> BookingIdResponse:
    with tracer.start_as_current_span('controller.update_booking_room') as span:
        span.set_attribute('user_id', user_id)
        span.set_attribute('room_id', request.room_id)
        span.set_attribute('booking.id', booking_id)

        with booking_metrics.track(operation='update'):
            booking = await use_case.update_booking_room(
                user_id=user_id, room_id=request.room_id, booking_id=booking_id
            )

        return BookingIdResponse(booking_id=booking.id)
