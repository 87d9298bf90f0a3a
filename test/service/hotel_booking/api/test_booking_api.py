"""
HTTP behaviour of /booking with in-memory persistence.

Status mapping: ticket not eligible 401, full room or existing booking 403,
unknown room or booking 404. Any other failure on these routes, malformed
input included, also answers 404.
"""

from unittest.mock import AsyncMock

from fastapi import status
import pytest

from src.service.hotel_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.hotel_booking.domain.entity.ticket_entity import TicketStatus
from test.service.hotel_booking.factories import make_room, make_ticket


USER_ID = 1
OTHER_USER_ID = 2


@pytest.fixture
def room(store):
    room = store.add_room(make_room(room_id=1, capacity=3, hotel_id=4, name='Suite 101'))
    # A room only validates once some booking references it
    store.add_booking(user_id=99, room_id=room.id)
    return room


@pytest.fixture
def eligible_user(store, login_as):
    store.tickets_by_user[USER_ID] = make_ticket()
    login_as(USER_ID)
    return USER_ID


class TestGetBooking:
    def test_get_booking_without_booking_returns_404(self, client, eligible_user):
        response = client.get('/booking')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'detail': 'Booking not found'}

    def test_get_booking_returns_booking_with_room(self, client, store, room, eligible_user):
        booking = store.add_booking(user_id=USER_ID, room_id=room.id)

        response = client.get('/booking')

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['id'] == booking.id
        assert body['Room']['id'] == room.id
        assert body['Room']['name'] == 'Suite 101'
        assert body['Room']['capacity'] == 3
        assert body['Room']['hotelId'] == 4
        assert 'createdAt' in body['Room']
        assert 'updatedAt' in body['Room']


class TestCreateBooking:
    def test_create_booking_returns_booking_id_and_get_shows_room(
        self, client, room, eligible_user
    ):
        response = client.post('/booking', json={'roomId': room.id})

        assert response.status_code == status.HTTP_200_OK
        booking_id = response.json()['bookingId']

        get_response = client.get('/booking')
        assert get_response.status_code == status.HTTP_200_OK
        assert get_response.json()['id'] == booking_id
        assert get_response.json()['Room']['id'] == room.id
        assert get_response.json()['Room']['hotelId'] == room.hotel_id

    @pytest.mark.parametrize(
        'ticket_kwargs',
        [
            {'status': TicketStatus.RESERVED},
            {'is_remote': True},
            {'includes_hotel': False},
        ],
        ids=['reserved', 'remote', 'without_hotel'],
    )
    def test_create_booking_with_ineligible_ticket_returns_401(
        self, client, store, room, login_as, ticket_kwargs
    ):
        store.tickets_by_user[USER_ID] = make_ticket(**ticket_kwargs)
        login_as(USER_ID)

        response = client.post('/booking', json={'roomId': room.id})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_booking_without_ticket_returns_404(self, client, room, login_as):
        login_as(USER_ID)

        response = client.post('/booking', json={'roomId': room.id})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_booking_in_full_room_returns_403(self, client, store, eligible_user):
        full_room = store.add_room(make_room(room_id=2, capacity=1))
        store.add_booking(user_id=OTHER_USER_ID, room_id=full_room.id)

        response = client.post('/booking', json={'roomId': full_room.id})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_second_booking_returns_403(self, client, store, room, eligible_user):
        store.add_booking(user_id=USER_ID, room_id=room.id)

        response = client.post('/booking', json={'roomId': room.id})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_booking_in_unbooked_room_returns_404(self, client, store, eligible_user):
        empty_room = store.add_room(make_room(room_id=3, capacity=2))

        response = client.post('/booking', json={'roomId': empty_room.id})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_booking_in_unknown_room_returns_404(self, client, eligible_user):
        response = client.post('/booking', json={'roomId': 12345})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize('body', [{}, {'roomId': 'abc'}, {'roomId': None}])
    def test_create_booking_with_invalid_body_returns_404(self, client, eligible_user, body):
        response = client.post('/booking', json=body)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'detail': 'Not Found'}

    def test_create_booking_unexpected_failure_returns_404(self, app, client, eligible_user):
        use_case = AsyncMock()
        use_case.create_booking.side_effect = RuntimeError('connection reset')
        app.dependency_overrides[CreateBookingUseCase.depends] = lambda: use_case

        response = client.post('/booking', json={'roomId': 1})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'detail': 'Not Found'}


class TestUpdateBookingRoom:
    @pytest.fixture
    def own_booking(self, store, room):
        return store.add_booking(user_id=USER_ID, room_id=room.id)

    @pytest.fixture
    def target_room(self, store):
        target = store.add_room(make_room(room_id=5, capacity=2, hotel_id=4, name='Suite 105'))
        store.add_booking(user_id=OTHER_USER_ID, room_id=target.id)
        return target

    def test_update_booking_room_moves_booking(
        self, client, own_booking, target_room, eligible_user
    ):
        response = client.put(f'/booking/{own_booking.id}', json={'roomId': target_room.id})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'bookingId': own_booking.id}

        get_response = client.get('/booking')
        assert get_response.json()['Room']['id'] == target_room.id

    def test_update_someone_elses_booking_returns_403(
        self, client, store, own_booking, target_room, eligible_user
    ):
        other_booking = next(
            b for b in store.bookings.values() if b.user_id == OTHER_USER_ID
        )

        response = client.put(f'/booking/{other_booking.id}', json={'roomId': target_room.id})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_update_without_own_booking_returns_403(self, client, target_room, eligible_user):
        response = client.put('/booking/1', json={'roomId': target_room.id})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_update_to_unknown_room_returns_404(self, client, own_booking, eligible_user):
        response = client.put(f'/booking/{own_booking.id}', json={'roomId': 12345})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_unknown_booking_returns_404(
        self, client, own_booking, target_room, eligible_user
    ):
        response = client.put('/booking/12345', json={'roomId': target_room.id})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_to_full_room_returns_403_and_keeps_room(
        self, client, store, room, own_booking, eligible_user
    ):
        full_room = store.add_room(make_room(room_id=6, capacity=1))
        store.add_booking(user_id=OTHER_USER_ID, room_id=full_room.id)

        response = client.put(f'/booking/{own_booking.id}', json={'roomId': full_room.id})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert client.get('/booking').json()['Room']['id'] == room.id

    def test_update_with_non_integer_booking_id_returns_404(
        self, client, target_room, eligible_user
    ):
        response = client.put('/booking/abc', json={'roomId': target_room.id})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestPlatformEndpoints:
    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['status'] == 'healthy'

    def test_metrics_expose_booking_counters(self, client, store, eligible_user):
        client.get('/booking')

        response = client.get('/metrics')

        assert response.status_code == status.HTTP_200_OK
        assert 'hotel_booking_requests_total' in response.text
        assert 'result="NotFoundError"' in response.text
