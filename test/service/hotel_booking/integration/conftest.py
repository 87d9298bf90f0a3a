"""
Fixtures for repository tests against a real PostgreSQL.

The test database (POSTGRES_DB, set in test/conftest.py) is created when
missing and its tables are rebuilt from the ORM metadata for every test.
Tests are skipped when no PostgreSQL server is reachable.
"""

from collections.abc import AsyncGenerator
from datetime import date

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base
from src.service.hotel_booking.domain.entity.ticket_entity import TicketStatus
from src.service.hotel_booking.driven_adapter.model import (
    BookingModel,
    EnrollmentModel,
    HotelModel,
    RoomModel,
    TicketModel,
    TicketTypeModel,
    UserModel,
)


async def _ensure_test_database() -> None:
    postgres_url = settings.DATABASE_URL_ASYNC.replace(f'/{settings.POSTGRES_DB}', '/postgres')
    engine = create_async_engine(postgres_url, isolation_level='AUTOCOMMIT', poolclass=NullPool)
    try:
        async with engine.connect() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': settings.POSTGRES_DB},
            )
            if not result.fetchone():
                await conn.execute(text(f'CREATE DATABASE "{settings.POSTGRES_DB}"'))
    finally:
        await engine.dispose()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    try:
        await _ensure_test_database()
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f'PostgreSQL not reachable: {e}')

    engine = create_async_engine(settings.DATABASE_URL_ASYNC, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def seeded(session: AsyncSession) -> dict[str, int]:
    """
    Two users, one hotel with two rooms and a paid in-person ticket for the guest.

    The neighbour already holds a booking in room_a, so room_a counts as a
    bookable room; room_b has no bookings yet.
    """
    guest = UserModel(email='guest@example.com')
    neighbour = UserModel(email='neighbour@example.com')
    hotel = HotelModel(name='Driven Resort', image='https://example.com/resort.png')
    session.add_all([guest, neighbour, hotel])
    await session.flush()

    room_a = RoomModel(name='101', capacity=3, hotel_id=hotel.id)
    room_b = RoomModel(name='102', capacity=2, hotel_id=hotel.id)
    ticket_type = TicketTypeModel(
        name='In person + hotel', price=600, is_remote=False, includes_hotel=True
    )
    enrollment = EnrollmentModel(
        user_id=guest.id,
        name='Guest',
        cpf='12345678901',
        birthday=date(1995, 5, 17),
        phone='5521999999999',
    )
    session.add_all([room_a, room_b, ticket_type, enrollment])
    await session.flush()

    ticket = TicketModel(
        ticket_type_id=ticket_type.id, enrollment_id=enrollment.id, status=TicketStatus.PAID.value
    )
    neighbour_booking = BookingModel(user_id=neighbour.id, room_id=room_a.id)
    session.add_all([ticket, neighbour_booking])
    await session.commit()
    # Tests read rows back from the database, as a fresh request session would
    session.expunge_all()

    return {
        'guest_id': guest.id,
        'neighbour_id': neighbour.id,
        'room_a_id': room_a.id,
        'room_b_id': room_b.id,
        'ticket_id': ticket.id,
        'enrollment_id': enrollment.id,
        'neighbour_booking_id': neighbour_booking.id,
    }
