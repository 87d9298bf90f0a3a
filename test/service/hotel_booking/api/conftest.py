from collections.abc import AsyncIterator, Callable, Generator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.database.unit_of_work import get_unit_of_work
from src.service.hotel_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.hotel_booking.driving_adapter.http_controller.auth.current_user import (
    get_current_user_id,
)
from test.service.hotel_booking.api.in_memory_adapters import (
    InMemoryBookingQueryRepo,
    InMemoryStore,
    InMemoryUnitOfWork,
)


@asynccontextmanager
async def _no_infra_lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield


@pytest.fixture(scope='session')
def app() -> FastAPI:
    return create_app(lifespan=_no_infra_lifespan, title_suffix=' (Test)')


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(app: FastAPI, store: InMemoryStore) -> Generator[TestClient, None, None]:
    """Client whose persistence goes to the in-memory store"""
    app.dependency_overrides[get_unit_of_work] = lambda: InMemoryUnitOfWork(store)
    app.dependency_overrides[GetBookingUseCase.depends] = lambda: GetBookingUseCase(
        booking_query_repo=InMemoryBookingQueryRepo(store)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(app: FastAPI) -> Callable[[int], None]:
    """Authenticate every following request as the given user id"""

    def _login_as(user_id: int) -> None:
        app.dependency_overrides[get_current_user_id] = lambda: user_id

    return _login_as
