"""
Test Configuration

Environment setup MUST happen before any application import: settings and
the loguru sinks are configured at import time.

Architecture:
- Unit tests (test/**/unit/): use cases, validator and auth with AsyncMock repos
- API tests (test/**/api/): the FastAPI app with in-memory adapters behind
  dependency overrides, no database needed
- Integration tests (test/**/integration/): SQLAlchemy repositories and the
  unit of work against PostgreSQL
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('POSTGRES_DB', 'hotel_booking_test_db')
    os.environ.setdefault('SECRET_KEY', 'test_secret_key_for_pytest_only')
    os.environ.setdefault('DB_POOL_SIZE_WRITE', '2')
    os.environ.setdefault('DB_POOL_SIZE_READ', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from dotenv import load_dotenv  # noqa: E402
import pytest  # noqa: E402


# .env values never override what was set above
load_dotenv(Path(__file__).resolve().parents[1] / '.env', override=False)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark tests by directory so `-m unit` / `-m api` / `-m integration` select them."""
    for item in items:
        path = str(item.fspath)
        if '/unit/' in path:
            item.add_marker(pytest.mark.unit)
        elif '/api/' in path:
            item.add_marker(pytest.mark.api)
        elif '/integration/' in path:
            item.add_marker(pytest.mark.integration)
