"""Shared fixtures: in-memory database, test client and fake collaborators"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["TESTING"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_BACKEND"] = "memory"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.api import dependencies  # noqa: E402
from app.db.database import engine  # noqa: E402
from app.db.models import Base  # noqa: E402
from app.infrastructure.external_services.rate_limiter import InMemoryRateLimiter  # noqa: E402

from .helpers import RecordingEmailService, FakePageFetcher  # noqa: E402


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def email_service() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture
def page_fetcher() -> FakePageFetcher:
    return FakePageFetcher()


@pytest.fixture
def rate_limiter() -> InMemoryRateLimiter:
    return InMemoryRateLimiter(limit=3, window_seconds=3600)


@pytest.fixture
def client(email_service, page_fetcher, rate_limiter):
    app.dependency_overrides[dependencies.get_email_service] = lambda: email_service
    app.dependency_overrides[dependencies.get_page_fetcher] = lambda: page_fetcher
    app.dependency_overrides[dependencies.get_rate_limiter] = lambda: rate_limiter
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
