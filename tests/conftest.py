from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from nomad.config import settings
from nomad.db.session import Base, get_db, make_engine
from nomad.main import app
from nomad.services.auth import SessionStore
from nomad.services.booking import MockPaymentGateway
from nomad.services.wizard import WizardStore

# Pytest only picks up fixtures from conftest.py files. Fixtures defined in other
# modules (like tests/seeds.py) are invisible unless we register them here.
pytest_plugins = ["tests.seeds"]

# Fresh in-memory catalog per test, separate from the application engine
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture(autouse=True)
def no_delays(monkeypatch: pytest.MonkeyPatch) -> None:
    """Skip the artificial network latency and pin settings tests depend on."""
    monkeypatch.setattr(settings, "catalog_delay_seconds", 0)
    monkeypatch.setattr(settings, "hotel_detail_delay_seconds", 0)
    monkeypatch.setattr(settings, "auth_delay_seconds", 0)
    monkeypatch.setattr(settings, "booking_delay_seconds", 0)
    monkeypatch.setattr(settings, "page_size", 10)
    monkeypatch.setattr(settings, "maps_api_key", None)


@pytest_asyncio.fixture
async def db() -> AsyncIterator[AsyncSession]:
    """Create tables and yield a session; the database vanishes with the engine."""
    engine = make_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncIterator[AsyncClient]:
    """HTTP client that uses the test database session and empty in-process stores."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.state.sessions = SessionStore()
    app.state.wizards = WizardStore()
    app.state.payment_gateway = MockPaymentGateway()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
