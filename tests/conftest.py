"""Shared test fixtures."""
import os

# Keep the application engine off the default Postgres URL
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import bookstore.models  # noqa: E402,F401
from bookstore.database import Base, get_db  # noqa: E402
from bookstore.main import app  # noqa: E402
from bookstore.schemas.book import BookSubmission  # noqa: E402

# Test database URL (SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine():
    """In-memory database with the schema created."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """Create test client bound to the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_submission():
    """Build a valid submission, with optional field overrides."""

    def _make(**overrides) -> BookSubmission:
        data = {
            "title": "Clean Code",
            "author": "Robert C. Martin",
            "isbn": "0132350884",
            "publication_year": 2008,
        }
        data.update(overrides)
        return BookSubmission(**data)

    return _make
