import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlmodel import SQLModel

from config import ApplicationConfig
from taskflow.adapter.services.database import create_engine, create_schema, create_session_factory
from taskflow.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskflow.api.app import create_app
from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.depends import get_unit_of_work


class TestConfig(ApplicationConfig):
    ENVIRONMENT = "test"
    DB_URI = None
    JWT_SECRET = None
    LOG_LEVEL = "WARNING"
    CORS_ORIGINS = []


@pytest_asyncio.fixture
async def engine():
    engine = create_engine("sqlite+aiosqlite:///./test.db")
    await create_schema(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = create_session_factory(engine)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def app(engine, db_session):
    app = create_app(TestConfig, session_factory=create_session_factory(engine))
    app.state.password_hasher = PasswordHasher(rounds=4)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session, app.state.token_service.refresh_token_ttl)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    yield app
    await app.state.dispatcher.drain()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
