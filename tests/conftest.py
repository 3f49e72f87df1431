"""공통 테스트 픽스처 (인메모리 SQLite + ASGI 클라이언트)"""
import httpx
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.main import app
from app.models.base import Base, create_engine_for_url, get_db

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """테스트마다 새 인메모리 DB 엔진 생성"""
    engine = create_engine_for_url(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_maker(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_db_session(test_session_maker):
    """테스트용 DB 세션"""
    async with test_session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_session_maker):
    """get_db 의존성을 테스트 DB로 교체한 비동기 HTTP 클라이언트"""

    async def override_get_db():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    app.dependency_overrides.clear()
