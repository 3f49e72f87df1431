from collections.abc import AsyncGenerator
from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool

from app.core.config import settings


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


_engine: AsyncEngine | None = None
_async_session_maker: async_sessionmaker[AsyncSession] | None = None


def create_engine_for_url(database_url: str) -> AsyncEngine:
    """DATABASE_URL에 맞는 비동기 엔진 생성

    인메모리 SQLite는 연결마다 DB가 새로 생기므로 단일 연결(StaticPool)을 공유한다.
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, connect_args={"check_same_thread": False})
    return create_async_engine(database_url, pool_pre_ping=True)


def get_engine() -> AsyncEngine:
    """비동기 엔진 싱글톤"""
    global _engine
    if _engine is None:
        _engine = create_engine_for_url(settings.database_url)
    return _engine


def get_async_session_maker() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 싱글톤"""
    global _async_session_maker
    if _async_session_maker is None:
        _async_session_maker = async_sessionmaker(get_engine(), expire_on_commit=False)
    return _async_session_maker


async def init_models(engine: AsyncEngine | None = None) -> None:
    """테이블 생성 (개발/SQLite 환경용, 운영은 Alembic 마이그레이션 사용)"""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 DB 세션 의존성"""
    session_maker = get_async_session_maker()
    async with session_maker() as session:
        yield session
