"""데이터베이스 엔진, 세션 및 트랜잭션 설정 모듈.

Database engine, session and transaction configuration module.
Sets up the async SQLAlchemy engine, session factory, ORM base class,
and the scoped transaction block used by every write operation.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from adminbase.config import settings

# asyncpg 전용 연결 옵션 — asyncpg-only connect args
# Supavisor(트랜잭션 모드 풀러)에서 prepared statement 비활성화
_connect_args: dict = (
    {"statement_cache_size": 0} if settings.DATABASE_URL.startswith("postgresql+asyncpg") else {}
)

# 비동기 데이터베이스 엔진 — Async database engine
# pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    connect_args=_connect_args,
)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is automatically closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


@asynccontextmanager
async def transaction(db: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """쓰기 작업을 하나의 트랜잭션으로 묶습니다.

    All-or-nothing transaction scope for a single write operation.
    Commits on normal exit; on any exception the session is rolled back
    and the exception is re-raised to the caller.

    Usage:
        async with transaction(db):
            await repository.create(db, data)

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)

    Yields:
        AsyncSession: 동일한 세션 (The same session)
    """
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
