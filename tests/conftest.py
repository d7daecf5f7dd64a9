"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh in-memory database (aiosqlite + StaticPool) with the
schema created from the ORM metadata; the app's ``get_db`` is overridden so
the test and the endpoints share one session.
"""

import os

# 설정 로딩 전에 테스트 DB 지정 — Must run before adminbase.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DEBUG"] = "false"
os.environ["AXIOM_API_TOKEN"] = ""
os.environ["AXIOM_DATASET"] = ""

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from adminbase.database import Base, get_db  # noqa: E402
from adminbase.main import app  # noqa: E402
from adminbase.models import *  # noqa: F401,F403,E402 — register all models with metadata
from adminbase.models.user import User  # noqa: E402
from adminbase.utils.jwt import create_access_token  # noqa: E402
from adminbase.utils.password import hash_password  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 새 인메모리 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_user(
    db: AsyncSession,
    username: str,
    nickname: str,
    password: str,
    is_active: bool = True,
) -> User:
    """사용자를 생성하고 커밋합니다."""
    user = User(
        username=username,
        nickname=nickname,
        password_hash=hash_password(password),
        email=f"{username}@test.com",
        is_active=is_active,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession) -> User:
    """관리자 사용자를 생성합니다."""
    return await make_user(db, "admin", "Test Admin", "admin123!")


@pytest_asyncio.fixture
async def inactive_user(db: AsyncSession) -> User:
    """비활성 사용자를 생성합니다."""
    return await make_user(db, "retired", "Retired User", "retired123!", is_active=False)


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": str(user.id), "username": user.username})


@pytest.fixture
def admin_token(admin_user: User) -> str:
    return make_token(admin_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
