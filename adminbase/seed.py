"""초기 데이터 시드 스크립트 — 관리자 계정 및 기본 부서 생성.

Seed script — Creates the admin account and a starter department tree.
Run this script once to bootstrap the database with required initial data.

Usage:
    python -m adminbase.seed

Creates:
    - 1개 관리자 계정: admin / admin123 (1 admin user, nickname "Administrator")
    - 3개 부서: Head Office > Engineering, Operations (3 departments)
"""

import asyncio
import logging

from sqlalchemy import select

from adminbase.database import Base, async_session, engine
from adminbase.models import Dept, User
from adminbase.utils.password import hash_password

logger = logging.getLogger(__name__)


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts the admin user and
    the starter departments, recording the admin as their creator.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        # 관리자 계정이 있으면 건너뜀 (Skip when the admin account already exists)
        result = await db.execute(select(User).where(User.username == "admin"))
        if result.scalar_one_or_none():
            logger.info("Already seeded. Skipping.")
            return

        admin: User = User(
            username="admin",
            nickname="Administrator",
            email="admin@example.com",
            password_hash=hash_password("admin123"),
            is_active=True,
        )
        db.add(admin)
        await db.flush()  # flush로 admin.id 생성 (Flush to generate admin.id)

        head: Dept = Dept(name="Head Office", parent_id=0, sort=1, create_user=admin.id)
        db.add(head)
        await db.flush()

        for sort, name in enumerate(("Engineering", "Operations"), start=1):
            db.add(Dept(name=name, parent_id=head.id, sort=sort, create_user=admin.id))

        await db.commit()
        logger.info("Seeded: admin user=admin/admin123, root dept=%s", head.id)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
