"""공통 ORM 컬럼 정의 — 숫자형 기본 키 및 감사(audit) 컬럼.

Shared ORM column definitions — numeric primary key and audit columns.
Every CRUD entity mixes in ``AuditMixin`` so the base service can record
and resolve who created and last updated a row.
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

# 숫자형 기본 키 타입 — SQLite는 INTEGER PRIMARY KEY만 자동 증가
# Numeric key type; SQLite only autoincrements INTEGER PRIMARY KEY
BigIntId = BigInteger().with_variant(Integer, "sqlite")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditMixin:
    """생성자/수정자 및 생성/수정 일시 컬럼 믹스인.

    Audit column mixin.

    Attributes:
        id: 숫자형 기본 키 (Autoincrement numeric primary key)
        create_user: 생성자 사용자 ID (Creator user id, nullable)
        create_time: 생성 일시 UTC (Creation timestamp)
        update_user: 수정자 사용자 ID (Last updater user id, nullable)
        update_time: 수정 일시 UTC (Last update timestamp, nullable)
    """

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    # 사용자 FK 없음 — 삭제된 사용자의 이력도 보존 (No FK so history survives user deletion)
    create_user: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    create_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    update_user: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    update_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, onupdate=_utcnow)
