"""사용자 ORM 모델 정의.

User SQLAlchemy ORM model definition.
Users log into the admin panel and are the owners referenced by every
audit column; their nickname is the audit display name.

Tables:
    - users: 관리자 계정 (Admin accounts)
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from adminbase.database import Base
from adminbase.models.audit import AuditMixin


class User(AuditMixin, Base):
    """사용자 모델 — 관리자 계정 정보.

    User model — Admin account information.

    Attributes:
        username: 로그인 아이디 (Login username, globally unique)
        nickname: 표시 이름 (Display name shown in audit columns)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        email: 이메일 (Email address, optional)
        is_active: 활성 상태 (Active status)
    """

    __tablename__ = "users"

    # 로그인 아이디 — Login username (전역 고유, globally unique)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    # 표시 이름 — Display name resolved for create_user/update_user
    nickname: Mapped[str] = mapped_column(String(64), nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
