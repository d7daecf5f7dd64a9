"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata,
which Alembic and ``Base.metadata.create_all`` rely on.

Modules:
    audit: 숫자형 기본 키 및 감사 컬럼 믹스인 (Numeric key and audit column mixin)
    user: 관리자 계정 (Admin users)
    dept: 부서 (Departments)
    announcement: 공지사항 (Announcements)
"""

from adminbase.models.announcement import Announcement
from adminbase.models.dept import Dept
from adminbase.models.user import User

__all__ = ["Announcement", "Dept", "User"]
