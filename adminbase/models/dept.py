"""부서 ORM 모델 정의.

Department SQLAlchemy ORM model definition.

Tables:
    - depts: 부서 (Departments, self-referencing tree via parent_id)
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from adminbase.database import Base
from adminbase.models.audit import AuditMixin


class Dept(AuditMixin, Base):
    """부서 모델.

    Department model.

    Attributes:
        name: 부서 이름 (Department name)
        parent_id: 상위 부서 ID (Parent department id, 0 = root)
        description: 설명 (Description, optional)
        sort: 정렬 순서 (Display order)
        status: 상태 (1 = enabled, 2 = disabled)
    """

    __tablename__ = "depts"

    name: Mapped[str] = mapped_column(String(64), nullable=False)
    # 상위 부서 ID — 0이면 최상위 (0 means top level)
    parent_id: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)
    description: Mapped[str | None] = mapped_column(String(512), nullable=True)
    sort: Mapped[int] = mapped_column(Integer, default=999, nullable=False)
    status: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
