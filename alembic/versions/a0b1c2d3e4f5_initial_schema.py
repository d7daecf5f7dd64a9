"""initial_schema

Revision ID: a0b1c2d3e4f5
Revises:
Create Date: 2026-10-18 09:12:05.412907

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'a0b1c2d3e4f5'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('create_user', sa.BigInteger(), nullable=True),
        sa.Column('create_time', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('update_user', sa.BigInteger(), nullable=True),
        sa.Column('update_time', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table('users',
        *_audit_columns(),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('nickname', sa.String(length=64), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )

    op.create_table('depts',
        *_audit_columns(),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('parent_id', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('description', sa.String(length=512), nullable=True),
        sa.Column('sort', sa.Integer(), nullable=False, server_default='999'),
        sa.Column('status', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_depts_parent_id', 'depts', ['parent_id'])

    op.create_table('announcements',
        *_audit_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=30), nullable=False),
        sa.Column('effective_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('terminate_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('sort', sa.Integer(), nullable=False, server_default='999'),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('announcements')
    op.drop_index('ix_depts_parent_id', table_name='depts')
    op.drop_table('depts')
    op.drop_table('users')
