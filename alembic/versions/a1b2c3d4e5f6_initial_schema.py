"""initial_schema

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

사용자, 리프레시 토큰, 메뉴 항목, 메뉴 리뷰, 추천서 요청, 학생 단체 테이블 생성.
Create users, refresh_tokens, ucsb_dining_commons_menu_items,
menu_item_reviews, recommendation_requests and ucsb_organizations tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLite는 INTEGER PRIMARY KEY만 자동 증가 (SQLite only autoincrements INTEGER PRIMARY KEY)
_BIGINT_ID = sa.BigInteger().with_variant(sa.Integer(), 'sqlite')


def upgrade() -> None:
    # users — 로그인 계정 (Login accounts)
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'refresh_tokens',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('token', sa.String(512), nullable=False, unique=True),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'ucsb_dining_commons_menu_items',
        sa.Column('id', _BIGINT_ID, primary_key=True, autoincrement=True),
        sa.Column('dining_commons_code', sa.String(100), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('station', sa.String(255), nullable=False),
    )

    # menu_item_reviews — item_id는 FK 제약 없음 (item_id is not a foreign key)
    op.create_table(
        'menu_item_reviews',
        sa.Column('id', _BIGINT_ID, primary_key=True, autoincrement=True),
        sa.Column('item_id', sa.BigInteger(), nullable=False),
        sa.Column('reviewer_email', sa.String(255), nullable=False),
        sa.Column('stars', sa.Integer(), nullable=False),
        sa.Column('date_reviewed', sa.DateTime(), nullable=False),
        sa.Column('comments', sa.Text(), nullable=False),
    )

    op.create_table(
        'recommendation_requests',
        sa.Column('id', _BIGINT_ID, primary_key=True, autoincrement=True),
        sa.Column('requester_email', sa.String(255), nullable=False),
        sa.Column('professor_email', sa.String(255), nullable=False),
        sa.Column('explanation', sa.Text(), nullable=False),
        sa.Column('date_requested', sa.DateTime(), nullable=False),
        sa.Column('date_needed', sa.DateTime(), nullable=False),
        sa.Column('done', sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        'ucsb_organizations',
        sa.Column('org_code', sa.String(100), primary_key=True),
        sa.Column('org_translation_short', sa.String(255), nullable=False),
        sa.Column('org_translation', sa.String(255), nullable=False),
        sa.Column('inactive', sa.Boolean(), nullable=False, server_default=sa.false()),
    )


def downgrade() -> None:
    op.drop_table('ucsb_organizations')
    op.drop_table('recommendation_requests')
    op.drop_table('menu_item_reviews')
    op.drop_table('ucsb_dining_commons_menu_items')
    op.drop_table('refresh_tokens')
    op.drop_table('users')
