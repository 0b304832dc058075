"""create users and cards

Revision ID: 3f2a9c1d7b44
Revises:
Create Date: 2026-10-19 10:12:03.418220
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b44'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _address_columns():
    return [
        sa.Column('state', sa.String(length=256), nullable=True),
        sa.Column('country', sa.String(length=256), nullable=False),
        sa.Column('city', sa.String(length=256), nullable=False),
        sa.Column('street', sa.String(length=256), nullable=False),
        sa.Column('house_number', sa.Integer(), nullable=False),
        sa.Column('zip', sa.Integer(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('first_name', sa.String(length=256), nullable=False),
        sa.Column('middle_name', sa.String(length=256), nullable=False, server_default=''),
        sa.Column('last_name', sa.String(length=256), nullable=False),
        sa.Column('phone', sa.String(length=11), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('image_url', sa.String(length=2048), nullable=True),
        sa.Column('image_alt', sa.String(length=256), nullable=True),
        *_address_columns(),
        sa.Column('is_business', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'])
    op.create_index(op.f('ix_users_email'), 'users', ['email'])

    op.create_table(
        'cards',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=256), nullable=False),
        sa.Column('subtitle', sa.String(length=256), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('phone', sa.String(length=11), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('web', sa.String(length=2048), nullable=True),
        sa.Column('image_url', sa.String(length=2048), nullable=True),
        sa.Column('image_alt', sa.String(length=256), nullable=True),
        *_address_columns(),
        sa.Column('biz_number', sa.BigInteger(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('likes', postgresql.ARRAY(sa.Integer()), nullable=False,
                  server_default=sa.text("'{}'")),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f('ix_cards_id'), 'cards', ['id'])
    op.create_index(op.f('ix_cards_biz_number'), 'cards', ['biz_number'], unique=True)
    op.create_index(op.f('ix_cards_user_id'), 'cards', ['user_id'])


def downgrade() -> None:
    op.drop_index(op.f('ix_cards_user_id'), table_name='cards')
    op.drop_index(op.f('ix_cards_biz_number'), table_name='cards')
    op.drop_index(op.f('ix_cards_id'), table_name='cards')
    op.drop_table('cards')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
