"""initial taskboard schema

Revision ID: 6c1f0e2a9b47
Revises:
Create Date: 2026-10-19 10:12:44.018272

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '6c1f0e2a9b47'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(14), primary_key=True),
        sa.Column('username', sa.String(), nullable=False, unique=True),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('hash', sa.String(), nullable=False),
        sa.Column('salt', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'boards',
        sa.Column('id', sa.String(14), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'lists',
        sa.Column('id', sa.String(14), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'cards',
        sa.Column('id', sa.String(14), primary_key=True),
        sa.Column('text', sa.String(), nullable=False),
        sa.Column('colors', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'comments',
        sa.Column('id', sa.String(14), primary_key=True),
        sa.Column('card_id', sa.String(14), sa.ForeignKey('cards.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.String(14), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('text', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_comments_card_id', 'comments', ['card_id'])
    op.create_table(
        'activity',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('action', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('entry_id', sa.String(14), nullable=False),
        sa.Column('board_id', sa.String(14), nullable=True),
        sa.Column('entry', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_activity_id', 'activity', ['id'])
    op.create_index('ix_activity_entry_id', 'activity', ['entry_id'])
    op.create_index('ix_activity_board_id', 'activity', ['board_id'])

    # Join tables
    op.create_table(
        'users_boards',
        sa.Column('user_id', sa.String(14), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('board_id', sa.String(14), sa.ForeignKey('boards.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_table(
        'users_starred_boards',
        sa.Column('user_id', sa.String(14), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('board_id', sa.String(14), sa.ForeignKey('boards.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_table(
        'boards_lists',
        sa.Column('board_id', sa.String(14), sa.ForeignKey('boards.id', ondelete='CASCADE'), nullable=False),
        sa.Column('list_id', sa.String(14), sa.ForeignKey('lists.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_index('ix_boards_lists_board_id', 'boards_lists', ['board_id'])
    op.create_table(
        'lists_cards',
        sa.Column('list_id', sa.String(14), sa.ForeignKey('lists.id', ondelete='CASCADE'), nullable=False),
        sa.Column('card_id', sa.String(14), sa.ForeignKey('cards.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_index('ix_lists_cards_list_id', 'lists_cards', ['list_id'])
    op.create_table(
        'users_activity',
        sa.Column('user_id', sa.String(14), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('activity_id', sa.Integer(), sa.ForeignKey('activity.id'), primary_key=True),
    )


def downgrade():
    for table in (
        'users_activity',
        'lists_cards',
        'boards_lists',
        'users_starred_boards',
        'users_boards',
        'activity',
        'comments',
        'cards',
        'lists',
        'boards',
        'users',
    ):
        op.drop_table(table)
