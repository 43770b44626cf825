"""Create settings

Revision ID: 0003
Revises: 0002
Create Date: 2026-01-08 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.core.migrations import table_exists

# revision identifiers, used by Alembic.
revision: str = '0003'
down_revision: Union[str, None] = '0002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

BREAKPOINTS = '{"small":640,"medium":1024,"large":1536,"xlarge":2048}'
COUNTS = '{"small":1,"medium":2,"large":3,"xlarge":5,"xxlarge":7}'


def upgrade() -> None:
    if table_exists('settings'):
        return
    op.create_table(
        'settings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('column_min_width', sa.Integer(), server_default='300', nullable=False),
        sa.Column('today_shows_previous', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('single_arrow_days', sa.Integer(), server_default='1', nullable=False),
        sa.Column('double_arrow_days', sa.Integer(), server_default='7', nullable=False),
        sa.Column('auto_column_breakpoints', sa.Text(), server_default=BREAKPOINTS, nullable=False),
        sa.Column('auto_column_counts', sa.Text(), server_default=COUNTS, nullable=False),
        sa.Column('drawer_height', sa.Integer(), server_default='300', nullable=False),
        sa.Column('drawer_is_open', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('settings')
