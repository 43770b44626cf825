"""Create trash

Revision ID: 0006
Revises: 0005
Create Date: 2026-01-10 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.core.migrations import table_exists

# revision identifiers, used by Alembic.
revision: str = '0006'
down_revision: Union[str, None] = '0005'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    if table_exists('trash'):
        return
    # task_id is a text snapshot, not a foreign key
    op.create_table(
        'trash',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('task_id', sa.String(), nullable=False),
        sa.Column('task_text', sa.String(), nullable=False),
        sa.Column('task_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('task_completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('task_type', sa.String(), nullable=False),
        sa.Column('someday_list_id', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('trash')
