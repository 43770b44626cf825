"""Copy tasks and someday_tasks into tasks_unified

Calendar tasks keep their ids. Someday task ids are shifted by the largest
calendar task id so the two id spaces cannot collide. The rollback only
empties tasks_unified; the source tables are untouched by the upgrade.

Revision ID: 0008
Revises: 0007
Create Date: 2026-01-12 00:00:02.000000

"""
import logging
from typing import Sequence, Union

from alembic import op

from app.core.migrations import dialect_name, scalar, table_exists

# revision identifiers, used by Alembic.
revision: str = '0008'
down_revision: Union[str, None] = '0007'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

logger = logging.getLogger(__name__)


def upgrade() -> None:
    offset = 0
    if table_exists('tasks'):
        op.execute(
            'INSERT INTO tasks_unified (id, title, completed, date, created_at, updated_at) '
            'SELECT id, title, completed, date, created_at, updated_at FROM tasks'
        )
        offset = scalar('SELECT COALESCE(MAX(id), 0) FROM tasks')

    if table_exists('someday_tasks'):
        op.execute(
            'INSERT INTO tasks_unified '
            '(id, title, completed, list_id, position, notes, created_at, updated_at) '
            f'SELECT id + {int(offset)}, title, completed, list_id, position, description, '
            'created_at, updated_at FROM someday_tasks'
        )

    if dialect_name() == 'postgresql':
        # Explicit ids do not advance the serial sequence
        next_id = scalar('SELECT COALESCE(MAX(id), 0) + 1 FROM tasks_unified')
        op.execute(f'ALTER SEQUENCE tasks_unified_id_seq RESTART WITH {int(next_id)}')

    copied = scalar('SELECT COUNT(*) FROM tasks_unified')
    logger.info('Copied %s tasks into tasks_unified (someday id offset %s)', copied, offset)


def downgrade() -> None:
    op.execute('DELETE FROM tasks_unified')
