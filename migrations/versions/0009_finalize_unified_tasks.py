"""Swap tasks_unified in as tasks

The legacy tables are renamed to *_old and kept for manual recovery.
PostgreSQL also carries the table name in the sequence, primary key,
indexes and foreign key, so those are renamed to match; SQLite has no such
dependent objects to rename.

Revision ID: 0009
Revises: 0008
Create Date: 2026-01-12 00:00:03.000000

"""
from typing import Sequence, Union

from alembic import op

from app.core.migrations import dialect_name, table_exists

# revision identifiers, used by Alembic.
revision: str = '0009'
down_revision: Union[str, None] = '0008'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

POSTGRES_RENAMES = [
    ('SEQUENCE', 'tasks_unified_id_seq', 'tasks_id_seq'),
    ('INDEX', 'idx_tasks_unified_date', 'idx_tasks_date'),
    ('INDEX', 'idx_tasks_unified_list_position', 'idx_tasks_list_position'),
]


def _rename_postgres_objects(forward: bool) -> None:
    for kind, old, new in POSTGRES_RENAMES:
        source, target = (old, new) if forward else (new, old)
        op.execute(f'ALTER {kind} IF EXISTS {source} RENAME TO {target}')
    source, target = ('tasks_unified', 'tasks') if forward else ('tasks', 'tasks_unified')
    op.execute(f'ALTER INDEX IF EXISTS {source}_pkey RENAME TO {target}_pkey')
    fk_source, fk_target = (
        ('fk_tasks_unified_list_id', 'fk_tasks_list_id')
        if forward
        else ('fk_tasks_list_id', 'fk_tasks_unified_list_id')
    )
    op.execute(f'ALTER TABLE {target} RENAME CONSTRAINT {fk_source} TO {fk_target}')


def upgrade() -> None:
    postgres = dialect_name() == 'postgresql'

    if table_exists('tasks'):
        op.rename_table('tasks', 'tasks_old')
        if postgres:
            # Free the names the unified table is about to take
            op.execute('ALTER SEQUENCE IF EXISTS tasks_id_seq RENAME TO tasks_old_id_seq')
            op.execute('ALTER INDEX IF EXISTS tasks_pkey RENAME TO tasks_old_pkey')
    if table_exists('someday_tasks'):
        op.rename_table('someday_tasks', 'someday_tasks_old')

    op.rename_table('tasks_unified', 'tasks')
    if postgres:
        _rename_postgres_objects(forward=True)


def downgrade() -> None:
    postgres = dialect_name() == 'postgresql'

    op.rename_table('tasks', 'tasks_unified')
    if postgres:
        _rename_postgres_objects(forward=False)

    if table_exists('someday_tasks_old'):
        op.rename_table('someday_tasks_old', 'someday_tasks')
    if table_exists('tasks_old'):
        op.rename_table('tasks_old', 'tasks')
        if postgres:
            op.execute('ALTER SEQUENCE IF EXISTS tasks_old_id_seq RENAME TO tasks_id_seq')
            op.execute('ALTER INDEX IF EXISTS tasks_old_pkey RENAME TO tasks_pkey')
