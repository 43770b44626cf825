"""Rebuild tasks on SQLite from explicit DDL

Gives the SQLite table an AUTOINCREMENT key, index names matching
PostgreSQL and an explicitly named list foreign key. Rows are copied across
so nothing is lost. PostgreSQL already has this shape after 0009.

Run with foreign keys off: dropping the old table must not cascade into
task_tags, task_links and task_attachments.

Revision ID: 0010
Revises: 0009
Create Date: 2026-01-12 00:00:04.000000

"""
from typing import Sequence, Union

from alembic import op

from app.core.migrations import dialect_name

# revision identifiers, used by Alembic.
revision: str = '0010'
down_revision: Union[str, None] = '0009'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TASK_COLUMNS = 'id, title, completed, date, list_id, position, notes, color, created_at, updated_at'

CREATE_TASKS = """
CREATE TABLE tasks_rebuilt (
    id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
    title VARCHAR NOT NULL,
    completed BOOLEAN NOT NULL DEFAULT 0,
    date DATETIME,
    list_id INTEGER,
    position INTEGER,
    notes TEXT,
    color VARCHAR,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL,
    CONSTRAINT fk_tasks_list_id FOREIGN KEY (list_id)
        REFERENCES someday_lists (id) ON DELETE SET NULL ON UPDATE CASCADE
)
"""

SATELLITES = [
    """
    CREATE TABLE IF NOT EXISTS task_tags (
        id INTEGER NOT NULL PRIMARY KEY,
        task_id INTEGER NOT NULL,
        tag_name VARCHAR NOT NULL,
        created_at DATETIME NOT NULL,
        CONSTRAINT fk_task_tags_task_id FOREIGN KEY (task_id)
            REFERENCES tasks (id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS task_links (
        id INTEGER NOT NULL PRIMARY KEY,
        task_id INTEGER NOT NULL,
        url TEXT NOT NULL,
        title VARCHAR,
        position INTEGER NOT NULL,
        created_at DATETIME NOT NULL,
        CONSTRAINT fk_task_links_task_id FOREIGN KEY (task_id)
            REFERENCES tasks (id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS task_attachments (
        id INTEGER NOT NULL PRIMARY KEY,
        task_id INTEGER NOT NULL,
        file_name VARCHAR NOT NULL,
        file_size INTEGER NOT NULL,
        mime_type VARCHAR NOT NULL,
        storage_path VARCHAR NOT NULL,
        uploaded_at DATETIME NOT NULL,
        CONSTRAINT fk_task_attachments_task_id FOREIGN KEY (task_id)
            REFERENCES tasks (id) ON DELETE CASCADE
    )
    """,
]

INDEXES = [
    'CREATE INDEX IF NOT EXISTS idx_tasks_date ON tasks (date)',
    'CREATE INDEX IF NOT EXISTS idx_tasks_list_position ON tasks (list_id, position)',
    'CREATE INDEX IF NOT EXISTS idx_task_tags_name ON task_tags (tag_name)',
    'CREATE INDEX IF NOT EXISTS idx_task_tags_task_id ON task_tags (task_id)',
    'CREATE INDEX IF NOT EXISTS idx_task_attachments_task_id ON task_attachments (task_id)',
]


def upgrade() -> None:
    if dialect_name() != 'sqlite':
        return

    op.execute('DROP TABLE IF EXISTS tasks_rebuilt')
    op.execute(CREATE_TASKS)
    op.execute(f'INSERT INTO tasks_rebuilt ({TASK_COLUMNS}) SELECT {TASK_COLUMNS} FROM tasks')
    op.execute('DROP TABLE tasks')
    op.execute('ALTER TABLE tasks_rebuilt RENAME TO tasks')

    for statement in SATELLITES:
        op.execute(statement)
    for statement in INDEXES:
        op.execute(statement)


def downgrade() -> None:
    # The rebuilt table has the same columns; 0009's downgrade handles the rest
    pass
