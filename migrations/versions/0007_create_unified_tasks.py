"""Create tasks_unified and the task satellite tables

tasks_unified holds both calendar and someday tasks. Context columns are all
nullable and a deleted list detaches its tasks (SET NULL) instead of
deleting them.

Revision ID: 0007
Revises: 0006
Create Date: 2026-01-12 00:00:01.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.core.migrations import index_exists, table_exists

# revision identifiers, used by Alembic.
revision: str = '0007'
down_revision: Union[str, None] = '0006'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    if not table_exists('tasks_unified'):
        op.create_table(
            'tasks_unified',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
            sa.Column('date', sa.DateTime(timezone=True), nullable=True),
            sa.Column('list_id', sa.Integer(), nullable=True),
            sa.Column('position', sa.Integer(), nullable=True),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('color', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(
                ['list_id'], ['someday_lists.id'],
                name='fk_tasks_unified_list_id', ondelete='SET NULL', onupdate='CASCADE'
            ),
            sa.PrimaryKeyConstraint('id')
        )
    if not index_exists('tasks_unified', 'idx_tasks_unified_date'):
        op.create_index('idx_tasks_unified_date', 'tasks_unified', ['date'])
    if not index_exists('tasks_unified', 'idx_tasks_unified_list_position'):
        op.create_index('idx_tasks_unified_list_position', 'tasks_unified', ['list_id', 'position'])

    if not table_exists('task_tags'):
        op.create_table(
            'task_tags',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('task_id', sa.Integer(), nullable=False),
            sa.Column('tag_name', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(
                ['task_id'], ['tasks_unified.id'], name='fk_task_tags_task_id', ondelete='CASCADE'
            ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_task_tags_name', 'task_tags', ['tag_name'])
        op.create_index('idx_task_tags_task_id', 'task_tags', ['task_id'])

    if not table_exists('task_links'):
        op.create_table(
            'task_links',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('task_id', sa.Integer(), nullable=False),
            sa.Column('url', sa.Text(), nullable=False),
            sa.Column('title', sa.String(), nullable=True),
            sa.Column('position', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(
                ['task_id'], ['tasks_unified.id'], name='fk_task_links_task_id', ondelete='CASCADE'
            ),
            sa.PrimaryKeyConstraint('id')
        )

    if not table_exists('task_attachments'):
        op.create_table(
            'task_attachments',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('task_id', sa.Integer(), nullable=False),
            sa.Column('file_name', sa.String(), nullable=False),
            sa.Column('file_size', sa.Integer(), nullable=False),
            sa.Column('mime_type', sa.String(), nullable=False),
            sa.Column('storage_path', sa.String(), nullable=False),
            sa.Column('uploaded_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(
                ['task_id'], ['tasks_unified.id'],
                name='fk_task_attachments_task_id', ondelete='CASCADE'
            ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_task_attachments_task_id', 'task_attachments', ['task_id'])

    if not table_exists('tag_presets'):
        op.create_table(
            'tag_presets',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('usage_count', sa.Integer(), server_default='0', nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('name', name='uq_tag_presets_name')
        )
        op.create_index('idx_tag_presets_name', 'tag_presets', ['name'])

    if not table_exists('color_presets'):
        op.create_table(
            'color_presets',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('hex_value', sa.String(), nullable=False),
            sa.Column('position', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('position', name='uq_color_presets_position')
        )
        op.create_index('idx_color_presets_position', 'color_presets', ['position'])


def downgrade() -> None:
    op.drop_table('color_presets')
    op.drop_table('tag_presets')
    op.drop_table('task_attachments')
    op.drop_table('task_links')
    op.drop_table('task_tags')
    op.drop_table('tasks_unified')
