"""Root GraphQL schema.

Every domain contributes one Query and one Mutation class; they are merged
into a single root type each. Two domains declaring the same field name make
``merge_types`` fail at import time.
"""

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.tools import merge_types

from app.core.dependencies import get_graphql_context
from app.core.field_logger import SlowFieldLogger
from app.domains.color_presets.controller import ColorPresetMutation, ColorPresetQuery
from app.domains.settings.controller import SettingsMutation, SettingsQuery
from app.domains.someday_lists.controller import SomedayListMutation, SomedayListQuery
from app.domains.someday_tasks.controller import SomedayTaskMutation, SomedayTaskQuery
from app.domains.tag_presets.controller import TagPresetMutation, TagPresetQuery
from app.domains.task_attachments.controller import TaskAttachmentMutation, TaskAttachmentQuery
from app.domains.task_links.controller import TaskLinkMutation, TaskLinkQuery
from app.domains.task_tags.controller import TaskTagMutation, TaskTagQuery
from app.domains.tasks.controller import TaskMutation, TaskQuery
from app.domains.trash.controller import TrashMutation, TrashQuery

Query = merge_types(
    "Query",
    (
        TaskQuery,
        SomedayListQuery,
        SomedayTaskQuery,
        TaskTagQuery,
        TaskLinkQuery,
        TaskAttachmentQuery,
        TagPresetQuery,
        ColorPresetQuery,
        SettingsQuery,
        TrashQuery,
    ),
)

Mutation = merge_types(
    "Mutation",
    (
        TaskMutation,
        SomedayListMutation,
        SomedayTaskMutation,
        TaskTagMutation,
        TaskLinkMutation,
        TaskAttachmentMutation,
        TagPresetMutation,
        ColorPresetMutation,
        SettingsMutation,
        TrashMutation,
    ),
)

schema = strawberry.Schema(query=Query, mutation=Mutation, extensions=[SlowFieldLogger])


def create_graphql_router() -> GraphQLRouter:
    """GraphQL endpoint: POST executes operations, GET serves GraphiQL."""
    return GraphQLRouter(schema, context_getter=get_graphql_context, graphql_ide="graphiql")
