# app/core/dependencies.py
import logging

from fastapi import Depends, HTTPException, Request, status
from strawberry.fastapi import BaseContext

from app.core.context import AppContext

logger = logging.getLogger(__name__)


def get_app_context(request: Request) -> AppContext:
    """Return the application context built during startup.

    Raises:
        HTTPException: If the application has not finished starting
    """
    context = getattr(request.app.state, "context", None)
    if context is None:
        logger.error("Request received before the application context was built")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service is starting up",
        )
    return context


class GraphQLContext(BaseContext):
    """Per-request GraphQL context; resolvers reach the repositories through it."""

    def __init__(self, app_context: AppContext):
        super().__init__()
        self.app_context = app_context


async def get_graphql_context(
    app_context: AppContext = Depends(get_app_context),
) -> GraphQLContext:
    return GraphQLContext(app_context)
