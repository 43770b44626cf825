"""GraphQL schema extension that reports slow resolvers."""

import inspect
import logging
import time

from strawberry.extensions import SchemaExtension

from app.core.config import settings

logger = logging.getLogger(__name__)


class SlowFieldLogger(SchemaExtension):
    """Log a warning for every resolver that takes longer than the threshold."""

    threshold_ms: float = settings.slow_field_threshold_ms

    async def resolve(self, _next, root, info, *args, **kwargs):
        start = time.perf_counter()
        result = _next(root, info, *args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        elapsed_ms = (time.perf_counter() - start) * 1000
        if elapsed_ms > self.threshold_ms:
            logger.warning(
                "Slow GraphQL field %s.%s took %.1f ms",
                info.parent_type.name,
                info.field_name,
                elapsed_ms,
            )
        return result
