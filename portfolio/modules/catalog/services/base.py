"""
Cached Service Base

Read-through caching and coarse write invalidation shared by the catalog
services.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Hashable, Optional, Sequence
from portfolio.modules.cache import ALL, ReadCache, read_cache

logger = logging.getLogger("portfolio.catalog.service")


class CachedService:
    """Service base holding a read cache and the namespaces it owns."""

    namespaces: Sequence[str] = ()

    def __init__(self, cache: Optional[ReadCache] = None):
        self.cache = cache or read_cache

    async def _cached(
        self,
        namespace: str,
        loader: Callable[[], Awaitable[Any]],
        key: Hashable = ALL
    ) -> Any:
        if self.cache.contains(namespace, key):
            logger.debug(f"[{type(self).__name__}] cache hit {namespace}:{key}")
            return self.cache.get(namespace, key)
        generation = self.cache.generation(namespace)
        value = await loader()
        # A write during the load has already evicted this namespace
        self.cache.put(namespace, value, key, generation=generation)
        return value

    def _evict(self) -> None:
        self.cache.evict_all(*self.namespaces)

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc).replace(tzinfo=None)
