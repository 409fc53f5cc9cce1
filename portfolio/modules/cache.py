"""
Read Cache

In-process cache for public read operations. Entries are grouped by
namespace; writes evict whole namespaces rather than single keys.

Each namespace carries a generation that eviction bumps. A reader that
loaded its value under an older generation must not store it.
"""
import logging
import threading
from typing import Any, Dict, Hashable, Iterable, Optional

logger = logging.getLogger("portfolio.cache")

# Key used for namespaces that hold a single value (e.g. "all projects").
ALL = "__all__"


class ReadCache:
    """Namespaced key/value cache with whole-namespace eviction."""

    def __init__(self):
        self._entries: Dict[str, Dict[Hashable, Any]] = {}
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, namespace: str, key: Hashable = ALL) -> Optional[Any]:
        with self._lock:
            return self._entries.get(namespace, {}).get(key)

    def contains(self, namespace: str, key: Hashable = ALL) -> bool:
        with self._lock:
            return key in self._entries.get(namespace, {})

    def generation(self, namespace: str) -> int:
        with self._lock:
            return self._generations.get(namespace, 0)

    def put(
        self,
        namespace: str,
        value: Any,
        key: Hashable = ALL,
        generation: Optional[int] = None
    ) -> bool:
        """
        Store a value. When ``generation`` is given the value is only stored
        if the namespace has not been evicted since; returns whether it was.
        """
        with self._lock:
            if generation is not None and self._generations.get(namespace, 0) != generation:
                logger.debug(f"[ReadCache.put] discarding stale value for {namespace}:{key}")
                return False
            self._entries.setdefault(namespace, {})[key] = value
            return True

    def evict_all(self, *namespaces: str) -> None:
        """Drop every entry in the given namespaces."""
        with self._lock:
            for namespace in namespaces:
                self._entries.pop(namespace, None)
                self._generations[namespace] = self._generations.get(namespace, 0) + 1
        logger.debug(f"[ReadCache.evict_all] namespaces={list(namespaces)}")

    def clear(self) -> None:
        with self._lock:
            for namespace in set(self._entries) | set(self._generations):
                self._generations[namespace] = self._generations.get(namespace, 0) + 1
            self._entries.clear()

    def namespaces(self) -> Iterable[str]:
        with self._lock:
            return list(self._entries.keys())


# Singleton instance
read_cache = ReadCache()
