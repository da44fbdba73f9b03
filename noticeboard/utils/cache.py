"""
In-process cache with tag-based invalidation.
Used for generated sitemaps, which stay cached until content changes.
"""

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, Iterable, Set

logger = logging.getLogger(__name__)


class TaggedCache:
    """
    Key/value cache where every entry is registered under one or more tags.

    Concurrent misses on the same key are serialized by a per-key lock so the
    loader runs once. Invalidating a tag drops every entry registered under it.
    """

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._tags: Dict[str, Set[str]] = defaultdict(set)
        self._locks: Dict[str, asyncio.Lock] = {}
        # Bumped on every invalidation; a load that raced with one is not stored
        self._generation = 0

    async def get_or_set(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
        tags: Iterable[str] = ()
    ) -> Any:
        """
        Return the cached value for ``key``, computing it with ``loader`` on a miss.

        Args:
            key: Cache key
            loader: Coroutine function producing the value
            tags: Tags the entry is registered under
        """
        if key in self._values:
            logger.debug(f"Cache hit: {key}")
            return self._values[key]

        tags = tuple(tags)
        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            if key in self._values:
                logger.debug(f"Cache hit after wait: {key}")
                return self._values[key]

            generation = self._generation
            value = await loader()

            if generation == self._generation:
                self._values[key] = value
                for tag in tags:
                    self._tags[tag].add(key)
                logger.debug(f"Cached {key} under tags {list(tags)}")
            return value

    def invalidate_tag(self, tag: str) -> int:
        """Drop every entry registered under ``tag``; returns the number dropped."""
        self._generation += 1
        keys = self._tags.pop(tag, set())
        dropped = 0
        for key in keys:
            if self._values.pop(key, None) is not None:
                dropped += 1
        logger.info(f"Invalidated cache tag '{tag}' ({dropped} entries)")
        return dropped

    def clear(self) -> None:
        self._generation += 1
        self._values.clear()
        self._tags.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._values


sitemap_cache = TaggedCache()


def revalidate_tag(tag: str) -> None:
    """Invalidate a sitemap tag after content changed."""
    sitemap_cache.invalidate_tag(tag)
