"""
Rendered Page Cache
Caches anonymous page renders by path; revalidating a path drops its entry
"""

import time
from typing import Dict, Optional, Protocol, Tuple

import redis.asyncio as redis
import structlog

from app.config import get_settings

logger = structlog.get_logger(__name__)

KEY_PREFIX = "page-cache:"


class PageCache(Protocol):
    backend: str

    async def get(self, path: str) -> Optional[str]: ...

    async def set(self, path: str, html: str, ttl: int) -> None: ...

    async def revalidate_path(self, path: str) -> None: ...

    async def close(self) -> None: ...


class InMemoryPageCache:
    """Per-process cache, used when no Redis URL is configured"""

    backend = "memory"

    def __init__(self):
        self._entries: Dict[str, Tuple[float, str]] = {}

    async def get(self, path: str) -> Optional[str]:
        entry = self._entries.get(path)
        if entry is None:
            return None
        expires_at, html = entry
        if time.monotonic() >= expires_at:
            del self._entries[path]
            return None
        return html

    async def set(self, path: str, html: str, ttl: int) -> None:
        self._entries[path] = (time.monotonic() + ttl, html)

    async def revalidate_path(self, path: str) -> None:
        self._entries.pop(path, None)
        logger.info("Path revalidated", path=path, backend=self.backend)

    async def close(self) -> None:
        self._entries.clear()


class RedisPageCache:
    """Cache shared by all workers through Redis"""

    backend = "redis"

    def __init__(self, redis_url: str):
        self.client = redis.from_url(redis_url, decode_responses=True)

    async def get(self, path: str) -> Optional[str]:
        return await self.client.get(KEY_PREFIX + path)

    async def set(self, path: str, html: str, ttl: int) -> None:
        await self.client.set(KEY_PREFIX + path, html, ex=ttl)

    async def revalidate_path(self, path: str) -> None:
        await self.client.delete(KEY_PREFIX + path)
        logger.info("Path revalidated", path=path, backend=self.backend)

    async def close(self) -> None:
        await self.client.aclose()


def create_page_cache(redis_url: Optional[str] = None) -> PageCache:
    """Pick the cache backend from configuration"""
    redis_url = redis_url if redis_url is not None else get_settings().redis_url
    if redis_url:
        logger.info("Using Redis page cache")
        return RedisPageCache(redis_url)
    logger.info("Using in-memory page cache")
    return InMemoryPageCache()
