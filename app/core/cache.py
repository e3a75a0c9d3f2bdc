"""Key-value кэш для вычисленных метрик."""
import asyncio
import json
import logging
from time import monotonic
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from redis.asyncio import Redis

from app.core.config import Settings

logger = logging.getLogger(__name__)


class CacheBackend(ABC):
    """Контракт кэша: None означает промах"""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Получение значения по ключу"""

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Сохранение значения; ttl=None означает TTL по умолчанию"""

    async def close(self) -> None:
        """Освобождение ресурсов"""


class InMemoryCache(CacheBackend):
    """Кэш в памяти процесса с TTL"""

    def __init__(self, default_ttl: Optional[int] = None) -> None:
        self.default_ttl = default_ttl
        self._data: Dict[str, Tuple[Any, Optional[float]]] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[Any]:
        async with self._lock:
            item = self._data.get(key)
            if item is None:
                return None
            value, expires_at = item
            if expires_at is not None and expires_at < monotonic():
                self._data.pop(key, None)
                return None
            return value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        ttl = ttl if ttl is not None else self.default_ttl
        async with self._lock:
            now = monotonic()
            # Ключи содержат текст документа, старые версии больше не читаются
            self._evict_expired(now)
            expires_at = now + ttl if ttl else None
            self._data[key] = (value, expires_at)

    def _evict_expired(self, now: float) -> None:
        expired = [
            key for key, (_value, expires_at) in self._data.items()
            if expires_at is not None and expires_at < now
        ]
        for key in expired:
            del self._data[key]

    def __len__(self) -> int:
        return len(self._data)


class RedisCache(CacheBackend):
    """Кэш в Redis; значения хранятся как JSON"""

    def __init__(self, client: Redis, default_ttl: Optional[int] = None) -> None:
        self._client = client
        self.default_ttl = default_ttl

    @classmethod
    def from_url(cls, url: str, default_ttl: Optional[int] = None, timeout: Optional[float] = None) -> "RedisCache":
        client = Redis.from_url(
            url,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
            decode_responses=True,
        )
        return cls(client, default_ttl=default_ttl)

    async def get(self, key: str) -> Optional[Any]:
        raw = await self._client.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        ttl = ttl if ttl is not None else self.default_ttl
        await self._client.set(key, json.dumps(value), ex=ttl or None)

    async def close(self) -> None:
        await self._client.aclose()


def create_cache(settings: Settings) -> CacheBackend:
    """Создание кэша по настройкам"""
    backend = settings.cache_backend.lower()

    if backend == "redis":
        logger.info(f"Using Redis cache at {settings.redis_url}")
        return RedisCache.from_url(
            settings.redis_url,
            default_ttl=settings.cache_ttl_seconds,
            timeout=settings.cache_timeout_seconds,
        )

    if backend == "memory":
        logger.info("Using in-memory cache")
        return InMemoryCache(default_ttl=settings.cache_ttl_seconds)

    raise ValueError(f"Unsupported cache backend: {settings.cache_backend}")
