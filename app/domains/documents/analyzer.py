import asyncio
import json
import logging
from typing import Any, Callable, List, Optional, Tuple

from app.core.cache import CacheBackend
from app.domains.documents import analysis

logger = logging.getLogger(__name__)


def build_cache_key(operation: str, params: Tuple[Any, ...], content: str) -> str:
    """Ключ вида operation[:param...]:content"""
    parts = [operation]
    parts.extend(json.dumps(param) for param in params)
    parts.append(content)
    return ":".join(parts)


class CachedTextAnalyzer:
    """Метрики текста через кэш (cache-aside).

    Промах кэша: метрика вычисляется и сохраняется с TTL по умолчанию.
    Ошибки и таймауты кэша не влияют на результат: чтение считается
    промахом, неудачная запись игнорируется.
    """

    def __init__(self, cache: CacheBackend, timeout: Optional[float] = None):
        self.cache = cache
        self.timeout = timeout

    async def count_words(self, content: str) -> int:
        return await self._cached("countWords", (), content, analysis.count_words)

    async def count_characters(self, content: str, exclude_punctuation: bool = False) -> int:
        return await self._cached(
            "countCharacters",
            (exclude_punctuation,),
            content,
            analysis.count_characters
        )

    async def count_sentences(self, content: str) -> int:
        return await self._cached("countSentences", (), content, analysis.count_sentences)

    async def count_paragraphs(self, content: str) -> int:
        return await self._cached("countParagraphs", (), content, analysis.count_paragraphs)

    async def longest_words(self, content: str) -> List[str]:
        return await self._cached(
            "longestWordInParagraphs",
            (),
            content,
            analysis.longest_words
        )

    async def _cached(
        self,
        operation: str,
        params: Tuple[Any, ...],
        content: str,
        compute: Callable[..., Any]
    ) -> Any:
        key = build_cache_key(operation, params, content)

        cached = await self._read(key)
        if cached is not None:
            logger.debug(f"Cache hit for {operation}")
            return cached

        logger.debug(f"Cache miss for {operation}")
        value = compute(content, *params)
        await self._write(key, value)
        return value

    async def _read(self, key: str) -> Optional[Any]:
        try:
            return await asyncio.wait_for(self.cache.get(key), self.timeout)
        except Exception as e:
            logger.warning(f"Cache read failed, computing instead: {e!r}")
            return None

    async def _write(self, key: str, value: Any) -> None:
        try:
            await asyncio.wait_for(self.cache.set(key, value), self.timeout)
        except Exception as e:
            logger.warning(f"Cache write failed, value not cached: {e!r}")
