import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from app.core.cache import CacheBackend, InMemoryCache
from app.domains.documents import analysis
from app.domains.documents.analyzer import CachedTextAnalyzer, build_cache_key


def _failing_cache() -> AsyncMock:
    cache = AsyncMock(spec=CacheBackend)
    cache.get.side_effect = ConnectionError("cache down")
    cache.set.side_effect = ConnectionError("cache down")
    return cache


class TestBuildCacheKey:
    def test_operation_without_params(self) -> None:
        assert build_cache_key("countWords", (), "Hello") == "countWords:Hello"

    def test_boolean_param_serialized_lowercase(self) -> None:
        assert build_cache_key("countCharacters", (True,), "Hi") == "countCharacters:true:Hi"
        assert build_cache_key("countCharacters", (False,), "Hi") == "countCharacters:false:Hi"

    def test_content_kept_verbatim(self) -> None:
        content = "a:b\n\nc"
        assert build_cache_key("countParagraphs", (), content) == "countParagraphs:a:b\n\nc"


class TestCacheHit:
    @pytest.mark.asyncio
    async def test_returns_cached_value_without_computing(self) -> None:
        cache = AsyncMock(spec=CacheBackend)
        cache.get.return_value = 42
        analyzer = CachedTextAnalyzer(cache)

        with patch("app.domains.documents.analysis.count_words") as mock_compute:
            result = await analyzer.count_words("It's a beautiful day!")

        assert result == 42
        cache.get.assert_awaited_once_with("countWords:It's a beautiful day!")
        mock_compute.assert_not_called()
        cache.set.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("cached", [0, []])
    async def test_falsy_cached_value_is_a_hit(self, cached) -> None:
        cache = AsyncMock(spec=CacheBackend)
        cache.get.return_value = cached
        analyzer = CachedTextAnalyzer(cache)

        with patch("app.domains.documents.analysis.longest_words") as mock_compute:
            result = await analyzer.longest_words("anything")

        assert result == cached
        mock_compute.assert_not_called()


class TestCacheMiss:
    @pytest.mark.asyncio
    async def test_computes_and_stores(self) -> None:
        cache = AsyncMock(spec=CacheBackend)
        cache.get.return_value = None
        analyzer = CachedTextAnalyzer(cache)

        result = await analyzer.count_characters("Hello, World!", True)

        assert result == 10
        cache.get.assert_awaited_once_with("countCharacters:true:Hello, World!")
        cache.set.assert_awaited_once_with("countCharacters:true:Hello, World!", 10)

    @pytest.mark.asyncio
    async def test_second_call_does_not_recompute(self) -> None:
        analyzer = CachedTextAnalyzer(InMemoryCache())
        content = "Wait!!! What??? Really..."

        with patch(
            "app.domains.documents.analysis.count_sentences",
            wraps=analysis.count_sentences
        ) as mock_compute:
            first = await analyzer.count_sentences(content)
            second = await analyzer.count_sentences(content)

        assert first == second == 3
        mock_compute.assert_called_once_with(content)

    @pytest.mark.asyncio
    async def test_params_are_part_of_key(self) -> None:
        analyzer = CachedTextAnalyzer(InMemoryCache())

        assert await analyzer.count_characters("Hello, World!") == 12
        assert await analyzer.count_characters("Hello, World!", True) == 10

    @pytest.mark.asyncio
    async def test_changed_content_is_recomputed(self) -> None:
        analyzer = CachedTextAnalyzer(InMemoryCache())

        assert await analyzer.count_paragraphs("one") == 1
        assert await analyzer.count_paragraphs("one\n\ntwo") == 2

    @pytest.mark.asyncio
    async def test_does_not_mutate_content(self) -> None:
        analyzer = CachedTextAnalyzer(InMemoryCache())
        content = "This is a sample paragraph.\nAnother sample paragraph."

        result = await analyzer.longest_words(content)

        assert result == ["paragraph"]
        assert content == "This is a sample paragraph.\nAnother sample paragraph."


class TestCacheFailures:
    @pytest.mark.asyncio
    async def test_read_and_write_errors_are_absorbed(self) -> None:
        cache = _failing_cache()
        analyzer = CachedTextAnalyzer(cache)

        result = await analyzer.count_words("The quick brown fox jumps over the lazy dog.")

        assert result == 9
        cache.set.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_write_error_still_returns_value(self) -> None:
        cache = AsyncMock(spec=CacheBackend)
        cache.get.return_value = None
        cache.set.side_effect = RuntimeError("read-only replica")
        analyzer = CachedTextAnalyzer(cache)

        assert await analyzer.count_paragraphs("a\n\nb") == 2

    @pytest.mark.asyncio
    async def test_failures_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        analyzer = CachedTextAnalyzer(_failing_cache())

        with caplog.at_level("WARNING", logger="app.domains.documents.analyzer"):
            await analyzer.count_words("hello")

        assert "Cache read failed" in caplog.text
        assert "Cache write failed" in caplog.text

    @pytest.mark.asyncio
    async def test_slow_read_is_treated_as_miss(self) -> None:
        async def slow_get(key: str):
            await asyncio.sleep(1)
            return 999

        cache = AsyncMock(spec=CacheBackend)
        cache.get.side_effect = slow_get
        cache.set.return_value = None
        analyzer = CachedTextAnalyzer(cache, timeout=0.01)

        result = await analyzer.count_words("two words")

        assert result == 2
        cache.set.assert_awaited_once_with("countWords:two words", 2)
