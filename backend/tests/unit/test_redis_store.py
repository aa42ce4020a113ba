"""
Unit Tests for the Redis Record Store

All Redis operations are mocked for fast, isolated testing.

These tests verify:
- Key namespacing
- Raw reads (present and absent keys)
- Writes serialize decoded data as JSON
- Aggregation over a Redis-backed store
"""

import json
from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from journey.enums.progress import StorageKey


class TestRedisRecordStore:
    """Test suite for RedisRecordStore class."""

    @pytest.fixture
    def store(self):
        """Create a RedisRecordStore instance."""
        from journey.db.redis import RedisRecordStore

        return RedisRecordStore(prefix="test_journey")

    def test_key_namespacing(self, store) -> None:
        assert store._make_key(StorageKey.TASKS) == "test_journey:sal-os-tasks"
        assert store._make_key("custom") == "test_journey:custom"

    def test_default_prefix_from_config(self) -> None:
        from journey.db.redis import RedisRecordStore

        assert RedisRecordStore().prefix == "journey"

    @pytest.mark.asyncio
    async def test_get_raw_missing_key(self, store, mock_redis) -> None:
        with patch("journey.db.redis.get_redis", return_value=mock_redis):
            result = await store.get_raw(StorageKey.JOURNAL_ENTRIES)

            assert result is None
            mock_redis.get.assert_called_once_with("test_journey:sal-os-journal-entries")

    @pytest.mark.asyncio
    async def test_get_raw_returns_text(self, store, mock_redis) -> None:
        with patch("journey.db.redis.get_redis", return_value=mock_redis):
            mock_redis.get = AsyncMock(return_value='[{"id": "j1"}]')

            result = await store.get_raw(StorageKey.JOURNAL_ENTRIES)

            assert result == '[{"id": "j1"}]'

    @pytest.mark.asyncio
    async def test_set_raw_serializes_value(self, store, mock_redis) -> None:
        with patch("journey.db.redis.get_redis", return_value=mock_redis):
            value = [{"id": "w1", "reviewCount": 2}]

            await store.set_raw(StorageKey.LIBRARY_VOCABULARY, value)

            mock_redis.set.assert_called_once()
            call_args = mock_redis.set.call_args
            assert call_args[0][0] == "test_journey:sal-os-vocabulary-library"
            assert json.loads(call_args[0][1]) == value

    @pytest.mark.asyncio
    async def test_set_raw_keeps_text(self, store, mock_redis) -> None:
        with patch("journey.db.redis.get_redis", return_value=mock_redis):
            await store.set_raw(StorageKey.TASKS, "[]")

            mock_redis.set.assert_called_once_with("test_journey:sal-os-tasks", "[]")

    @pytest.mark.asyncio
    async def test_aggregate_from_redis(self, store, mock_redis, sample_raw_collections) -> None:
        """Every collection is fetched from Redis and aggregated."""
        from journey.services.progress import ProgressAggregator

        values = {
            f"test_journey:{key}": json.dumps(value)
            for key, value in sample_raw_collections.items()
        }
        mock_redis.get = AsyncMock(side_effect=lambda key: values.get(key))

        with patch("journey.db.redis.get_redis", return_value=mock_redis):
            progress = await ProgressAggregator(store).get_progress(date(2026, 10, 17))

        assert progress.current_streak == 3
        assert mock_redis.get.await_count == 6


class TestRedisPool:
    """Tests for connection pool lifecycle."""

    @pytest.mark.asyncio
    async def test_close_pool_resets(self) -> None:
        import journey.db.redis as redis_module

        pool = AsyncMock()
        with patch.object(redis_module, "_redis_pool", pool):
            await redis_module.close_redis_pool()

            pool.disconnect.assert_awaited_once()
            assert redis_module._redis_pool is None
