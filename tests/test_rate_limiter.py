"""Tests for the Redis fixed-window login throttle."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from edusphere.security.rate_limiter import RateLimiter


class FakeRedis:
    """In-memory Redis covering INCR / EXPIRE NX / TTL in a MULTI pipeline.

    A queued transaction applies all of its commands or none of them.
    ``fail_next`` makes the next ``execute`` raise before anything is applied.
    """

    def __init__(self) -> None:
        self.counts: dict[str, int] = {}
        self.ttls: dict[str, int] = {}
        self.fail_next = 0

    def pipeline(self, transaction: bool = True) -> _FakePipeline:
        assert transaction is True
        return _FakePipeline(self)

    def expire_window(self, key: str) -> None:
        self.counts.pop(key, None)
        self.ttls.pop(key, None)


class _FakePipeline:
    def __init__(self, redis: FakeRedis) -> None:
        self._redis = redis
        self._ops: list[tuple] = []

    async def __aenter__(self) -> _FakePipeline:
        return self

    async def __aexit__(self, *exc) -> None:
        self._ops.clear()

    def incr(self, key: str) -> _FakePipeline:
        self._ops.append(("incr", key))
        return self

    def expire(self, key: str, seconds: int, nx: bool = False) -> _FakePipeline:
        self._ops.append(("expire", key, seconds, nx))
        return self

    def ttl(self, key: str) -> _FakePipeline:
        self._ops.append(("ttl", key))
        return self

    async def execute(self) -> list:
        if self._redis.fail_next:
            self._redis.fail_next -= 1
            raise ConnectionError("redis unavailable")

        results = []
        for op in self._ops:
            if op[0] == "incr":
                count = self._redis.counts.get(op[1], 0) + 1
                self._redis.counts[op[1]] = count
                results.append(count)
            elif op[0] == "expire":
                _, key, seconds, nx = op
                if nx and key in self._redis.ttls:
                    results.append(False)
                else:
                    self._redis.ttls[key] = seconds
                    results.append(True)
            else:
                key = op[1]
                if key not in self._redis.counts:
                    results.append(-2)
                else:
                    results.append(self._redis.ttls.get(key, -1))
        return results


class TestRateLimiter:
    @pytest.mark.asyncio()
    async def test_first_hit_opens_window(self):
        redis = FakeRedis()

        allowed, retry_after = await RateLimiter(redis).check("rate:login:a@x.test", limit=10, window=300)

        assert (allowed, retry_after) == (True, 0)
        assert redis.ttls["rate:login:a@x.test"] == 300

    @pytest.mark.asyncio()
    async def test_window_is_not_extended_by_later_hits(self):
        redis = FakeRedis()
        limiter = RateLimiter(redis)
        await limiter.check("k", limit=10, window=300)
        redis.ttls["k"] = 120

        await limiter.check("k", limit=10, window=300)

        assert redis.ttls["k"] == 120

    @pytest.mark.asyncio()
    async def test_over_limit_reports_remaining_window(self):
        redis = FakeRedis()
        limiter = RateLimiter(redis)
        for _ in range(3):
            assert (await limiter.check("k", limit=3, window=300))[0] is True
        redis.ttls["k"] = 42

        assert await limiter.check("k", limit=3, window=300) == (False, 42)

    @pytest.mark.asyncio()
    async def test_fails_open_when_redis_is_down(self):
        redis = FakeRedis()
        redis.fail_next = 1

        assert await RateLimiter(redis).check("k", limit=10, window=300) == (True, 0)
        assert redis.counts == {}

    @pytest.mark.asyncio()
    async def test_failed_attempt_leaves_no_counter_without_expiry(self):
        redis = FakeRedis()
        limiter = RateLimiter(redis)
        redis.fail_next = 1

        results = [await limiter.check("k", limit=3, window=300) for _ in range(6)]

        assert results[:4] == [(True, 0)] * 4
        assert results[4:] == [(False, 300)] * 2
        assert redis.ttls["k"] == 300

        redis.expire_window("k")
        assert await limiter.check("k", limit=3, window=300) == (True, 0)

    @pytest.mark.asyncio()
    async def test_counter_missing_its_expiry_gets_a_fresh_window(self):
        redis = FakeRedis()
        redis.counts["k"] = 50

        allowed, retry_after = await RateLimiter(redis).check("k", limit=3, window=300)

        assert (allowed, retry_after) == (False, 300)
        assert redis.ttls["k"] == 300

    @pytest.mark.asyncio()
    async def test_uses_one_transactional_pipeline(self):
        redis = MagicMock()
        pipe = redis.pipeline.return_value.__aenter__.return_value
        pipe.execute = AsyncMock(return_value=[1, True, 300])

        assert await RateLimiter(redis).check("k", limit=10, window=300) == (True, 0)

        redis.pipeline.assert_called_once_with(transaction=True)
        pipe.incr.assert_called_once_with("k")
        pipe.expire.assert_called_once_with("k", 300, nx=True)
        pipe.ttl.assert_called_once_with("k")
