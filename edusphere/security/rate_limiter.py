"""Redis-backed fixed-window login throttle.

One MULTI/EXEC pipeline per attempt: INCR the counter, EXPIRE it with NX,
read its TTL. The counter and its expiry are written together or not at all,
and NX gives a key that somehow lost its TTL a fresh window on the next
attempt, so a counter can never outlive its window.

Usage:
    from edusphere.security.rate_limiter import rate_limiter

    allowed, retry_after = await rate_limiter.check("rate:login:a@b.c", limit=10, window=300)
"""

from __future__ import annotations

import logging

from edusphere.db.engine import redis_client

logger = logging.getLogger(__name__)


class RateLimiter:
    """Counts attempts per key inside a window of ``window`` seconds."""

    def __init__(self, redis: object) -> None:
        self._redis = redis

    async def check(self, key: str, limit: int, window: int) -> tuple[bool, int]:
        """Record one attempt against ``key``.

        Returns:
            (allowed, retry_after). ``retry_after`` is the number of seconds
            until the window closes, or 0 when the attempt is allowed.
        """
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.incr(key)
                pipe.expire(key, window, nx=True)
                pipe.ttl(key)
                count, _, ttl = await pipe.execute()
        except Exception:
            logger.exception("Login throttle unavailable for %s, allowing attempt", key)
            return True, 0

        if count <= limit:
            return True, 0

        retry_after = ttl if ttl > 0 else window
        logger.info("Throttled %s: %d attempts, retry in %ds", key, count, retry_after)
        return False, retry_after


# Module-level singleton
rate_limiter = RateLimiter(redis_client)
