"""Rate limiter — token bucket for form submissions."""

import time
from collections import defaultdict
from typing import Optional

from ledforms.config import get_settings


class TokenBucketRateLimiter:
    """In-memory token bucket rate limiter, keyed by client.

    A bucket idle for a full window has refilled completely, so it is
    dropped and recreated on the client's next request.
    """

    def __init__(
        self,
        max_tokens: Optional[int] = None,
        refill_seconds: Optional[int] = None,
    ):
        settings = get_settings()
        self.max_tokens = max_tokens or settings.RATE_LIMIT_MAX_SUBMISSIONS
        self.refill_seconds = refill_seconds or settings.RATE_LIMIT_WINDOW_SECONDS
        self._buckets: dict = defaultdict(
            lambda: {"tokens": self.max_tokens, "last_refill": time.time()}
        )
        self._last_prune = time.time()

    def allow_request(self, key: str = "global") -> bool:
        """Check if a request is allowed and consume a token.

        Args:
            key: Rate limit key (e.g., client IP or "global")

        Returns:
            True if request is allowed, False if rate limited
        """
        now = time.time()
        self._prune(now)

        bucket = self._buckets[key]

        elapsed = now - bucket["last_refill"]
        tokens_to_add = int(elapsed / self.refill_seconds * self.max_tokens)

        if tokens_to_add > 0:
            bucket["tokens"] = min(self.max_tokens, bucket["tokens"] + tokens_to_add)
            bucket["last_refill"] = now

        if bucket["tokens"] > 0:
            bucket["tokens"] -= 1
            return True

        return False

    def _prune(self, now: float) -> None:
        """Drop buckets idle for at least one window, at most once per window."""
        if now - self._last_prune < self.refill_seconds:
            return

        idle = [
            key for key, bucket in self._buckets.items()
            if now - bucket["last_refill"] >= self.refill_seconds
        ]
        for key in idle:
            del self._buckets[key]

        self._last_prune = now

    @property
    def tracked_clients(self) -> int:
        return len(self._buckets)

    def remaining(self, key: str = "global") -> int:
        """Get remaining tokens for a key without consuming."""
        bucket = self._buckets.get(key)
        if bucket is None:
            return self.max_tokens
        return bucket["tokens"]

    def reset_time(self, key: str = "global") -> float:
        """Get seconds until next token refill."""
        bucket = self._buckets.get(key)
        if bucket is None:
            return 0
        elapsed = time.time() - bucket["last_refill"]
        return max(0, self.refill_seconds / self.max_tokens - elapsed)

    def reset(self) -> None:
        """Forget every bucket."""
        self._buckets.clear()


# Module-level singleton
rate_limiter = TokenBucketRateLimiter()
