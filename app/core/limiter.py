"""
Per-client request quota.

The handler depends only on the ``RateLimiter`` interface so the in-process
store can be swapped for a shared one (Redis, KV) without touching it.
Quota state held by ``InMemoryRateLimiter`` is local to one process: restarted
or horizontally scaled deployments do not share counts.
"""
import threading
import time
from abc import ABC, abstractmethod
from typing import Optional

from limits import RateLimitItem, parse
from limits.storage import MemoryStorage, Storage
from limits.strategies import FixedWindowRateLimiter

from app.core.constants import RateLimitConfig


class RateLimiter(ABC):
    """Abstract interface for quota stores."""

    @abstractmethod
    def admit(self, key: str) -> bool:
        """
        Decide whether to admit the current call for ``key``.

        Admitted calls are counted; rejected calls are not.
        """
        ...

    @abstractmethod
    def retry_after(self, key: str) -> float:
        """Seconds until ``key`` gets a fresh quota (0 if it has one now)."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human-readable quota for error messages."""
        ...


class InMemoryRateLimiter(RateLimiter):
    """
    Fixed-window cap per client key, backed by ``limits``.

    A client's window opens with its first admitted call and the count starts
    over once it has elapsed, so a burst just before expiry followed by a
    burst just after is allowed.

    Example:
        limiter = InMemoryRateLimiter("30/day")
        if not limiter.admit("203.0.113.7"):
            ...
    """

    def __init__(
        self,
        rate: str = RateLimitConfig.SUMMARIZE,
        storage: Optional[Storage] = None,
    ):
        """
        Initialize the limiter.

        Args:
            rate: Quota in ``limits`` notation, e.g. "30/day".
            storage: Counter backend; a private MemoryStorage by default.
        """
        self.item: RateLimitItem = parse(rate)
        self._strategy = FixedWindowRateLimiter(
            storage if storage is not None else MemoryStorage()
        )
        # test() and hit() are separate storage calls
        self._lock = threading.Lock()

    @property
    def max_requests(self) -> int:
        return self.item.amount

    @property
    def window_seconds(self) -> int:
        return self.item.get_expiry()

    def admit(self, key: str) -> bool:
        with self._lock:
            if not self._strategy.test(self.item, key):
                return False
            return self._strategy.hit(self.item, key)

    def retry_after(self, key: str) -> float:
        reset_time, _ = self._strategy.get_window_stats(self.item, key)
        return max(0.0, reset_time - time.time())

    def count(self, key: str) -> int:
        """
        Admitted calls for ``key`` in its current window.

        Introspection only; the request path never calls it.
        """
        _, remaining = self._strategy.get_window_stats(self.item, key)
        return self.item.amount - remaining

    def describe(self) -> str:
        hours = self.window_seconds / 3600
        return f"{self.max_requests} requests per {hours:g}h"
