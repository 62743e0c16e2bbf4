# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from threading import Lock

from flask import Request, request

from userservice.shared.config import SecurityConfig
from userservice.shared.logging import logger


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._lock = Lock()
        self._buckets: dict[str, Bucket] = defaultdict(lambda: Bucket(deque(maxlen=self._limit)))

    def allow(self, key: str) -> bool:
        with self._lock:
            now = self._clock()
            self._prune(now)
            bucket = self._buckets[key]
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True

    def _prune(self, now: float) -> None:
        # caller holds the lock
        for key in list(self._buckets):
            timestamps = self._buckets[key].timestamps
            while timestamps and (now - timestamps[0]) > self._window:
                timestamps.popleft()
            if not timestamps:
                del self._buckets[key]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buckets)


def _client_key(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def rate_limit(
    config: SecurityConfig,
    on_limited: Callable[[], object],
    limit: int | None = None,
    window_seconds: float | None = None,
):
    """Throttle a view per client IP and path; *on_limited* builds the reply."""
    limiter = InMemoryRateLimiter(
        limit or config.rate_limit_requests,
        window_seconds or config.rate_limit_window,
    )

    def decorator(f: Callable):
        if not config.enable_rate_limit:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = f"{request.path}:{_client_key(request)}"
            if not limiter.allow(key):
                logger.warning(f"rate_limit: throttled {request.method} {request.path}")
                return on_limited()
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
