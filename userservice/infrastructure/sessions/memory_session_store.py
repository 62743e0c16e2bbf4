# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from userservice.domain.users.repositories import SessionStore
from userservice.shared.logging import logger


@dataclass(slots=True)
class StoreEntry:
    value: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class InMemorySessionStore(SessionStore):
    """Process-local key/value store with per-key expiry.

    Expired keys read as absent. They are dropped on access and swept on every write. ``clock`` must be
    monotonic seconds; tests pass a fake one to move time forward.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = Lock()
        self._store: dict[str, StoreEntry] = {}

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                logger.debug(f"session_store: expired key={key[:16]}…")
                self._store.pop(key, None)
                return None
            return entry.value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        with self._lock:
            now = self._clock()
            self._sweep(now)
            self._store[key] = StoreEntry(value=value, expires_at=now + ttl_seconds)

    def _sweep(self, now: float) -> None:
        # caller holds the lock
        expired = [key for key, entry in self._store.items() if entry.is_expired(now)]
        for key in expired:
            del self._store[key]
        if expired:
            logger.debug(f"session_store: swept {len(expired)} expired keys")

    def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            return sum(1 for entry in self._store.values() if not entry.is_expired(now))


__all__ = ["InMemorySessionStore"]
