# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .memory_session_store import InMemorySessionStore
from .redis_session_store import RedisSessionStore

__all__ = ["InMemorySessionStore", "RedisSessionStore"]
