# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import redis

from userservice.domain.users.repositories import SessionStore
from userservice.shared.config import SessionConfig
from userservice.shared.errors.base import InfrastructureError


class RedisSessionStore(SessionStore):
    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: SessionConfig) -> RedisSessionStore:
        client = redis.Redis.from_url(
            config.redis_url,
            decode_responses=True,
            socket_timeout=config.redis_socket_timeout,
            socket_connect_timeout=config.redis_socket_timeout,
        )
        return cls(client)

    def get(self, key: str) -> str | None:
        try:
            value = self._client.get(key)
        except redis.RedisError as exc:
            raise InfrastructureError("session_store_unavailable") from exc
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            self._client.set(key, value, ex=ttl_seconds)
        except redis.RedisError as exc:
            raise InfrastructureError("session_store_unavailable") from exc

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError as exc:
            raise InfrastructureError("session_store_unavailable") from exc


__all__ = ["RedisSessionStore"]
