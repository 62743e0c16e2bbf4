from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import redis

from userservice.infrastructure.sessions import InMemorySessionStore, RedisSessionStore
from userservice.shared.config import SessionConfig
from userservice.shared.errors.base import InfrastructureError

from .conftest import FakeClock


def test_memory_store_expires_keys(clock: FakeClock) -> None:
    store = InMemorySessionStore(clock=clock)
    store.set("a", "1", 10)
    store.set("b", "2", 20)

    clock.advance(10)

    assert store.get("a") is None
    assert store.get("b") == "2"
    assert len(store) == 1


def test_memory_store_overwrites_value_and_ttl(clock: FakeClock) -> None:
    store = InMemorySessionStore(clock=clock)
    store.set("a", "1", 5)
    store.set("a", "2", 50)

    clock.advance(10)

    assert store.get("a") == "2"


def test_memory_store_sweeps_expired_keys_on_write(clock: FakeClock) -> None:
    store = InMemorySessionStore(clock=clock)
    for i in range(5):
        store.set(f"stale-{i}", "v", 10)

    clock.advance(10)
    store.set("fresh", "v", 10)

    assert list(store._store) == ["fresh"]


def test_memory_store_missing_key() -> None:
    assert InMemorySessionStore().get("nope") is None


def test_redis_store_sets_with_expiry() -> None:
    client = MagicMock()
    store = RedisSessionStore(client)

    store.set("session:abc", '{"id": 1}', 1800)

    client.set.assert_called_once_with("session:abc", '{"id": 1}', ex=1800)


def test_redis_store_get_decodes_bytes() -> None:
    client = MagicMock()
    client.get.return_value = b'{"id": 1}'

    assert RedisSessionStore(client).get("k") == '{"id": 1}'


def test_redis_store_get_missing() -> None:
    client = MagicMock()
    client.get.return_value = None

    assert RedisSessionStore(client).get("k") is None


@pytest.mark.parametrize("method, args", [("get", ("k",)), ("set", ("k", "v", 10))])
def test_redis_errors_become_infrastructure_errors(method: str, args: tuple) -> None:
    client = MagicMock()
    getattr(client, method).side_effect = redis.ConnectionError("refused")

    with pytest.raises(InfrastructureError) as excinfo:
        getattr(RedisSessionStore(client), method)(*args)

    assert excinfo.value.code == "session_store_unavailable"


def test_redis_store_from_config_uses_url() -> None:
    config = SessionConfig(redis_url="redis://cache.internal:6380/2", redis_socket_timeout=1.5)

    store = RedisSessionStore.from_config(config)

    kwargs = store._client.connection_pool.connection_kwargs
    assert kwargs["host"] == "cache.internal"
    assert kwargs["port"] == 6380
    assert kwargs["db"] == 2
    assert kwargs["socket_timeout"] == 1.5
