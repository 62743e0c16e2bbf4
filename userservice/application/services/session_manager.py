# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
import uuid
from collections.abc import Callable

from userservice.application.result import Outcome, captures_infrastructure_failures
from userservice.domain.users.codes import ResultCode
from userservice.domain.users.entities import AccountSnapshot, Session
from userservice.domain.users.repositories import SessionStore
from userservice.shared.logging import logger


def new_token() -> str:
    return str(uuid.uuid4())


class SessionManager:
    """Issues session tokens and checks them against the session store.

    A token is valid exactly as long as its key exists in the store. Expiry is
    left to the store's own TTL eviction, so nothing here tracks time.
    """

    def __init__(
        self,
        *,
        store: SessionStore,
        ttl_seconds: int,
        key_prefix: str = "",
        token_factory: Callable[[], str] = new_token,
    ) -> None:
        self._store = store
        self._ttl_seconds = ttl_seconds
        self._key_prefix = key_prefix
        self._token_factory = token_factory

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def _key(self, token: str) -> str:
        return f"{self._key_prefix}{token}"

    def issue(self, account: AccountSnapshot, ttl_seconds: int | None = None) -> Session:
        ttl = ttl_seconds if ttl_seconds is not None else self._ttl_seconds
        token = self._token_factory()
        self._store.set(self._key(token), json.dumps(account.to_dict()), ttl)
        logger.info(f"session.issue: user_id={account.id} ttl={ttl}s tok={token[:8]}…")
        return Session(token=token, account=account, ttl_seconds=ttl)

    @captures_infrastructure_failures("session.validate")
    def validate(self, token: str | None) -> Outcome[Session]:
        token = (token or "").strip()
        if not token:
            return Outcome.business_failure(ResultCode.SESSION_INVALID)

        raw = self._store.get(self._key(token))
        if raw is None:
            logger.debug(f"session.validate: miss tok={token[:8]}…")
            return Outcome.business_failure(ResultCode.SESSION_INVALID)

        try:
            account = AccountSnapshot.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError):
            logger.warning(f"session.validate: undecodable session payload tok={token[:8]}…")
            return Outcome.business_failure(ResultCode.SESSION_INVALID)

        return Outcome.success(Session(token=token, account=account))


__all__ = ["SessionManager", "new_token"]
