# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account, NewAccount


class AccountRepository(Protocol):
    def find_by_username(self, username: str) -> Account | None: ...
    def find_by_id(self, account_id: int) -> Account | None: ...
    def insert(self, account: NewAccount) -> int: ...
    def update_password_hash(self, account_id: int, password_hash: str) -> int: ...


class SessionStore(Protocol):
    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str, ttl_seconds: int) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str, salt: str) -> str: ...
    def verify(self, password: str, salt: str, hashed: str) -> bool: ...
