# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    username: str
    password_hash: str
    salt: str

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(id=self.id, username=self.username, salt=self.salt)

    def profile(self) -> ProfileView:
        return ProfileView(id=self.id, username=self.username)


@dataclass(slots=True, frozen=True)
class NewAccount:
    """Account row awaiting its store-assigned id."""

    username: str
    password_hash: str
    salt: str


@dataclass(slots=True, frozen=True)
class AccountSnapshot:
    """What a session remembers about its account. Never holds the hash."""

    id: int
    username: str
    salt: str

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "username": self.username, "salt": self.salt}

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> AccountSnapshot:
        return cls(
            id=int(payload["id"]),  # type: ignore[arg-type]
            username=str(payload["username"]),
            salt=str(payload["salt"]),
        )


@dataclass(slots=True, frozen=True)
class Session:

    token: str
    account: AccountSnapshot
    ttl_seconds: int | None = None


@dataclass(slots=True, frozen=True)
class ProfileView:

    id: int
    username: str


@dataclass(slots=True, frozen=True)
class LoginResult:

    token: str
    username: str
