# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .codes import ResultCode
from .entities import (
    Account,
    AccountSnapshot,
    LoginResult,
    NewAccount,
    ProfileView,
    Session,
)
from .exceptions import UsernameTakenError
from .repositories import AccountRepository, PasswordHasher, SessionStore

__all__ = [
    "Account",
    "AccountRepository",
    "AccountSnapshot",
    "LoginResult",
    "NewAccount",
    "PasswordHasher",
    "ProfileView",
    "ResultCode",
    "Session",
    "SessionStore",
    "UsernameTakenError",
]
