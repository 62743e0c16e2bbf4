# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stable business result codes.

2xxx  business executed successfully
4xxx  failures caused by the caller, e.g. registering a taken username
5xxx  failures caused by the system
"""

from __future__ import annotations

from enum import Enum


class ResultCode(Enum):
    SUCCESS = ("2000", "business executed successfully")
    DUPLICATE_USERNAME = ("4001", "username already exists")
    PASSWORD_MISMATCH = ("4002", "password is incorrect")
    SESSION_INVALID = ("4003", "session is invalid or has expired")
    REQUEST_TOO_FREQUENT = ("4005", "requests are too frequent")
    USER_NOT_FOUND = ("4006", "user does not exist")
    VALIDATION_FAILED = ("4007", "request parameters are invalid")
    FAIL = ("5000", "business execution failed")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


__all__ = ["ResultCode"]
