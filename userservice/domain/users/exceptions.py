# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from userservice.shared.errors.base import DomainError


class UsernameTakenError(DomainError):
    """Raised by account stores when the unique username constraint fires."""

    code = "username_taken"
    status = HTTPStatus.CONFLICT
