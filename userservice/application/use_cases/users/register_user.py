# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from userservice.application.result import Outcome, captures_infrastructure_failures
from userservice.application.services.password_hashing import new_salt
from userservice.domain.users.codes import ResultCode
from userservice.domain.users.entities import NewAccount
from userservice.domain.users.exceptions import UsernameTakenError
from userservice.domain.users.repositories import AccountRepository, PasswordHasher
from userservice.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        salt_factory: Callable[[], str] = new_salt,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._salt_factory = salt_factory

    @captures_infrastructure_failures("register")
    def execute(self, username: str, password: str) -> Outcome[None]:
        username = username.strip()
        if self._accounts.find_by_username(username) is not None:
            logger.info(f"register: duplicate username={username}")
            return Outcome.business_failure(ResultCode.DUPLICATE_USERNAME)

        salt = self._salt_factory()
        account = NewAccount(
            username=username,
            password_hash=self._password_hasher.hash(password, salt),
            salt=salt,
        )
        try:
            inserted = self._accounts.insert(account)
        except UsernameTakenError:
            # lost the race against a concurrent registration of the same name
            logger.info(f"register: unique constraint hit username={username}")
            return Outcome.business_failure(ResultCode.DUPLICATE_USERNAME)

        if inserted != 1:
            logger.warning(f"register: expected 1 inserted row, got {inserted}")
            return Outcome.business_failure(ResultCode.FAIL)

        logger.info(f"register: ok username={username}")
        return Outcome.success()
