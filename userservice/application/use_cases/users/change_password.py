# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userservice.application.result import Outcome, captures_infrastructure_failures
from userservice.domain.users.codes import ResultCode
from userservice.domain.users.repositories import AccountRepository, PasswordHasher
from userservice.shared.logging import logger


class ChangePasswordUseCase:
    """Replace an account's password hash, keeping its salt."""

    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher

    @captures_infrastructure_failures("change_password")
    def execute(self, account_id: int, old_password: str, new_password: str) -> Outcome[None]:
        # a cached session can outlive its account, so always reload
        account = self._accounts.find_by_id(account_id)
        if account is None:
            return Outcome.business_failure(ResultCode.USER_NOT_FOUND)

        if not self._password_hasher.verify(old_password, account.salt, account.password_hash):
            logger.info(f"change_password: old password mismatch user_id={account_id}")
            return Outcome.business_failure(ResultCode.PASSWORD_MISMATCH)

        new_hash = self._password_hasher.hash(new_password, account.salt)
        updated = self._accounts.update_password_hash(account.id, new_hash)
        if updated != 1:
            logger.warning(f"change_password: expected 1 updated row, got {updated}")
            return Outcome.business_failure(ResultCode.FAIL)

        logger.info(f"change_password: ok user_id={account_id}")
        return Outcome.success()
