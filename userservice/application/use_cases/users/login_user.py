# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userservice.application.result import Outcome, captures_infrastructure_failures
from userservice.application.services.session_manager import SessionManager
from userservice.domain.users.codes import ResultCode
from userservice.domain.users.entities import LoginResult
from userservice.domain.users.repositories import AccountRepository, PasswordHasher
from userservice.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        sessions: SessionManager,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._sessions = sessions
        self._password_hasher = password_hasher

    @captures_infrastructure_failures("login")
    def execute(self, username: str, password: str) -> Outcome[LoginResult]:
        account = self._accounts.find_by_username(username.strip())
        if account is None:
            return Outcome.business_failure(ResultCode.USER_NOT_FOUND)

        if not self._password_hasher.verify(password, account.salt, account.password_hash):
            logger.info(f"login: password mismatch user_id={account.id}")
            return Outcome.business_failure(ResultCode.PASSWORD_MISMATCH)

        session = self._sessions.issue(account.snapshot())
        return Outcome.success(LoginResult(token=session.token, username=account.username))
