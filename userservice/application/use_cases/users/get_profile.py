# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userservice.application.result import Outcome, captures_infrastructure_failures
from userservice.domain.users.codes import ResultCode
from userservice.domain.users.entities import ProfileView
from userservice.domain.users.repositories import AccountRepository


class GetProfileUseCase:
    def __init__(self, *, accounts: AccountRepository) -> None:
        self._accounts = accounts

    @captures_infrastructure_failures("get_profile")
    def execute(self, account_id: int) -> Outcome[ProfileView]:
        account = self._accounts.find_by_id(account_id)
        if account is None:
            return Outcome.business_failure(ResultCode.USER_NOT_FOUND)
        return Outcome.success(account.profile())
