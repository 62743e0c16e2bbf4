# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from userservice.domain.users.entities import Account, NewAccount
from userservice.domain.users.exceptions import UsernameTakenError
from userservice.domain.users.repositories import AccountRepository
from userservice.infrastructure.db.models import User
from userservice.infrastructure.db.session import session_scope
from userservice.shared.errors.base import InfrastructureError


def _to_domain(row: User) -> Account:
    return Account(
        id=row.id,
        username=row.user_name,
        password_hash=row.password,
        salt=row.salt,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> Account | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.scalars(select(User).where(User.user_name == username)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise InfrastructureError("database_unavailable") from exc

    def find_by_id(self, account_id: int) -> Account | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(User, account_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise InfrastructureError("database_unavailable") from exc

    def insert(self, account: NewAccount) -> int:
        try:
            with session_scope(self._session_factory) as session:
                session.add(
                    User(
                        user_name=account.username,
                        password=account.password_hash,
                        salt=account.salt,
                    )
                )
                session.flush()
                return 1
        except IntegrityError as exc:
            raise UsernameTakenError(context={"username": account.username}) from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError("database_unavailable") from exc

    def update_password_hash(self, account_id: int, password_hash: str) -> int:
        try:
            with session_scope(self._session_factory) as session:
                result = session.execute(
                    update(User).where(User.id == account_id).values(password=password_hash)
                )
                return result.rowcount
        except SQLAlchemyError as exc:
            raise InfrastructureError("database_unavailable") from exc
