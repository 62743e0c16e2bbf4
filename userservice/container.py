"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from userservice.application.services.password_hashing import build_password_hasher
from userservice.application.services.session_manager import SessionManager
from userservice.application.use_cases.users.change_password import ChangePasswordUseCase
from userservice.application.use_cases.users.get_profile import GetProfileUseCase
from userservice.application.use_cases.users.login_user import LoginUserUseCase
from userservice.application.use_cases.users.register_user import RegisterUserUseCase
from userservice.domain.users.repositories import (
    AccountRepository,
    PasswordHasher,
    SessionStore,
)
from userservice.infrastructure.db import build_engine, build_session_factory
from userservice.infrastructure.repositories.users.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
)
from userservice.infrastructure.sessions import InMemorySessionStore, RedisSessionStore
from userservice.interfaces.http.controllers.misc_controller import MiscController
from userservice.interfaces.http.controllers.user_controller import UserController
from userservice.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return build_password_hasher(self.config.password)

    @cached_property
    def account_repository(self) -> AccountRepository:
        return SqlAlchemyAccountRepository(self.session_factory)

    @cached_property
    def session_store(self) -> SessionStore:
        if self.config.session.backend == "memory":
            return InMemorySessionStore()
        return RedisSessionStore.from_config(self.config.session)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            store=self.session_store,
            ttl_seconds=self.config.session.ttl_seconds,
            key_prefix=self.config.session.key_prefix,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            accounts=self.account_repository,
            sessions=self.session_manager,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def change_password_use_case(self) -> ChangePasswordUseCase:
        return ChangePasswordUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(accounts=self.account_repository)

    @cached_property
    def user_controller(self) -> UserController:
        return UserController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            change_password_use_case=self.change_password_use_case,
            get_profile_use_case=self.get_profile_use_case,
            sessions=self.session_manager,
            session_header=self.config.session.header,
            security=self.config.security,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine, session_store=self.session_store)
