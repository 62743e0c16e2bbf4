from __future__ import annotations

import itertools

import pytest

from userservice.app import create_app
from userservice.application.services.password_hashing import SaltedDigestHasher
from userservice.application.services.session_manager import SessionManager
from userservice.application.use_cases.users.change_password import ChangePasswordUseCase
from userservice.application.use_cases.users.get_profile import GetProfileUseCase
from userservice.application.use_cases.users.login_user import LoginUserUseCase
from userservice.application.use_cases.users.register_user import RegisterUserUseCase
from userservice.container import Container
from userservice.domain.users.entities import Account, NewAccount
from userservice.domain.users.exceptions import UsernameTakenError
from userservice.domain.users.repositories import AccountRepository
from userservice.infrastructure.sessions import InMemorySessionStore
from userservice.shared.config import (
    AppConfig,
    DatabaseConfig,
    PasswordConfig,
    SecurityConfig,
    SessionConfig,
)

SESSION_TTL = 60


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._seq = itertools.count(1)
        self.inserts = 0
        self.updates = 0

    def find_by_username(self, username: str) -> Account | None:
        for account in self._accounts.values():
            if account.username == username:
                return account
        return None

    def find_by_id(self, account_id: int) -> Account | None:
        return self._accounts.get(account_id)

    def insert(self, account: NewAccount) -> int:
        if self.find_by_username(account.username) is not None:
            raise UsernameTakenError()
        account_id = next(self._seq)
        self._accounts[account_id] = Account(
            id=account_id,
            username=account.username,
            password_hash=account.password_hash,
            salt=account.salt,
        )
        self.inserts += 1
        return 1

    def update_password_hash(self, account_id: int, password_hash: str) -> int:
        current = self._accounts.get(account_id)
        if current is None:
            return 0
        self._accounts[account_id] = Account(
            id=current.id,
            username=current.username,
            password_hash=password_hash,
            salt=current.salt,
        )
        self.updates += 1
        return 1

    def remove(self, account_id: int) -> None:
        self._accounts.pop(account_id, None)


class Service:
    """The credential and session operations wired over in-memory stores."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.accounts = InMemoryAccountRepository()
        self.store = InMemorySessionStore(clock=clock)
        self.hasher = SaltedDigestHasher("sha256")
        self.sessions = SessionManager(store=self.store, ttl_seconds=SESSION_TTL)
        self.register = RegisterUserUseCase(accounts=self.accounts, password_hasher=self.hasher)
        self.login = LoginUserUseCase(
            accounts=self.accounts, sessions=self.sessions, password_hasher=self.hasher
        )
        self.change_password = ChangePasswordUseCase(
            accounts=self.accounts, password_hasher=self.hasher
        )
        self.get_profile = GetProfileUseCase(accounts=self.accounts)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def service(clock: FakeClock) -> Service:
    return Service(clock)


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        app_env="test",
        log_level="WARNING",
        database=DatabaseConfig(url="sqlite://"),
        session=SessionConfig(backend="memory", ttl_seconds=SESSION_TTL),
        password=PasswordConfig(scheme="pbkdf2_sha256", iterations=1000),
        security=SecurityConfig(enable_rate_limit=False),
    )


@pytest.fixture()
def container(app_config: AppConfig, clock: FakeClock) -> Container:
    container = Container(app_config)
    container.session_store = InMemorySessionStore(clock=clock)
    return container


@pytest.fixture()
def client(container: Container):
    app = create_app(container=container)
    app.config.update(TESTING=True)
    with app.test_client() as client:
        yield client
    container.engine.dispose()
