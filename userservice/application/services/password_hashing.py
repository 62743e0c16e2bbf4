"""Password hashing strategies.

Every scheme hashes ``password`` together with the account's own salt, so the
salt stored next to the hash is all that is needed to verify a password later.
"""

from __future__ import annotations

import hashlib
import hmac
import uuid

from userservice.domain.users.repositories import PasswordHasher
from userservice.shared.config import PasswordConfig


def new_salt() -> str:
    return str(uuid.uuid4())


class SaltedDigestHasher(PasswordHasher):
    """``digest(password + salt)`` as lowercase hex.

    With ``algorithm="md5"`` this matches rows written by the legacy service.
    It is a single unstretched digest and is only kept for that compatibility.
    """

    def __init__(self, algorithm: str = "sha256") -> None:
        hashlib.new(algorithm)
        self._algorithm = algorithm

    def hash(self, password: str, salt: str) -> str:
        return hashlib.new(self._algorithm, (password + salt).encode("utf-8")).hexdigest()

    def verify(self, password: str, salt: str, hashed: str) -> bool:
        return hmac.compare_digest(self.hash(password, salt), hashed)


class Pbkdf2PasswordHasher(PasswordHasher):
    def __init__(self, iterations: int = 600_000, algorithm: str = "sha256") -> None:
        self._iterations = iterations
        self._algorithm = algorithm

    def hash(self, password: str, salt: str) -> str:
        return hashlib.pbkdf2_hmac(
            self._algorithm,
            password.encode("utf-8"),
            salt.encode("utf-8"),
            self._iterations,
        ).hex()

    def verify(self, password: str, salt: str, hashed: str) -> bool:
        return hmac.compare_digest(self.hash(password, salt), hashed)


def build_password_hasher(config: PasswordConfig) -> PasswordHasher:
    if config.scheme == "salted_md5":
        return SaltedDigestHasher("md5")
    if config.scheme == "salted_sha256":
        return SaltedDigestHasher("sha256")
    return Pbkdf2PasswordHasher(iterations=config.iterations)


__all__ = [
    "Pbkdf2PasswordHasher",
    "SaltedDigestHasher",
    "build_password_hasher",
    "new_salt",
]
