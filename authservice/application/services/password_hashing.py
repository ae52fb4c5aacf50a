"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from authservice.domain.users.repositories import PasswordHasher

DEFAULT_METHOD = "scrypt:32768:8:1"
SALT_LENGTH = 16


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = DEFAULT_METHOD) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password, method=self._method, salt_length=SALT_LENGTH))

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except ValueError:
            # unknown method prefix in a stored digest
            return False
