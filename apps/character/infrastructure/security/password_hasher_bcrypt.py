"""bcrypt PasswordHasher."""

from __future__ import annotations

import bcrypt


class BcryptPasswordHasher:
    """PasswordHasher 구현체."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), hashed.encode())
        except ValueError:
            # 해시 형식이 올바르지 않으면 불일치로 처리
            return False
