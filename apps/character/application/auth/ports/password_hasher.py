"""PasswordHasher Port."""

from typing import Protocol


class PasswordHasher(Protocol):
    """비밀번호 해시/검증 인터페이스.

    구현체:
        - BcryptPasswordHasher (infrastructure/security/)
    """

    def hash(self, password: str) -> str:
        """솔트를 포함한 해시 문자열을 반환합니다."""
        ...

    def verify(self, password: str, hashed: str) -> bool:
        """평문 비밀번호가 해시와 일치하는지 확인합니다."""
        ...
