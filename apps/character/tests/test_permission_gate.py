"""PermissionGate 테스트.

필수 권한은 AND 의미론(부분집합 검사)으로 평가됩니다.
"""

import pytest

from apps.character.application.auth.dto import UserProfile
from apps.character.application.auth.exceptions import ForbiddenError
from apps.character.application.auth.services import PermissionGate
from apps.character.domain.enums import DEFAULT_PERMISSIONS, PermissionKey


@pytest.fixture
def gate() -> PermissionGate:
    return PermissionGate()


@pytest.fixture
def default_user() -> UserProfile:
    return UserProfile(id="hero", permissions=frozenset(DEFAULT_PERMISSIONS))


class TestAuthorize:
    def test_empty_requirement_always_passes(self, gate) -> None:
        assert gate.authorize(UserProfile(id="nobody"), []) is True

    def test_subset_passes(self, gate, default_user) -> None:
        assert gate.authorize(
            default_user, [PermissionKey.VIEW_OWN_USER, PermissionKey.UPDATE_OWN_USER]
        )

    def test_all_required_must_be_present(self, gate, default_user) -> None:
        """하나라도 없으면 거부 (OR 아님)."""
        assert not gate.authorize(
            default_user, [PermissionKey.VIEW_OWN_USER, PermissionKey.VIEW_ANY_USER]
        )

    def test_duplicates_in_requirement_are_ignored(self, gate, default_user) -> None:
        assert gate.authorize(
            default_user, [PermissionKey.CREATE_USER, PermissionKey.CREATE_USER]
        )


class TestEnsure:
    def test_raises_forbidden_with_missing_keys(self, gate, default_user) -> None:
        with pytest.raises(ForbiddenError) as exc_info:
            gate.ensure(
                default_user,
                [PermissionKey.VIEW_OWN_USER, PermissionKey.DELETE_ANY_USER],
            )

        assert exc_info.value.status_code == 403
        assert exc_info.value.missing == [PermissionKey.DELETE_ANY_USER.value]

    def test_passes_silently(self, gate, default_user) -> None:
        gate.ensure(default_user, [PermissionKey.DELETE_OWN_USER])
