"""Permission Enums."""

from enum import Enum


class PermissionKey(str, Enum):
    """토큰 클레임으로 전달되는 권한 키."""

    VIEW_OWN_USER = "ViewOwnUser"
    VIEW_ANY_USER = "ViewAnyUser"
    CREATE_USER = "CreateUser"
    UPDATE_OWN_USER = "UpdateOwnUser"
    UPDATE_ANY_USER = "UpdateAnyUser"
    DELETE_OWN_USER = "DeleteOwnUser"
    DELETE_ANY_USER = "DeleteAnyUser"


# 신규 캐릭터에 기본으로 부여되는 권한
DEFAULT_PERMISSIONS: tuple[PermissionKey, ...] = (
    PermissionKey.VIEW_OWN_USER,
    PermissionKey.CREATE_USER,
    PermissionKey.UPDATE_OWN_USER,
    PermissionKey.DELETE_OWN_USER,
)
