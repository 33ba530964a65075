"""Domain value objects."""

from crudgate.domain.value_objects.crud_action import (
    ALL_ITEMS_ACTIONS,
    ALLOWED_METHODS,
    SINGLE_ITEM_ACTIONS,
    CrudAction,
)
from crudgate.domain.value_objects.user_role import (
    ADMIN,
    USER,
    PermissionsMap,
    UserRole,
    UserUUID,
)

__all__ = [
    "ADMIN",
    "ALLOWED_METHODS",
    "ALL_ITEMS_ACTIONS",
    "CrudAction",
    "PermissionsMap",
    "SINGLE_ITEM_ACTIONS",
    "USER",
    "UserRole",
    "UserUUID",
]
