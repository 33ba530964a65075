"""Permission checker port - RBAC authorization."""

from typing import Protocol

from crudgate.domain.value_objects import CrudAction, UserRole


class PermissionChecker(Protocol):
    """Port for checking whether a role may perform an action."""

    def check(self, role: UserRole, action: CrudAction) -> bool: ...
