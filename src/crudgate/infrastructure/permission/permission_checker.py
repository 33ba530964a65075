"""Permission checker implementation - checks against a static permission map."""

from crudgate.domain.value_objects import CrudAction, PermissionsMap, UserRole


class StaticPermissionChecker:
    """Checks role permissions against a caller-supplied permission map."""

    def __init__(self, permissions_map: PermissionsMap) -> None:
        self._permissions_map = permissions_map

    def check(self, role: UserRole, action: CrudAction) -> bool:
        """Check if role has action in the map."""
        return role.can(self._permissions_map, action)
