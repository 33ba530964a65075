"""User role and identity value objects."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import NewType

PermissionsMap = Mapping[str, Sequence[str]]

UserUUID = NewType("UserUUID", str)


@dataclass(frozen=True, slots=True)
class UserRole:
    """Named access class. Permissions are looked up by exact name."""

    name: str

    def can(self, permissions_map: PermissionsMap, action: str) -> bool:
        """Return True if ``action`` is listed verbatim for this role."""
        actions = permissions_map.get(self.name)
        if actions is None:
            return False
        for permitted in actions:
            if permitted == action:
                return True
        return False

    def __str__(self) -> str:
        return self.name


ADMIN = UserRole("Admin")
USER = UserRole("User")
