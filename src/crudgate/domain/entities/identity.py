"""Identity entity - result of authenticating a request."""

from dataclasses import dataclass

from crudgate.domain.value_objects import UserRole, UserUUID


@dataclass(frozen=True)
class Identity:
    """Authenticated caller: role for permission checks, uuid passed to handlers."""

    role: UserRole
    user_uuid: UserUUID
