"""Domain exceptions."""


class CrudGateError(Exception):
    """Base exception for crudgate."""

    pass


class AuthenticationFailed(CrudGateError):
    """Auth handler could not resolve a role for the request."""

    pass


class PermissionDenied(CrudGateError):
    """Role is not permitted to perform the requested action."""

    def __init__(self, role: str, action: str) -> None:
        super().__init__(f"Role {role!r} may not perform {action}")
        self.role = role
        self.action = action


class InvalidRequest(CrudGateError):
    """Request body or parameters are malformed."""

    pass


class OperationFailed(CrudGateError):
    """CRUD operation raised an unexpected error."""

    def __init__(self, action: str, message: str = "") -> None:
        super().__init__(message or f"{action} failed")
        self.action = action
