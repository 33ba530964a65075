"""Application ports - interfaces for caller-supplied collaborators."""

from crudgate.application.ports.auth_handler import AuthHandler
from crudgate.application.ports.crud_interface import CrudInterface
from crudgate.application.ports.error_handler import ErrorHandler, NotAllowedHandler
from crudgate.application.ports.permission_checker import PermissionChecker

__all__ = [
    "AuthHandler",
    "CrudInterface",
    "ErrorHandler",
    "NotAllowedHandler",
    "PermissionChecker",
]
