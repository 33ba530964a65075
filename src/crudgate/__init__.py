"""Role-gated CRUD endpoints for Falcon applications."""

from crudgate.interfaces.api.dispatcher import CrudResource, add_crud_handlers

__version__ = "0.4.0"

__all__ = [
    "CrudResource",
    "__version__",
    "add_crud_handlers",
]
