"""CRUD actions and the HTTP verbs that map onto them."""

from enum import StrEnum


class CrudAction(StrEnum):
    """Actions that can be granted to a role in a permission map."""

    CREATE_ONE = "CreateOne"
    CREATE_ALL = "CreateAll"
    READ_ONE = "ReadOne"
    READ_ALL = "ReadAll"
    UPDATE_ONE = "UpdateOne"
    UPDATE_ALL = "UpdateAll"
    DELETE_ONE = "DeleteOne"
    DELETE_ALL = "DeleteAll"

    @property
    def operation_name(self) -> str:
        """Name of the CrudInterface coroutine, e.g. ``read_one``."""
        return self.name.lower()


ALLOWED_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})

SINGLE_ITEM_ACTIONS: dict[str, CrudAction] = {
    "GET": CrudAction.READ_ONE,
    "POST": CrudAction.CREATE_ONE,
    "PUT": CrudAction.UPDATE_ONE,
    "DELETE": CrudAction.DELETE_ONE,
}

ALL_ITEMS_ACTIONS: dict[str, CrudAction] = {
    "GET": CrudAction.READ_ALL,
    "POST": CrudAction.CREATE_ALL,
    "PUT": CrudAction.UPDATE_ALL,
    "DELETE": CrudAction.DELETE_ALL,
}
