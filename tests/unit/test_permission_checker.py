"""Unit tests for StaticPermissionChecker."""

from crudgate.domain.value_objects import ADMIN, USER, CrudAction
from crudgate.infrastructure.permission.permission_checker import StaticPermissionChecker


def test_check_delegates_to_map() -> None:
    checker = StaticPermissionChecker({"Admin": ["DeleteAll"]})
    assert checker.check(ADMIN, CrudAction.DELETE_ALL) is True
    assert checker.check(ADMIN, CrudAction.DELETE_ONE) is False
    assert checker.check(USER, CrudAction.DELETE_ALL) is False


def test_check_reads_map_without_mutating() -> None:
    permissions = {"User": ["ReadOne", "ReadAll"]}
    checker = StaticPermissionChecker(permissions)
    checker.check(USER, CrudAction.READ_ALL)
    checker.check(ADMIN, CrudAction.READ_ALL)
    assert permissions == {"User": ["ReadOne", "ReadAll"]}
