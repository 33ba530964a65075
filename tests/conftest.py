"""Pytest fixtures for crudgate tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import falcon
import pytest

from crudgate.domain.entities import Identity
from crudgate.domain.exceptions import AuthenticationFailed, CrudGateError
from crudgate.domain.value_objects import UserRole, UserUUID


# --- Fake collaborators ---


@dataclass
class CrudCall:
    """One recorded CRUD operation call."""

    operation: str
    role: UserRole
    user_uuid: UserUUID
    params: dict[str, Any]


class RecordingCrud:
    """In-memory CrudInterface that records calls and writes a small body."""

    def __init__(self) -> None:
        self.calls: list[CrudCall] = []
        self.failures: dict[str, Exception] = {}

    def fail(self, operation: str, error: Exception) -> None:
        """Make ``operation`` raise ``error`` after recording the call."""
        self.failures[operation] = error

    def operations(self) -> list[str]:
        return [c.operation for c in self.calls]

    async def _handle(self, operation, req, resp, role, user_uuid, params) -> None:
        self.calls.append(CrudCall(operation, role, user_uuid, dict(params)))
        if operation in self.failures:
            raise self.failures[operation]
        resp.status = falcon.HTTP_201 if operation.startswith("create") else falcon.HTTP_200
        resp.media = {"operation": operation, "user": user_uuid, **params}

    async def create_one(self, req, resp, role, user_uuid, **params) -> None:
        await self._handle("create_one", req, resp, role, user_uuid, params)

    async def create_all(self, req, resp, role, user_uuid, **params) -> None:
        await self._handle("create_all", req, resp, role, user_uuid, params)

    async def read_one(self, req, resp, role, user_uuid, **params) -> None:
        await self._handle("read_one", req, resp, role, user_uuid, params)

    async def read_all(self, req, resp, role, user_uuid, **params) -> None:
        await self._handle("read_all", req, resp, role, user_uuid, params)

    async def update_one(self, req, resp, role, user_uuid, **params) -> None:
        await self._handle("update_one", req, resp, role, user_uuid, params)

    async def update_all(self, req, resp, role, user_uuid, **params) -> None:
        await self._handle("update_all", req, resp, role, user_uuid, params)

    async def delete_one(self, req, resp, role, user_uuid, **params) -> None:
        await self._handle("delete_one", req, resp, role, user_uuid, params)

    async def delete_all(self, req, resp, role, user_uuid, **params) -> None:
        await self._handle("delete_all", req, resp, role, user_uuid, params)


class StaticAuthHandler:
    """Auth handler that always resolves the same identity, or always fails."""

    def __init__(
        self,
        role: str = "Admin",
        user_uuid: str = "user-1",
        error: Exception | None = None,
    ) -> None:
        self.identity = Identity(UserRole(role), UserUUID(user_uuid))
        self.error = error
        self.calls = 0

    async def __call__(self, req, resp) -> Identity:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.identity


@dataclass
class RecordingErrorHandler:
    """ErrorHandler that records each error and answers 418."""

    errors: list[CrudGateError] = field(default_factory=list)

    async def __call__(self, req, resp, error: CrudGateError) -> None:
        self.errors.append(error)
        resp.status = falcon.HTTP_418
        resp.media = {"error": type(error).__name__}


# --- Fixtures ---


@pytest.fixture
def crud() -> RecordingCrud:
    """Fresh recording CRUD implementation."""
    return RecordingCrud()


@pytest.fixture
def admin_auth() -> StaticAuthHandler:
    """Auth handler resolving Admin / user-1."""
    return StaticAuthHandler()


@pytest.fixture
def failing_auth() -> StaticAuthHandler:
    """Auth handler that always fails."""
    return StaticAuthHandler(error=AuthenticationFailed("bad token"))


@pytest.fixture
def error_handler() -> RecordingErrorHandler:
    """Error handler recording every failure it receives."""
    return RecordingErrorHandler()


@pytest.fixture
def make_auth():
    """Factory for StaticAuthHandler with a chosen role, uuid or error."""
    return StaticAuthHandler


@pytest.fixture
def crud_config():
    """Default dispatch config: 405 not-allowed handler, no origins, lenient permissions."""
    from crudgate.config import CrudConfig
    from crudgate.interfaces.api.handlers import default_not_allowed_handler

    return CrudConfig(not_allowed_handler=default_not_allowed_handler)
