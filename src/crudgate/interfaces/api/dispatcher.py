"""CRUD dispatcher - role-gated single-item and bulk endpoints on a Falcon app."""

import logging
from typing import Any

import falcon
import falcon.asgi
from falcon.constants import COMBINED_METHODS

from crudgate.application.ports import (
    AuthHandler,
    CrudInterface,
    ErrorHandler,
    PermissionChecker,
)
from crudgate.config import CrudConfig
from crudgate.domain.exceptions import (
    AuthenticationFailed,
    CrudGateError,
    OperationFailed,
    PermissionDenied,
)
from crudgate.domain.value_objects import (
    ALL_ITEMS_ACTIONS,
    ALLOWED_METHODS,
    SINGLE_ITEM_ACTIONS,
    CrudAction,
    PermissionsMap,
)
from crudgate.infrastructure.permission.permission_checker import StaticPermissionChecker
from crudgate.interfaces.api.handlers import default_error_handler

logger = logging.getLogger("crudgate.dispatch")

COLLECTION_SUFFIX = "collection"

_PASSTHROUGH = (falcon.HTTPError, falcon.HTTPStatus)

# WebSocket handshakes stay with Falcon.
_UNMANAGED_METHODS = ALLOWED_METHODS | {"WEBSOCKET"}


class CrudResource:
    """Falcon resource serving one single-item slug and one all-items slug.

    Single-item responders (``on_get`` ...) map to the ``*One`` actions; the
    ``collection`` suffix responders map to the ``*All`` actions. Every other
    HTTP method is answered by the configured not-allowed handler.
    """

    def __init__(
        self,
        permissions_map: PermissionsMap,
        crud: CrudInterface,
        auth_handler: AuthHandler,
        error_handler: ErrorHandler | None = None,
        *,
        config: CrudConfig,
    ) -> None:
        self._permission_checker: PermissionChecker = StaticPermissionChecker(permissions_map)
        self._crud = crud
        self._auth_handler = auth_handler
        self._error_handler = error_handler or default_error_handler
        self._config = config

        # Falcon resolves responders with getattr, so instance attributes
        # take over the methods it would otherwise answer itself.
        for method in COMBINED_METHODS:
            if method in _UNMANAGED_METHODS:
                continue
            name = f"on_{method.lower()}"
            setattr(self, name, self._not_allowed)
            setattr(self, f"{name}_{COLLECTION_SUFFIX}", self._not_allowed)

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        """GET one item - ReadOne."""
        await self._dispatch(req, resp, SINGLE_ITEM_ACTIONS["GET"], params)

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        """POST one item - CreateOne."""
        await self._dispatch(req, resp, SINGLE_ITEM_ACTIONS["POST"], params)

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        """PUT one item - UpdateOne."""
        await self._dispatch(req, resp, SINGLE_ITEM_ACTIONS["PUT"], params)

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        """DELETE one item - DeleteOne."""
        await self._dispatch(req, resp, SINGLE_ITEM_ACTIONS["DELETE"], params)

    async def on_get_collection(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        """GET all items - ReadAll."""
        await self._dispatch(req, resp, ALL_ITEMS_ACTIONS["GET"], params)

    async def on_post_collection(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        """POST many items - CreateAll."""
        await self._dispatch(req, resp, ALL_ITEMS_ACTIONS["POST"], params)

    async def on_put_collection(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        """PUT many items - UpdateAll."""
        await self._dispatch(req, resp, ALL_ITEMS_ACTIONS["PUT"], params)

    async def on_delete_collection(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        """DELETE many items - DeleteAll."""
        await self._dispatch(req, resp, ALL_ITEMS_ACTIONS["DELETE"], params)

    async def _not_allowed(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: Any
    ) -> None:
        await self._config.not_allowed_handler(req, resp)

    async def _dispatch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        action: CrudAction,
        params: dict[str, Any],
    ) -> None:
        """Authenticate, check permission, then run exactly one CRUD operation."""
        try:
            identity = await self._auth_handler(req, resp)
        except _PASSTHROUGH:
            raise
        except Exception as exc:
            logger.info("Authentication failed for %s %s: %s", req.method, req.path, exc)
            error = exc
            if not isinstance(error, AuthenticationFailed):
                error = AuthenticationFailed(str(exc) or "Authentication failed")
                error.__cause__ = exc
            await self._error_handler(req, resp, error)
            return

        if identity is None:
            logger.info("Authentication failed for %s %s: no identity", req.method, req.path)
            await self._error_handler(req, resp, AuthenticationFailed("No identity resolved"))
            return

        if not self._permission_checker.check(identity.role, action):
            logger.debug(
                "Role %s lacks %s on %s %s", identity.role, action, req.method, req.path
            )
            if self._config.strict_permissions:
                await self._error_handler(req, resp, PermissionDenied(identity.role.name, action))
            return

        operation = getattr(self._crud, action.operation_name)
        try:
            await operation(req, resp, identity.role, identity.user_uuid, **params)
        except _PASSTHROUGH:
            raise
        except CrudGateError as exc:
            logger.warning("%s rejected on %s %s: %s", action, req.method, req.path, exc)
            await self._error_handler(req, resp, exc)
        except Exception as exc:
            logger.exception("%s failed on %s %s", action, req.method, req.path)
            error = OperationFailed(action)
            error.__cause__ = exc
            await self._error_handler(req, resp, error)


def add_crud_handlers(
    app: falcon.asgi.App,
    one_slug: str,
    all_slug: str | None,
    permissions_map: PermissionsMap,
    crud: CrudInterface,
    auth_handler: AuthHandler,
    error_handler: ErrorHandler | None = None,
    *,
    config: CrudConfig,
) -> CrudResource:
    """Register role-gated CRUD routes on ``app``.

    ``one_slug`` serves the single-item actions; ``all_slug``, when given,
    serves the bulk actions. Without ``error_handler`` failures are answered
    with 403 (authentication, strict permission), 400 (``InvalidRequest``)
    or 500 (anything else). ``config`` is the process-wide dispatch config the
    app was created with; it supplies the not-allowed handler and the
    strict-permissions switch.
    """
    resource = CrudResource(
        permissions_map,
        crud,
        auth_handler,
        error_handler=error_handler,
        config=config,
    )
    app.add_route(one_slug, resource)
    if all_slug:
        app.add_route(all_slug, resource, suffix=COLLECTION_SUFFIX)
    logger.debug("Registered CRUD routes %s and %s", one_slug, all_slug or "-")
    return resource
