"""Default not-allowed and error handlers."""

import falcon
import falcon.asgi

from crudgate.domain.exceptions import (
    AuthenticationFailed,
    CrudGateError,
    InvalidRequest,
    PermissionDenied,
)
from crudgate.domain.value_objects import ALLOWED_METHODS

ALLOW_HEADER = ", ".join(sorted(ALLOWED_METHODS))


async def default_not_allowed_handler(
    req: falcon.asgi.Request, resp: falcon.asgi.Response
) -> None:
    """405 with Allow header listing the CRUD verbs."""
    resp.status = falcon.HTTP_405
    resp.set_header("Allow", ALLOW_HEADER)
    resp.media = {"error": "Method not allowed"}


async def default_error_handler(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    error: CrudGateError,
) -> None:
    """Map dispatch failures to 403/400/500."""
    if isinstance(error, AuthenticationFailed):
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Forbidden"}
    elif isinstance(error, PermissionDenied):
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Permission denied"}
    elif isinstance(error, InvalidRequest):
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(error)}
    else:
        resp.status = falcon.HTTP_500
        resp.media = {"error": "Internal server error"}
