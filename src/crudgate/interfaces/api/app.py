"""Falcon ASGI application."""

import logging
from collections.abc import Sequence
from typing import Any

import falcon
import falcon.asgi
from falcon.asgi import App

from crudgate.config import CrudConfig
from crudgate.interfaces.api.middleware.cors import CORSMiddleware

logger = logging.getLogger("crudgate.app")


async def log_exception(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict[str, Any]
) -> None:
    """Catch-all for errors that escape a responder."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def create_app(
    config: CrudConfig,
    middleware: Sequence[Any] | None = None,
) -> App:
    """Create Falcon ASGI app; pass the same ``config`` to every ``add_crud_handlers`` call."""
    stack: list[Any] = []
    if config.allowed_origins:
        stack.append(CORSMiddleware(config.allowed_origins))
    stack.extend(middleware or ())

    app = falcon.asgi.App(middleware=stack)
    app.add_error_handler(Exception, log_exception)
    return app
