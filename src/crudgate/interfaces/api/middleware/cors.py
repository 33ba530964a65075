"""CORS middleware - adds Access-Control-Allow-Origin headers."""

from collections.abc import Sequence

import falcon
import falcon.asgi

from crudgate.interfaces.api.handlers import ALLOW_HEADER


class CORSMiddleware:
    """Middleware that adds CORS headers and handles OPTIONS preflight."""

    def __init__(self, origins: Sequence[str]) -> None:
        self._origins = list(origins)

    def _origin_allowed(self, origin: str | None) -> bool:
        return bool(origin) and ("*" in self._origins or origin in self._origins)

    def _set_cors_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Set CORS headers for a listed origin; unlisted origins get none."""
        origin = req.get_header("Origin")
        if not self._origin_allowed(origin):
            return
        if "*" in self._origins:
            resp.set_header("Access-Control-Allow-Origin", "*")
        else:
            resp.set_header("Access-Control-Allow-Origin", origin)
            resp.append_header("Vary", "Origin")
        resp.set_header("Access-Control-Allow-Methods", f"{ALLOW_HEADER}, OPTIONS")
        resp.set_header("Access-Control-Allow-Headers", "Authorization, Content-Type")
        resp.set_header("Access-Control-Max-Age", "86400")

    async def process_resource(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params
    ) -> None:
        """Answer preflight for routed paths and listed origins; the rest falls through."""
        if (
            resource is not None
            and req.method == "OPTIONS"
            and req.get_header("Access-Control-Request-Method")
            and self._origin_allowed(req.get_header("Origin"))
        ):
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        """Ensure CORS headers on every response."""
        self._set_cors_headers(req, resp)
