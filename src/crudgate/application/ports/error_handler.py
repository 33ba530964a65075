"""Error handler ports - report dispatch failures to the client."""

from typing import Protocol

import falcon.asgi

from crudgate.domain.exceptions import CrudGateError


class ErrorHandler(Protocol):
    """Write a response for an auth, permission or operation failure."""

    async def __call__(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        error: CrudGateError,
    ) -> None: ...


class NotAllowedHandler(Protocol):
    """Write a response for a method outside GET/POST/PUT/DELETE."""

    async def __call__(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None: ...
