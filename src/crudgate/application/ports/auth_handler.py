"""Auth handler port - resolves an Identity for an incoming request."""

from typing import Protocol

import falcon.asgi

from crudgate.domain.entities import Identity


class AuthHandler(Protocol):
    """Authenticate a request. Raise or return None on failure."""

    async def __call__(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> Identity | None: ...
