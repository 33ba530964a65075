"""CRUD interface port - caller-supplied data access for one resource type."""

from typing import Any, Protocol

import falcon.asgi

from crudgate.domain.value_objects import UserRole, UserUUID


class CrudInterface(Protocol):
    """Eight CRUD coroutines. Each writes its own response; raising signals failure."""

    async def create_one(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: UserRole,
        user_uuid: UserUUID,
        **params: Any,
    ) -> None: ...

    async def create_all(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: UserRole,
        user_uuid: UserUUID,
        **params: Any,
    ) -> None: ...

    async def read_one(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: UserRole,
        user_uuid: UserUUID,
        **params: Any,
    ) -> None: ...

    async def read_all(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: UserRole,
        user_uuid: UserUUID,
        **params: Any,
    ) -> None: ...

    async def update_one(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: UserRole,
        user_uuid: UserUUID,
        **params: Any,
    ) -> None: ...

    async def update_all(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: UserRole,
        user_uuid: UserUUID,
        **params: Any,
    ) -> None: ...

    async def delete_one(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: UserRole,
        user_uuid: UserUUID,
        **params: Any,
    ) -> None: ...

    async def delete_all(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: UserRole,
        user_uuid: UserUUID,
        **params: Any,
    ) -> None: ...
