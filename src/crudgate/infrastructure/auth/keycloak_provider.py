"""Keycloak OIDC provider and the auth handler built on it."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import falcon.asgi
from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from crudgate.domain.entities import Identity
from crudgate.domain.exceptions import AuthenticationFailed
from crudgate.domain.value_objects import UserRole, UserUUID

logger = logging.getLogger("crudgate.auth")


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None
    username: str | None
    realm_roles: list[str]


class KeycloakProvider:
    """Keycloak OIDC - validates JWT and extracts user info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        client: KeycloakOpenID | None = None,
    ) -> None:
        self._keycloak = client or KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if inactive or rejected."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not token_info.get("active"):
            return None
        return OIDCUser(
            user_id=token_info.get("sub", ""),
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            realm_roles=token_info.get("realm_access", {}).get("roles", []),
        )


class KeycloakAuthHandler:
    """Auth handler resolving role and user uuid from a Keycloak bearer token.

    The first entry of ``role_priority`` found among the token's realm roles
    becomes the request role. ``default_role`` applies when none match;
    without it such tokens are rejected.
    """

    def __init__(
        self,
        provider: KeycloakProvider,
        role_priority: Sequence[str] = ("Admin", "User"),
        default_role: str | None = None,
    ) -> None:
        self._provider = provider
        self._role_priority = tuple(role_priority)
        self._default_role = default_role

    async def __call__(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> Identity:
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer "):
            raise AuthenticationFailed("Missing bearer token")

        user = await self._provider.decode_token(auth[7:])
        if user is None or not user.user_id:
            raise AuthenticationFailed("Invalid or expired token")

        role_name = next(
            (r for r in self._role_priority if r in user.realm_roles),
            self._default_role,
        )
        if role_name is None:
            raise AuthenticationFailed(f"User {user.user_id} has no recognised role")

        return Identity(role=UserRole(role_name), user_uuid=UserUUID(user.user_id))
