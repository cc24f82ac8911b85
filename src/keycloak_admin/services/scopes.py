"""Authorization scopes of a client's resource server."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import ScopeRepresentation
from keycloak_admin.services._helpers import path, require_id

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient

SCOPES_PATH = "admin/realms/{}/clients/{}/authz/resource-server/scope"
SCOPE_PATH = SCOPES_PATH + "/{}"


class ScopesService:
    """Manage authorization scopes.

    The client must have authorization services enabled. Unlike most admin
    endpoints, ``create`` answers with the created scope in the body.
    """

    def __init__(self, client: KeycloakClient):
        self.client = client

    def list(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[list[ScopeRepresentation], requests.Response]:
        return self.client.call(
            "GET",
            path(SCOPES_PATH, realm, client_uuid),
            target=list[ScopeRepresentation],
            timeout=timeout,
        )

    def create(
        self,
        realm: str,
        client_uuid: str,
        scope: ScopeRepresentation,
        *,
        timeout: float | None = None,
    ) -> tuple[ScopeRepresentation, requests.Response]:
        """Create a scope.

        Returns:
            Tuple of (created scope with its ``id``, raw response); the status
            is 201 on success
        """
        return self.client.call(
            "POST",
            path(SCOPES_PATH, realm, client_uuid),
            body=scope,
            target=ScopeRepresentation,
            timeout=timeout,
        )

    def get(
        self, realm: str, client_uuid: str, scope_id: str, *, timeout: float | None = None
    ) -> tuple[ScopeRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path(SCOPE_PATH, realm, client_uuid, scope_id),
            target=ScopeRepresentation,
            timeout=timeout,
        )

    def update(
        self,
        realm: str,
        client_uuid: str,
        scope: ScopeRepresentation,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Replace a scope.

        Raises:
            KeycloakRequestError: If ``scope.id`` is not set
        """
        scope_id = require_id(scope.id, "scope")
        _, response = self.client.call(
            "PUT",
            path(SCOPE_PATH, realm, client_uuid, scope_id),
            body=scope,
            timeout=timeout,
        )
        return response

    def delete(
        self, realm: str, client_uuid: str, scope_id: str, *, timeout: float | None = None
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE", path(SCOPE_PATH, realm, client_uuid, scope_id), timeout=timeout
        )
        return response
