"""Realm-level client scopes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import ClientScopeRepresentation
from keycloak_admin.services._helpers import path, require_id

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient


class ClientScopesService:
    def __init__(self, client: KeycloakClient):
        self.client = client

    def list(
        self, realm: str, *, timeout: float | None = None
    ) -> tuple[list[ClientScopeRepresentation], requests.Response]:
        """List client scopes, the built-in ``profile``, ``email`` etc. included."""
        return self.client.call(
            "GET",
            path("admin/realms/{}/client-scopes", realm),
            target=list[ClientScopeRepresentation],
            timeout=timeout,
        )

    def create(
        self,
        realm: str,
        client_scope: ClientScopeRepresentation,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Create a client scope; 201 with the new id in ``Location``."""
        _, response = self.client.call(
            "POST",
            path("admin/realms/{}/client-scopes", realm),
            body=client_scope,
            timeout=timeout,
        )
        return response

    def get(
        self, realm: str, client_scope_id: str, *, timeout: float | None = None
    ) -> tuple[ClientScopeRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}/client-scopes/{}", realm, client_scope_id),
            target=ClientScopeRepresentation,
            timeout=timeout,
        )

    def update(
        self,
        realm: str,
        client_scope: ClientScopeRepresentation,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Replace a client scope.

        Raises:
            KeycloakRequestError: If ``client_scope.id`` is not set
        """
        client_scope_id = require_id(client_scope.id, "client scope")
        _, response = self.client.call(
            "PUT",
            path("admin/realms/{}/client-scopes/{}", realm, client_scope_id),
            body=client_scope,
            timeout=timeout,
        )
        return response

    def delete(
        self, realm: str, client_scope_id: str, *, timeout: float | None = None
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path("admin/realms/{}/client-scopes/{}", realm, client_scope_id),
            timeout=timeout,
        )
        return response
