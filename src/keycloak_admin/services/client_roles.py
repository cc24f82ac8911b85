"""Roles scoped to a single client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import RoleRepresentation, UserRepresentation
from keycloak_admin.options import ListOptions
from keycloak_admin.services._helpers import path

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient

ROLES_PATH = "admin/realms/{}/clients/{}/roles"
ROLE_BY_ID_PATH = "admin/realms/{}/roles-by-id/{}?client={}"


class ClientRolesService:
    """Manage the roles of one client, addressed by role name.

    The ``*_by_id`` methods use the realm-wide ``roles-by-id`` endpoint with
    the client UUID as a query parameter.
    """

    def __init__(self, client: KeycloakClient):
        self.client = client

    def create(
        self,
        realm: str,
        client_uuid: str,
        role: RoleRepresentation,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Create a client role.

        Returns:
            The raw response; 201 on success, 409 if the name is taken
        """
        _, response = self.client.call(
            "POST", path(ROLES_PATH, realm, client_uuid), body=role, timeout=timeout
        )
        return response

    def list(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[list[RoleRepresentation], requests.Response]:
        return self.client.call(
            "GET",
            path(ROLES_PATH, realm, client_uuid),
            target=list[RoleRepresentation],
            timeout=timeout,
        )

    def get(
        self, realm: str, client_uuid: str, role_name: str, *, timeout: float | None = None
    ) -> tuple[RoleRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path(ROLES_PATH + "/{}", realm, client_uuid, role_name),
            target=RoleRepresentation,
            timeout=timeout,
        )

    def delete(
        self, realm: str, client_uuid: str, role_name: str, *, timeout: float | None = None
    ) -> requests.Response:
        """Delete a client role (204, or 404 if it does not exist)."""
        _, response = self.client.call(
            "DELETE",
            path(ROLES_PATH + "/{}", realm, client_uuid, role_name),
            timeout=timeout,
        )
        return response

    def get_users(
        self,
        realm: str,
        client_uuid: str,
        role_name: str,
        options: ListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> tuple[list[UserRepresentation], requests.Response]:
        """List users that have the role, paginated with ``options``."""
        return self.client.call(
            "GET",
            path(ROLES_PATH + "/{}/users", realm, client_uuid, role_name),
            target=list[UserRepresentation],
            options=options,
            timeout=timeout,
        )

    def get_by_id(
        self, realm: str, role_id: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[RoleRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path(ROLE_BY_ID_PATH, realm, role_id, client_uuid),
            target=RoleRepresentation,
            timeout=timeout,
        )

    def delete_by_id(
        self, realm: str, role_id: str, client_uuid: str, *, timeout: float | None = None
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path(ROLE_BY_ID_PATH, realm, role_id, client_uuid),
            timeout=timeout,
        )
        return response
