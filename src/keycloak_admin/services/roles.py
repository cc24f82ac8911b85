"""Realm roles, plus the ``roles-by-id`` lookups shared with client roles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import RoleRepresentation
from keycloak_admin.options import RolesListOptions
from keycloak_admin.services._helpers import path

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient


class RolesService:
    """Manage realm roles.

    A new realm already carries built-in roles such as ``offline_access`` and
    ``uma_authorization``, so ``list`` is never empty.
    """

    def __init__(self, client: KeycloakClient):
        self.client = client

    def create(
        self, realm: str, role: RoleRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Create a realm role.

        Returns:
            The raw response; 201 with ``Location`` ending in the role name,
            409 if the name is taken
        """
        _, response = self.client.call(
            "POST", path("admin/realms/{}/roles", realm), body=role, timeout=timeout
        )
        return response

    def list(
        self,
        realm: str,
        options: RolesListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> tuple[list[RoleRepresentation], requests.Response]:
        """List realm roles.

        Args:
            realm: Realm name
            options: Search, pagination and ``briefRepresentation``
            timeout: Timeout in seconds for this call
        """
        return self.client.call(
            "GET",
            path("admin/realms/{}/roles", realm),
            target=list[RoleRepresentation],
            options=options,
            timeout=timeout,
        )

    def get_by_name(
        self, realm: str, name: str, *, timeout: float | None = None
    ) -> tuple[RoleRepresentation, requests.Response]:
        """Look a role up by name; a missing role answers 404."""
        return self.client.call(
            "GET",
            path("admin/realms/{}/roles/{}", realm, name),
            target=RoleRepresentation,
            timeout=timeout,
        )

    def get_by_id(
        self, realm: str, role_id: str, *, timeout: float | None = None
    ) -> tuple[RoleRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}/roles-by-id/{}", realm, role_id),
            target=RoleRepresentation,
            timeout=timeout,
        )

    def update_by_name(
        self,
        realm: str,
        name: str,
        role: RoleRepresentation,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Replace the role currently called ``name``; ``role.name`` may rename it."""
        _, response = self.client.call(
            "PUT",
            path("admin/realms/{}/roles/{}", realm, name),
            body=role,
            timeout=timeout,
        )
        return response

    def delete_by_name(
        self, realm: str, name: str, *, timeout: float | None = None
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE", path("admin/realms/{}/roles/{}", realm, name), timeout=timeout
        )
        return response

    def get_client_role_by_id(
        self, realm: str, role_id: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[RoleRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}/roles-by-id/{}?client={}", realm, role_id, client_uuid),
            target=RoleRepresentation,
            timeout=timeout,
        )

    def delete_client_role_by_id(
        self, realm: str, role_id: str, client_uuid: str, *, timeout: float | None = None
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path("admin/realms/{}/roles-by-id/{}?client={}", realm, role_id, client_uuid),
            timeout=timeout,
        )
        return response
