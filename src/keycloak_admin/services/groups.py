"""Group administration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import (
    GroupRepresentation,
    RoleRepresentation,
    UserRepresentation,
)
from keycloak_admin.options import ListOptions
from keycloak_admin.services._helpers import path, require_id

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient


class GroupsService:
    def __init__(self, client: KeycloakClient):
        self.client = client

    def create(
        self, realm: str, group: GroupRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Create a top-level group.

        Returns:
            The raw response; 201 with the new id in ``Location``, 409 if a
            top-level group with that name exists
        """
        _, response = self.client.call(
            "POST", path("admin/realms/{}/groups", realm), body=group, timeout=timeout
        )
        return response

    def list(
        self, realm: str, *, timeout: float | None = None
    ) -> tuple[list[GroupRepresentation], requests.Response]:
        """List top-level groups; children are in ``sub_groups``."""
        return self.client.call(
            "GET",
            path("admin/realms/{}/groups", realm),
            target=list[GroupRepresentation],
            timeout=timeout,
        )

    def get(
        self, realm: str, group_id: str, *, timeout: float | None = None
    ) -> tuple[GroupRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}/groups/{}", realm, group_id),
            target=GroupRepresentation,
            timeout=timeout,
        )

    def update(
        self, realm: str, group: GroupRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Replace a group.

        Raises:
            KeycloakRequestError: If ``group.id`` is not set
        """
        group_id = require_id(group.id, "group")
        _, response = self.client.call(
            "PUT",
            path("admin/realms/{}/groups/{}", realm, group_id),
            body=group,
            timeout=timeout,
        )
        return response

    def delete(
        self, realm: str, group_id: str, *, timeout: float | None = None
    ) -> requests.Response:
        """Delete a group and its sub-groups."""
        _, response = self.client.call(
            "DELETE", path("admin/realms/{}/groups/{}", realm, group_id), timeout=timeout
        )
        return response

    def members(
        self,
        realm: str,
        group_id: str,
        options: ListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> tuple[list[UserRepresentation], requests.Response]:
        """List the group's direct members, paginated with ``options``."""
        return self.client.call(
            "GET",
            path("admin/realms/{}/groups/{}/members", realm, group_id),
            target=list[UserRepresentation],
            options=options,
            timeout=timeout,
        )

    def add_realm_roles(
        self,
        realm: str,
        group_id: str,
        roles: list[RoleRepresentation],
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Grant realm roles to every member of the group (204 on success)."""
        _, response = self.client.call(
            "POST",
            path("admin/realms/{}/groups/{}/role-mappings/realm", realm, group_id),
            body=roles,
            timeout=timeout,
        )
        return response

    def remove_realm_roles(
        self,
        realm: str,
        group_id: str,
        roles: list[RoleRepresentation],
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path("admin/realms/{}/groups/{}/role-mappings/realm", realm, group_id),
            body=roles,
            timeout=timeout,
        )
        return response
