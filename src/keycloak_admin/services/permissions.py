"""Permissions of a client's resource server.

A permission ties resources (resource-based) or scopes (scope-based) to the
policies that decide access, combined by its decision strategy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import (
    PermissionRepresentation,
    ResourcePermissionRepresentation,
    ScopePermissionRepresentation,
)
from keycloak_admin.services._helpers import path

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient

PERMISSIONS_PATH = "admin/realms/{}/clients/{}/authz/resource-server/permission"


class PermissionsService:
    def __init__(self, client: KeycloakClient):
        self.client = client

    def list(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[list[PermissionRepresentation], requests.Response]:
        """List resource- and scope-based permissions alike."""
        return self.client.call(
            "GET",
            path(PERMISSIONS_PATH, realm, client_uuid),
            target=list[PermissionRepresentation],
            timeout=timeout,
        )

    def create_resource_permission(
        self,
        realm: str,
        client_uuid: str,
        permission: ResourcePermissionRepresentation,
        *,
        timeout: float | None = None,
    ) -> tuple[ResourcePermissionRepresentation, requests.Response]:
        """Create a resource-based permission.

        Args:
            realm: Realm name
            client_uuid: UUID of the resource-server client
            permission: ``resources`` and ``policies`` hold ids
            timeout: Timeout in seconds for this call

        Returns:
            Tuple of (created permission, raw response); 201 on success
        """
        return self.client.call(
            "POST",
            path(PERMISSIONS_PATH + "/resource", realm, client_uuid),
            body=permission,
            target=ResourcePermissionRepresentation,
            timeout=timeout,
        )

    def get_resource_permission(
        self,
        realm: str,
        client_uuid: str,
        permission_id: str,
        *,
        timeout: float | None = None,
    ) -> tuple[ResourcePermissionRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path(PERMISSIONS_PATH + "/resource/{}", realm, client_uuid, permission_id),
            target=ResourcePermissionRepresentation,
            timeout=timeout,
        )

    def create_scope_permission(
        self,
        realm: str,
        client_uuid: str,
        permission: ScopePermissionRepresentation,
        *,
        timeout: float | None = None,
    ) -> tuple[ScopePermissionRepresentation, requests.Response]:
        """Create a scope-based permission; returns it with the response (201)."""
        return self.client.call(
            "POST",
            path(PERMISSIONS_PATH + "/scope", realm, client_uuid),
            body=permission,
            target=ScopePermissionRepresentation,
            timeout=timeout,
        )

    def get_scope_permission(
        self,
        realm: str,
        client_uuid: str,
        permission_id: str,
        *,
        timeout: float | None = None,
    ) -> tuple[ScopePermissionRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path(PERMISSIONS_PATH + "/scope/{}", realm, client_uuid, permission_id),
            target=ScopePermissionRepresentation,
            timeout=timeout,
        )

    def delete(
        self,
        realm: str,
        client_uuid: str,
        permission_id: str,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Delete a permission of either kind."""
        _, response = self.client.call(
            "DELETE",
            path(PERMISSIONS_PATH + "/{}", realm, client_uuid, permission_id),
            timeout=timeout,
        )
        return response
