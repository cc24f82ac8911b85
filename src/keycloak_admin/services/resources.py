"""Protected resources of a client's resource server."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import ResourceRepresentation
from keycloak_admin.services._helpers import path, require_id

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient

RESOURCES_PATH = "admin/realms/{}/clients/{}/authz/resource-server/resource"
RESOURCE_PATH = RESOURCES_PATH + "/{}"


class ResourcesService:
    def __init__(self, client: KeycloakClient):
        self.client = client

    def list(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[list[ResourceRepresentation], requests.Response]:
        """List resources; a new resource server has a "Default Resource"."""
        return self.client.call(
            "GET",
            path(RESOURCES_PATH, realm, client_uuid),
            target=list[ResourceRepresentation],
            timeout=timeout,
        )

    def create(
        self,
        realm: str,
        client_uuid: str,
        resource: ResourceRepresentation,
        *,
        timeout: float | None = None,
    ) -> tuple[ResourceRepresentation, requests.Response]:
        """Create a resource; the server returns it (201), ``_id`` included."""
        return self.client.call(
            "POST",
            path(RESOURCES_PATH, realm, client_uuid),
            body=resource,
            target=ResourceRepresentation,
            timeout=timeout,
        )

    def get(
        self,
        realm: str,
        client_uuid: str,
        resource_id: str,
        *,
        timeout: float | None = None,
    ) -> tuple[ResourceRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path(RESOURCE_PATH, realm, client_uuid, resource_id),
            target=ResourceRepresentation,
            timeout=timeout,
        )

    def update(
        self,
        realm: str,
        client_uuid: str,
        resource: ResourceRepresentation,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Replace a resource.

        Raises:
            KeycloakRequestError: If ``resource.id`` is not set
        """
        resource_id = require_id(resource.id, "resource")
        _, response = self.client.call(
            "PUT",
            path(RESOURCE_PATH, realm, client_uuid, resource_id),
            body=resource,
            timeout=timeout,
        )
        return response

    def delete(
        self,
        realm: str,
        client_uuid: str,
        resource_id: str,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path(RESOURCE_PATH, realm, client_uuid, resource_id),
            timeout=timeout,
        )
        return response
