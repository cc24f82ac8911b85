"""Client (application) administration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import (
    ClientRepresentation,
    CredentialRepresentation,
    RoleRepresentation,
    UserRepresentation,
)
from keycloak_admin.options import ListOptions
from keycloak_admin.services._helpers import path, require_id

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient


class ClientsService:
    """Manage the clients registered in a realm.

    Clients are addressed by their server-assigned UUID (``ClientRepresentation.id``),
    not by ``client_id``.
    """

    def __init__(self, client: KeycloakClient):
        self.client = client

    def list(
        self, realm: str, *, timeout: float | None = None
    ) -> tuple[list[ClientRepresentation], requests.Response]:
        """List the realm's clients, built-in ones such as ``account`` included."""
        return self.client.call(
            "GET",
            path("admin/realms/{}/clients", realm),
            target=list[ClientRepresentation],
            timeout=timeout,
        )

    def create(
        self, realm: str, client: ClientRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Register a client.

        Returns:
            The raw response; 201 with the new UUID in ``Location``, 409 if
            ``client.client_id`` is taken
        """
        _, response = self.client.call(
            "POST", path("admin/realms/{}/clients", realm), body=client, timeout=timeout
        )
        return response

    def update(
        self, realm: str, client: ClientRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Replace a client.

        Raises:
            KeycloakRequestError: If ``client.id`` is not set
        """
        client_uuid = require_id(client.id, "client")
        _, response = self.client.call(
            "PUT",
            path("admin/realms/{}/clients/{}", realm, client_uuid),
            body=client,
            timeout=timeout,
        )
        return response

    def get(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[ClientRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}/clients/{}", realm, client_uuid),
            target=ClientRepresentation,
            timeout=timeout,
        )

    def delete(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> requests.Response:
        """Not supported.

        Raises:
            NotImplementedError: Always
        """
        raise NotImplementedError("Deleting clients is not supported")

    def create_role(
        self,
        realm: str,
        client_uuid: str,
        role: RoleRepresentation,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Create a client role (201 on success, 409 if the name is taken)."""
        _, response = self.client.call(
            "POST",
            path("admin/realms/{}/clients/{}/roles", realm, client_uuid),
            body=role,
            timeout=timeout,
        )
        return response

    def list_roles(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[list[RoleRepresentation], requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}/clients/{}/roles", realm, client_uuid),
            target=list[RoleRepresentation],
            timeout=timeout,
        )

    def get_secret(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[CredentialRepresentation, requests.Response]:
        """Read a confidential client's secret; the value is in ``.value``."""
        return self.client.call(
            "GET",
            path("admin/realms/{}/clients/{}/client-secret", realm, client_uuid),
            target=CredentialRepresentation,
            timeout=timeout,
        )

    def create_secret(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[CredentialRepresentation, requests.Response]:
        """Regenerate a confidential client's secret (200); the old one stops working."""
        return self.client.call(
            "POST",
            path("admin/realms/{}/clients/{}/client-secret", realm, client_uuid),
            target=CredentialRepresentation,
            timeout=timeout,
        )

    def get_users_in_role(
        self,
        realm: str,
        client_uuid: str,
        role: str,
        options: ListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> tuple[list[UserRepresentation], requests.Response]:
        """List users that have the client role ``role``.

        Args:
            realm: Realm name
            client_uuid: The client's UUID
            role: Role name
            options: Pagination (``first``, ``max``)
            timeout: Timeout in seconds for this call
        """
        return self.client.call(
            "GET",
            path("admin/realms/{}/clients/{}/roles/{}/users", realm, client_uuid, role),
            target=list[UserRepresentation],
            options=options,
            timeout=timeout,
        )
