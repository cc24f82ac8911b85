"""Realm administration and realm discovery endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import Configuration, RealmRepresentation
from keycloak_admin.services._helpers import path, require_id

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient


class RealmsService:
    """Create, read, update and delete realms.

    Realms are addressed by name (``realm``), not by their internal id.
    """

    def __init__(self, client: KeycloakClient):
        self.client = client

    def create(
        self, realm: RealmRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Create a realm.

        Args:
            realm: The new realm; ``realm.realm`` becomes its name
            timeout: Timeout in seconds for this call

        Returns:
            The raw response; 201 with a ``Location`` header on success,
            409 if the name is taken
        """
        _, response = self.client.call(
            "POST", "admin/realms", body=realm, timeout=timeout
        )
        return response

    def list(
        self, *, timeout: float | None = None
    ) -> tuple[list[RealmRepresentation], requests.Response]:
        """List every realm the caller may see, ``master`` included."""
        return self.client.call(
            "GET", "admin/realms", target=list[RealmRepresentation], timeout=timeout
        )

    def get(
        self, name: str, *, timeout: float | None = None
    ) -> tuple[RealmRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}", name),
            target=RealmRepresentation,
            timeout=timeout,
        )

    def update(
        self, realm: RealmRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Replace a realm's settings; ``realm.realm`` selects the realm.

        Raises:
            KeycloakRequestError: If ``realm.realm`` is not set
        """
        name = require_id(realm.realm, "realm")
        _, response = self.client.call(
            "PUT", path("admin/realms/{}", name), body=realm, timeout=timeout
        )
        return response

    def delete(self, name: str, *, timeout: float | None = None) -> requests.Response:
        """Delete a realm and everything in it (204, or 404 if it is gone)."""
        _, response = self.client.call(
            "DELETE", path("admin/realms/{}", name), timeout=timeout
        )
        return response

    def get_config(
        self, name: str, *, timeout: float | None = None
    ) -> tuple[Configuration, requests.Response]:
        """Fetch the realm's UMA 2.0 discovery document.

        This endpoint is public and lives outside ``admin/``.
        """
        return self.client.call(
            "GET",
            path("realms/{}/.well-known/uma2-configuration", name),
            target=Configuration,
            timeout=timeout,
        )
