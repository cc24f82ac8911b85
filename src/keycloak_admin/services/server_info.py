from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import ServerInfoRepresentation

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient


class ServerInfoService:
    def __init__(self, client: KeycloakClient):
        self.client = client

    def get(
        self, *, timeout: float | None = None
    ) -> tuple[ServerInfoRepresentation, requests.Response]:
        """Fetch version, memory and feature information about the server."""
        return self.client.call(
            "GET", "admin/serverinfo", target=ServerInfoRepresentation, timeout=timeout
        )
