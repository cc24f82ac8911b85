"""Authorization policies of a client's resource server.

Keycloak serves policies and permissions from the same collection; ``list``
asks for policies only (``permission=false``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import (
    GroupPolicyRepresentation,
    PolicyRepresentation,
    RolePolicyRepresentation,
    UserPolicyRepresentation,
)
from keycloak_admin.services._helpers import path

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient

POLICIES_PATH = "admin/realms/{}/clients/{}/authz/resource-server/policy"


class PoliciesService:
    """Manage policies.

    The ``create_*`` methods return the created policy decoded from the
    response body together with the response (201 on success, 409 if the
    name is taken).
    """

    def __init__(self, client: KeycloakClient):
        self.client = client

    def list(
        self, realm: str, client_uuid: str, *, timeout: float | None = None
    ) -> tuple[list[PolicyRepresentation], requests.Response]:
        return self.client.call(
            "GET",
            path(POLICIES_PATH + "?permission=false", realm, client_uuid),
            target=list[PolicyRepresentation],
            timeout=timeout,
        )

    def get(
        self, realm: str, client_uuid: str, policy_id: str, *, timeout: float | None = None
    ) -> tuple[PolicyRepresentation, requests.Response]:
        """Read any policy; type-specific fields arrive as extra fields."""
        return self.client.call(
            "GET",
            path(POLICIES_PATH + "/{}", realm, client_uuid, policy_id),
            target=PolicyRepresentation,
            timeout=timeout,
        )

    def create_user_policy(
        self,
        realm: str,
        client_uuid: str,
        policy: UserPolicyRepresentation,
        *,
        timeout: float | None = None,
    ) -> tuple[UserPolicyRepresentation, requests.Response]:
        """Create a policy granting access to the users listed by id (201)."""
        return self.client.call(
            "POST",
            path(POLICIES_PATH + "/user", realm, client_uuid),
            body=policy,
            target=UserPolicyRepresentation,
            timeout=timeout,
        )

    def create_role_policy(
        self,
        realm: str,
        client_uuid: str,
        policy: RolePolicyRepresentation,
        *,
        timeout: float | None = None,
    ) -> tuple[RolePolicyRepresentation, requests.Response]:
        """Create a policy granting access to holders of the listed roles (201)."""
        return self.client.call(
            "POST",
            path(POLICIES_PATH + "/role", realm, client_uuid),
            body=policy,
            target=RolePolicyRepresentation,
            timeout=timeout,
        )

    def create_group_policy(
        self,
        realm: str,
        client_uuid: str,
        policy: GroupPolicyRepresentation,
        *,
        timeout: float | None = None,
    ) -> tuple[GroupPolicyRepresentation, requests.Response]:
        """Create a policy granting access to members of the listed groups (201)."""
        return self.client.call(
            "POST",
            path(POLICIES_PATH + "/group", realm, client_uuid),
            body=policy,
            target=GroupPolicyRepresentation,
            timeout=timeout,
        )

    def delete(
        self, realm: str, client_uuid: str, policy_id: str, *, timeout: float | None = None
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path(POLICIES_PATH + "/{}", realm, client_uuid, policy_id),
            timeout=timeout,
        )
        return response
