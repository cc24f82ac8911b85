"""User administration: accounts, credentials, group membership and role mappings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from keycloak_admin.keycloak_models import (
    CredentialRepresentation,
    GroupRepresentation,
    RoleRepresentation,
    UserRepresentation,
)
from keycloak_admin.options import ExecuteActionsOptions, UsersListOptions
from keycloak_admin.services._helpers import path, require_id

if TYPE_CHECKING:
    from keycloak_admin.client import KeycloakClient


class UsersService:
    """Manage users of a realm.

    Users are addressed by their server-assigned id. ``create`` does not
    return it; read it from the response's ``Location`` header with
    ``keycloak_admin.client.location_id``.

    Example:
        >>> response = kc.users.create("myrealm", UserRepresentation(username="jane"))
        >>> user_id = location_id(response)
        >>> kc.users.reset_password(
        ...     "myrealm",
        ...     user_id,
        ...     CredentialRepresentation(type="password", value="s3cret", temporary=False),
        ...     timeout=5,
        ... )
    """

    def __init__(self, client: KeycloakClient):
        self.client = client

    def create(
        self, realm: str, user: UserRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Create a user.

        Args:
            realm: Realm name
            user: The new user; ``username`` is required by the server
            timeout: Timeout in seconds for this call

        Returns:
            The raw response; 201 with the new id in ``Location``, 409 if the
            username or email is taken
        """
        _, response = self.client.call(
            "POST", path("admin/realms/{}/users", realm), body=user, timeout=timeout
        )
        return response

    def list(
        self,
        realm: str,
        options: UsersListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> tuple[list[UserRepresentation], requests.Response]:
        """List users, optionally filtered and paginated.

        Keycloak returns at most 100 users unless ``options.max`` says otherwise.
        """
        return self.client.call(
            "GET",
            path("admin/realms/{}/users", realm),
            target=list[UserRepresentation],
            options=options,
            timeout=timeout,
        )

    def get(
        self, realm: str, user_id: str, *, timeout: float | None = None
    ) -> tuple[UserRepresentation, requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}/users/{}", realm, user_id),
            target=UserRepresentation,
            timeout=timeout,
        )

    def get_by_username(
        self, realm: str, username: str, *, timeout: float | None = None
    ) -> tuple[list[UserRepresentation], requests.Response]:
        """Search users by username.

        Keycloak matches by substring, so the result may hold several users.
        """
        return self.list(realm, UsersListOptions(username=username), timeout=timeout)

    def update(
        self, realm: str, user: UserRepresentation, *, timeout: float | None = None
    ) -> requests.Response:
        """Replace a user.

        Raises:
            KeycloakRequestError: If ``user.id`` is not set
        """
        user_id = require_id(user.id, "user")
        _, response = self.client.call(
            "PUT",
            path("admin/realms/{}/users/{}", realm, user_id),
            body=user,
            timeout=timeout,
        )
        return response

    def delete(
        self, realm: str, user_id: str, *, timeout: float | None = None
    ) -> requests.Response:
        """Delete a user (204, or 404 once it is gone)."""
        _, response = self.client.call(
            "DELETE", path("admin/realms/{}/users/{}", realm, user_id), timeout=timeout
        )
        return response

    def reset_password(
        self,
        realm: str,
        user_id: str,
        credential: CredentialRepresentation,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Set or reset the user's password (204 on success)."""
        _, response = self.client.call(
            "PUT",
            path("admin/realms/{}/users/{}/reset-password", realm, user_id),
            body=credential,
            timeout=timeout,
        )
        return response

    def execute_actions_email(
        self,
        realm: str,
        user_id: str,
        actions: list[str],
        options: ExecuteActionsOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Email the user a link to perform ``actions`` (e.g. "UPDATE_PASSWORD").

        The realm needs a working SMTP configuration; Keycloak answers 500
        otherwise.
        """
        _, response = self.client.call(
            "PUT",
            path("admin/realms/{}/users/{}/execute-actions-email", realm, user_id),
            body=list(actions),
            options=options,
            timeout=timeout,
        )
        return response

    def list_groups(
        self, realm: str, user_id: str, *, timeout: float | None = None
    ) -> tuple[list[GroupRepresentation], requests.Response]:
        return self.client.call(
            "GET",
            path("admin/realms/{}/users/{}/groups", realm, user_id),
            target=list[GroupRepresentation],
            timeout=timeout,
        )

    def join_group(
        self, realm: str, user_id: str, group_id: str, *, timeout: float | None = None
    ) -> requests.Response:
        """Add the user to a group (204 on success); sends no body."""
        _, response = self.client.call(
            "PUT",
            path("admin/realms/{}/users/{}/groups/{}", realm, user_id, group_id),
            timeout=timeout,
        )
        return response

    def leave_group(
        self, realm: str, user_id: str, group_id: str, *, timeout: float | None = None
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path("admin/realms/{}/users/{}/groups/{}", realm, user_id, group_id),
            timeout=timeout,
        )
        return response

    def add_realm_roles(
        self,
        realm: str,
        user_id: str,
        roles: list[RoleRepresentation],
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Grant realm roles; each role needs at least ``id`` and ``name``."""
        _, response = self.client.call(
            "POST",
            path("admin/realms/{}/users/{}/role-mappings/realm", realm, user_id),
            body=roles,
            timeout=timeout,
        )
        return response

    def remove_realm_roles(
        self,
        realm: str,
        user_id: str,
        roles: list[RoleRepresentation],
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path("admin/realms/{}/users/{}/role-mappings/realm", realm, user_id),
            body=roles,
            timeout=timeout,
        )
        return response

    def add_client_roles(
        self,
        realm: str,
        user_id: str,
        client_uuid: str,
        roles: list[RoleRepresentation],
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        """Grant roles of the client ``client_uuid`` (204 on success)."""
        _, response = self.client.call(
            "POST",
            path(
                "admin/realms/{}/users/{}/role-mappings/clients/{}",
                realm,
                user_id,
                client_uuid,
            ),
            body=roles,
            timeout=timeout,
        )
        return response

    def remove_client_roles(
        self,
        realm: str,
        user_id: str,
        client_uuid: str,
        roles: list[RoleRepresentation],
        *,
        timeout: float | None = None,
    ) -> requests.Response:
        _, response = self.client.call(
            "DELETE",
            path(
                "admin/realms/{}/users/{}/role-mappings/clients/{}",
                realm,
                user_id,
                client_uuid,
            ),
            body=roles,
            timeout=timeout,
        )
        return response
