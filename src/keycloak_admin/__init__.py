"""Typed client for the Keycloak Admin REST API."""

from keycloak_admin.auth import KeycloakTokenAuth
from keycloak_admin.client import KeycloakClient, expect_status, location_id
from keycloak_admin.exceptions import (
    KeycloakAPIError,
    KeycloakAuthError,
    KeycloakConfigError,
    KeycloakDecodeError,
    KeycloakError,
    KeycloakRequestError,
    KeycloakTimeoutError,
    KeycloakTransportError,
)
from keycloak_admin.keycloak_models import DecisionStrategy, Logic
from keycloak_admin.options import (
    ExecuteActionsOptions,
    ListOptions,
    RolesListOptions,
    UsersListOptions,
)

__version__ = "0.1.0"

__all__ = [
    "DecisionStrategy",
    "ExecuteActionsOptions",
    "KeycloakAPIError",
    "KeycloakAuthError",
    "KeycloakClient",
    "KeycloakConfigError",
    "KeycloakDecodeError",
    "KeycloakError",
    "KeycloakRequestError",
    "KeycloakTimeoutError",
    "KeycloakTokenAuth",
    "KeycloakTransportError",
    "ListOptions",
    "Logic",
    "RolesListOptions",
    "UsersListOptions",
    "expect_status",
    "location_id",
]
