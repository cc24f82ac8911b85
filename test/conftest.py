"""Shared fixtures for the Keycloak admin client tests."""

import pytest

from keycloak_admin.client import KeycloakClient

BASE_URL = "http://localhost:8080/auth/"


@pytest.fixture
def kc():
    """A KeycloakClient against a base URL with a path, like older Keycloak
    releases that serve everything under /auth/.

    No session auth is configured, so requests go out unauthenticated and
    tests only register the admin endpoints they exercise.
    """
    return KeycloakClient(BASE_URL)
