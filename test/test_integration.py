"""Tests against a live Keycloak server.

Skipped unless KEYCLOAK_INTEGRATION_URL points at a disposable server, e.g.

    docker run -p 8080:8080 -e KEYCLOAK_ADMIN=admin -e KEYCLOAK_ADMIN_PASSWORD=admin \\
        quay.io/keycloak/keycloak start-dev

    KEYCLOAK_INTEGRATION_URL=http://localhost:8080/ pytest -m integration

The admin user is taken from KEYCLOAK_INTEGRATION_USERNAME and
KEYCLOAK_INTEGRATION_PASSWORD (default: admin/admin). The tests create and
delete a realm called "first".
"""

import os

import pytest
import requests

from keycloak_admin.auth import KeycloakTokenAuth
from keycloak_admin.client import KeycloakClient, location_id
from keycloak_admin.exceptions import KeycloakRequestError
from keycloak_admin.keycloak_models import RealmRepresentation, UserRepresentation

INTEGRATION_URL = os.getenv("KEYCLOAK_INTEGRATION_URL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not INTEGRATION_URL, reason="KEYCLOAK_INTEGRATION_URL is not set"),
]

REALM = "first"


@pytest.fixture(scope="module")
def live_kc():
    base_url = INTEGRATION_URL if INTEGRATION_URL.endswith("/") else INTEGRATION_URL + "/"
    session = requests.Session()
    session.auth = KeycloakTokenAuth(
        base_url,
        client_id="admin-cli",
        username=os.getenv("KEYCLOAK_INTEGRATION_USERNAME", "admin"),
        password=os.getenv("KEYCLOAK_INTEGRATION_PASSWORD", "admin"),
    )
    return KeycloakClient(base_url, session=session, timeout=30)


@pytest.fixture
def realm(live_kc):
    # Leftover from an aborted run
    live_kc.realms.delete(REALM)

    response = live_kc.realms.create(RealmRepresentation(id=REALM, realm=REALM, enabled=True))
    assert response.status_code == 201
    yield response
    live_kc.realms.delete(REALM)


def test_create_realm_returns_location(realm):
    assert realm.headers["Location"].endswith("/admin/realms/first")


def test_fresh_realm_has_builtin_roles(live_kc, realm):
    roles, response = live_kc.roles.list(REALM)

    assert response.status_code == 200
    names = {role.name for role in roles}
    assert "offline_access" in names
    assert "uma_authorization" in names


def test_user_round_trip(live_kc, realm):
    submitted = UserRepresentation(
        username="jane",
        email="jane@example.com",
        first_name="Jane",
        last_name="Doe",
        enabled=True,
    )

    response = live_kc.users.create(REALM, submitted)
    assert response.status_code == 201

    user, response = live_kc.users.get(REALM, location_id(response))
    assert response.status_code == 200
    for field in submitted.model_fields_set:
        assert getattr(user, field) == getattr(submitted, field)


def test_delete_twice(live_kc, realm):
    response = live_kc.users.create(REALM, UserRepresentation(username="tmp", enabled=True))
    user_id = location_id(response)

    first = live_kc.users.delete(REALM, user_id)
    second = live_kc.users.delete(REALM, user_id)

    assert first.status_code == 204
    assert second.status_code == 404


def test_update_without_id(live_kc):
    with pytest.raises(KeycloakRequestError):
        live_kc.users.update(REALM, UserRepresentation(username="jane"))
