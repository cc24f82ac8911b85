"""Environment configuration for building an authenticated admin client.

Settings come from environment variables, optionally loaded from a ``.env``
file. Never keep secrets in your code.
"""

import os
from dataclasses import dataclass

import requests
from dotenv import load_dotenv

from keycloak_admin.auth import KeycloakTokenAuth
from keycloak_admin.client import KeycloakClient
from keycloak_admin.exceptions import KeycloakConfigError


@dataclass(frozen=True)
class Settings:
    """Connection settings for one Keycloak server."""

    keycloak_url: str
    client_id: str
    client_secret: str | None = None
    auth_realm: str = "master"
    username: str | None = None
    password: str | None = None
    timeout: float | None = None


def _env(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


def load_settings(dotenv: bool = True) -> Settings:
    """Read the settings from the environment.

    Variables:
        KEYCLOAK_URL: Server base URL; a trailing "/" is added if missing
        CLIENT_ID: OAuth2 client ID
        CLIENT_SECRET: OAuth2 client secret (client-credentials grant)
        KEYCLOAK_AUTH_REALM: Realm that issues tokens (default: "master")
        KEYCLOAK_USERNAME, KEYCLOAK_PASSWORD: Use the password grant instead
        KEYCLOAK_TIMEOUT: Per-request timeout in seconds (default: none)

    Args:
        dotenv: Load a ``.env`` file first; already-set variables win

    Raises:
        KeycloakConfigError: If a required variable is missing or invalid
    """
    if dotenv:
        load_dotenv()

    keycloak_url = _env("KEYCLOAK_URL")
    client_id = _env("CLIENT_ID")
    client_secret = _env("CLIENT_SECRET")
    username = _env("KEYCLOAK_USERNAME")
    password = _env("KEYCLOAK_PASSWORD")

    missing = []
    if not keycloak_url:
        missing.append("KEYCLOAK_URL")
    if not client_id:
        missing.append("CLIENT_ID")
    if username is None and not client_secret:
        missing.append("CLIENT_SECRET")
    if username is not None and password is None:
        missing.append("KEYCLOAK_PASSWORD")

    if missing:
        raise KeycloakConfigError(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Please check your .env file."
        )

    timeout = None
    raw_timeout = _env("KEYCLOAK_TIMEOUT")
    if raw_timeout is not None:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise KeycloakConfigError(
                f"KEYCLOAK_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from e

    if not keycloak_url.endswith("/"):
        keycloak_url += "/"

    return Settings(
        keycloak_url=keycloak_url,
        client_id=client_id,
        client_secret=client_secret,
        auth_realm=_env("KEYCLOAK_AUTH_REALM") or "master",
        username=username,
        password=password,
        timeout=timeout,
    )


def build_client(settings: Settings) -> KeycloakClient:
    """Create a KeycloakClient whose session authenticates with ``settings``."""
    session = requests.Session()
    session.auth = KeycloakTokenAuth(
        settings.keycloak_url,
        client_id=settings.client_id,
        client_secret=settings.client_secret,
        realm=settings.auth_realm,
        username=settings.username,
        password=settings.password,
    )
    return KeycloakClient(
        settings.keycloak_url, session=session, timeout=settings.timeout
    )
