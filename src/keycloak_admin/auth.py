"""Bearer-token authentication for ``requests`` sessions.

The admin client itself never fetches tokens: it uses whatever auth the
session carries. ``KeycloakTokenAuth`` is a ready-made ``requests`` auth
that obtains tokens from Keycloak's OpenID Connect token endpoint and
refreshes them shortly before they expire.

Two OAuth2 grants are supported:
- client credentials (service account of a confidential client), the default
- resource-owner password (e.g. the ``admin`` user via ``admin-cli``),
  used when ``username`` and ``password`` are given
"""

import logging
import threading
import time
from urllib.parse import urljoin

import requests
from pydantic import ValidationError
from requests.auth import AuthBase

from keycloak_admin.exceptions import KeycloakAuthError
from keycloak_admin.keycloak_models import TokenResponse

logger = logging.getLogger(__name__)

# Refresh this many seconds before the token actually expires
EXPIRY_MARGIN = 10


class KeycloakTokenAuth(AuthBase):
    """Attach a Keycloak access token to every request.

    Attributes:
        token_url: The realm's token endpoint
        access_token: The current access token (None until the first request)
        token_expiry: Unix timestamp after which a new token is fetched

    Example:
        >>> session = requests.Session()
        >>> session.auth = KeycloakTokenAuth(
        ...     "http://localhost:8080/",
        ...     client_id="admin-cli",
        ...     username="admin",
        ...     password="admin",
        ... )
    """

    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str | None = None,
        realm: str = "master",
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = 10,
    ):
        """Initialize the token auth.

        Args:
            base_url: Base URL of the Keycloak server, ending with "/"
            client_id: The OAuth2 client ID
            client_secret: The client secret; required for client credentials,
                optional for public clients using the password grant
            realm: The realm that issues the token (default: "master")
            username: User name for the password grant
            password: Password for the password grant
            timeout: Timeout in seconds for token requests
        """
        self.token_url = urljoin(
            base_url, f"realms/{realm}/protocol/openid-connect/token"
        )
        self.client_id = client_id
        self.client_secret = client_secret
        self.username = username
        self.password = password
        self.timeout = timeout
        self.access_token: str | None = None
        self.token_expiry: float = 0
        self._lock = threading.Lock()

    def _grant(self) -> dict[str, str]:
        if self.username is not None:
            data = {
                "grant_type": "password",
                "client_id": self.client_id,
                "username": self.username,
                "password": self.password or "",
            }
        else:
            data = {
                "grant_type": "client_credentials",
                "client_id": self.client_id,
            }
        if self.client_secret:
            data["client_secret"] = self.client_secret
        return data

    def _get_access_token(self) -> str:
        """Obtain a new access token from Keycloak.

        Updates ``token_expiry`` from the ``expires_in`` of the response.

        Raises:
            KeycloakAuthError: If the token endpoint fails or answers with an
                unusable response
        """
        try:
            response = requests.post(
                self.token_url, data=self._grant(), timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to obtain access token: {e}")
            raise KeycloakAuthError(f"Authentication failed: {e}") from e

        try:
            token_data = TokenResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Failed to parse token response: {e}")
            raise KeycloakAuthError(f"Invalid token response format: {e}") from e

        self.token_expiry = time.time() + token_data.expires_in - EXPIRY_MARGIN
        return token_data.access_token

    def token(self) -> str:
        """Return a valid access token, fetching a new one if needed."""
        with self._lock:
            if not self.access_token or time.time() >= self.token_expiry:
                logger.debug("Token missing or expired, obtaining new token")
                self.access_token = self._get_access_token()
            return self.access_token

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.headers["Authorization"] = f"Bearer {self.token()}"
        return request
