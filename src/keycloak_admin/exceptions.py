"""Exceptions raised by the Keycloak admin client.

Every error derives from KeycloakError, so callers can catch the whole
family with one except clause. Non-2xx responses are NOT errors here: the
services return them unchanged and leave status checks to the caller (see
``expect_status`` in the client module for an opt-in check).
"""

import requests


class KeycloakError(Exception):
    """Base exception for all Keycloak client errors."""

    pass


class KeycloakConfigError(KeycloakError):
    """Raised when the client is misconfigured.

    Examples:
        - Base URL whose path does not end with "/"
        - Missing environment variables
    """

    pass


class KeycloakRequestError(KeycloakError):
    """Raised when a request cannot be built.

    Examples:
        - Body that cannot be encoded as JSON
        - URL that requests refuses to prepare
        - Update of a record whose identifier is not set
    """

    pass


class KeycloakTransportError(KeycloakError):
    """Raised when the request never got a response.

    Examples:
        - Connection refused
        - DNS failure
        - TLS handshake error
    """

    pass


class KeycloakTimeoutError(KeycloakTransportError):
    """Raised when the caller's timeout elapsed before the server answered."""

    pass


class KeycloakDecodeError(KeycloakError):
    """Raised when a response body does not decode into the requested type.

    The raw response is kept so the caller can still inspect the status code
    (a 404 body, for example, will not decode into a list of users).
    """

    def __init__(self, message: str, response: requests.Response | None = None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class KeycloakAPIError(KeycloakError):
    """Raised by ``expect_status`` when a response has an unexpected status.

    Examples:
        - 404 Not Found (realm doesn't exist)
        - 403 Forbidden (insufficient permissions)
        - 409 Conflict (name already taken)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        """Initialize the API error with an optional HTTP status code.

        Args:
            message: Human-readable error description
            status_code: HTTP status code from the failed request
            response_body: Raw body returned by the server, if any
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class KeycloakAuthError(KeycloakError):
    """Raised when a token cannot be obtained from Keycloak.

    Examples:
        - Invalid client credentials
        - Token endpoint unreachable
        - Malformed token response
    """

    pass
