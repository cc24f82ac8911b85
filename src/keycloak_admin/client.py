"""Transport client for the Keycloak Admin REST API.

``KeycloakClient`` resolves relative paths against a base URL, encodes
request bodies as JSON, sends them over a ``requests.Session`` and decodes
JSON responses into Pydantic types. It never looks at status codes: every
service method hands the raw ``requests.Response`` back so the caller can
check it. Authentication is whatever the session carries (see
``keycloak_admin.auth`` for a ready-made bearer-token helper).

Example:
    >>> session = requests.Session()
    >>> session.auth = KeycloakTokenAuth(
    ...     "http://localhost:8080/", client_id="admin-cli", client_secret="secret"
    ... )
    >>> kc = KeycloakClient("http://localhost:8080/", session=session)
    >>> realms, response = kc.realms.list()
    >>> response.status_code
    200
"""

import json
import logging
from functools import lru_cache
from typing import Any
from urllib.parse import urljoin, urlsplit

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from keycloak_admin.exceptions import (
    KeycloakAPIError,
    KeycloakConfigError,
    KeycloakDecodeError,
    KeycloakRequestError,
    KeycloakTimeoutError,
    KeycloakTransportError,
)
from keycloak_admin.options import add_options
from keycloak_admin.services import (
    ClientRolesService,
    ClientScopesService,
    ClientsService,
    GroupsService,
    PermissionsService,
    PoliciesService,
    RealmsService,
    ResourcesService,
    RolesService,
    ScopesService,
    ServerInfoService,
    UsersService,
)

logger = logging.getLogger(__name__)


def _jsonable(body: Any) -> Any:
    """Turn models (possibly nested in lists/dicts) into plain JSON data.

    Unset model fields are dropped; fields explicitly set to None stay and
    become JSON null.
    """
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(body, (list, tuple)):
        return [_jsonable(item) for item in body]
    if isinstance(body, dict):
        return {key: _jsonable(value) for key, value in body.items()}
    return body


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class KeycloakClient:
    """Client for the Keycloak Admin REST API.

    The client holds no mutable state after construction, so one instance can
    be shared between threads as long as the underlying session can.

    Attributes:
        base_url: Absolute URL every request path is resolved against. Its path
            must end with "/" (e.g. "http://localhost:8080/" or
            "http://localhost:8080/auth/").
        session: The requests session used as transport.
        timeout: Default timeout in seconds for each request; None waits
            indefinitely.
        realms, clients, client_roles, client_scopes, users, groups, roles,
        scopes, resources, policies, permissions, server_info: Resource
            services sharing this client.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        """Initialize the Keycloak client.

        A base URL without a trailing "/" is accepted here but makes every
        later request fail with KeycloakConfigError.

        Args:
            base_url: Base URL of the Keycloak server, ending with "/"
            session: Pre-configured session (auth, TLS, proxies); a new one
                is created when omitted
            timeout: Default per-request timeout in seconds
        """
        self.base_url = base_url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

        self.realms = RealmsService(self)
        self.clients = ClientsService(self)
        self.client_roles = ClientRolesService(self)
        self.client_scopes = ClientScopesService(self)
        self.users = UsersService(self)
        self.groups = GroupsService(self)
        self.roles = RolesService(self)
        self.scopes = ScopesService(self)
        self.resources = ResourcesService(self)
        self.policies = PoliciesService(self)
        self.permissions = PermissionsService(self)
        self.server_info = ServerInfoService(self)

    def build_request(
        self, method: str, path: str, body: Any = None
    ) -> requests.PreparedRequest:
        """Build a request for ``path`` relative to the base URL.

        The path is resolved with standard URL resolution, so a path starting
        with "/" replaces the base URL's path instead of extending it.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Path relative to the base URL, may carry a query string
            body: Model, list of models or plain JSON data; None sends no body

        Returns:
            A prepared request with the session's auth and headers applied

        Raises:
            KeycloakConfigError: If the base URL path does not end with "/"
            KeycloakRequestError: If the body cannot be JSON-encoded or the
                URL cannot be prepared
        """
        if not urlsplit(self.base_url).path.endswith("/"):
            raise KeycloakConfigError(
                f"base_url must have a trailing slash, but {self.base_url!r} does not"
            )

        url = urljoin(self.base_url, path)

        headers = {}
        data = None
        if body is not None:
            try:
                data = json.dumps(_jsonable(body), allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise KeycloakRequestError(f"Cannot encode request body: {e}") from e
            headers["Content-Type"] = "application/json"

        request = requests.Request(method, url, headers=headers, data=data)
        try:
            return self.session.prepare_request(request)
        except requests.exceptions.RequestException as e:
            raise KeycloakRequestError(f"Invalid request URL {url!r}: {e}") from e

    def execute(
        self,
        request: requests.PreparedRequest,
        target: Any = None,
        *,
        timeout: float | None = None,
    ) -> tuple[Any, requests.Response]:
        """Send a prepared request and optionally decode the response body.

        The body is decoded into ``target`` whatever the status code is;
        checking ``response.status_code`` is up to the caller.

        Args:
            request: Request from ``build_request``
            target: Type to decode the JSON body into (a model class or a
                generic such as ``list[UserRepresentation]``); None skips
                decoding
            timeout: Timeout in seconds for this call, overriding the
                client default

        Returns:
            Tuple of (decoded value or None, raw response)

        Raises:
            KeycloakTimeoutError: If the timeout elapsed
            KeycloakTransportError: If no response was received
            KeycloakDecodeError: If the body does not decode into ``target``
        """
        if timeout is None:
            timeout = self.timeout

        settings = self.session.merge_environment_settings(
            request.url, {}, None, None, None
        )
        logger.debug(f"{request.method} {request.url}")
        try:
            response = self.session.send(request, timeout=timeout, **settings)
        except requests.exceptions.Timeout as e:
            raise KeycloakTimeoutError(
                f"{request.method} {request.url} timed out: {e}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise KeycloakTransportError(
                f"Failed to communicate with Keycloak: {e}"
            ) from e
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if target is None:
            return None, response

        if not response.content:
            raise KeycloakDecodeError(
                f"Empty response body (status {response.status_code})", response
            )
        try:
            value = _adapter(target).validate_json(response.content)
        except ValidationError as e:
            raise KeycloakDecodeError(
                f"Cannot decode response (status {response.status_code}): {e}",
                response,
            ) from e
        return value, response

    def call(
        self,
        method: str,
        path: str,
        body: Any = None,
        target: Any = None,
        options: Any = None,
        timeout: float | None = None,
    ) -> tuple[Any, requests.Response]:
        """Build and execute one request; the shape every service method uses.

        ``timeout`` overrides the client default for this call only.
        """
        request = self.build_request(method, add_options(path, options), body)
        return self.execute(request, target, timeout=timeout)


def location_id(response: requests.Response) -> str | None:
    """Return the last path segment of the ``Location`` header.

    Keycloak answers most creates with ``201 Created`` and a ``Location``
    pointing at the new resource; its last segment is the new identifier.
    """
    location = response.headers.get("Location")
    if not location:
        return None
    return urlsplit(location).path.rstrip("/").rsplit("/", 1)[-1]


def expect_status(response: requests.Response, *status_codes: int) -> requests.Response:
    """Raise KeycloakAPIError unless the response has one of ``status_codes``.

    Returns the response so calls can be chained.
    """
    if response.status_code in status_codes:
        return response

    expected = ", ".join(str(code) for code in status_codes)
    raise KeycloakAPIError(
        f"{response.url} returned {response.status_code}, expected {expected}",
        status_code=response.status_code,
        response_body=response.text,
    )
