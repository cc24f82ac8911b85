"""Query-string options for list and search endpoints.

Each options model lists its own field-to-query-key pairs in ``to_params``.
Fields left as None are not sent.
"""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel


def _encode(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _params(pairs) -> list[tuple[str, str]]:
    return [(key, _encode(value)) for key, value in pairs if value is not None]


class ListOptions(BaseModel):
    """Pagination for endpoints that accept ``first`` and ``max``."""

    first: int | None = None
    max: int | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return _params([("first", self.first), ("max", self.max)])


class RolesListOptions(ListOptions):
    brief_representation: bool | None = None
    search: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return _params(
            [
                ("briefRepresentation", self.brief_representation),
                ("search", self.search),
                ("first", self.first),
                ("max", self.max),
            ]
        )


class UsersListOptions(ListOptions):
    """Filters for ``GET admin/realms/{realm}/users``.

    ``exact`` makes the username/email/name filters match exactly instead of
    by substring.
    """

    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    search: str | None = None
    exact: bool | None = None
    brief_representation: bool | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return _params(
            [
                ("username", self.username),
                ("email", self.email),
                ("firstName", self.first_name),
                ("lastName", self.last_name),
                ("search", self.search),
                ("exact", self.exact),
                ("briefRepresentation", self.brief_representation),
                ("first", self.first),
                ("max", self.max),
            ]
        )


class ExecuteActionsOptions(BaseModel):
    """Query parameters for ``execute-actions-email``.

    ``lifespan`` is the link lifetime in seconds.
    """

    client_id: str | None = None
    lifespan: int | None = None
    redirect_uri: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return _params(
            [
                ("client_id", self.client_id),
                ("lifespan", self.lifespan),
                ("redirect_uri", self.redirect_uri),
            ]
        )


def add_options(path: str, options) -> str:
    """Append the query parameters of ``options`` to ``path``.

    Parameters already present on ``path`` are kept and come first. Returns
    ``path`` unchanged when ``options`` is None or encodes to nothing.
    """
    if options is None:
        return path

    params = options.to_params()
    if not params:
        return path

    parts = urlsplit(path)
    query = parse_qsl(parts.query, keep_blank_values=True) + params
    return urlunsplit(parts._replace(query=urlencode(query)))
