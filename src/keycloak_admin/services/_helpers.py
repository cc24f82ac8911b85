from urllib.parse import quote

from keycloak_admin.exceptions import KeycloakRequestError

# URL resolution would drop or climb these instead of keeping them as a segment
_UNSAFE_SEGMENTS = ("", ".", "..")


def path(template: str, *segments: str) -> str:
    """Fill ``template`` with URL-quoted path segments.

    Each segment is quoted as a whole, so a role named "a/b" stays one
    segment instead of splitting the path.

    Raises:
        KeycloakRequestError: If a segment is empty, "." or ".."
    """
    quoted = []
    for segment in segments:
        segment = str(segment)
        if segment in _UNSAFE_SEGMENTS:
            raise KeycloakRequestError(
                f"Invalid path segment {segment!r} for {template!r}"
            )
        quoted.append(quote(segment, safe=""))
    return template.format(*quoted)


def require_id(identifier: str | None, kind: str) -> str:
    """Return ``identifier`` or fail before a request with a bad URL is built."""
    if not identifier:
        raise KeycloakRequestError(f"{kind} id must be set before calling update")
    return identifier
