"""Keycloak MCP Server.

Exposes read-only Keycloak admin operations as MCP (Model Context Protocol)
tools so AI assistants can inspect a Keycloak server.

The server provides tools for:
- Listing realms and reading one realm
- Listing users in a realm and reading one user
- Listing groups, realm roles and clients of a realm

Configuration is read from the environment (see ``keycloak_admin.config``).
"""

import logging
import sys

from fastmcp import FastMCP

from keycloak_admin.client import KeycloakClient, expect_status
from keycloak_admin.config import build_client, load_settings
from keycloak_admin.exceptions import KeycloakConfigError
from keycloak_admin.options import UsersListOptions

logger = logging.getLogger(__name__)

# The name "keycloak-admin" identifies this server to MCP clients
mcp = FastMCP("keycloak-admin")

_keycloak_client: KeycloakClient | None = None


def get_client() -> KeycloakClient:
    """Return the shared client, building it from the environment on first use.

    Raises:
        KeycloakConfigError: If the environment is incomplete
    """
    global _keycloak_client
    if _keycloak_client is None:
        _keycloak_client = build_client(load_settings())
        logger.info("Keycloak client initialized successfully")
    return _keycloak_client


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# MCP Tool Definitions
# =============================================================================


@mcp.tool()
def get_realms() -> list[dict]:
    """Get a list of all realms from the Keycloak server.

    A realm in Keycloak is a space where you manage users, credentials,
    roles, and groups. A realm is isolated from other realms.

    Returns:
        A list of realm objects with fields like id, realm, displayName, enabled
    """
    try:
        realms, response = get_client().realms.list()
        expect_status(response, 200)
        logger.info(f"Retrieved {len(realms)} realms")
        return [_dump(realm) for realm in realms]
    except Exception as e:
        logger.error(f"Failed to get realms: {e}")
        # Re-raise the exception so the MCP client gets proper error info
        raise


@mcp.tool()
def get_realm(realm: str) -> dict:
    """Get the full settings of one realm by name."""
    try:
        representation, response = get_client().realms.get(realm)
        expect_status(response, 200)
        logger.info(f"Retrieved realm '{realm}'")
        return _dump(representation)
    except Exception as e:
        logger.error(f"Failed to get realm '{realm}': {e}")
        raise


@mcp.tool()
def get_users(realm: str, max_users: int = 100) -> list[dict]:
    """Get a list of users from a specific realm.

    Args:
        realm: The name of the realm to get users from (e.g., "master")
        max_users: Maximum number of users to return (default: 100)

    Returns:
        A list of user objects with fields like id, username, email,
        firstName, lastName, enabled
    """
    try:
        users, response = get_client().users.list(
            realm, UsersListOptions(max=max_users)
        )
        expect_status(response, 200)
        logger.info(f"Retrieved {len(users)} users from realm '{realm}'")
        return [_dump(user) for user in users]
    except Exception as e:
        logger.error(f"Failed to get users from realm '{realm}': {e}")
        raise


@mcp.tool()
def get_user_info(realm: str, user_id: str) -> dict:
    """Get detailed information about a specific user.

    Args:
        realm: The realm the user belongs to
        user_id: The unique ID of the user (UUID format, not username!)
                 You can get this from the get_users() tool.
    """
    try:
        user, response = get_client().users.get(realm, user_id)
        expect_status(response, 200)
        logger.info(f"Retrieved info for user '{user_id}' in realm '{realm}'")
        return _dump(user)
    except Exception as e:
        logger.error(f"Failed to get user info for '{user_id}' in realm '{realm}': {e}")
        raise


@mcp.tool()
def get_groups(realm: str) -> list[dict]:
    """Get the top-level groups of a realm, with their sub-groups."""
    try:
        groups, response = get_client().groups.list(realm)
        expect_status(response, 200)
        logger.info(f"Retrieved {len(groups)} groups from realm '{realm}'")
        return [_dump(group) for group in groups]
    except Exception as e:
        logger.error(f"Failed to get groups from realm '{realm}': {e}")
        raise


@mcp.tool()
def get_realm_roles(realm: str) -> list[dict]:
    """Get the realm-level roles of a realm, built-in roles included."""
    try:
        roles, response = get_client().roles.list(realm)
        expect_status(response, 200)
        logger.info(f"Retrieved {len(roles)} roles from realm '{realm}'")
        return [_dump(role) for role in roles]
    except Exception as e:
        logger.error(f"Failed to get roles from realm '{realm}': {e}")
        raise


@mcp.tool()
def get_clients(realm: str) -> list[dict]:
    """Get the clients (applications) registered in a realm.

    Note: the "id" field is the UUID used by other admin endpoints, while
    "clientId" is the name applications authenticate with.
    """
    try:
        clients, response = get_client().clients.list(realm)
        expect_status(response, 200)
        logger.info(f"Retrieved {len(clients)} clients from realm '{realm}'")
        return [_dump(client) for client in clients]
    except Exception as e:
        logger.error(f"Failed to get clients from realm '{realm}': {e}")
        raise


def main() -> None:
    """Main entry point for the MCP server.

    Validates the configuration up front, then serves over stdio, the
    standard way MCP servers talk to their clients.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        get_client()
    except KeycloakConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logger.info("Starting Keycloak MCP server...")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
