"""Type definitions for Keycloak API representations.

Every representation is a Pydantic model whose fields are all optional.
Python attributes are snake_case and map to the camelCase keys Keycloak uses
on the wire. A field left untouched is *unset* and is omitted from request
bodies; a field explicitly set to None is sent as JSON null. Fields the
server returns but we don't model are kept (``extra="allow"``) so a record
read from the server can be sent back on update without losing data.

The upstream Java representations live under
https://github.com/keycloak/keycloak/tree/main/core/src/main/java/org/keycloak/representations
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class KeycloakModel(BaseModel):
    """Base class for all representations sent to or read from Keycloak."""

    model_config = ConfigDict(
        # Keep fields the server returns but we don't model
        extra="allow",
        # Accept both snake_case attribute names and camelCase wire names
        populate_by_name=True,
        alias_generator=to_camel,
    )


class DecisionStrategy(str, Enum):
    """How the outcomes of several policies combine into one decision."""

    # At least one policy must evaluate to a positive decision.
    AFFIRMATIVE = "AFFIRMATIVE"
    # All policies must evaluate to a positive decision.
    UNANIMOUS = "UNANIMOUS"
    # Positive decisions must outnumber negative ones; a tie is negative.
    CONSENSUS = "CONSENSUS"


class Logic(str, Enum):
    """Whether a policy's outcome is used as-is or negated."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


# =============================================================================
# Realms
# =============================================================================


class RealmRepresentation(KeycloakModel):
    """Represents a Keycloak realm.

    Example JSON from Keycloak API:
    {
        "id": "master",
        "realm": "master",
        "displayName": "Keycloak",
        "enabled": true,
        "sslRequired": "external",
        "registrationAllowed": false,
        "loginWithEmailAllowed": true,
        ...
    }
    """

    id: str | None = None
    realm: str | None = None
    display_name: str | None = None
    display_name_html: str | None = None
    not_before: int | None = None
    revoke_refresh_token: bool | None = None
    refresh_token_max_reuse: int | None = None
    access_token_lifespan: int | None = None
    access_token_lifespan_for_implicit_flow: int | None = None
    sso_session_idle_timeout: int | None = None
    sso_session_max_lifespan: int | None = None
    sso_session_idle_timeout_remember_me: int | None = None
    sso_session_max_lifespan_remember_me: int | None = None
    offline_session_idle_timeout: int | None = None
    offline_session_max_lifespan_enabled: bool | None = None
    offline_session_max_lifespan: int | None = None
    client_session_idle_timeout: int | None = None
    client_session_max_lifespan: int | None = None
    client_offline_session_idle_timeout: int | None = None
    client_offline_session_max_lifespan: int | None = None
    access_code_lifespan: int | None = None
    access_code_lifespan_user_action: int | None = None
    access_code_lifespan_login: int | None = None
    action_token_generated_by_admin_lifespan: int | None = None
    action_token_generated_by_user_lifespan: int | None = None
    enabled: bool | None = None
    ssl_required: str | None = None
    registration_allowed: bool | None = None
    registration_email_as_username: bool | None = None
    remember_me: bool | None = None
    verify_email: bool | None = None
    login_with_email_allowed: bool | None = None
    duplicate_emails_allowed: bool | None = None
    reset_password_allowed: bool | None = None
    edit_username_allowed: bool | None = None
    brute_force_protected: bool | None = None
    permanent_lockout: bool | None = None
    max_failure_wait_seconds: int | None = None
    minimum_quick_login_wait_seconds: int | None = None
    wait_increment_seconds: int | None = None
    quick_login_check_milli_seconds: int | None = None
    max_delta_time_seconds: int | None = None
    failure_factor: int | None = None
    default_roles: list[str] | None = None
    required_credentials: list[str] | None = None
    otp_policy_type: str | None = None
    otp_policy_algorithm: str | None = None
    otp_policy_initial_counter: int | None = None
    otp_policy_digits: int | None = None
    otp_policy_look_ahead_window: int | None = None
    otp_policy_period: int | None = None
    otp_supported_applications: list[str] | None = None
    web_authn_policy_rp_entity_name: str | None = None
    web_authn_policy_signature_algorithms: list[str] | None = None
    web_authn_policy_rp_id: str | None = None
    web_authn_policy_attestation_conveyance_preference: str | None = None
    web_authn_policy_authenticator_attachment: str | None = None
    web_authn_policy_require_resident_key: str | None = None
    web_authn_policy_user_verification_requirement: str | None = None
    web_authn_policy_create_timeout: int | None = None
    web_authn_policy_avoid_same_authenticator_register: bool | None = None
    web_authn_policy_acceptable_aaguids: list[str] | None = None
    browser_security_headers: dict[str, str] | None = None
    smtp_server: dict[str, str] | None = None
    events_enabled: bool | None = None
    events_listeners: list[str] | None = None
    enabled_event_types: list[str] | None = None
    admin_events_enabled: bool | None = None
    admin_events_details_enabled: bool | None = None
    internationalization_enabled: bool | None = None
    supported_locales: list[str] | None = None
    default_locale: str | None = None
    browser_flow: str | None = None
    registration_flow: str | None = None
    direct_grant_flow: str | None = None
    reset_credentials_flow: str | None = None
    client_authentication_flow: str | None = None
    docker_authentication_flow: str | None = None
    attributes: dict[str, str] | None = None
    user_managed_access_allowed: bool | None = None


class Configuration(BaseModel):
    """UMA 2.0 discovery document served at ``.well-known/uma2-configuration``.

    Unlike the admin representations, this document uses snake_case keys.
    """

    model_config = ConfigDict(extra="allow")

    issuer: str | None = None
    authorization_endpoint: str | None = None
    token_endpoint: str | None = None
    introspection_endpoint: str | None = None
    end_session_endpoint: str | None = None
    jwks_uri: str | None = None
    grant_types_supported: list[str] | None = None
    response_types_supported: list[str] | None = None
    response_modes_supported: list[str] | None = None
    registration_endpoint: str | None = None
    token_endpoint_auth_methods_supported: list[str] | None = None
    token_endpoint_auth_signing_alg_values_supported: list[str] | None = None
    scopes_supported: list[str] | None = None
    resource_registration_endpoint: str | None = None
    permission_endpoint: str | None = None
    policy_endpoint: str | None = None


# =============================================================================
# Clients
# =============================================================================


class ClientRepresentation(KeycloakModel):
    """Represents an application registered in a realm.

    ``id`` is the server-assigned UUID used in URLs; ``client_id`` is the
    human-chosen identifier applications authenticate with.
    """

    id: str | None = None
    client_id: str | None = None
    name: str | None = None
    description: str | None = None
    root_url: str | None = None
    admin_url: str | None = None
    base_url: str | None = None
    surrogate_auth_required: bool | None = None
    enabled: bool | None = None
    always_display_in_console: bool | None = None
    client_authenticator_type: str | None = None
    secret: str | None = None
    default_roles: list[str] | None = None
    redirect_uris: list[str] | None = None
    web_origins: list[str] | None = None
    not_before: int | None = None
    bearer_only: bool | None = None
    consent_required: bool | None = None
    standard_flow_enabled: bool | None = None
    implicit_flow_enabled: bool | None = None
    direct_access_grants_enabled: bool | None = None
    service_accounts_enabled: bool | None = None
    authorization_services_enabled: bool | None = None
    public_client: bool | None = None
    frontchannel_logout: bool | None = None
    protocol: str | None = None
    attributes: dict[str, str] | None = None
    authentication_flow_binding_overrides: dict[str, str] | None = None
    full_scope_allowed: bool | None = None
    node_re_registration_timeout: int | None = None
    default_client_scopes: list[str] | None = None
    optional_client_scopes: list[str] | None = None
    access: dict[str, bool] | None = None


class ClientScopeRepresentation(KeycloakModel):
    """Represents a reusable set of protocol mappers and role scopes."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    protocol: str | None = None
    attributes: dict[str, str] | None = None


class CredentialRepresentation(KeycloakModel):
    """Represents a credential, e.g. a password or a client secret.

    Example JSON for a password reset:
    {
        "type": "password",
        "value": "s3cret",
        "temporary": false
    }
    """

    type: str | None = None
    value: str | None = None
    temporary: bool | None = None


# =============================================================================
# Users, groups and roles
# =============================================================================


class UserRepresentation(KeycloakModel):
    """Represents a Keycloak user.

    Example JSON from Keycloak API:
    {
        "id": "8a9b1c2d-3e4f-5a6b-7c8d-9e0f1a2b3c4d",
        "username": "john.doe",
        "enabled": true,
        "emailVerified": false,
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "createdTimestamp": 1609459200000,
        ...
    }
    """

    id: str | None = None
    created_timestamp: int | None = None
    username: str | None = None
    enabled: bool | None = None
    totp: bool | None = None
    email_verified: bool | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    disableable_credential_types: list[str] | None = None
    required_actions: list[str] | None = None
    not_before: int | None = None
    access: dict[str, bool] | None = None
    attributes: dict[str, list[str]] | None = None
    credentials: list[CredentialRepresentation] | None = None
    groups: list[str] | None = None


class GroupRepresentation(KeycloakModel):
    """Represents a group; ``sub_groups`` nests child groups by value."""

    id: str | None = None
    name: str | None = None
    path: str | None = None
    attributes: dict[str, list[str]] | None = None
    realm_roles: list[str] | None = None
    client_roles: dict[str, list[str]] | None = None
    sub_groups: list["GroupRepresentation"] | None = None
    access: dict[str, bool] | None = None


class RoleRepresentation(KeycloakModel):
    """Represents a realm role or a client role.

    ``container_id`` is the realm id for realm roles and the client UUID for
    client roles.
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    composite: bool | None = None
    client_role: bool | None = None
    container_id: str | None = None
    attributes: dict[str, list[str]] | None = None


# =============================================================================
# Authorization services
# =============================================================================


class ScopeRepresentation(KeycloakModel):
    """Represents an authorization scope, i.e. an action on a resource."""

    id: str | None = None
    name: str | None = None
    icon_uri: str | None = None
    display_name: str | None = None


class ResourceOwner(KeycloakModel):
    id: str | None = None
    name: str | None = None


class ResourceRepresentation(KeycloakModel):
    """Represents a protected resource.

    Keycloak names the identifier ``_id`` for resources.
    """

    id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    display_name: str | None = None
    type: str | None = None
    uris: list[str] | None = None
    scopes: list[ScopeRepresentation] | None = None
    attributes: dict[str, list[str]] | None = None
    owner_managed_access: bool | None = None
    owner: ResourceOwner | None = None


class PolicyRepresentation(KeycloakModel):
    """Fields shared by every policy and permission type.

    ``policies``, ``resources`` and ``scopes`` reference other authorization
    objects by identifier.
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    policies: list[str] | None = None
    resources: list[str] | None = None
    scopes: list[str] | None = None
    logic: Logic | None = None
    decision_strategy: DecisionStrategy | None = None
    owner: str | None = None


class UserPolicyRepresentation(PolicyRepresentation):
    users: list[str] | None = None


class RoleDefinition(KeycloakModel):
    id: str | None = None
    required: bool | None = None


class RolePolicyRepresentation(PolicyRepresentation):
    roles: list[RoleDefinition] | None = None


class GroupDefinition(KeycloakModel):
    id: str | None = None
    path: str | None = None
    extend_children: bool | None = None


class GroupPolicyRepresentation(PolicyRepresentation):
    groups_claim: str | None = None
    groups: list[GroupDefinition] | None = None


class PermissionRepresentation(PolicyRepresentation):
    """A policy that binds resources and scopes to other policies."""

    pass


class ResourcePermissionRepresentation(PermissionRepresentation):
    resource_type: str | None = None


class ScopePermissionRepresentation(PermissionRepresentation):
    resource_type: str | None = None


# =============================================================================
# Server info
# =============================================================================


class SystemInfo(KeycloakModel):
    version: str | None = None
    server_time: str | None = None
    uptime: str | None = None
    uptime_millis: int | None = None
    java_version: str | None = None
    java_vendor: str | None = None
    java_vm: str | None = Field(default=None, alias="javaVM")
    java_vm_version: str | None = Field(default=None, alias="javaVMVersion")
    java_runtime: str | None = None
    java_home: str | None = None
    os_name: str | None = None
    os_architecture: str | None = None
    os_version: str | None = None
    file_encoding: str | None = None
    user_name: str | None = None
    user_dir: str | None = None
    user_timezone: str | None = None
    user_locale: str | None = None


class MemoryInfo(KeycloakModel):
    total: int | None = None
    total_formatted: str | None = None
    used: int | None = None
    used_formatted: str | None = None
    free: int | None = None
    free_formatted: str | None = None
    free_percentage: int | None = None


class ProfileInfo(KeycloakModel):
    name: str | None = None
    disabled_features: list[str] | None = None
    preview_features: list[str] | None = None
    experimental_features: list[str] | None = None


class CryptoInfo(KeycloakModel):
    crypto_provider: str | None = None
    supported_keystore_types: list[str] | None = None


class ServerInfoRepresentation(KeycloakModel):
    """Subset of ``admin/serverinfo``; themes, locales and providers are
    left in the extra fields."""

    system_info: SystemInfo | None = None
    memory_info: MemoryInfo | None = None
    profile_info: ProfileInfo | None = None
    crypto_info: CryptoInfo | None = None


# =============================================================================
# OAuth2
# =============================================================================


class TokenResponse(BaseModel):
    """Represents an OAuth2 token response.

    This is the response from the token endpoint. ``access_token`` and
    ``expires_in`` are required for a usable token.

    Example JSON:
    {
        "access_token": "eyJhbGciOiJSUzI1NiIs...",
        "expires_in": 300,
        "refresh_expires_in": 1800,
        "token_type": "Bearer",
        "not-before-policy": 0,
        "scope": "profile email"
    }
    """

    model_config = ConfigDict(
        # Allow extra fields from API that we don't explicitly define
        extra="allow",
    )

    access_token: str
    expires_in: int
    refresh_expires_in: int | None = None
    token_type: str = "Bearer"
    scope: str | None = None
