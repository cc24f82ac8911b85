from keycloak_admin.services.client_roles import ClientRolesService
from keycloak_admin.services.client_scopes import ClientScopesService
from keycloak_admin.services.clients import ClientsService
from keycloak_admin.services.groups import GroupsService
from keycloak_admin.services.permissions import PermissionsService
from keycloak_admin.services.policies import PoliciesService
from keycloak_admin.services.realms import RealmsService
from keycloak_admin.services.resources import ResourcesService
from keycloak_admin.services.roles import RolesService
from keycloak_admin.services.scopes import ScopesService
from keycloak_admin.services.server_info import ServerInfoService
from keycloak_admin.services.users import UsersService

__all__ = [
    "ClientRolesService",
    "ClientScopesService",
    "ClientsService",
    "GroupsService",
    "PermissionsService",
    "PoliciesService",
    "RealmsService",
    "ResourcesService",
    "RolesService",
    "ScopesService",
    "ServerInfoService",
    "UsersService",
]
