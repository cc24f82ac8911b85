"""Tests for the Pydantic representations."""

from keycloak_admin.keycloak_models import (
    Configuration,
    DecisionStrategy,
    GroupRepresentation,
    Logic,
    PolicyRepresentation,
    ResourceRepresentation,
    RolePolicyRepresentation,
    ServerInfoRepresentation,
    UserRepresentation,
)


def _wire(model) -> dict:
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


def test_fields_map_to_camel_case():
    user = UserRepresentation(first_name="Jane", email_verified=True)

    assert _wire(user) == {"firstName": "Jane", "emailVerified": True}


def test_wire_names_populate_fields():
    user = UserRepresentation.model_validate(
        {"id": "u1", "username": "jane", "createdTimestamp": 1609459200000}
    )

    assert user.id == "u1"
    assert user.created_timestamp == 1609459200000


def test_unknown_server_fields_survive_a_round_trip():
    user = UserRepresentation.model_validate(
        {"id": "u1", "username": "jane", "federationLink": "ldap-1"}
    )

    assert _wire(user)["federationLink"] == "ldap-1"


def test_absent_null_and_present_are_distinct():
    absent = UserRepresentation(username="jane")
    null = UserRepresentation(username="jane", email=None)
    present = UserRepresentation(username="jane", email="jane@example.com")

    assert "email" not in _wire(absent)
    assert _wire(null)["email"] is None
    assert _wire(present)["email"] == "jane@example.com"


def test_enums_serialize_to_server_tokens():
    policy = PolicyRepresentation(
        name="only-admins",
        logic=Logic.NEGATIVE,
        decision_strategy=DecisionStrategy.CONSENSUS,
    )

    assert _wire(policy) == {
        "name": "only-admins",
        "logic": "NEGATIVE",
        "decisionStrategy": "CONSENSUS",
    }


def test_enums_parse_from_server_tokens():
    policy = PolicyRepresentation.model_validate(
        {"logic": "POSITIVE", "decisionStrategy": "AFFIRMATIVE"}
    )

    assert policy.logic is Logic.POSITIVE
    assert policy.decision_strategy is DecisionStrategy.AFFIRMATIVE


def test_enum_values():
    assert [s.value for s in DecisionStrategy] == ["AFFIRMATIVE", "UNANIMOUS", "CONSENSUS"]
    assert [logic.value for logic in Logic] == ["POSITIVE", "NEGATIVE"]


def test_resource_id_uses_underscore_key():
    resource = ResourceRepresentation.model_validate({"_id": "r1", "name": "doc"})

    assert resource.id == "r1"
    assert _wire(ResourceRepresentation(id="r1")) == {"_id": "r1"}


def test_role_policy_nests_role_definitions():
    policy = RolePolicyRepresentation.model_validate(
        {
            "name": "admins",
            "type": "role",
            "roles": [{"id": "role-1", "required": True}],
        }
    )

    assert policy.roles[0].id == "role-1"
    assert policy.roles[0].required is True


def test_group_sub_groups_are_groups():
    group = GroupRepresentation.model_validate(
        {"id": "g1", "name": "parent", "subGroups": [{"id": "g2", "name": "child"}]}
    )

    assert group.sub_groups[0].name == "child"


def test_uma_configuration_keeps_snake_case_keys():
    config = Configuration.model_validate(
        {
            "issuer": "http://localhost:8080/realms/first",
            "token_endpoint": "http://localhost:8080/realms/first/protocol/openid-connect/token",
        }
    )

    assert config.token_endpoint.endswith("/token")


def test_server_info_java_vm_keys():
    info = ServerInfoRepresentation.model_validate(
        {
            "systemInfo": {"version": "24.0.1", "javaVM": "OpenJDK 64-Bit", "javaVMVersion": "17"},
            "memoryInfo": {"total": 100, "usedFormatted": "50 MB"},
        }
    )

    assert info.system_info.version == "24.0.1"
    assert info.system_info.java_vm == "OpenJDK 64-Bit"
    assert info.system_info.java_vm_version == "17"
    assert info.memory_info.used_formatted == "50 MB"
