"""Tests for the ProviderMetadata JSON Schema descriptor."""

from __future__ import annotations

from provider_dto.base.enums import ProviderTypeEnum
from provider_dto.base.models import ProviderMetadata


def test_schema_required_is_exactly_id_name_type():
    schema = ProviderMetadata.get_json_schema()
    assert schema["type"] == "object"
    assert set(schema["required"]) == {"id", "name", "type"}
    assert len(schema["required"]) == 3


def test_schema_lists_every_flat_record_key():
    schema = ProviderMetadata.get_json_schema()
    record = ProviderMetadata("x", "X", ProviderTypeEnum.CLOUD).to_array()
    assert list(schema["properties"]) == list(record)
    for prop in schema["properties"].values():
        assert prop["description"]


def test_schema_enum_constraints():
    props = ProviderMetadata.get_json_schema()["properties"]

    assert props["type"] == {
        "type": "string",
        "enum": ["cloud", "server", "client"],
        "description": "The provider type (cloud, server, or client).",
    }
    assert props["authenticationMethod"]["type"] == ["string", "null"]
    assert props["authenticationMethod"]["enum"] == ["api_key", None]
    assert props["id"]["type"] == "string"
    assert props["credentialsUrl"]["type"] == "string"


def test_schema_is_independent_of_instance_state():
    a = ProviderMetadata("a", "A", ProviderTypeEnum.CLOUD)
    b = ProviderMetadata("b", "B", ProviderTypeEnum.CLIENT, description="other")
    assert a.get_json_schema() == b.get_json_schema() == ProviderMetadata.get_json_schema()


def test_schema_returns_fresh_copy():
    first = ProviderMetadata.get_json_schema()
    first["required"].append("description")
    assert ProviderMetadata.get_json_schema()["required"] == ["id", "name", "type"]
