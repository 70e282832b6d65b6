"""Tests for the ProviderMetadata DTO.

Covers construction, flat-record conversion in both directions, required and
enum field enforcement, optional defaulting, and immutability.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from provider_dto.base.errors import InvalidEnumValueError, MissingFieldError
from provider_dto.base.enums import ProviderTypeEnum, RequestAuthenticationMethod
from provider_dto.base.models import ProviderMetadata


def test_from_array_minimal_record_matches_expected_scenario():
    meta = ProviderMetadata.from_array({"id": "openai", "name": "OpenAI", "type": "cloud"})

    assert meta.id == "openai"
    assert meta.name == "OpenAI"
    assert meta.type is ProviderTypeEnum.CLOUD
    assert meta.description is None
    assert meta.credentials_url is None
    assert meta.authentication_method is None
    assert meta.to_array() == {
        "id": "openai",
        "name": "OpenAI",
        "description": None,
        "type": "cloud",
        "credentialsUrl": None,
        "authenticationMethod": None,
    }


def test_from_array_full_record(openai_record):
    meta = ProviderMetadata.from_array(openai_record)

    assert meta.description == "Hosted GPT models."
    assert meta.credentials_url == "https://platform.openai.com/api-keys"
    assert meta.authentication_method is RequestAuthenticationMethod.API_KEY


def test_to_array_key_order_and_enum_strings(openai_record):
    out = ProviderMetadata.from_array(openai_record).to_array()

    assert list(out) == ["id", "name", "description", "type", "credentialsUrl", "authenticationMethod"]
    assert out["type"] == "cloud"
    assert type(out["type"]) is str
    assert out["authenticationMethod"] == "api_key"
    assert type(out["authenticationMethod"]) is str


@pytest.mark.parametrize(
    "meta",
    [
        ProviderMetadata("openai", "OpenAI", ProviderTypeEnum.CLOUD),
        ProviderMetadata(
            "ollama",
            "Ollama",
            ProviderTypeEnum.SERVER,
            credentials_url=None,
            authentication_method=None,
            description="Local daemon.",
        ),
        ProviderMetadata(
            "webllm",
            "WebLLM",
            ProviderTypeEnum.CLIENT,
            "https://example.org/keys",
            RequestAuthenticationMethod.API_KEY,
            "Runs in the browser.",
        ),
    ],
)
def test_round_trip_preserves_every_field(meta):
    again = ProviderMetadata.from_array(meta.to_array())

    assert again == meta
    assert again.to_array() == meta.to_array()


@pytest.mark.parametrize("missing", ["id", "name", "type"])
def test_from_array_missing_required_key(missing, openai_record):
    del openai_record[missing]

    with pytest.raises(MissingFieldError) as excinfo:
        ProviderMetadata.from_array(openai_record)

    assert excinfo.value.field == missing
    assert excinfo.value.dto == "ProviderMetadata"


def test_missing_error_reports_first_and_all_keys():
    with pytest.raises(MissingFieldError) as excinfo:
        ProviderMetadata.from_array({"description": "orphan"})

    assert excinfo.value.field == "id"
    assert excinfo.value.missing == ("id", "name", "type")


def test_required_keys_present_with_any_optional_subset():
    meta = ProviderMetadata.from_array(
        {"id": "x", "name": "X", "type": "server", "credentialsUrl": "https://x.test"}
    )
    assert meta.credentials_url == "https://x.test"
    assert meta.description is None


def test_from_array_rejects_unknown_type():
    with pytest.raises(InvalidEnumValueError) as excinfo:
        ProviderMetadata.from_array({"id": "x", "name": "X", "type": "mainframe"})

    err = excinfo.value
    assert err.value == "mainframe"
    assert err.field == "type"
    assert err.enum is ProviderTypeEnum


def test_from_array_type_is_case_sensitive():
    with pytest.raises(InvalidEnumValueError):
        ProviderMetadata.from_array({"id": "x", "name": "X", "type": "Cloud"})


def test_from_array_rejects_unknown_authentication_method():
    with pytest.raises(InvalidEnumValueError) as excinfo:
        ProviderMetadata.from_array(
            {"id": "x", "name": "X", "type": "cloud", "authenticationMethod": "oauth"}
        )

    assert excinfo.value.field == "authenticationMethod"
    assert excinfo.value.enum is RequestAuthenticationMethod


def test_absent_and_null_authentication_method_are_equivalent():
    absent = ProviderMetadata.from_array({"id": "x", "name": "X", "type": "cloud"})
    explicit = ProviderMetadata.from_array(
        {"id": "x", "name": "X", "type": "cloud", "authenticationMethod": None}
    )

    assert absent == explicit
    assert explicit.to_array()["authenticationMethod"] is None


def test_from_array_ignores_unknown_keys():
    meta = ProviderMetadata.from_array({"id": "x", "name": "X", "type": "cloud", "homepage": "https://x"})
    assert "homepage" not in meta.to_array()


def test_from_array_accepts_enum_members():
    meta = ProviderMetadata.from_array(
        {
            "id": "x",
            "name": "X",
            "type": ProviderTypeEnum.SERVER,
            "authenticationMethod": RequestAuthenticationMethod.API_KEY,
        }
    )
    assert meta.type is ProviderTypeEnum.SERVER
    assert meta.authentication_method is RequestAuthenticationMethod.API_KEY


def test_direct_construction_keyword_and_positional_agree():
    positional = ProviderMetadata("x", "X", ProviderTypeEnum.CLOUD, "https://x.test")
    keyword = ProviderMetadata(
        id="x", name="X", type=ProviderTypeEnum.CLOUD, credentials_url="https://x.test"
    )
    assert positional == keyword


def test_instances_are_immutable_and_hashable():
    meta = ProviderMetadata("x", "X", ProviderTypeEnum.CLOUD)

    with pytest.raises(ValidationError):
        meta.name = "Y"  # type: ignore[misc]

    assert hash(meta) == hash(ProviderMetadata("x", "X", ProviderTypeEnum.CLOUD))
    assert len({meta, ProviderMetadata("x", "X", ProviderTypeEnum.CLOUD)}) == 1


def test_from_array_rejects_non_mapping():
    with pytest.raises(TypeError):
        ProviderMetadata.from_array([("id", "x")])  # type: ignore[arg-type]


def test_from_array_wrong_value_type_raises_validation_error():
    with pytest.raises(ValidationError):
        ProviderMetadata.from_array({"id": 1, "name": "X", "type": "cloud"})
