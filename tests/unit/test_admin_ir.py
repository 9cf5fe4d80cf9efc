"""Unit tests for admin backend IR types."""

import pytest
from pydantic import ValidationError

from adminspec.core.errors import InvalidFieldTypeError, MissingPropertyError
from adminspec.core.ir import (
    ACTION_ORDER,
    AdminAction,
    BackendConfig,
    BackendSpec,
    ClassNameEntry,
    EntitySpec,
    FieldOptions,
    FieldSpec,
    OptionsEntry,
    PropertyName,
    decode_entity_entry,
    decode_field_entry,
)


def _entity_data(name: str = "User") -> dict:
    return {
        "class": "App\\Entity\\User",
        "label": "Client",
        "name": name,
        "list": {"fields": {"id": {"property": "id"}}},
        "show": {"fields": {}},
        "new": {"fields": {}},
        "edit": {"fields": {"email": {"property": "email", "label": "Contact"}}},
    }


class TestRawEntries:
    """Tests for raw entry decoding."""

    def test_class_name_entry(self):
        entry = decode_entity_entry("App\\Entity\\User")

        assert isinstance(entry, ClassNameEntry)
        assert entry.to_options() == {"class": "App\\Entity\\User"}

    def test_options_entry(self):
        entry = decode_entity_entry({"class": "App\\Entity\\User", "label": "Client"})

        assert isinstance(entry, OptionsEntry)
        assert entry.to_options() == {"class": "App\\Entity\\User", "label": "Client"}

    def test_null_entry(self):
        entry = decode_entity_entry(None)

        assert isinstance(entry, ClassNameEntry)
        assert entry.class_name == ""

    def test_options_are_copied(self):
        entry = decode_entity_entry({"class": "App\\Entity\\User"})
        options = entry.to_options()
        options["label"] = "Client"

        assert "label" not in entry.to_options()

    def test_property_name_field(self):
        field = decode_field_entry("email", "list", "App\\Entity\\User")

        assert isinstance(field, PropertyName)
        assert field.name == "email"
        assert field.to_config() == {"property": "email"}

    def test_field_options(self):
        field = decode_field_entry({"property": "email", "label": "Contact"}, "list", "App\\Entity\\User")

        assert isinstance(field, FieldOptions)
        assert field.name == "email"
        assert field.to_config() == {"property": "email", "label": "Contact"}

    def test_field_without_property(self):
        with pytest.raises(MissingPropertyError):
            decode_field_entry({"label": "Contact"}, "new", "App\\Entity\\User")

    def test_field_of_wrong_type(self):
        with pytest.raises(InvalidFieldTypeError):
            decode_field_entry(3, "new", "App\\Entity\\User")


class TestBackendConfig:
    """Tests for the top-level configuration schema."""

    def test_defaults(self):
        config = BackendConfig()

        assert config.site_name == "ACME Backend"
        assert config.list_max_results == 15
        assert config.list_actions == ["edit"]
        assert config.entities == {}

    def test_null_entities(self):
        assert BackendConfig(entities=None).entities == {}

    def test_list_entities(self):
        config = BackendConfig(entities=["App\\Entity\\User"])

        assert config.entities == ["App\\Entity\\User"]

    def test_unknown_option(self):
        with pytest.raises(ValidationError):
            BackendConfig.model_validate({"site_title": "Backend"})

    def test_invalid_max_results(self):
        with pytest.raises(ValidationError):
            BackendConfig(list_max_results=0)


class TestCanonicalSpecs:
    """Tests for the normalized specification models."""

    def test_action_order(self):
        assert [action.value for action in ACTION_ORDER] == ["edit", "list", "new", "show"]

    def test_entity_spec(self):
        entity = EntitySpec.model_validate(_entity_data())

        assert entity.entity_class == "App\\Entity\\User"
        assert entity.label == "Client"
        assert entity.action(AdminAction.LIST).fields["id"].property_name == "id"
        assert entity.action("edit").fields["email"].model_extra == {"label": "Contact"}

    def test_entity_spec_keeps_extra_options(self):
        data = {**_entity_data(), "form": {"fields": ["id"]}}

        entity = EntitySpec.model_validate(data)

        assert entity.model_extra == {"form": {"fields": ["id"]}}

    def test_entity_spec_requires_class(self):
        data = {**_entity_data(), "class": ""}

        with pytest.raises(ValidationError):
            EntitySpec.model_validate(data)

    def test_field_key_must_match_property(self):
        data = _entity_data()
        data["list"] = {"fields": {"identifier": {"property": "id"}}}

        with pytest.raises(ValidationError):
            EntitySpec.model_validate(data)

    def test_field_spec_by_name(self):
        field = FieldSpec(property_name="id")

        assert field.property_name == "id"

    def test_backend_spec(self):
        spec = BackendSpec.model_validate(
            {
                "site_name": "Backend",
                "list_max_results": 10,
                "list_actions": ["edit", "show"],
                "entities": {"User": _entity_data()},
            }
        )

        assert spec.get_entity("User").name == "User"
        assert spec.get_entity("Client") is None

    def test_entity_key_must_match_name(self):
        with pytest.raises(ValidationError):
            BackendSpec.model_validate(
                {
                    "site_name": "Backend",
                    "list_max_results": 10,
                    "list_actions": [],
                    "entities": {"Client": _entity_data()},
                }
            )
