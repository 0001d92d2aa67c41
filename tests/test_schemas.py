"""Validate the schema registry and boundary validation."""

import json

import pytest

from tapprint_shared.contracts import ApiResponse, Layout, PaginatedResponse, User
from tapprint_shared.core.config import reset_settings
from tapprint_shared.core.exceptions import (
    ContractError,
    ContractValidationError,
    ConventionViolationError,
    UnknownContractError,
)
from tapprint_shared.schemas import (
    ROOT_FIELD,
    contract_names,
    export_schemas,
    get_contract,
    schema_for,
    validate_api_response,
    validate_paginated,
    validate_payload,
)


def _fields(exc_info):
    return [e.field for e in exc_info.value.errors]


class TestRegistry:
    """Contract lookup and schema generation."""

    def test_every_contract_resolves(self):
        for name in contract_names():
            assert get_contract(name) is not None

    def test_envelopes_take_item_contracts(self):
        assert get_contract("ApiResponse", "Layout") is ApiResponse[Layout]
        assert get_contract("PaginatedResponse", "Layout") is PaginatedResponse[Layout]

    def test_unknown_contract(self):
        with pytest.raises(UnknownContractError) as exc_info:
            get_contract("Invoice")
        assert exc_info.value.name == "Invoice"

        with pytest.raises(UnknownContractError):
            get_contract("ApiResponse", "Invoice")

    def test_non_envelope_rejects_item_contract(self):
        with pytest.raises(ContractError):
            get_contract("Layout", "User")

    def test_schema_uses_wire_names(self):
        schema = schema_for("User")

        assert "createdAt" in schema["required"]
        assert "created_at" not in schema["properties"]
        assert schema["additionalProperties"] is False
        assert schema["$defs"]["UserRole"]["enum"] == ["admin", "user"]

    def test_optional_fields_not_required(self):
        schema = schema_for("Layout")
        assert "description" not in schema["required"]
        assert "categoryId" not in schema["required"]
        assert "isPublic" in schema["required"]

    def test_export(self, tmp_path):
        written = export_schemas(tmp_path / "schema")

        assert len(written) == len(contract_names())
        layout_schema = json.loads((tmp_path / "schema" / "Layout.schema.json").read_text())
        assert layout_schema["title"] == "Layout"


class TestValidatePayload:
    """Raw wire payloads at the boundary."""

    def test_valid_payload(self, layout_payload):
        layout = validate_payload("Layout", layout_payload)
        assert isinstance(layout, Layout)
        assert layout.name == "Shipping label"

    def test_bad_enum_value(self, user_payload):
        with pytest.raises(ContractValidationError) as exc_info:
            validate_payload("User", {**user_payload, "role": "owner"})

        assert _fields(exc_info) == ["role"]
        assert exc_info.value.contract == "User"

    def test_missing_field_reported_at_root(self, user_payload):
        del user_payload["name"]
        with pytest.raises(ContractValidationError) as exc_info:
            validate_payload("User", user_payload)

        assert _fields(exc_info) == [ROOT_FIELD]
        assert "'name'" in exc_info.value.errors[0].message

    def test_unknown_field(self, user_payload):
        with pytest.raises(ContractValidationError):
            validate_payload("User", {**user_payload, "password": "hunter2"})

    def test_snake_case_rejected_on_the_wire(self, user_payload):
        user_payload["created_at"] = user_payload.pop("createdAt")
        with pytest.raises(ContractValidationError):
            validate_payload("User", user_payload)

    def test_bad_timestamp_caught_by_model(self, user_payload):
        with pytest.raises(ContractValidationError) as exc_info:
            validate_payload("User", {**user_payload, "createdAt": "yesterday"})

        assert _fields(exc_info) == ["createdAt"]
        assert "model validation" in exc_info.value.message

    def test_error_message_lists_fields(self, user_payload):
        with pytest.raises(ContractValidationError) as exc_info:
            validate_payload("User", {**user_payload, "role": "owner"})
        assert "role:" in str(exc_info.value)


class TestEnvelopes:
    """ApiResponse and PaginatedResponse with item contracts."""

    def test_successful_response(self, layout_payload):
        response = validate_api_response({"success": True, "data": layout_payload}, "Layout")

        assert isinstance(response.data, Layout)
        assert response.unwrap().user_id == "usr_1"

    def test_failed_response(self):
        response = validate_api_response({"success": False, "error": "not found"}, "Layout")
        assert response.data is None
        assert response.error == "not found"

    def test_bad_nested_data(self, layout_payload):
        del layout_payload["content"]["version"]
        with pytest.raises(ContractValidationError) as exc_info:
            validate_api_response({"success": True, "data": layout_payload}, "Layout")

        assert all(field.startswith("data") for field in _fields(exc_info))

    def test_list_item_contract(self, printer_payload):
        response = validate_api_response({"success": True, "data": [printer_payload]}, "Printer[]")
        assert response.data[0].make_model == "Zebra ZD421"

    def test_paginated(self, user_payload):
        payload = {
            "data": [user_payload],
            "pagination": {"page": 1, "limit": 10, "total": 1, "pages": 1},
        }
        response = validate_paginated(payload, "User")

        assert isinstance(response.data[0], User)
        assert response.pagination.total == 1

    def test_nested_envelope(self, layout_payload):
        assert (
            get_contract("ApiResponse", "PaginatedResponse[Layout]")
            is ApiResponse[PaginatedResponse[Layout]]
        )
        payload = {
            "success": True,
            "data": {
                "data": [layout_payload],
                "pagination": {"page": 1, "limit": 10, "total": 1, "pages": 1},
            },
        }
        response = validate_api_response(payload, "PaginatedResponse[Layout]", conventions=True)

        assert isinstance(response.data.data[0], Layout)
        assert response.data.pagination.pages == 1

    def test_nested_envelope_item_must_exist(self):
        with pytest.raises(UnknownContractError):
            get_contract("ApiResponse", "PaginatedResponse[Invoice]")


class TestConventionPolicy:
    """Conventions are checked only when asked for."""

    def test_off_by_default(self, settings_payload):
        settings = validate_payload("PrintSettings", {**settings_payload, "copies": 0})
        assert settings.copies == 0

    def test_explicit_flag(self, settings_payload):
        with pytest.raises(ConventionViolationError) as exc_info:
            validate_payload("PrintSettings", {**settings_payload, "copies": 0}, conventions=True)
        assert _fields(exc_info) == ["copies"]

    def test_enabled_from_environment(self, monkeypatch, printer_payload):
        monkeypatch.setenv("TAPPRINT_ENFORCE_CONVENTIONS", "yes")
        reset_settings()
        fleet = [printer_payload, {**printer_payload, "name": "Zebra-2"}]

        with pytest.raises(ConventionViolationError) as exc_info:
            validate_api_response({"success": True, "data": fleet}, "Printer[]")
        assert _fields(exc_info) == ["data.isDefault"]

    def test_response_data_requirement_can_be_relaxed(self, monkeypatch):
        monkeypatch.setenv("TAPPRINT_ENFORCE_CONVENTIONS", "true")
        monkeypatch.setenv("TAPPRINT_REQUIRE_RESPONSE_DATA", "false")
        reset_settings()

        response = validate_api_response({"success": True, "message": "deleted"})
        assert response.data is None

    def test_pagination_pages(self, user_payload):
        payload = {
            "data": [user_payload],
            "pagination": {"page": 1, "limit": 10, "total": 11, "pages": 1},
        }
        with pytest.raises(ConventionViolationError) as exc_info:
            validate_paginated(payload, "User", conventions=True)
        assert _fields(exc_info) == ["pagination.pages"]

    def test_later_printer_page_without_default(self, printer_payload):
        payload = {
            "data": [{**printer_payload, "isDefault": False}],
            "pagination": {"page": 2, "limit": 1, "total": 2, "pages": 2},
        }
        page = validate_paginated(payload, "Printer", conventions=True)
        assert page.data[0].is_default is False
