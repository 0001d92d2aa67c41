"""
JSON Schema registry and boundary validation for TapPrint contracts.

Raw wire payloads are checked twice: first against the JSON Schema exported
from the contract model, then by the pydantic model itself. Failures are
reported as a list of field-level ``ValidationError`` contracts.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

import jsonschema
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tapprint_shared.contracts import (
    ApiResponse,
    Category,
    CreateLayoutInput,
    CreatePrintSetInput,
    Layout,
    LayoutContent,
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
    PDFGenerationRequest,
    PDFGenerationResponse,
    Printer,
    PrinterCapabilities,
    PrintSet,
    PrintSettings,
    UpdateLayoutInput,
    UpdatePrintSetInput,
    User,
    ValidationError,
    WebSocketMessage,
    check_conventions,
)
from tapprint_shared.core.config import get_settings
from tapprint_shared.core.exceptions import (
    ContractError,
    ContractValidationError,
    ConventionViolationError,
    UnknownContractError,
)
from tapprint_shared.core.logging import contract_context
from tapprint_shared.core.logging import schemas_logger as logger

CONTRACTS: Dict[str, Type[BaseModel]] = {
    "User": User,
    "Layout": Layout,
    "LayoutContent": LayoutContent,
    "PrintSet": PrintSet,
    "PrintSettings": PrintSettings,
    "Category": Category,
    "Printer": Printer,
    "PrinterCapabilities": PrinterCapabilities,
    "WebSocketMessage": WebSocketMessage,
    "PDFGenerationRequest": PDFGenerationRequest,
    "PDFGenerationResponse": PDFGenerationResponse,
    "ValidationError": ValidationError,
    "PaginationParams": PaginationParams,
    "PaginationMeta": PaginationMeta,
    "CreateLayoutInput": CreateLayoutInput,
    "UpdateLayoutInput": UpdateLayoutInput,
    "CreatePrintSetInput": CreatePrintSetInput,
    "UpdatePrintSetInput": UpdatePrintSetInput,
}

# Envelopes parameterized by an item contract
ENVELOPES: Dict[str, Type[BaseModel]] = {
    "ApiResponse": ApiResponse,
    "PaginatedResponse": PaginatedResponse,
}

ROOT_FIELD = "<root>"


def contract_names() -> List[str]:
    return sorted(list(CONTRACTS) + list(ENVELOPES))


def contract_label(name: str, of: Optional[str] = None) -> str:
    return f"{name}[{of}]" if of else name


def _resolve_item(of: str) -> Any:
    # "Printer[]" is a list of printers
    if of.endswith("[]"):
        return List[_resolve_item(of[:-2])]
    # "PaginatedResponse[Layout]" is an envelope nested in another
    envelope, bracket, inner = of.partition("[")
    if bracket and inner.endswith("]") and envelope in ENVELOPES:
        return ENVELOPES[envelope][_resolve_item(inner[:-1])]
    if of in CONTRACTS:
        return CONTRACTS[of]
    if of in ENVELOPES:
        return ENVELOPES[of]
    raise UnknownContractError(of)


@lru_cache(maxsize=None)
def get_contract(name: str, of: Optional[str] = None) -> Type[BaseModel]:
    """Resolve a contract name, and an item contract for envelopes, to a model."""
    if name in ENVELOPES:
        envelope = ENVELOPES[name]
        return envelope[_resolve_item(of)] if of else envelope
    if name not in CONTRACTS:
        raise UnknownContractError(name)
    if of:
        raise ContractError(f"{name} does not take an item contract", details={"of": of})
    return CONTRACTS[name]


def schema_for(name: str, of: Optional[str] = None) -> Dict[str, Any]:
    """JSON Schema (draft 2020-12) of a contract in its wire form."""
    schema = get_contract(name, of).model_json_schema(by_alias=True)
    schema.setdefault("$schema", "https://json-schema.org/draft/2020-12/schema")
    return schema


@lru_cache(maxsize=None)
def get_validator(name: str, of: Optional[str] = None) -> jsonschema.Draft202012Validator:
    schema = schema_for(name, of)
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


def _path(parts) -> str:
    return ".".join(str(p) for p in parts) or ROOT_FIELD


def _schema_errors(name: str, of: Optional[str], payload: Any) -> List[ValidationError]:
    errors = get_validator(name, of).iter_errors(payload)
    return [
        ValidationError(field=_path(e.absolute_path), message=e.message)
        for e in sorted(errors, key=lambda e: _path(e.absolute_path))
    ]


def validate_payload(
    name: str,
    payload: Any,
    of: Optional[str] = None,
    conventions: Optional[bool] = None,
) -> BaseModel:
    """
    Validate a raw wire payload and return the contract instance.

    Args:
        name: Contract name, e.g. "Layout" or "ApiResponse"
        payload: Decoded JSON value
        of: Item contract for envelopes, e.g. "Layout", "Printer[]" or
            "PaginatedResponse[Layout]"
        conventions: Check conventions too; defaults to TAPPRINT_ENFORCE_CONVENTIONS

    Raises:
        ContractValidationError: the payload does not match the contract
        ConventionViolationError: the payload breaks a convention
    """
    label = contract_label(name, of)
    model = get_contract(name, of)

    with contract_context(label):
        errors = _schema_errors(name, of, payload)
        if errors:
            logger.warning("payload_rejected", stage="schema", errors=len(errors))
            raise ContractValidationError(
                f"{label} payload failed schema validation", errors=errors, contract=label
            )

        try:
            instance = model.model_validate(payload)
        except PydanticValidationError as e:
            errors = [
                ValidationError(field=_path(err["loc"]), message=err["msg"]) for err in e.errors()
            ]
            logger.warning("payload_rejected", stage="model", errors=len(errors))
            raise ContractValidationError(
                f"{label} payload failed model validation", errors=errors, contract=label
            ) from e

        policy = get_settings().validation
        enforce = policy.enforce_conventions if conventions is None else conventions
        if enforce:
            violations = check_conventions(instance, require_data=policy.require_response_data)
            if violations:
                logger.warning("payload_rejected", stage="conventions", errors=len(violations))
                raise ConventionViolationError(
                    f"{label} payload breaks conventions", errors=violations, contract=label
                )

        logger.debug("payload_validated")
    return instance


def validate_api_response(payload: Any, data_contract: Optional[str] = None, **kwargs) -> ApiResponse:
    """Validate an ``ApiResponse`` envelope whose data is ``data_contract``."""
    return validate_payload("ApiResponse", payload, of=data_contract, **kwargs)


def validate_paginated(payload: Any, item_contract: str, **kwargs) -> PaginatedResponse:
    """Validate a ``PaginatedResponse`` of ``item_contract`` items."""
    return validate_payload("PaginatedResponse", payload, of=item_contract, **kwargs)


def export_schemas(out_dir: Path | str) -> List[Path]:
    """Write ``<Name>.schema.json`` for every contract into ``out_dir``."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written = []
    for name in contract_names():
        path = out / f"{name}.schema.json"
        path.write_text(json.dumps(schema_for(name), indent=2, sort_keys=True) + "\n")
        written.append(path)
    logger.info("schemas_exported", directory=str(out), count=len(written))
    return written
