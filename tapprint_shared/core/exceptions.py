"""
Custom exceptions for TapPrint shared contracts.

Provides a hierarchy of exceptions raised while resolving, validating and
decoding contract payloads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from tapprint_shared.contracts.common import ValidationError


class TapPrintError(Exception):
    """Base exception for all TapPrint errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TapPrintError):
    """Raised when there are configuration issues."""
    pass


class ContractError(TapPrintError):
    """Base class for contract resolution and validation errors."""
    pass


class UnknownContractError(ContractError):
    """Raised when a contract name is not registered."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"Unknown contract: {name}", **kwargs)
        self.name = name


class ContractValidationError(ContractError):
    """A payload does not match its contract."""

    def __init__(
        self,
        message: str,
        errors: Optional[List["ValidationError"]] = None,
        contract: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.errors = list(errors or [])
        self.contract = contract

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        lines = [self.message]
        lines.extend(f"  {e.field}: {e.message}" for e in self.errors)
        return "\n".join(lines)


class ConventionViolationError(ContractValidationError):
    """A structurally valid payload breaks a backend convention."""
    pass


class PayloadDecodeError(ContractError):
    """An opaque payload does not match the model registered for it."""

    def __init__(self, kind: str, key: str, message: str, **kwargs):
        super().__init__(f"{kind}[{key}]: {message}", **kwargs)
        self.kind = kind
        self.key = key


class FixtureError(TapPrintError):
    """A fixture file is missing, unreadable or malformed."""
    pass


class ApiError(TapPrintError):
    """Raised when unwrapping an unsuccessful API response."""

    def __init__(self, error: Optional[str], message: Optional[str] = None, **kwargs):
        super().__init__(error or message or "API request failed", **kwargs)
        self.error = error
        self.api_message = message
