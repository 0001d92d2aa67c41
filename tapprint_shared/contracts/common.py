"""
Generic API envelopes and field-level error descriptions.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from tapprint_shared.contracts.base import ContractModel
from tapprint_shared.core.exceptions import ApiError

T = TypeVar("T")


class ValidationError(ContractModel):
    """Field-level validation failure."""

    field: str
    message: str


class ApiResponse(ContractModel, Generic[T]):
    """Standard API response envelope.

    By convention ``data`` is present only when ``success`` is true and
    ``error`` only when it is false; the type itself does not enforce this.
    """

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "ApiResponse":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str, message: Optional[str] = None) -> "ApiResponse":
        return cls(success=False, error=error, message=message)

    def unwrap(self):
        """Return ``data`` or raise ApiError for an unsuccessful response."""
        if not self.success:
            raise ApiError(self.error, self.message)
        return self.data
