"""
Checks for invariants the wire types leave to convention.

None of these are enforced when a model is built. They hold for a well-behaved
backend and are checked on demand, or at the boundary when
``TAPPRINT_ENFORCE_CONVENTIONS`` is set.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from tapprint_shared.contracts.common import ApiResponse, ValidationError
from tapprint_shared.contracts.pagination import PaginatedResponse, PaginationMeta
from tapprint_shared.contracts.pdf import PDFGenerationRequest, PDFGenerationResponse
from tapprint_shared.contracts.print_sets import PrintSet, PrintSettings
from tapprint_shared.contracts.printers import Printer


def check_api_response(
    response: ApiResponse, require_data: bool = True, prefix: str = ""
) -> List[ValidationError]:
    """``data`` goes with success, ``error`` with failure."""
    errors = []
    if response.success:
        if require_data and response.data is None:
            errors.append(ValidationError(field=f"{prefix}data", message="successful response has no data"))
        if response.error is not None:
            errors.append(ValidationError(field=f"{prefix}error", message="successful response carries an error"))
    else:
        if response.data is not None:
            errors.append(ValidationError(field=f"{prefix}data", message="failed response carries data"))
        if not response.error:
            errors.append(ValidationError(field=f"{prefix}error", message="failed response has no error"))
    if response.data is not None:
        errors.extend(_check_value(response.data, f"{prefix}data."))
    return errors


def check_pdf_response(response: PDFGenerationResponse, prefix: str = "") -> List[ValidationError]:
    errors = []
    if response.success and response.error:
        errors.append(ValidationError(field=f"{prefix}error", message="successful render carries an error"))
    if not response.success:
        if response.pdf_url is not None:
            errors.append(ValidationError(field=f"{prefix}pdfUrl", message="failed render has a pdfUrl"))
        if not response.error:
            errors.append(ValidationError(field=f"{prefix}error", message="failed render has no error"))
    return errors


def check_print_settings(settings: PrintSettings, prefix: str = "") -> List[ValidationError]:
    if settings.copies < 1:
        return [ValidationError(field=f"{prefix}copies", message=f"copies must be at least 1, got {settings.copies}")]
    return []


def check_pagination(meta: PaginationMeta, prefix: str = "") -> List[ValidationError]:
    if meta.is_consistent:
        return []
    expected = PaginationMeta.expected_pages(meta.total, meta.limit)
    return [
        ValidationError(
            field=f"{prefix}pages",
            message=f"expected {expected} pages for total={meta.total} limit={meta.limit}, got {meta.pages}",
        )
    ]


def check_printer_fleet(printers: Sequence[Printer], prefix: str = "") -> List[ValidationError]:
    """A non-empty fleet has exactly one default printer."""
    if not printers:
        return []
    defaults = [p.name for p in printers if p.is_default]
    if len(defaults) == 1:
        return []
    if not defaults:
        message = "no default printer"
    else:
        message = f"{len(defaults)} default printers: {', '.join(defaults)}"
    return [ValidationError(field=f"{prefix}isDefault", message=message)]


def _check_value(value: Any, prefix: str, require_data: bool = True) -> List[ValidationError]:
    if isinstance(value, ApiResponse):
        return check_api_response(value, require_data=require_data, prefix=prefix)
    if isinstance(value, PaginatedResponse):
        errors = check_pagination(value.pagination, prefix=f"{prefix}pagination.")
        # A page is a slice of the fleet, so only its items are checked
        for i, item in enumerate(value.data):
            errors.extend(_check_value(item, f"{prefix}data.{i}."))
        return errors
    if isinstance(value, PaginationMeta):
        return check_pagination(value, prefix=prefix)
    if isinstance(value, PDFGenerationResponse):
        return check_pdf_response(value, prefix=prefix)
    if isinstance(value, (PrintSet, PDFGenerationRequest)):
        return check_print_settings(value.settings, prefix=f"{prefix}settings.")
    if isinstance(value, PrintSettings):
        return check_print_settings(value, prefix=prefix)
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(v, Printer) for v in value):
            return check_printer_fleet(value, prefix=prefix)
        errors = []
        for i, item in enumerate(value):
            errors.extend(_check_value(item, f"{prefix}{i}."))
        return errors
    return []


def check_conventions(value: Any, require_data: bool = True) -> List[ValidationError]:
    """Return every convention ``value`` breaks; an empty list means none."""
    return _check_value(value, "", require_data=require_data)
