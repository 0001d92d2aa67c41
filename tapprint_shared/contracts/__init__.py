"""
Shared domain contracts for the TapPrint client and server.

These modules define stable payload shapes that both sides rely on when
exchanging data over REST and WebSocket.
"""

from tapprint_shared.contracts.base import SERVER_ASSIGNED_FIELDS, BaseEntity, ContractModel
from tapprint_shared.contracts.categories import Category
from tapprint_shared.contracts.common import ApiResponse, ValidationError
from tapprint_shared.contracts.conventions import (
    check_api_response,
    check_conventions,
    check_pagination,
    check_pdf_response,
    check_print_settings,
    check_printer_fleet,
)
from tapprint_shared.contracts.derived import (
    apply_update,
    derive_create_model,
    derive_update_model,
    to_create_input,
)
from tapprint_shared.contracts.layouts import (
    CreateLayoutInput,
    Layout,
    LayoutContent,
    UpdateLayoutInput,
)
from tapprint_shared.contracts.pagination import (
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
    SortOrder,
)
from tapprint_shared.contracts.payloads import (
    PayloadRegistry,
    layout_content_payloads,
    websocket_payloads,
)
from tapprint_shared.contracts.pdf import PDFGenerationRequest, PDFGenerationResponse
from tapprint_shared.contracts.print_sets import (
    CreatePrintSetInput,
    Orientation,
    PrintQuality,
    PrintSet,
    PrintSettings,
    UpdatePrintSetInput,
)
from tapprint_shared.contracts.printers import (
    Printer,
    PrinterCapabilities,
    PrinterStatus,
    default_printer,
)
from tapprint_shared.contracts.users import User, UserRole
from tapprint_shared.contracts.websocket import MessageType, WebSocketMessage

__all__ = [
    "ApiResponse",
    "BaseEntity",
    "Category",
    "ContractModel",
    "CreateLayoutInput",
    "CreatePrintSetInput",
    "Layout",
    "LayoutContent",
    "MessageType",
    "Orientation",
    "PDFGenerationRequest",
    "PDFGenerationResponse",
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationParams",
    "PayloadRegistry",
    "PrintQuality",
    "PrintSet",
    "PrintSettings",
    "Printer",
    "PrinterCapabilities",
    "PrinterStatus",
    "SERVER_ASSIGNED_FIELDS",
    "SortOrder",
    "UpdateLayoutInput",
    "UpdatePrintSetInput",
    "User",
    "UserRole",
    "ValidationError",
    "WebSocketMessage",
    "apply_update",
    "check_api_response",
    "check_conventions",
    "check_pagination",
    "check_pdf_response",
    "check_print_settings",
    "check_printer_fleet",
    "default_printer",
    "derive_create_model",
    "derive_update_model",
    "layout_content_payloads",
    "to_create_input",
    "websocket_payloads",
]
