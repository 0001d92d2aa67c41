"""PDF render job request and result."""

from __future__ import annotations

from typing import Any, List, Optional

from tapprint_shared.contracts.base import ContractModel
from tapprint_shared.contracts.print_sets import PrintSettings


class PDFGenerationRequest(ContractModel):
    layout_id: str
    data: List[Any]
    settings: PrintSettings


class PDFGenerationResponse(ContractModel):
    """Render result; ``pdf_url`` is present only on success."""

    success: bool
    pdf_url: Optional[str] = None
    file_name: Optional[str] = None
    error: Optional[str] = None
