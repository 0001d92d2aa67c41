"""Print job contracts: a layout, the records to merge into it and settings."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from tapprint_shared.contracts.base import BaseEntity, ContractModel
from tapprint_shared.contracts.derived import derive_create_model, derive_update_model


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PrintQuality(str, Enum):
    DRAFT = "draft"
    NORMAL = "normal"
    HIGH = "high"


class PrintSettings(ContractModel):
    """Print job configuration.

    ``copies`` is expected to be at least 1; see ``check_conventions``.
    """

    copies: int
    printer_name: Optional[str] = None
    paper_size: str
    orientation: Orientation
    quality: PrintQuality


class PrintSet(BaseEntity):
    """A bound print job."""

    name: str
    layout_id: str
    category_id: Optional[str] = None
    data: List[Any]
    settings: PrintSettings
    user_id: str

    @property
    def record_count(self) -> int:
        return len(self.data)


CreatePrintSetInput = derive_create_model(PrintSet, "CreatePrintSetInput")
UpdatePrintSetInput = derive_update_model(CreatePrintSetInput, "UpdatePrintSetInput")
