"""Printer device descriptors."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from tapprint_shared.contracts.base import ContractModel


class PrinterStatus(str, Enum):
    IDLE = "idle"
    PRINTING = "printing"
    STOPPED = "stopped"
    ERROR = "error"


class PrinterCapabilities(ContractModel):
    """Static device capability set."""

    paper_sizes: List[str]
    resolutions: List[str]
    duplex: bool
    color: bool


class Printer(ContractModel):
    """Printer as reported by the print server."""

    name: str
    description: str
    location: Optional[str] = None
    make_model: str
    status: PrinterStatus
    is_default: bool
    capabilities: PrinterCapabilities

    def supports_paper(self, paper_size: str) -> bool:
        return paper_size in self.capabilities.paper_sizes


def default_printer(printers: Iterable[Printer]) -> Optional[Printer]:
    """Return the first printer flagged as default, or None."""
    return next((p for p in printers if p.is_default), None)
