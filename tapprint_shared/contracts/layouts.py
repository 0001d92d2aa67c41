"""
Layout contracts.

A layout is a reusable print template whose ``content.data`` belongs to the
template engine (PDFme); ``content.version`` tags its format.
"""

from __future__ import annotations

from typing import Any, Optional

from tapprint_shared.contracts.base import BaseEntity, ContractModel
from tapprint_shared.contracts.derived import derive_create_model, derive_update_model
from tapprint_shared.contracts.payloads import layout_content_payloads


class LayoutContent(ContractModel):
    """Template payload plus its format version."""

    data: Any
    version: str

    def decode(self) -> Any:
        """Decode ``data`` with the model registered for ``version``, if any."""
        return layout_content_payloads.decode(self.version, self.data)


class Layout(BaseEntity):
    """Reusable print template."""

    name: str
    description: Optional[str] = None
    content: LayoutContent
    category_id: Optional[str] = None
    user_id: str
    is_public: bool


CreateLayoutInput = derive_create_model(Layout, "CreateLayoutInput")
UpdateLayoutInput = derive_update_model(CreateLayoutInput, "UpdateLayoutInput")
