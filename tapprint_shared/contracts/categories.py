"""Category contracts."""

from __future__ import annotations

from typing import Optional

from tapprint_shared.contracts.base import BaseEntity


class Category(BaseEntity):
    """User-defined grouping of layouts and print sets."""

    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    user_id: str
