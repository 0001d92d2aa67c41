"""Base classes shared by every TapPrint contract model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContractModel(BaseModel):
    """Immutable wire shape.

    Attributes are snake_case in Python and camelCase on the wire. Unknown
    fields are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        use_enum_values=True,
    )

    def to_wire(self) -> dict:
        """Serialize to the JSON-compatible camelCase form.

        Timestamps are parsed on the way in, so they come back as normalized
        ISO-8601 text: "2024-05-01T10:00:00.000Z" is written as
        "2024-05-01T10:00:00Z". The instant is preserved, the exact text is not.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BaseEntity(ContractModel):
    """Server-owned record with an identifier and timestamps."""

    id: str
    created_at: datetime
    updated_at: datetime


# Python attribute names of the fields the server assigns
SERVER_ASSIGNED_FIELDS = ("id", "created_at", "updated_at")
