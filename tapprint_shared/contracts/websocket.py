"""WebSocket push notification envelope."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from tapprint_shared.contracts.base import ContractModel
from tapprint_shared.contracts.payloads import websocket_payloads


class MessageType(str, Enum):
    PRINT_STATUS = "print_status"
    PRINTER_UPDATE = "printer_update"
    ERROR = "error"


class WebSocketMessage(ContractModel):
    """Notification tagged by ``type``; the shape of ``data`` depends on it."""

    type: MessageType
    data: Any
    timestamp: datetime

    @classmethod
    def create(cls, type: MessageType, data: Any) -> "WebSocketMessage":
        return cls(type=type, data=data, timestamp=datetime.now(timezone.utc))

    @classmethod
    def print_status(cls, data: Any) -> "WebSocketMessage":
        return cls.create(MessageType.PRINT_STATUS, data)

    @classmethod
    def printer_update(cls, data: Any) -> "WebSocketMessage":
        return cls.create(MessageType.PRINTER_UPDATE, data)

    @classmethod
    def error(cls, data: Any) -> "WebSocketMessage":
        return cls.create(MessageType.ERROR, data)

    def decode_data(self) -> Any:
        """Decode ``data`` with the model registered for ``type``, if any."""
        return websocket_payloads.decode(self.type, self.data)
