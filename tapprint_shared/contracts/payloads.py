"""
Registries for opaque payload fields.

Layout content and WebSocket message data are owned by other subsystems (the
template engine and the notification dispatcher). A registry lets those
subsystems attach a model to a discriminator value without this package
constraining the payloads of anyone who does not opt in.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tapprint_shared.core.exceptions import PayloadDecodeError
from tapprint_shared.core.logging import contracts_logger as logger


def _key(key: Any) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


class PayloadRegistry:
    """Maps a discriminator value to the model of an opaque payload."""

    def __init__(self, kind: str):
        self.kind = kind
        self._models: Dict[str, Type[BaseModel]] = {}

    def register(
        self, key: str, model: Optional[Type[BaseModel]] = None
    ) -> Callable[[Type[BaseModel]], Type[BaseModel]]:
        """Register ``model`` for ``key``; usable as a class decorator."""

        def _register(cls: Type[BaseModel]) -> Type[BaseModel]:
            self._models[_key(key)] = cls
            logger.debug("payload_model_registered", kind=self.kind, key=_key(key), model=cls.__name__)
            return cls

        if model is not None:
            return _register(model)
        return _register

    def unregister(self, key: str) -> None:
        self._models.pop(_key(key), None)

    def get(self, key: str) -> Optional[Type[BaseModel]]:
        return self._models.get(_key(key))

    def keys(self):
        return sorted(self._models)

    def __contains__(self, key: object) -> bool:
        return _key(key) in self._models

    def decode(self, key: str, data: Any) -> Any:
        """Validate ``data`` against the model for ``key``.

        Data for an unregistered key is returned unchanged.
        """
        model = self.get(key)
        if model is None:
            return data
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise PayloadDecodeError(
                self.kind, _key(key), str(e), details={"errors": e.errors()}
            ) from e


layout_content_payloads = PayloadRegistry("layout_content")
websocket_payloads = PayloadRegistry("websocket")
