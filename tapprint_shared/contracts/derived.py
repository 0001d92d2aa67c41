"""
Mechanically derived input shapes.

Create inputs are the base entity without its server-assigned fields; update
inputs are the create input with every field optional. Both are generated from
the base model so they stay in sync with it.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Iterable, Tuple, Type, TypeVar

from pydantic import Field, create_model
from pydantic.fields import FieldInfo

from tapprint_shared.contracts.base import SERVER_ASSIGNED_FIELDS, ContractModel

M = TypeVar("M", bound=ContractModel)


def _annotation(info: FieldInfo) -> Any:
    # Re-attach constraints such as ge/le carried in the field metadata
    if info.metadata:
        return Annotated[(info.annotation, *info.metadata)]
    return info.annotation


def _copy_field(info: FieldInfo) -> Tuple[Any, FieldInfo]:
    if info.is_required():
        return _annotation(info), Field(..., description=info.description)
    if info.default_factory is not None:
        return _annotation(info), Field(
            default_factory=info.default_factory, description=info.description
        )
    return _annotation(info), Field(default=info.default, description=info.description)


def derive_create_model(
    base: Type[ContractModel],
    name: str,
    omit: Iterable[str] = SERVER_ASSIGNED_FIELDS,
) -> Type[ContractModel]:
    """Build ``base`` minus the ``omit`` fields as a new contract model."""
    omitted = set(omit)
    fields: Dict[str, Any] = {
        field_name: _copy_field(info)
        for field_name, info in base.model_fields.items()
        if field_name not in omitted
    }
    return create_model(
        name,
        __base__=ContractModel,
        __module__=base.__module__,
        __doc__=f"{base.__name__} without server-assigned fields.",
        **fields,
    )


def derive_update_model(create: Type[ContractModel], name: str) -> Type[ContractModel]:
    """Build ``create`` with every field omittable.

    Fields keep their annotation, so a field that cannot be null on the entity
    cannot be sent as null in an update either. The None default is never
    validated and only marks the field as left out.
    """
    fields: Dict[str, Any] = {
        field_name: (_annotation(info), Field(default=None, description=info.description))
        for field_name, info in create.model_fields.items()
    }
    return create_model(
        name,
        __base__=ContractModel,
        __module__=create.__module__,
        __doc__=f"Partial {create.__name__}; omitted fields are left unchanged.",
        **fields,
    )


def to_create_input(entity: ContractModel, create: Type[M]) -> M:
    """Strip the server-assigned fields from ``entity`` and validate the rest."""
    data = entity.model_dump(exclude=set(SERVER_ASSIGNED_FIELDS))
    return create.model_validate(data)


def apply_update(entity: M, update: ContractModel) -> M:
    """Return ``entity`` with the fields explicitly set on ``update`` replaced."""
    data = entity.model_dump(exclude_unset=True)
    data.update(update.model_dump(include=set(update.model_fields_set)))
    return type(entity).model_validate(data)
