"""Turn configuration records into BTP CLI parameter maps.

A record is a pydantic model whose exported fields carry an ``Export``
marker inside ``Annotated``::

    class SubaccountParams(BaseModel):
        display_name: Annotated[StringValue, Export("displayName")] = StringValue()
        beta_enabled: Annotated[bool, Export("betaEnabled")] = False
        internal_note: str = ""  # not exported

``to_params_map`` walks the export table of the record's class and renders
every present value as a string. The table is derived once per class from
the field annotations.
"""

from __future__ import annotations

import json
import types
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Optional, Union, get_args, get_origin

from pydantic import BaseModel

from tfbtp.models.values import BoolValue, ObjectValue, StringValue
from tfbtp.utils.logging import get_logger

log = get_logger(__name__)


# ── Errors ────────────────────────────────────────────────────────────────

class ParamsError(ValueError):
    """Base class for marshalling failures."""


class InvalidInputError(ParamsError):
    """The value handed in does not resolve to a configuration record."""


class UnsupportedFieldTypeError(ParamsError):
    """An exported field has a type the marshaller cannot render."""

    def __init__(self, type_name: str, key: str):
        super().__init__(
            f"the type '{type_name}' assigned to '{key}' is not yet supported",
        )
        self.type_name = type_name
        self.key = key


# ── Export table ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Export:
    """Marks a model field as a CLI parameter named ``key``."""

    key: str


class FieldKind(str, Enum):
    string_value = "string_value"
    bool_value = "bool_value"
    bool = "bool"
    string = "string"
    string_ref = "string_ref"
    string_list_map = "string_list_map"
    unsupported = "unsupported"


@dataclass(frozen=True)
class ExportField:
    attr: str
    key: str
    kind: FieldKind
    type_name: str


def _strip_optional(annotation: Any) -> tuple[Any, bool]:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1 and len(get_args(annotation)) == 2:
            return args[0], True
    return annotation, False


def _is_string_list_map(annotation: Any) -> bool:
    if get_origin(annotation) is not dict:
        return False
    key_type, value_type = get_args(annotation) or (None, None)
    return (
        key_type is str
        and get_origin(value_type) is list
        and get_args(value_type) == (str,)
    )


def _kind_of(annotation: Any) -> FieldKind:
    inner, optional = _strip_optional(annotation)

    if not optional:
        if annotation is StringValue:
            return FieldKind.string_value
        if annotation is BoolValue:
            return FieldKind.bool_value
        if annotation is bool:
            return FieldKind.bool
        if annotation is str:
            return FieldKind.string
    elif inner is str:
        return FieldKind.string_ref

    if _is_string_list_map(inner):
        return FieldKind.string_list_map
    return FieldKind.unsupported


def _type_name(annotation: Any) -> str:
    if isinstance(annotation, type) and not get_args(annotation):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


@lru_cache(maxsize=None)
def export_fields(model_cls: type[BaseModel]) -> tuple[ExportField, ...]:
    """Return the export table of ``model_cls`` in field declaration order."""
    table: list[ExportField] = []
    for attr, info in model_cls.model_fields.items():
        marker = next((m for m in info.metadata if isinstance(m, Export)), None)
        if marker is None:
            continue
        table.append(
            ExportField(
                attr=attr,
                key=marker.key,
                kind=_kind_of(info.annotation),
                type_name=_type_name(info.annotation),
            ),
        )
    return tuple(table)


def validate_export_fields(model_cls: type[BaseModel]) -> None:
    """Raise ``UnsupportedFieldTypeError`` for the first field that cannot be rendered."""
    for f in export_fields(model_cls):
        if f.kind == FieldKind.unsupported:
            raise UnsupportedFieldTypeError(f.type_name, f.key)


# ── Rendering ─────────────────────────────────────────────────────────────

def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _render_string_value(v: StringValue) -> Optional[str]:
    if v.is_unknown() or v.is_null():
        return None
    return v.value_string()


def _render_bool_value(v: BoolValue) -> Optional[str]:
    if v.is_unknown() or v.is_null():
        return None
    return _bool_text(v.value_bool())


def _render_string(v: str) -> Optional[str]:
    return v or None


def _render_string_ref(v: Optional[str]) -> Optional[str]:
    return v


def _render_string_list_map(v: Optional[dict[str, list[str]]]) -> Optional[str]:
    if v is None:
        return None
    return json.dumps(v, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


_RENDERERS: dict[FieldKind, Callable[[Any], Optional[str]]] = {
    FieldKind.string_value: _render_string_value,
    FieldKind.bool_value: _render_bool_value,
    FieldKind.bool: _bool_text,
    FieldKind.string: _render_string,
    FieldKind.string_ref: _render_string_ref,
    FieldKind.string_list_map: _render_string_list_map,
}


def _resolve_record(obj: Any) -> Optional[BaseModel]:
    value = obj
    while isinstance(value, ObjectValue):
        if not value.is_known():
            return None
        value = value.value
    if value is None:
        return None
    if not isinstance(value, BaseModel):
        raise InvalidInputError(f"unsupported type: {type(value).__name__}")
    return value


def to_params_map(obj: Any) -> dict[str, str]:
    """Build the CLI parameter map for a configuration record.

    ``obj`` may be wrapped in any number of ``ObjectValue`` layers. A missing
    block (``None``, or a null or unknown ``ObjectValue``) yields ``{}``.

    Raises ``InvalidInputError`` when ``obj`` is not a record and
    ``UnsupportedFieldTypeError`` for the first exported field whose type
    has no renderer. Nothing is returned on error.
    """
    record = _resolve_record(obj)
    if record is None:
        return {}

    out: dict[str, str] = {}
    for f in export_fields(type(record)):
        renderer = _RENDERERS.get(f.kind)
        if renderer is None:
            raise UnsupportedFieldTypeError(f.type_name, f.key)
        value = renderer(getattr(record, f.attr))
        if value is None:
            continue
        out[f.key] = value

    log.debug("params.marshalled", record=type(record).__name__, keys=sorted(out))
    return out
