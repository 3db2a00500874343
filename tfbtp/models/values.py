"""Tri-state configuration values: unknown, null or known."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ValueState(str, Enum):
    unknown = "unknown"
    null = "null"
    known = "known"


class _TriState(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: ValueState = ValueState.null

    def is_unknown(self) -> bool:
        return self.state == ValueState.unknown

    def is_null(self) -> bool:
        return self.state == ValueState.null

    def is_known(self) -> bool:
        return self.state == ValueState.known


class StringValue(_TriState):
    """A string attribute as handed over by the plan or state.

    A known value may be the empty string; that is still a value and is
    distinct from null.
    """

    value: str = ""

    @classmethod
    def unknown(cls) -> StringValue:
        return cls(state=ValueState.unknown)

    @classmethod
    def null(cls) -> StringValue:
        return cls(state=ValueState.null)

    @classmethod
    def of(cls, value: str) -> StringValue:
        return cls(state=ValueState.known, value=value)

    def value_string(self) -> str:
        """Return the value, or ``""`` when it is not known."""
        return self.value if self.is_known() else ""


class BoolValue(_TriState):
    value: bool = False

    @classmethod
    def unknown(cls) -> BoolValue:
        return cls(state=ValueState.unknown)

    @classmethod
    def null(cls) -> BoolValue:
        return cls(state=ValueState.null)

    @classmethod
    def of(cls, value: bool) -> BoolValue:
        return cls(state=ValueState.known, value=value)

    def value_bool(self) -> bool:
        return self.value if self.is_known() else False


class ObjectValue(_TriState):
    """A nested configuration block.

    ``value`` is a configuration record or another ``ObjectValue``. Null and
    unknown both mean the block was not provided.
    """

    value: Optional[Any] = None

    @classmethod
    def unknown(cls) -> ObjectValue:
        return cls(state=ValueState.unknown)

    @classmethod
    def null(cls) -> ObjectValue:
        return cls(state=ValueState.null)

    @classmethod
    def of(cls, value: Any) -> ObjectValue:
        return cls(state=ValueState.known, value=value)
