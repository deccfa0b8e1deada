"""Tri-state attribute values and the semantic equality capability."""

import logging
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from powerscale_models.diagnostics import Diagnostics
from powerscale_models.enums import DiagnosticKind, ValueState

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="StringValue")


class UnknownMarker:
    """Raw payload standing for a value that is not known until apply."""

    _instance = None

    def __new__(cls) -> "UnknownMarker":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN = UnknownMarker()


@runtime_checkable
class SemanticEquals(Protocol):
    """Values that decide themselves whether a difference is a planned change."""

    def semantic_equals(self, other: Any) -> tuple[bool, Diagnostics]: ...


class StringValue(BaseModel):
    """A string attribute that is null, unknown or holds a known value.

    Validates from ``None`` (null), a ``str`` (known), another value instance
    or a ``{"state": ..., "value": ...}`` mapping. Serialises to the plain
    string; null and unknown both serialise to ``None``.
    """

    model_config = ConfigDict(frozen=True)

    state: ValueState = ValueState.NULL
    value: str = ""

    @model_validator(mode="before")
    @classmethod
    def coerce_raw(cls, data: Any) -> Any:
        if data is None:
            return {"state": ValueState.NULL}
        if data is UNKNOWN:
            return {"state": ValueState.UNKNOWN}
        if isinstance(data, str):
            return {"state": ValueState.KNOWN, "value": data}
        if isinstance(data, StringValue):
            return {"state": data.state, "value": data.value}
        return data

    @model_validator(mode="after")
    def check_payload(self) -> "StringValue":
        if self.state != ValueState.KNOWN and self.value:
            raise ValueError(f"A {self.state} value cannot carry a string payload")
        return self

    @model_serializer(mode="plain")
    def serialize(self) -> Any:
        return self.value if self.state == ValueState.KNOWN else None

    @classmethod
    def new(cls: type[V], value: str) -> V:
        return cls(state=ValueState.KNOWN, value=value)

    @classmethod
    def null(cls: type[V]) -> V:
        return cls(state=ValueState.NULL)

    @classmethod
    def unknown(cls: type[V]) -> V:
        return cls(state=ValueState.UNKNOWN)

    def is_null(self) -> bool:
        return self.state == ValueState.NULL

    def is_unknown(self) -> bool:
        return self.state == ValueState.UNKNOWN

    def is_known(self) -> bool:
        return self.state == ValueState.KNOWN

    def value_string(self) -> str:
        """Return the value exactly as supplied.

        Null and unknown values return the empty string; check ``is_null()``
        or ``is_unknown()`` first when the distinction matters.
        """
        return self.value

    def __str__(self) -> str:
        return self.value_string()

    def semantic_equals(self, other: Any) -> tuple[bool, Diagnostics]:
        diags = self._check_kind(other)
        if diags.has_error():
            return False, diags
        return self.state == other.state and self.value == other.value, diags

    def canonicalize(self: V, other: V) -> tuple[V, Diagnostics]:
        """Return ``other`` when it is semantically equal to this value, else self."""
        equal, diags = self.semantic_equals(other)
        return (other if equal else self), diags

    def _check_kind(self, other: Any) -> Diagnostics:
        diags = Diagnostics()
        if type(other) is not type(self):
            diags.add_error(
                "Semantic Equality Check Error",
                "An unexpected value type was received while performing semantic "
                "equality checks. "
                f"Expected Value Type: {type(self).__name__}\n"
                f"Got Value Type: {type(other).__name__}",
                kind=DiagnosticKind.TYPE_MISMATCH,
            )
            logger.warning(
                "Semantic equality type mismatch: expected %s, got %s",
                type(self).__name__,
                type(other).__name__,
            )
        return diags
