"""String values whose letter case does not count as a change."""

import logging
from typing import Any, Optional

from powerscale_models.diagnostics import Diagnostics
from powerscale_models.enums import DiagnosticKind
from powerscale_models.types.base import UNKNOWN, StringValue

logger = logging.getLogger(__name__)

CASE_INSENSITIVE_STRING_TYPE_NAME = "customtypes.CaseInsensitiveStringType"


class CaseInsensitiveStringValue(StringValue):
    """String value compared with Unicode case folding.

    The original casing is kept for display and storage; only
    ``semantic_equals`` ignores it. Folding uses ``str.casefold``, so
    ``"Straße"`` and ``"STRASSE"`` compare equal.
    """

    def semantic_equals(self, other: Any) -> tuple[bool, Diagnostics]:
        diags = self._check_kind(other)
        if diags.has_error():
            return False, diags

        if not (self.is_known() and other.is_known()):
            return self.state == other.state, diags

        equal = self.value.casefold() == other.value.casefold()
        logger.debug(
            "CaseInsensitiveStringValue.semantic_equals: current=%r other=%r equal=%s",
            self.value,
            other.value,
            equal,
        )
        return equal, diags

    def attribute_type(self) -> "CaseInsensitiveStringType":
        return CaseInsensitiveStringType()


class CaseInsensitiveStringType:
    """Attribute type producing CaseInsensitiveStringValue instances."""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CaseInsensitiveStringType)

    def __hash__(self) -> int:
        return hash(CASE_INSENSITIVE_STRING_TYPE_NAME)

    def __str__(self) -> str:
        return CASE_INSENSITIVE_STRING_TYPE_NAME

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def value_from_string(
        self, value: StringValue
    ) -> tuple[Optional[CaseInsensitiveStringValue], Diagnostics]:
        """Wrap a plain string value, keeping its state and casing."""
        diags = Diagnostics()
        if not isinstance(value, StringValue):
            diags.add_error(
                "Error converting value",
                f"unexpected value type of {type(value).__name__}",
                kind=DiagnosticKind.CONVERSION,
            )
            return None, diags
        return CaseInsensitiveStringValue(state=value.state, value=value.value), diags

    def value_from_terraform(
        self, raw: Any
    ) -> tuple[Optional[CaseInsensitiveStringValue], Diagnostics]:
        """Convert a raw wire payload: None, the UNKNOWN marker or a str."""
        diags = Diagnostics()
        if raw is None:
            return CaseInsensitiveStringValue.null(), diags
        if raw is UNKNOWN:
            return CaseInsensitiveStringValue.unknown(), diags
        if not isinstance(raw, str):
            diags.add_error(
                "Error converting value",
                f"expected a string, got {type(raw).__name__}",
                kind=DiagnosticKind.CONVERSION,
            )
            return None, diags
        return CaseInsensitiveStringValue.new(raw), diags

    def validate(self, raw: Any) -> Diagnostics:
        return Diagnostics()

    def value_type(self) -> CaseInsensitiveStringValue:
        return CaseInsensitiveStringValue()


def new_case_insensitive_string_value(value: str) -> CaseInsensitiveStringValue:
    return CaseInsensitiveStringValue.new(value)


def new_case_insensitive_string_null() -> CaseInsensitiveStringValue:
    return CaseInsensitiveStringValue.null()


def new_case_insensitive_string_unknown() -> CaseInsensitiveStringValue:
    return CaseInsensitiveStringValue.unknown()


def new_case_insensitive_string_pointer_value(
    value: Optional[str],
) -> CaseInsensitiveStringValue:
    """Null when ``value`` is None, otherwise a known value."""
    if value is None:
        return CaseInsensitiveStringValue.null()
    return CaseInsensitiveStringValue.new(value)
