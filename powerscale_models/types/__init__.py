from powerscale_models.types.base import (
    UNKNOWN,
    SemanticEquals,
    StringValue,
    UnknownMarker,
)
from powerscale_models.types.case_insensitive import (
    CASE_INSENSITIVE_STRING_TYPE_NAME,
    CaseInsensitiveStringType,
    CaseInsensitiveStringValue,
    new_case_insensitive_string_null,
    new_case_insensitive_string_pointer_value,
    new_case_insensitive_string_unknown,
    new_case_insensitive_string_value,
)

__all__ = [
    "CASE_INSENSITIVE_STRING_TYPE_NAME",
    "CaseInsensitiveStringType",
    "CaseInsensitiveStringValue",
    "SemanticEquals",
    "StringValue",
    "UNKNOWN",
    "UnknownMarker",
    "new_case_insensitive_string_null",
    "new_case_insensitive_string_pointer_value",
    "new_case_insensitive_string_unknown",
    "new_case_insensitive_string_value",
]
