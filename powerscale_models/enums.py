import sys

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from enum import Enum

    class StrEnum(str, Enum):
        """Compatibility StrEnum for Python < 3.11."""

        def __str__(self) -> str:
            return str(self.value)


class ValueState(StrEnum):
    """State of an attribute value."""

    NULL = "null"
    UNKNOWN = "unknown"
    KNOWN = "known"


class Severity(StrEnum):
    """Severity of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"


class DiagnosticKind(StrEnum):
    """Category of a diagnostic."""

    TYPE_MISMATCH = "type_mismatch"
    CONVERSION = "conversion"
    INVALID_PLAN = "invalid_plan"


class PlanAction(StrEnum):
    """Action planned for a single attribute."""

    NO_CHANGE = "no_change"
    UPDATE = "update"
    KNOWN_AFTER_APPLY = "known_after_apply"


class OutputFormat(StrEnum):
    """Output format of the plan command."""

    TEXT = "text"
    JSON = "json"


class SyncIQRuleType(StrEnum):
    """Type of a SyncIQ performance rule."""

    BANDWIDTH = "bandwidth"
    FILE_COUNT = "file_count"
    CPU = "cpu"
    WORKER = "worker"


class SyncIQRuleDay(StrEnum):
    """Days of the week a SyncIQ rule applies to."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class NfsExportScope(StrEnum):
    """Field selection when reading NFS exports."""

    EFFECTIVE = "effective"
    USER = "user"
    DEFAULT = "default"
