"""Diagnostics returned to the plan engine instead of raised exceptions."""

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from powerscale_models.enums import DiagnosticKind, Severity
from powerscale_models.exceptions import DiagnosticsError


class Diagnostic(BaseModel):
    """A single error or warning produced while converting or comparing values."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    summary: str
    detail: str = ""
    kind: DiagnosticKind


class Diagnostics(BaseModel):
    """Ordered collection of diagnostics.

    An empty collection is the "no diagnostics" result; callers check
    ``has_error()`` rather than relying on exceptions.
    """

    items: list[Diagnostic] = Field(default_factory=list)

    def add_error(
        self,
        summary: str,
        detail: str = "",
        kind: DiagnosticKind = DiagnosticKind.CONVERSION,
    ) -> None:
        self.items.append(
            Diagnostic(
                severity=Severity.ERROR, summary=summary, detail=detail, kind=kind
            )
        )

    def add_warning(
        self,
        summary: str,
        detail: str = "",
        kind: DiagnosticKind = DiagnosticKind.INVALID_PLAN,
    ) -> None:
        self.items.append(
            Diagnostic(
                severity=Severity.WARNING, summary=summary, detail=detail, kind=kind
            )
        )

    def extend(self, other: "Diagnostics") -> None:
        self.items.extend(other.items)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity == Severity.ERROR]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity == Severity.WARNING]

    def has_error(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.items)

    def raise_for_errors(self) -> None:
        """Raise DiagnosticsError if the collection holds any error."""
        if self.has_error():
            raise DiagnosticsError(self)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:  # type: ignore[override]
        return iter(self.items)
