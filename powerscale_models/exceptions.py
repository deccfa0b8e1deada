"""Custom exceptions for the application."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from powerscale_models.diagnostics import Diagnostics


class PowerScaleModelError(Exception):
    """Base class for all application exceptions."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error


class DiagnosticsError(PowerScaleModelError):
    """Error diagnostics were raised by a caller that opted in to exceptions."""

    def __init__(self, diagnostics: "Diagnostics"):
        summaries = "; ".join(d.summary for d in diagnostics.errors())
        super().__init__(f"{len(diagnostics.errors())} error(s): {summaries}")
        self.diagnostics = diagnostics


class DocumentLoadError(PowerScaleModelError):
    """An input document could not be read or parsed."""

    def __init__(self, path: str, original_error: Optional[Exception] = None):
        super().__init__(f"Could not load document {path}", original_error)
        self.path = path
