"""Error types raised by shapesaver."""

from __future__ import annotations


class NeverThrown(RuntimeError):
    """Raised by `never()` when a path that should be unreachable is reached.

    The env payload carries whatever context the call site attached so the
    failure can be diagnosed without a debugger.
    """

    def __init__(self, message: str, *, env: dict[str, object] | None = None):
        super().__init__(message)
        self.reason = message
        self.env = dict(env or {})


class ShapeSaverError(Exception):
    """Base class for failures reported to the user."""

    category = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def report(self) -> str:
        return f"{self.category}: {self.message}"


class DocumentParseError(ShapeSaverError):
    category = "JSON error"


class InvalidLimitError(ShapeSaverError):
    category = "Limit error"


class OutputWriteError(ShapeSaverError):
    category = "Copy error"
