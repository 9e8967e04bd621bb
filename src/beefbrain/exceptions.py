"""Exception hierarchy for Beef Brain.

Only malformed input is an error. Missing sections of a character sheet are
absences and are skipped by the engine rather than raised.
"""

from typing import Any


class BeefBrainError(Exception):
    """Base exception for all Beef Brain errors.

    Attributes:
        message: Human-readable error description
        details: Additional context (line, column, path, ...)
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message


class ParseError(BeefBrainError):
    """Raised when a character sheet is not well-formed YAML."""

    pass
