"""pathglob — translate glob path patterns into Python regular expressions."""

from __future__ import annotations

from typing import Final, Literal

__version__ = "0.1.0"

SyntaxReason = Literal[
    "unterminated-escape",
    "invalid-range",
    "separator-in-class",
    "unterminated-class",
    "nested-group",
    "unterminated-group",
]

_REASON_MESSAGES: Final[dict[str, str]] = {
    "unterminated-escape": "no character to escape",
    "invalid-range": "invalid range",
    "separator-in-class": "explicit name separator in class",
    "unterminated-class": "missing ']'",
    "nested-group": "cannot nest groups",
    "unterminated-group": "missing '}'",
}


class PathglobError(Exception):
    """User-facing error.

    Raised for malformed patterns, unreadable pattern files and invalid
    command-line usage. The CLI prints the message to stderr and exits
    with code 1.
    """


class PatternSyntaxError(PathglobError, ValueError):
    """A glob pattern could not be translated.

    Attributes:
        reason: Which grammar rule was violated.
        pattern: The full glob pattern text.
        index: Offset in ``pattern`` where the violation was detected.
    """

    def __init__(self, reason: SyntaxReason, pattern: str, index: int) -> None:
        self.reason = reason
        self.pattern = pattern
        self.index = index
        super().__init__(f"{_REASON_MESSAGES[reason]} in '{pattern}' at {index}")


class PatternFileError(PathglobError):
    """A pattern file contains a line that is not a valid glob."""
