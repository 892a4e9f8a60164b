"""Glob-to-regex translation with a single-pass scanner."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final, Literal

from pathglob import PatternSyntaxError, SyntaxReason

logger = logging.getLogger(__name__)

PathStyle = Literal["posix", "dos"]

REGEX_META_CHARS: Final[str] = ".^$+{[]|()"
GLOB_META_CHARS: Final[str] = "\\*?[{"

# Doubled inside a class, ``re`` reads these as set operations.
_CLASS_SET_OPS: Final[str] = "&~|"


@dataclass(frozen=True, slots=True)
class _Separator:
    """Regex fragments for one path-separator convention.

    Attributes:
        regex: Regex matching a single separator.
        negated: Regex matching one character that is not a separator.
        class_chars: Glob characters rejected inside a bracket expression.
    """

    regex: str
    negated: str
    class_chars: str


_SEPARATORS: Final[dict[str, _Separator]] = {
    "posix": _Separator(regex="/", negated="[^/]", class_chars="/"),
    "dos": _Separator(regex="\\\\", negated="[^\\\\]", class_chars="/\\"),
}


@dataclass(slots=True)
class _ClassState:
    """Range tracking inside a bracket expression."""

    has_range_start: bool = False
    last: str = ""


class _Scanner:
    """Translate one pattern; instances are single-use."""

    def __init__(self, pattern: str, separator: _Separator) -> None:
        self._pattern = pattern
        self._sep = separator
        self._pos = 0
        self._in_group = False
        self._out: list[str] = ["^"]

    def _peek(self) -> str:
        if self._pos < len(self._pattern):
            return self._pattern[self._pos]
        return ""

    def _error(self, reason: SyntaxReason, index: int) -> PatternSyntaxError:
        return PatternSyntaxError(reason, self._pattern, index)

    def run(self) -> str:
        pattern = self._pattern
        while self._pos < len(pattern):
            c = pattern[self._pos]
            self._pos += 1
            if c == "\\":
                self._escape()
            elif c == "/":
                self._out.append(self._sep.regex)
            elif c == "[":
                self._scan_class()
            elif c == "{":
                if self._in_group:
                    raise self._error("nested-group", self._pos - 1)
                self._out.append("(?:(?:")
                self._in_group = True
            elif c == "}":
                if self._in_group:
                    self._out.append("))")
                    self._in_group = False
                else:
                    self._out.append("}")
            elif c == ",":
                self._out.append(")|(?:" if self._in_group else ",")
            elif c == "*":
                if self._peek() == "*":
                    # crosses directory boundaries
                    self._out.append("(?s:.*)")
                    self._pos += 1
                else:
                    self._out.append(self._sep.negated + "*")
            elif c == "?":
                self._out.append(self._sep.negated)
            elif c in REGEX_META_CHARS:
                self._out.append("\\" + c)
            else:
                self._out.append(c)

        if self._in_group:
            raise self._error("unterminated-group", len(pattern) - 1)

        self._out.append("\\Z")
        return "".join(self._out)

    def _escape(self) -> None:
        if self._pos == len(self._pattern):
            raise self._error("unterminated-escape", self._pos - 1)
        c = self._pattern[self._pos]
        self._pos += 1
        if c in GLOB_META_CHARS or c in REGEX_META_CHARS:
            self._out.append("\\")
        self._out.append(c)

    def _class_member(self, c: str) -> str:
        """Return ``c`` escaped for use inside a regex class."""
        if c in "\\[" or (c in _CLASS_SET_OPS and self._peek() == c):
            return "\\" + c
        return c

    def _scan_class(self) -> None:
        pattern = self._pattern
        rest = pattern[self._pos :]
        if rest.startswith(("]", "!]")):
            # empty class matches nothing; its negation any non-separator
            negated = rest[0] == "!"
            self._pos += 2 if negated else 1
            self._out.append(self._sep.negated if negated else "(?!)")
            return

        # the lookahead keeps the class from ever matching a separator
        self._out.append(f"(?:(?!{self._sep.regex})[")

        if self._peek() == "^":
            self._out.append("\\^")
            self._pos += 1
        else:
            if self._peek() == "!":
                self._out.append("^")
                self._pos += 1
            if self._peek() == "-":
                self._out.append("-")
                self._pos += 1

        state = _ClassState()
        closed = False
        while self._pos < len(pattern):
            c = pattern[self._pos]
            self._pos += 1
            if c == "]":
                closed = True
                break
            if c in self._sep.class_chars:
                raise self._error("separator-in-class", self._pos - 1)

            if c != "-":
                self._out.append(self._class_member(c))
                state = _ClassState(has_range_start=True, last=c)
                continue

            if not state.has_range_start:
                raise self._error("invalid-range", self._pos - 1)
            self._out.append("-")
            end = self._peek()
            if not end:
                raise self._error("unterminated-class", len(pattern))
            self._pos += 1
            if end == "]":
                closed = True
                break
            if end < state.last:
                raise self._error("invalid-range", self._pos - 3)
            self._out.append("\\-" if end == "-" else self._class_member(end))
            state = _ClassState()

        if not closed:
            raise self._error("unterminated-class", len(pattern) - 1)
        self._out.append("])")


def _separator(path_style: str) -> _Separator:
    try:
        return _SEPARATORS[path_style]
    except KeyError:
        known = ", ".join(sorted(_SEPARATORS))
        raise ValueError(
            f"Unknown path style '{path_style}'. Known styles: {known}"
        ) from None


def native_path_style() -> PathStyle:
    """Return the path style of the running platform."""
    return "dos" if os.sep == "\\" else "posix"


def translate(pattern: str, path_style: PathStyle = "posix") -> str:
    """Translate a glob pattern into Python regular-expression text.

    The result is anchored at both ends, so a match always covers the
    whole candidate path. ``*`` and ``?`` stay within one path segment,
    ``**`` crosses separators, ``[...]`` never matches a separator and
    ``{a,b}`` is an alternation group (groups do not nest).

    Args:
        pattern: Glob pattern text. ``\\`` escapes the next character
            and ``/`` is the directory separator in both path styles.
        path_style: ``"posix"`` to match ``/`` separators in candidate
            paths, ``"dos"`` to match backslash separators.

    Returns:
        str: Regex text suitable for :func:`re.compile`.

    Raises:
        PatternSyntaxError: If the glob is malformed.
        ValueError: If ``path_style`` is not a known style.
    """
    regex = _Scanner(pattern, _separator(path_style)).run()
    logger.debug("Translated %r (%s) to %r", pattern, path_style, regex)
    return regex
