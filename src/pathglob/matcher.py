"""Compiled glob matchers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pathglob.translator import PathStyle, translate


@dataclass(frozen=True, slots=True)
class GlobMatcher:
    """A glob pattern compiled to a regular expression.

    Attributes:
        pattern: Original glob pattern text.
        path_style: Separator convention the pattern was compiled for.
        regex: Compiled, fully anchored regular expression.
    """

    pattern: str
    path_style: PathStyle
    regex: re.Pattern[str]

    @property
    def regex_text(self) -> str:
        return self.regex.pattern

    def matches(self, path: str) -> bool:
        """Return whether the whole of ``path`` matches the pattern.

        Args:
            path: Candidate path string. No normalization is applied.

        Returns:
            bool: ``True`` only when the entire string matches.
        """
        return self.regex.fullmatch(path) is not None


def compile_glob(pattern: str, path_style: PathStyle = "posix") -> GlobMatcher:
    """Translate and compile a glob pattern.

    Args:
        pattern: Glob pattern text.
        path_style: ``"posix"`` or ``"dos"`` separator convention.

    Returns:
        GlobMatcher: Ready-to-use matcher.

    Raises:
        PatternSyntaxError: If the glob is malformed.
        re.error: If the translated text is rejected by ``re``.
        ValueError: If ``path_style`` is not a known style.
    """
    regex = re.compile(translate(pattern, path_style))
    return GlobMatcher(pattern=pattern, path_style=path_style, regex=regex)


def to_regex_pattern(pattern: str, dos_mode: bool = False) -> GlobMatcher:
    """Compile ``pattern`` with a boolean separator switch.

    ``dos_mode`` selects backslash separators, otherwise ``/``.
    """
    return compile_glob(pattern, "dos" if dos_mode else "posix")
