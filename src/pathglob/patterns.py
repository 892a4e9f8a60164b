"""pathspec integration — glob patterns as pathspec pattern factories."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import ClassVar, Final

from pathspec import PathSpec
from pathspec.pattern import RegexPattern
from pathspec.util import register_pattern

from pathglob import PatternFileError, PatternSyntaxError
from pathglob.translator import PathStyle, translate

logger = logging.getLogger(__name__)


class GlobPattern(RegexPattern):
    """pathspec pattern compiled from a POSIX-style glob."""

    __slots__ = ()

    path_style: ClassVar[PathStyle] = "posix"

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> tuple[str, bool]:
        return translate(pattern, cls.path_style), True


class DosGlobPattern(GlobPattern):
    """pathspec pattern compiled from a DOS-style glob."""

    __slots__ = ()

    path_style: ClassVar[PathStyle] = "dos"


PATTERN_FACTORIES: Final[dict[str, type[GlobPattern]]] = {
    "posix": GlobPattern,
    "dos": DosGlobPattern,
}

register_pattern("pathglob", GlobPattern)
register_pattern("pathglob-dos", DosGlobPattern)


def build_spec(lines: Iterable[str], path_style: PathStyle = "posix") -> PathSpec:
    """Compile pattern lines into a spec.

    Blank lines and lines starting with ``#`` are skipped. Other lines
    are used verbatim, including surrounding whitespace.

    Args:
        lines: Pattern lines without line terminators.
        path_style: Separator convention for every pattern.

    Returns:
        PathSpec: Spec holding one pattern per non-comment line.

    Raises:
        PatternFileError: If a line is not a valid glob
            or its translation is rejected by ``re``.
        ValueError: If ``path_style`` is not a known style.
    """
    if path_style not in PATTERN_FACTORIES:
        known = ", ".join(sorted(PATTERN_FACTORIES))
        raise ValueError(f"Unknown path style '{path_style}'. Known styles: {known}")
    factory = PATTERN_FACTORIES[path_style]

    patterns: list[GlobPattern] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip() or line.startswith("#"):
            continue
        try:
            patterns.append(factory(line))
        except (PatternSyntaxError, re.error) as exc:
            raise PatternFileError(f"line {lineno}: {exc}") from exc
    return PathSpec(patterns)


def load_pattern_file(path: Path, path_style: PathStyle = "posix") -> PathSpec | None:
    """Load a pattern file with one glob per line.

    Args:
        path: Pattern file location.
        path_style: Separator convention for every pattern.

    Returns:
        A compiled spec when the file is readable, otherwise ``None``.

    Raises:
        PatternFileError: If a line is not a valid glob.
    """
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        logger.debug("Cannot read pattern file: %s", path)
        return None
    try:
        return build_spec(lines, path_style)
    except PatternFileError as exc:
        raise PatternFileError(f"{path}: {exc}") from exc.__cause__


def match_path(spec: PathSpec, path: str) -> bool:
    """Return whether any included pattern in ``spec`` matches ``path``.

    Unlike ``PathSpec.match_file`` the path is not normalized, so leading
    separators and backslashes are matched as written.
    """
    return any(
        pattern.include and pattern.match_file(path) is not None
        for pattern in spec.patterns
    )
