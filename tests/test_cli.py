"""Tests for pathglob.cli — CLI entry point.

Tests here cover:
  - Matching candidates from arguments and stdin
  - Pattern files, path styles and --print-regex
  - Error paths (missing patterns, malformed globs, unreadable files)
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from pathglob import PathglobError, PatternSyntaxError
from pathglob.cli import main, run_pglob


class TestRunPglob:
    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------
    def test_matches_arguments(self) -> None:
        output = run_pglob(["-e", "*.py", "a.py", "b.txt", "pkg/c.py"])
        assert output == "a.py"

    def test_multiple_patterns(self) -> None:
        output = run_pglob(["-e", "*.py", "-e", "**.txt", "a.py", "b.txt", "d/e.txt"])
        assert output.split("\n") == ["a.py", "b.txt", "d/e.txt"]

    def test_invert_match(self) -> None:
        output = run_pglob(["-e", "*.py", "-v", "a.py", "b.txt"])
        assert output == "b.txt"

    def test_reads_stdin(self) -> None:
        stdin = io.StringIO("a.py\nb.txt\nc.py\n")
        assert run_pglob(["-e", "*.py"], stdin=stdin) == "a.py\nc.py"

    def test_no_match_is_empty(self) -> None:
        assert run_pglob(["-e", "*.py", "a.txt"]) == ""

    def test_hash_pattern_from_argument(self) -> None:
        assert run_pglob(["-e", "#*", "#tag", "tag"]) == "#tag"

    def test_dos_style(self) -> None:
        output = run_pglob(["--style", "dos", "-e", "dir/*", "dir\\a", "dir/a"])
        assert output == "dir\\a"

    def test_patterns_file(self, pattern_file: Path) -> None:
        output = run_pglob(
            ["-f", str(pattern_file), "index.html", "a/b.css", "main.py"]
        )
        assert output.split("\n") == ["index.html", "a/b.css"]

    def test_patterns_file_and_argument(self, pattern_file: Path) -> None:
        output = run_pglob(
            ["-f", str(pattern_file), "-e", "*.py", "index.html", "main.py", "x"]
        )
        assert output.split("\n") == ["index.html", "main.py"]

    # ------------------------------------------------------------------
    # --print-regex
    # ------------------------------------------------------------------
    def test_print_regex(self) -> None:
        output = run_pglob(["--print-regex", "-e", "*.txt", "-e", "?"])
        assert output.split("\n") == [r"^[^/]*\.txt\Z", r"^[^/]\Z"]

    def test_print_regex_dos(self) -> None:
        output = run_pglob(["--print-regex", "--style", "dos", "-e", "a/b"])
        assert output == r"^a\\b\Z"

    # ------------------------------------------------------------------
    # Error paths
    # ------------------------------------------------------------------
    def test_no_patterns(self) -> None:
        with pytest.raises(PathglobError, match="at least one pattern"):
            run_pglob(["a.py"])

    def test_print_regex_requires_pattern(self, pattern_file: Path) -> None:
        with pytest.raises(PathglobError, match="requires at least one -e"):
            run_pglob(["--print-regex", "-f", str(pattern_file)])

    def test_malformed_pattern(self) -> None:
        with pytest.raises(PatternSyntaxError, match="missing '}'"):
            run_pglob(["-e", "*{class,java", "a.java"])

    def test_unreadable_patterns_file(self, tmp_path: Path) -> None:
        with pytest.raises(PathglobError, match="cannot read patterns file"):
            run_pglob(["-f", str(tmp_path / "missing.txt"), "a"])


class TestMain:
    def test_writes_matches(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["pglob", "-e", "*.md", "README.md", "x"])
        main()
        assert capsys.readouterr().out == "README.md\n"

    def test_error_exits_1(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["pglob", "-e", "[a-", "a"])
        with pytest.raises(SystemExit) as excinfo:
            main()
        assert excinfo.value.code == 1
        assert capsys.readouterr().err == "pglob: missing ']' in '[a-' at 3\n"

    def test_engine_error_exits_1(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("pathglob.patterns.translate", lambda pattern, style: "(")
        monkeypatch.setattr(sys, "argv", ["pglob", "-e", "*", "a"])
        with pytest.raises(SystemExit) as excinfo:
            main()
        assert excinfo.value.code == 1
        assert capsys.readouterr().err.startswith("pglob: invalid translated regex")
