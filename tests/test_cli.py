"""Tests for the CLI module: arg parsing, exit codes, output formats."""

from __future__ import annotations

import argparse
import io
import json
from pathlib import Path

import pytest

from exprlex.cli import build_parser, main, parse_format_arg

# ---------------------------------------------------------------------------
# Argument parsing helpers
# ---------------------------------------------------------------------------


class TestParseHelpers:
    def test_parse_format_text(self) -> None:
        assert parse_format_arg("text") == "text"

    def test_parse_format_json(self) -> None:
        assert parse_format_arg("json") == "json"

    def test_parse_format_unknown_raises(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_format_arg("xml")


class TestArgParsing:
    def test_expression_only(self) -> None:
        ns = build_parser().parse_args(["1+2"])
        assert ns.expression == "1+2"
        assert ns.file is None
        assert ns.format is None

    def test_no_arguments(self) -> None:
        ns = build_parser().parse_args([])
        assert ns.expression is None

    def test_file_flag(self) -> None:
        ns = build_parser().parse_args(["-f", "expr.txt"])
        assert ns.file == "expr.txt"

    def test_flags(self) -> None:
        ns = build_parser().parse_args(["x", "--format", "json", "--positions", "--strict"])
        assert ns.format == "json"
        assert ns.positions is True
        assert ns.strict is True

    def test_flags_default_to_none(self) -> None:
        ns = build_parser().parse_args(["x"])
        assert ns.positions is None
        assert ns.strict is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


class TestExitCodes:
    def test_success(self) -> None:
        assert main(["sin(x)+pi"]) == 0

    def test_lexical_error_returns_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1.2.3"]) == 1
        err = capsys.readouterr().err
        assert "multiple decimal points" in err
        assert "<expr>:1:4" in err

    def test_invalid_tokens_allowed_by_default(self) -> None:
        assert main(["a+bb"]) == 0

    def test_strict_invalid_returns_2(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["a+bb", "--strict"]) == 2
        err = capsys.readouterr().err
        assert "'a'" in err
        assert "'bb' at 1:3" in err

    def test_bad_format_returns_2(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["x", "--format", "xml"]) == 2
        assert "invalid format" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Input sources and output
# ---------------------------------------------------------------------------


class TestOutput:
    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["2*x"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split() for line in lines] == [
            ["NUMBER", "2"],
            ["OPERATOR", "*"],
            ["VARIABLE", "x"],
        ]

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["pi", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"kind": "CONSTANT", "text": "pi"}]

    def test_json_positions(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([" x", "--format", "json", "--positions"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0]["start"] == {"line": 1, "column": 2, "offset": 1}
        assert data[0]["end"]["offset"] == 2

    def test_read_from_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = tmp_path / "expr.txt"
        src.write_text("sqrt(y)\n")
        assert main(["-f", str(src)]) == 0
        assert "FUNCTION" in capsys.readouterr().out

    def test_file_error_names_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = tmp_path / "bad.txt"
        src.write_text("2e+\n")
        assert main(["-f", str(src)]) == 1
        assert "bad.txt:1:4" in capsys.readouterr().err

    def test_read_from_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("3 % z"))
        assert main([]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 3
