"""Tests for the word_case_cli command-line front end."""

import io
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from src.word_case_cli import main


def test_main_converts_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that positional words are joined and converted."""
    with patch.object(sys, "argv", ["word_case_cli", "user", "API", "key"]):
        assert main() == 0
    assert capsys.readouterr().out == "userAPIKey\n"


def test_main_style_option(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the --style option selects the output style."""
    with patch.object(
        sys, "argv", ["word_case_cli", "--style", "dot", "API_response-data"]
    ):
        assert main() == 0
    assert capsys.readouterr().out == "api.response.data\n"


def test_main_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that an error string is printed and the exit code is 1."""
    with patch.object(sys, "argv", ["word_case_cli", "-s", "kebab", "Y"]):
        assert main() == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: Input must contain at least two words")
    assert "kebab-case" in out


def test_main_reads_stdin(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that each non-blank stdin line is converted on its own."""
    stdin = io.StringIO("user_name\n\nY\nAPI key\n")
    with (
        patch.object(sys, "argv", ["word_case_cli"]),
        patch.object(sys, "stdin", stdin),
    ):
        assert main() == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "userName"
    assert lines[1].startswith("Error:")
    assert lines[2] == "apiKey"


def test_main_config_defaults(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that config supplies the default style and acronym handling."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        "conversion:\n  default_style: dot\n  preserve_dot_acronyms: true\n",
        encoding="utf-8",
    )
    argv = ["word_case_cli", "--config", str(config_file), "user-API-key"]
    with patch.object(sys, "argv", argv):
        assert main() == 0
    assert capsys.readouterr().out == "user.API.key\n"


def test_main_flag_preserves_acronyms(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the --preserve-dot-acronyms flag."""
    argv = ["word_case_cli", "-s", "dot", "--preserve-dot-acronyms", "user-API-key"]
    with patch.object(sys, "argv", argv):
        assert main() == 0
    assert capsys.readouterr().out == "user.API.key\n"


def test_main_bad_config(tmp_path: Path) -> None:
    """Verify that an invalid config exits with a usage error."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("conversion:\n  default_style: snake\n", encoding="utf-8")
    argv = ["word_case_cli", "--config", str(config_file), "user name"]
    with patch.object(sys, "argv", argv), pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 2
