"""Tests for nsoap.cli — CLI entrypoint and argument parsing."""

import pytest

from nsoap.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_call_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_call_missing_app(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call"])
        assert exc_info.value.code == 2

    def test_call_missing_expression(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "myapp:app"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "nsoap" in captured.out
