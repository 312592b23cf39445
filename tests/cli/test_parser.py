"""
Tests for CLI argument parser.
"""

from unittest.mock import patch

import pytest

from vsfinder.cli.parser import CLI


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_no_command_shows_help(self, capsys):
        """Test that running without command shows help."""
        cli = CLI()
        result = cli.run([])

        assert result == 1
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower()

    def test_version_flag(self, capsys):
        """Test --version flag."""
        cli = CLI()

        with pytest.raises(SystemExit) as exc_info:
            cli.run(["--version"])

        assert exc_info.value.code == 0
        assert "vsfinder" in capsys.readouterr().out

    def test_global_options(self, tmp_path):
        """Test global options are parsed."""
        args = CLI().parse_args(
            ["--verbose", "--config", str(tmp_path / "c.yaml"), "list"]
        )

        assert args.verbose is True
        assert args.config == tmp_path / "c.yaml"
        assert args.command == "list"


class TestSelectCommand:
    """Test select command parsing."""

    def test_select_defaults(self):
        """Test select with no options."""
        args = CLI().parse_args(["select"])

        assert args.command == "select"
        assert args.records is None
        assert args.msvs_version is None
        assert args.ignore_environment is False
        assert args.json is False

    def test_select_all_options(self):
        """Test select with every option."""
        args = CLI().parse_args(
            [
                "select",
                "--records",
                "vs.json",
                "--msvs-version",
                "2019",
                "--ignore-environment",
                "--json",
            ]
        )

        assert args.records == "vs.json"
        assert args.msvs_version == "2019"
        assert args.ignore_environment is True
        assert args.json is True


class TestListCommand:
    """Test list command parsing."""

    def test_list_options(self):
        """Test list with records and JSON output."""
        args = CLI().parse_args(["list", "--records", "-", "--json"])

        assert args.command == "list"
        assert args.records == "-"
        assert args.json is True


class TestDispatch:
    """Test command dispatch and error handling."""

    def test_dispatch_to_select(self):
        """Test select is dispatched to its module."""
        with patch("vsfinder.cli.commands.select.run", return_value=0) as mock_run:
            result = CLI().run(["select"])

        assert result == 0
        mock_run.assert_called_once()

    def test_vsfinder_error_returns_1(self):
        """Test an invalid msvs_version exits with 1."""
        assert CLI().run(["select", "--msvs-version", "latest"]) == 1

    def test_non_ascii_digits_return_1(self):
        """Test a non-ASCII digit msvs_version exits with 1."""
        assert CLI().run(["select", "--msvs-version", "\u00b2"]) == 1

    def test_keyboard_interrupt(self):
        """Test Ctrl+C exits with 130."""
        with patch("vsfinder.cli.commands.list.run", side_effect=KeyboardInterrupt):
            assert CLI().run(["list"]) == 130
