"""
Tests for CLI argument parser.
"""

from unittest.mock import patch

import pytest

from scannerkit.cli.parser import CLI


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_creation(self):
        """Test CLI can be created."""
        cli = CLI()
        assert cli.parser is not None

    def test_no_command_shows_help(self, capsys):
        """Test that running without command shows help."""
        result = CLI().run([])

        assert result == 1
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower()

    def test_version_flag(self, capsys):
        """Test --version flag."""
        with pytest.raises(SystemExit) as exc_info:
            CLI().run(["--version"])

        assert exc_info.value.code == 0
        assert "scannerkit" in capsys.readouterr().out


class TestInstallCommand:
    """Test install command parsing."""

    def test_install_defaults(self):
        args = CLI().parse_args(["install"])

        assert args.command == "install"
        assert args.scanner_version is None
        assert args.with_jre is None
        assert args.add_path is True

    def test_install_with_options(self):
        args = CLI().parse_args(
            ["install", "--scanner-version", "4.8.0.2856", "--with-jre", "--no-add-path"]
        )

        assert args.scanner_version == "4.8.0.2856"
        assert args.with_jre is True
        assert args.add_path is False

    def test_without_jre(self):
        args = CLI().parse_args(["install", "--without-jre"])
        assert args.with_jre is False

    def test_jre_flags_are_exclusive(self):
        with pytest.raises(SystemExit):
            CLI().parse_args(["install", "--with-jre", "--without-jre"])

    def test_missing_version_reports_failure(self, capsys):
        """Test a run without any version source fails the step."""
        result = CLI().run(["install"])

        assert result == 1
        assert "::error::Sonar Scanner version is required" in capsys.readouterr().out

    @patch("scannerkit.cli.commands.install.run", return_value=0)
    def test_dispatch(self, mock_run):
        """Test install is dispatched to its command module."""
        assert CLI().run(["install", "--scanner-version", "4.8.0.2856"]) == 0
        mock_run.assert_called_once()


class TestLocateCommand:
    """Test locate command."""

    def test_locate_explicit_platform(self, capsys):
        result = CLI().run(
            ["locate", "--scanner-version", "4.8.0.2856", "--with-jre", "--platform", "macos"]
        )

        assert result == 0
        out = capsys.readouterr().out
        assert "sonar-scanner-cli-4.8.0.2856-macosx.zip" in out
        assert "/Users/runner/sonar-scanner" in out
        assert "sonar-scanner-4.8.0.2856-macosx" in out

    @patch("platform.system", return_value="Linux")
    def test_locate_detects_platform(self, mock_system, capsys):
        result = CLI().run(["locate", "--scanner-version", "4.8.0.2856"])

        assert result == 0
        out = capsys.readouterr().out
        assert "sonar-scanner-cli-4.8.0.2856.zip" in out
        assert "/opt/sonar-scanner" in out

    def test_locate_unknown_platform(self):
        result = CLI().run(
            ["locate", "--scanner-version", "4.8.0.2856", "--platform", "solaris"]
        )

        assert result == 1

    def test_locate_reads_action_inputs(self, monkeypatch, capsys):
        monkeypatch.setenv("INPUT_VERSION", "5.0.1.3006")
        monkeypatch.setenv("INPUT_WITH-JRE", "TRUE")

        assert CLI().run(["locate", "--platform", "windows"]) == 0
        out = capsys.readouterr().out
        assert "sonar-scanner-cli-5.0.1.3006-windows.zip" in out
        assert "C:\\sonar-scanner" in out
