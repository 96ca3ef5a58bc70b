"""Integration tests for the CLI entry point."""

import errno
import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from filenav import __version__
from filenav.cli import app


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the logging setup each invocation applies to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestVersionCommand:
    """Tests for `filenav version` command."""

    def test_version(self, runner):
        """Test that the version is printed without starting the browser."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"filenav version {__version__}" in result.output
        assert "Current Directory" not in result.output


class TestBrowseSession:
    """End-to-end browsing sessions driven through stdin."""

    def test_exit_immediately(self, runner, tmp_path):
        """Test starting and leaving the browser."""
        result = runner.invoke(app, ["--start", str(tmp_path)], input="0\n")

        assert result.exit_code == 0
        assert f"Current Directory: {tmp_path.resolve()}" in result.output
        assert "Goodbye!" in result.output

    def test_end_of_input(self, runner, tmp_path):
        """Test that closing stdin ends the session successfully."""
        result = runner.invoke(app, ["--start", str(tmp_path)], input="")

        assert result.exit_code == 0
        assert "Goodbye!" not in result.output

    def test_defaults_to_current_directory(self, runner, tmp_path, monkeypatch):
        """Test that the browser starts in the working directory."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [], input="0\n")

        assert result.exit_code == 0
        assert f"Current Directory: {tmp_path.resolve()}" in result.output

    def test_missing_working_directory_aborts(self, runner):
        """Test that an unusable working directory aborts with a message."""
        with patch(
            "filenav.cli.Path.cwd",
            side_effect=FileNotFoundError(errno.ENOENT, "No such file or directory"),
        ):
            result = runner.invoke(app, [], input="0\n")

        assert result.exit_code != 0
        assert "Cannot determine start directory" in result.output
        assert "Current Directory" not in result.output

    def test_start_must_be_directory(self, runner, tmp_path):
        """Test that a bad starting directory aborts."""
        result = runner.invoke(app, ["--start", str(tmp_path / "missing")])

        assert result.exit_code != 0
        assert "Not a directory" in result.output

    def test_full_session(self, runner, tmp_path):
        """Test a session that creates, enters, copies and searches."""
        script = "\n".join(
            [
                "5",
                "project/docs",
                "2",
                "project",
                "4",
                "readme.md",
                "7",
                "readme.md",
                "docs/readme_copy.md",
                "9",
                "readme",
                "3",
                "0",
            ]
        )
        result = runner.invoke(app, ["--start", str(tmp_path)], input=script + "\n")

        assert result.exit_code == 0
        project = tmp_path.resolve() / "project"
        assert (project / "readme.md").is_file()
        assert (project / "docs" / "readme_copy.md").is_file()
        assert f"Current Directory: {project}" in result.output
        assert "2 match(es)" in result.output
        assert result.output.rstrip().endswith("Goodbye!")

    def test_verbose_flag(self, runner, tmp_path):
        """Test that --verbose is accepted."""
        result = runner.invoke(app, ["--verbose", "--start", str(tmp_path)], input="0\n")

        assert result.exit_code == 0
        assert "Goodbye!" in result.output
