"""
Smoke Tests for CLI Commands.

These tests verify that the dojo CLI starts as a module and answers --help.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli_command(args: list[str], timeout: int = 30) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        args: Arguments after 'python -m src.dojo'
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    result = subprocess.run(
        [sys.executable, "-m", "src.dojo", *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=timeout,
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        """Main help should list the three commands."""
        code, stdout, stderr = run_cli_command(["--help"])

        assert code == 0, f"Help failed: {stderr}"
        for command in ("init", "start", "learn"):
            assert command in stdout

    def test_learn_help(self):
        """Learn help should mention the topics."""
        code, stdout, stderr = run_cli_command(["learn", "--help"])

        assert code == 0, f"Learn help failed: {stderr}"
        assert "cli-basics" in stdout

    def test_learn_without_topic_fails(self):
        """Missing topic is a usage error."""
        code, stdout, stderr = run_cli_command(["learn"])

        assert code != 0
