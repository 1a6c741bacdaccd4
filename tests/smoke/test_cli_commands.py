"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

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


def run_cli_command(*args: str, timeout: int = 60) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        args: Arguments after 'python -m birdly_engine'
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    result = subprocess.run(
        [sys.executable, "-m", "birdly_engine", *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=timeout,
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        code, stdout, stderr = run_cli_command("--help")

        assert code == 0, f"Help failed: {stderr}"
        assert "simulate" in stdout
        assert "wordsearch" in stdout


class TestSimulate:
    def test_simulate_runs(self):
        code, stdout, stderr = run_cli_command("simulate", "--steps", "50", "--seed", "1")

        assert code == 0, f"simulate failed: {stderr}"
        assert "Introduction" in stdout
        assert "Set progress" in stdout


class TestWordSearch:
    def test_wordsearch_prints_word(self):
        code, stdout, stderr = run_cli_command("wordsearch", "Robin", "--seed", "3")

        assert code == 0, f"wordsearch failed: {stderr}"
        assert "ROBIN" in stdout

    def test_wordsearch_unplaceable_word_exits_nonzero(self):
        code, stdout, _ = run_cli_command("wordsearch", "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "--max-size", "5")

        assert code == 1
        assert "Could not build" in stdout


class TestSettings:
    def test_settings_lists_values(self):
        code, stdout, stderr = run_cli_command("settings")

        assert code == 0, f"settings failed: {stderr}"
        assert "intro_window" in stdout
