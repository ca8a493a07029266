"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli_command(
    command: str,
    input_text: str | None = None,
    env: dict[str, str] | None = None,
    timeout: int = 30,
) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        command: The command to run (after 'python -m elementwise.cli')
        input_text: Keystrokes fed to interactive commands
        env: Extra environment variables
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    full_command = f"{sys.executable} -m elementwise.cli {command}"

    result = subprocess.run(
        full_command,
        shell=True,
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        encoding="utf-8",
        input=input_text,
        timeout=timeout,
        env={**os.environ, "PYTHONIOENCODING": "utf-8", "COLUMNS": "160", **(env or {})},
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        code, stdout, stderr = run_cli_command("--help")

        assert code == 0, f"Help failed: {stderr}"
        assert "elementwise" in stdout.lower()
        assert "Commands" in stdout

    @pytest.mark.parametrize("command", ["table", "element", "compare", "quiz", "flashcards", "memory"])
    def test_command_help(self, command):
        code, stdout, stderr = run_cli_command(f"{command} --help")

        assert code == 0, f"{command} help failed: {stderr}"


class TestPeriodicTable:
    def test_table_runs(self):
        code, stdout, stderr = run_cli_command("table")

        assert code == 0, f"Table failed: {stderr}"
        assert "118 elements" in stdout
        assert "Og" in stdout

    def test_table_trend(self):
        code, stdout, stderr = run_cli_command("table --trend electronegativity")

        assert code == 0, f"Trend table failed: {stderr}"
        assert "Electronegativity" in stdout

    def test_table_filters(self):
        code, stdout, stderr = run_cli_command("table --category halogen --state gas --temp 1000")

        assert code == 0, f"Filtered table failed: {stderr}"
        assert "2 elements" in stdout

    def test_unknown_category(self):
        code, stdout, _ = run_cli_command("table --category plasma")

        assert code == 1
        assert "Unknown category" in stdout

    def test_missing_dataset(self, tmp_path):
        code, stdout, _ = run_cli_command(
            "table", env={"ELEMENTWISE_DATA_PATH": str(tmp_path / "missing.json")}
        )

        assert code == 1
        assert "Could not load element data" in stdout


class TestElementViews:
    def test_element_detail(self):
        code, stdout, stderr = run_cli_command("element Na")

        assert code == 0, f"Element failed: {stderr}"
        assert "Sodium" in stdout
        assert "Bohr model" in stdout

    def test_unknown_element(self):
        code, stdout, _ = run_cli_command("element kryptonite")

        assert code == 1
        assert "Unknown element" in stdout

    def test_compare_ignores_overflow(self):
        code, stdout, stderr = run_cli_command("compare Li Na K Rb Cs")

        assert code == 0, f"Compare failed: {stderr}"
        assert "ignoring Cs" in stdout
        assert "Rb - Rubidium" in stdout


class TestStudyModes:
    def test_quiz_one_round(self):
        code, stdout, stderr = run_cli_command("quiz --rounds 1 --seed 3", input_text="h\n1\n")

        assert code == 0, f"Quiz failed: {stderr}"
        assert "Period:" in stdout
        assert "Score" in stdout

    def test_quiz_quit(self):
        code, stdout, stderr = run_cli_command("quiz --seed 3", input_text="q\n")

        assert code == 0, f"Quiz quit failed: {stderr}"
        assert "Best streak: 0" in stdout

    def test_flashcards(self):
        code, stdout, stderr = run_cli_command(
            "flashcards --difficulty hard --seed 5", input_text="f\nn\np\ns\nq\n"
        )

        assert code == 0, f"Flashcards failed: {stderr}"
        assert "Card 2 / 20" in stdout

    def test_memory(self):
        code, stdout, stderr = run_cli_command("memory --pairs 2 --seed 1", input_text="0\n1\nq\n")

        assert code == 0, f"Memory failed: {stderr}"
        assert "Moves: 1" in stdout
