"""Tests for the installer subprocess helper."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from registry_sync.core.subprocess import run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = "✔ Done."
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["bun", "x", "shadcn@latest", "add", "button"],
            operation_context="install component 'button'",
            cwd=Path("/project"),
        )

        assert result == mock_result
        mock_run.assert_called_once_with(
            ["bun", "x", "shadcn@latest", "add", "button"],
            cwd=Path("/project"),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
            check=True,
        )


def test_merge_stderr_sends_stderr_to_stdout() -> None:
    """Test that merge_stderr redirects stderr into stdout."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = Mock(spec=subprocess.CompletedProcess)

        run_subprocess_with_context(
            ["bun", "--version"],
            operation_context="check bun",
            cwd=Path("/project"),
            merge_stderr=True,
        )

        assert mock_run.call_args.kwargs["stderr"] == subprocess.STDOUT


def test_failure_includes_command_exit_code_and_output() -> None:
    """Test that CalledProcessError is re-raised with context."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=2,
            cmd=["bun", "x", "shadcn@latest", "add", "chart"],
            output="✔ Checking registry.\n",
            stderr="Something went wrong\n",
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["bun", "x", "shadcn@latest", "add", "chart"],
                operation_context="install component 'chart'",
                cwd=Path("/project"),
            )

        message = str(exc_info.value)
        assert "Failed to install component 'chart'" in message
        assert "Command: bun x shadcn@latest add chart" in message
        assert "Exit code: 2" in message
        assert "stdout: ✔ Checking registry." in message
        assert "stderr: Something went wrong" in message
        assert isinstance(exc_info.value.__cause__, subprocess.CalledProcessError)


def test_blank_output_is_left_out_of_failure_message() -> None:
    """Test that whitespace-only streams are not reported."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=1, cmd=["bun"], output="  \n", stderr=None
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["bun"], operation_context="run bun", cwd=Path("/p"))

        assert "stdout:" not in str(exc_info.value)
        assert "stderr:" not in str(exc_info.value)


def test_missing_binary_is_reported() -> None:
    """Test that FileNotFoundError is re-raised with the command name."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("No such file or directory: 'bun'")

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["bun", "x", "shadcn@latest"],
                operation_context="probe component 'button'",
                cwd=Path("/project"),
            )

        message = str(exc_info.value)
        assert "Command not found while trying to probe component 'button': bun" in message
        assert "Full command: bun x shadcn@latest" in message


def test_command_that_cannot_be_executed_is_reported() -> None:
    """Test that other OSErrors from spawning are re-raised as RuntimeError."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = PermissionError(13, "Permission denied")

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["./shadcn", "add", "button"],
                operation_context="probe component 'button'",
                cwd=Path("/project"),
            )

        message = str(exc_info.value)
        assert "Could not run ./shadcn while trying to probe component 'button'" in message
        assert "Permission denied" in message
        assert isinstance(exc_info.value.__cause__, PermissionError)
