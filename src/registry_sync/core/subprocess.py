"""Installer subprocess execution.

Output is decoded as UTF-8 with replacement characters, and every way a command
can fail to start or finish surfaces as RuntimeError. Callers map that single
exception onto their own per-component error.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path


def _describe_exit(
    cmd: Sequence[str], operation_context: str, e: subprocess.CalledProcessError
) -> str:
    lines = [
        f"Failed to {operation_context}",
        f"Command: {' '.join(cmd)}",
        f"Exit code: {e.returncode}",
    ]
    for label, output in (("stdout", e.stdout), ("stderr", e.stderr)):
        if output and output.strip():
            lines.append(f"{label}: {output.strip()}")
    return "\n".join(lines)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path,
    *,
    merge_stderr: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run a non-interactive command and capture its output as text.

    stdin is closed so the command can never block on a prompt.

    Args:
        cmd: Command and arguments to execute
        operation_context: What the command does, e.g. "install component 'button'"
        cwd: Working directory for the command
        merge_stderr: Send stderr into stdout instead of capturing it separately

    Raises:
        RuntimeError: If the command exits non-zero, is not found or cannot be executed
    """
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise RuntimeError(_describe_exit(cmd, operation_context, e)) from e
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Command not found while trying to {operation_context}: {cmd[0]}"
            f"\nFull command: {' '.join(cmd)}"
        ) from e
    except OSError as e:
        raise RuntimeError(
            f"Could not run {cmd[0]} while trying to {operation_context}: {e.strerror or e}"
            f"\nFull command: {' '.join(cmd)}"
        ) from e
