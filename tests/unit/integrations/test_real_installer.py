"""Tests for RealInstaller command construction and error mapping."""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from registry_sync.core.errors import InstallFailed, VerificationFailed
from registry_sync.core.installer.operations import install_component, is_component_missing
from registry_sync.core.installer.real import RealInstaller
from registry_sync.core.installer.types import UpdateOutcome

COMMAND = ("bun", "x", "--bun", "shadcn@latest")
REGISTRY_URL = "https://ui.example.com"


def _installer() -> RealInstaller:
    return RealInstaller(COMMAND, REGISTRY_URL, Path("/project"))


def _completed(stdout: str, stderr: str | None = None) -> Mock:
    result = Mock(spec=subprocess.CompletedProcess)
    result.returncode = 0
    result.stdout = stdout
    result.stderr = stderr
    return result


def test_probe_runs_without_overwrite_and_merges_stderr() -> None:
    """Test the probe command line and stream handling."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = _completed("Skipped 1 files:\n  - src/components/button.tsx\n")

        output = _installer().probe("button")

        assert output == "Skipped 1 files:\n  - src/components/button.tsx\n"
        mock_run.assert_called_once_with(
            ["bun", "x", "--bun", "shadcn@latest", "add", "https://ui.example.com/r/button"],
            cwd=Path("/project"),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            check=True,
        )


def test_add_passes_overwrite_flag() -> None:
    """Test the install command line and combined output."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = _completed("✔ Updated 1 file:\n", "warn: peer dependency\n")

        output = _installer().add("button", overwrite=True)

        assert output == "✔ Updated 1 file:\nwarn: peer dependency\n"
        mock_run.assert_called_once_with(
            [
                "bun",
                "x",
                "--bun",
                "shadcn@latest",
                "add",
                "https://ui.example.com/r/button",
                "--overwrite",
            ],
            cwd=Path("/project"),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
            check=True,
        )


def test_add_without_overwrite_omits_flag() -> None:
    """Test that overwrite=False leaves the flag out."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = _completed("")

        _installer().add("card", overwrite=False)

        cmd = mock_run.call_args.args[0]
        assert "--overwrite" not in cmd


def test_failed_install_raises_install_failed() -> None:
    """Test that a non-zero exit becomes InstallFailed for that component."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=1, cmd=["bun"], stderr="Component not found"
        )

        with pytest.raises(InstallFailed) as exc_info:
            _installer().add("chart", overwrite=True)

        assert exc_info.value.component_name == "chart"
        assert "Failed to install component 'chart'" in str(exc_info.value)
        assert "stderr: Component not found" in str(exc_info.value)


def test_missing_binary_raises_verification_failed() -> None:
    """Test that a missing installer binary becomes VerificationFailed."""
    with patch("registry_sync.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("bun")

        with pytest.raises(VerificationFailed, match="Command not found"):
            _installer().probe("button")


@pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")
def test_probe_output_that_is_not_utf8_is_decoded_with_replacement(tmp_path: Path) -> None:
    """Test that stray bytes in installer output never abort verification."""
    script = "printf 'Skipped 1 files:\\n  - src/components/caf\\351.tsx\\n'"
    installer = RealInstaller(("sh", "-c", script), REGISTRY_URL, tmp_path)

    output = installer.probe("cafe")

    assert output == "Skipped 1 files:\n  - src/components/caf�.tsx\n"


@pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")
def test_install_output_that_is_not_utf8_is_decoded_with_replacement(tmp_path: Path) -> None:
    """Test that stray bytes on stderr are replaced as well."""
    script = "printf 'Updated 1 file\\n'; printf 'warn: \\377\\n' >&2"
    installer = RealInstaller(("sh", "-c", script), REGISTRY_URL, tmp_path)

    assert installer.add("button", overwrite=True) == "Updated 1 file\nwarn: �\n"


def test_installer_that_cannot_be_executed_fails_per_component(tmp_path: Path) -> None:
    """Test that a non-executable installer maps onto the component errors."""
    installer_script = tmp_path / "shadcn"
    installer_script.write_text("#!/bin/sh\necho unreachable\n", encoding="utf-8")
    installer_script.chmod(0o600)
    installer = RealInstaller((str(installer_script),), REGISTRY_URL, tmp_path)

    with pytest.raises(VerificationFailed, match="Could not run") as probe_error:
        installer.probe("button")
    with pytest.raises(InstallFailed, match="Could not run") as add_error:
        installer.add("button", overwrite=True)

    assert probe_error.value.component_name == "button"
    assert add_error.value.component_name == "button"


def test_unexecutable_installer_is_recovered_as_missing_and_failed(tmp_path: Path) -> None:
    """Test that spawn failures are recovered by the verifier and the driver."""
    installer_script = tmp_path / "shadcn"
    installer_script.write_text("#!/bin/sh\n", encoding="utf-8")
    installer_script.chmod(0o600)
    installer = RealInstaller((str(installer_script),), REGISTRY_URL, tmp_path)

    assert is_component_missing(installer, "button") is True
    assert install_component(installer, "button", force=True) is UpdateOutcome.FAILED
