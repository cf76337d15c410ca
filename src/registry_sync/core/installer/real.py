"""Production installer running the shadcn CLI via subprocess."""

import logging
from collections.abc import Sequence
from pathlib import Path

from registry_sync.core.errors import InstallFailed, VerificationFailed
from registry_sync.core.installer.abc import Installer
from registry_sync.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

OVERWRITE_FLAG = "--overwrite"


class RealInstaller(Installer):
    """Runs ``<command> add <registry>/r/<name>`` in the project root.

    Invocations are blocking and sequential. stdin is closed so the installer
    never waits on an interactive prompt.
    """

    def __init__(self, command: Sequence[str], registry_url: str, cwd: Path) -> None:
        """Create installer.

        Args:
            command: Installer command prefix, e.g. ("bun", "x", "--bun", "shadcn@latest")
            registry_url: Registry root the component targets are built from
            cwd: Project root to run the installer in
        """
        self._command = tuple(command)
        self._registry_url = registry_url
        self._cwd = cwd

    def target(self, name: str) -> str:
        """Registry address handed to the installer for a component."""
        return f"{self._registry_url}/r/{name}"

    def probe(self, name: str) -> str:
        cmd = [*self._command, "add", self.target(name)]
        logger.debug("Probing component %s: %s", name, " ".join(cmd))
        try:
            result = run_subprocess_with_context(
                cmd,
                operation_context=f"probe component '{name}'",
                cwd=self._cwd,
                merge_stderr=True,
            )
        except RuntimeError as e:
            raise VerificationFailed(name, str(e)) from e
        return result.stdout or ""

    def add(self, name: str, *, overwrite: bool) -> str:
        cmd = [*self._command, "add", self.target(name)]
        if overwrite:
            cmd.append(OVERWRITE_FLAG)
        logger.debug("Installing component %s: %s", name, " ".join(cmd))
        try:
            result = run_subprocess_with_context(
                cmd,
                operation_context=f"install component '{name}'",
                cwd=self._cwd,
            )
        except RuntimeError as e:
            raise InstallFailed(name, str(e)) from e
        return (result.stdout or "") + (result.stderr or "")
