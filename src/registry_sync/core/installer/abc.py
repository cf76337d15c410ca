"""Abstract interface for the external component installer.

The installer (``shadcn add``) is an opaque command: it receives a component
target, writes files into the project and reports what it did as text. This
interface only runs it and returns that text; interpreting the text lives in
``registry_sync.core.installer.parsing``.
"""

from abc import ABC, abstractmethod


class Installer(ABC):
    """Runs the external installer for a single component."""

    @abstractmethod
    def probe(self, name: str) -> str:
        """Request the component without overwriting local files.

        The installer reports which files it skipped because they are identical
        to the registry version. Dry-run fidelity depends on the installer itself.

        Args:
            name: Registry component name

        Returns:
            Combined stdout and stderr text

        Raises:
            VerificationFailed: If the command exits non-zero or cannot be run
        """

    @abstractmethod
    def add(self, name: str, *, overwrite: bool) -> str:
        """Install or update the component's files.

        Args:
            name: Registry component name
            overwrite: Whether to pass the installer's overwrite directive

        Returns:
            Installer output text

        Raises:
            InstallFailed: If the command exits non-zero or cannot be run
        """
