"""In-memory fake implementation of Installer for testing.

FakeInstaller returns canned installer output per component without spawning
any process, and records every invocation for assertions.
"""

from registry_sync.core.errors import InstallFailed, VerificationFailed
from registry_sync.core.installer.abc import Installer

DEFAULT_PROBE_OUTPUT = "✔ Checking registry.\n✔ Created 1 file:\n  - src/components/new.tsx\n"
DEFAULT_ADD_OUTPUT = "✔ Checking registry.\n✔ Updated 1 file:\n  - src/components/new.tsx\n"


class FakeInstaller(Installer):
    """In-memory fake implementation of the installer.

    Constructor Injection:
    - All state is provided via constructor parameters
    - No mutations occur other than call recording

    Examples:
        # Component already present: probe reports every file skipped
        >>> installer = FakeInstaller(
        ...     probe_outputs={"card": "Skipped 1 files:\\n  - src/components/card.tsx\\n"}
        ... )

        # Installer crashes for one component
        >>> installer = FakeInstaller(failing_installs={"chart"})
    """

    def __init__(
        self,
        *,
        probe_outputs: dict[str, str] | None = None,
        add_outputs: dict[str, str] | None = None,
        failing_probes: set[str] | None = None,
        failing_installs: set[str] | None = None,
    ) -> None:
        """Initialize fake with predetermined outputs.

        Args:
            probe_outputs: Probe output per component. Components not listed get
                output reporting a newly created file (i.e. missing).
            add_outputs: Install output per component. Components not listed get
                output reporting an updated file.
            failing_probes: Components whose probe raises VerificationFailed
            failing_installs: Components whose install raises InstallFailed
        """
        self._probe_outputs = probe_outputs or {}
        self._add_outputs = add_outputs or {}
        self._failing_probes = failing_probes or set()
        self._failing_installs = failing_installs or set()
        self._probe_calls: list[str] = []
        self._add_calls: list[tuple[str, bool]] = []

    @property
    def probe_calls(self) -> list[str]:
        """Component names passed to probe(), in call order.

        This property is for test assertions only.
        """
        return self._probe_calls.copy()

    @property
    def add_calls(self) -> list[tuple[str, bool]]:
        """List of (name, overwrite) tuples passed to add(), in call order.

        This property is for test assertions only.
        """
        return self._add_calls.copy()

    def probe(self, name: str) -> str:
        self._probe_calls.append(name)
        if name in self._failing_probes:
            raise VerificationFailed(name, f"Failed to probe component '{name}'\nExit code: 1")
        return self._probe_outputs.get(name, DEFAULT_PROBE_OUTPUT)

    def add(self, name: str, *, overwrite: bool) -> str:
        self._add_calls.append((name, overwrite))
        if name in self._failing_installs:
            raise InstallFailed(name, f"Failed to install component '{name}'\nExit code: 1")
        return self._add_outputs.get(name, DEFAULT_ADD_OUTPUT)
