"""Exception taxonomy for registry synchronization.

Network and schema faults abort the session. Installer faults are raised at the
subprocess boundary and recovered per item by the verifier and the driver.
"""


class SyncError(Exception):
    """Base class for all well-known registry-sync failures."""


class RegistryUnavailable(SyncError):
    """The registry index could not be fetched (transport fault or non-success status)."""


class RegistryMalformed(SyncError):
    """The registry responded with a payload that does not match the expected schema."""


class ComponentNotFound(SyncError):
    """A per-component bundle could not be fetched from the registry."""


class InstallerError(SyncError):
    """The external installer command failed.

    Attributes:
        component_name: Component the installer was invoked for
    """

    def __init__(self, component_name: str, message: str) -> None:
        super().__init__(message)
        self.component_name = component_name


class VerificationFailed(InstallerError):
    """The non-mutating probe invocation failed."""


class InstallFailed(InstallerError):
    """The mutating install invocation failed."""


class ArgumentError(SyncError):
    """Invalid combination of command-line arguments.

    Attributes:
        usage_lines: Usage hints printed after the error message
    """

    def __init__(self, message: str, usage_lines: tuple[str, ...]) -> None:
        super().__init__(message)
        self.usage_lines = usage_lines


class InvalidTransition(SyncError):
    """A session event was applied to a state that does not accept it."""
