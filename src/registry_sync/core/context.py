"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from registry_sync.cli.config import SyncConfig, load_config
from registry_sync.core.installer.abc import Installer
from registry_sync.core.keyboard.abc import Keyboard
from registry_sync.core.registry.abc import Registry


@dataclass(frozen=True)
class SyncContext:
    """Immutable context holding all dependencies for a sync session.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Attributes:
        registry: Remote registry client
        installer: External installer command
        keyboard: Single-key input for confirmation prompts
        config: Loaded configuration
        cwd: Project root the scan, diff and installer run against
        debug: Debug flag (debug logging enabled)
    """

    registry: Registry
    installer: Installer
    keyboard: Keyboard
    config: SyncConfig
    cwd: Path
    debug: bool

    @staticmethod
    def for_test(
        registry: Registry | None = None,
        installer: Installer | None = None,
        keyboard: Keyboard | None = None,
        config: SyncConfig | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "SyncContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes by default so no network request or subprocess is made.

        Args:
            registry: Optional Registry. If None, creates an empty FakeRegistry.
            installer: Optional Installer. If None, creates FakeInstaller.
            keyboard: Optional Keyboard. If None, creates FakeKeyboard with no keys.
            config: Optional SyncConfig. If None, uses SyncConfig.defaults().
            cwd: Project root (defaults to Path("/fake/project"))
            debug: Whether to enable debug mode (default False).

        Example:
            >>> from registry_sync.core.registry.fake import FakeRegistry
            >>> ctx = SyncContext.for_test(
            ...     registry=FakeRegistry(names=["button"]), cwd=tmp_path
            ... )
        """
        from registry_sync.core.installer.fake import FakeInstaller
        from registry_sync.core.keyboard.fake import FakeKeyboard
        from registry_sync.core.registry.fake import FakeRegistry

        return SyncContext(
            registry=registry if registry is not None else FakeRegistry(),
            installer=installer if installer is not None else FakeInstaller(),
            keyboard=keyboard if keyboard is not None else FakeKeyboard(),
            config=config if config is not None else SyncConfig.defaults(),
            cwd=cwd if cwd is not None else Path("/fake/project"),
            debug=debug,
        )


def create_context(*, debug: bool, cwd: Path | None = None) -> SyncContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Reads ``registry-sync.toml`` from the
    project root and the environment.

    Args:
        debug: If True, debug logging is enabled
        cwd: Project root. Defaults to the current working directory.

    Raises:
        ValueError: If the configuration file is invalid
    """
    from registry_sync.core.installer.real import RealInstaller
    from registry_sync.core.keyboard.real import RealKeyboard
    from registry_sync.core.registry.real import RealRegistry

    project_root = cwd if cwd is not None else Path.cwd()
    config = load_config(project_root)

    return SyncContext(
        registry=RealRegistry(config.registry_url, timeout=config.request_timeout),
        installer=RealInstaller(config.installer_command, config.registry_url, project_root),
        keyboard=RealKeyboard(),
        config=config,
        cwd=project_root,
        debug=debug,
    )
