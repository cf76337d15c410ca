"""External component installer subpackage."""

from registry_sync.core.installer.abc import Installer
from registry_sync.core.installer.fake import FakeInstaller
from registry_sync.core.installer.operations import install_component, is_component_missing
from registry_sync.core.installer.real import RealInstaller
from registry_sync.core.installer.types import ComponentOutcome, UpdateOutcome

__all__ = [
    "ComponentOutcome",
    "FakeInstaller",
    "Installer",
    "RealInstaller",
    "UpdateOutcome",
    "install_component",
    "is_component_missing",
]
