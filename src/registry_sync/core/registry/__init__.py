"""Remote component registry subpackage."""

from registry_sync.core.registry.abc import Registry
from registry_sync.core.registry.fake import FakeRegistry
from registry_sync.core.registry.real import RealRegistry
from registry_sync.core.registry.types import (
    ComponentDetails,
    ComponentFile,
    RegistryItem,
    RegistryManifest,
)

__all__ = [
    "ComponentDetails",
    "ComponentFile",
    "FakeRegistry",
    "RealRegistry",
    "Registry",
    "RegistryItem",
    "RegistryManifest",
]
