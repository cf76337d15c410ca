"""Abstract interface for the remote component registry."""

from abc import ABC, abstractmethod

from registry_sync.core.registry.types import ComponentDetails, RegistryManifest


class Registry(ABC):
    """Read-only access to the remote component registry.

    This is the only network boundary of the tool. Implementations never retry:
    a failed fetch surfaces immediately and the caller decides whether to abort.
    """

    @abstractmethod
    def fetch_manifest(self) -> RegistryManifest:
        """Fetch the registry index.

        Raises:
            RegistryUnavailable: If the request fails or returns a non-success status
            RegistryMalformed: If the payload lacks an items sequence
        """

    @abstractmethod
    def fetch_component_details(self, name: str) -> ComponentDetails:
        """Fetch the file bundle for one component.

        Args:
            name: Registry component name

        Raises:
            ComponentNotFound: If the request fails or returns a non-success status
            RegistryMalformed: If the payload does not match the component schema
        """
