"""In-memory fake implementation of Registry for testing."""

from registry_sync.core.errors import ComponentNotFound, RegistryUnavailable
from registry_sync.core.registry.abc import Registry
from registry_sync.core.registry.types import (
    ComponentDetails,
    ComponentFile,
    RegistryItem,
    RegistryManifest,
)


class FakeRegistry(Registry):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.

    Examples:
        >>> registry = FakeRegistry(names=["button", "card"])
        >>> registry.fetch_manifest().component_names()
        ('button', 'card')

        >>> registry = FakeRegistry(unavailable=True)
        >>> registry.fetch_manifest()  # raises RegistryUnavailable
    """

    def __init__(
        self,
        *,
        names: list[str] | None = None,
        components: dict[str, list[ComponentFile]] | None = None,
        unavailable: bool = False,
    ) -> None:
        """Create FakeRegistry with pre-configured manifest and bundles.

        Args:
            names: Registry item names in manifest order
            components: Mapping of component name to its files. Names absent from
                this mapping raise ComponentNotFound with a 404 status.
            unavailable: If True, fetch_manifest() raises RegistryUnavailable
        """
        self._names = names or []
        self._components = components or {}
        self._unavailable = unavailable
        self._manifest_fetches = 0
        self._detail_requests: list[str] = []

    @property
    def manifest_fetches(self) -> int:
        """Number of fetch_manifest() calls made.

        This property is for test assertions only.
        """
        return self._manifest_fetches

    @property
    def detail_requests(self) -> list[str]:
        """Component names passed to fetch_component_details(), in call order.

        This property is for test assertions only.
        """
        return self._detail_requests.copy()

    def fetch_manifest(self) -> RegistryManifest:
        self._manifest_fetches += 1
        if self._unavailable:
            raise RegistryUnavailable("Failed to fetch registry: 503 Service Unavailable")
        return RegistryManifest(items=tuple(RegistryItem(name=name) for name in self._names))

    def fetch_component_details(self, name: str) -> ComponentDetails:
        self._detail_requests.append(name)
        if name not in self._components:
            raise ComponentNotFound(f'Failed to fetch component "{name}": 404 Not Found')
        return ComponentDetails(name=name, files=tuple(self._components[name]))
