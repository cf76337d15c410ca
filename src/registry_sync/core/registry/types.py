"""Registry payload models.

The registry serves two JSON documents:

- ``/r/registry.json``: ``{"items": [{"name": ...}, ...]}``
- ``/r/<name>.json``: ``{"name": ..., "files": [{"path", "content", "type"}, ...]}``

Unknown fields are ignored so newer registry builds keep parsing.
"""

from pydantic import BaseModel, ConfigDict, Field

# Registry entries that are never offered as installable components. Filtering
# "theme" here leaves the theme category of the breakdown empty.
RESERVED_NAMES = frozenset({"index", "theme"})
DEMO_MARKER = "-demo"


class RegistryItem(BaseModel):
    """One entry of the registry index."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str


class RegistryManifest(BaseModel):
    """The registry index, fetched once per session."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    items: tuple[RegistryItem, ...]

    def component_names(self) -> tuple[str, ...]:
        """Working set of installable component names.

        Drops demo entries and reserved names, collapses duplicates and keeps
        the registry's order.
        """
        names: dict[str, None] = {}
        for item in self.items:
            if DEMO_MARKER in item.name or item.name in RESERVED_NAMES:
                continue
            names.setdefault(item.name, None)
        return tuple(names)


class ComponentFile(BaseModel):
    """A single source file belonging to a registry component."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    path: str
    content: str = ""
    kind: str = Field(default="", alias="type")


class ComponentDetails(BaseModel):
    """Full bundle for one component, fetched on demand."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    files: tuple[ComponentFile, ...]
