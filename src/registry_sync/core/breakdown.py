"""Grouping of registry component names into display categories."""

from collections.abc import Iterable
from dataclasses import dataclass

from registry_sync.core.inventory import THEME_SENTINEL

HOOK_PREFIX = "use-"
ICON_SUFFIX = "-icon"


@dataclass(frozen=True)
class ComponentCategories:
    """Names split into components, hooks, icons and theme, each in input order."""

    components: tuple[str, ...]
    hooks: tuple[str, ...]
    icons: tuple[str, ...]
    theme: tuple[str, ...]

    @property
    def total(self) -> int:
        return len(self.components) + len(self.hooks) + len(self.icons) + len(self.theme)

    def restricted_to(self, names: Iterable[str]) -> "ComponentCategories":
        """Same categories keeping only the given names."""
        keep = set(names)
        return ComponentCategories(
            components=tuple(name for name in self.components if name in keep),
            hooks=tuple(name for name in self.hooks if name in keep),
            icons=tuple(name for name in self.icons if name in keep),
            theme=tuple(name for name in self.theme if name in keep),
        )


def categorize(names: Iterable[str]) -> ComponentCategories:
    """Place every name in exactly one category.

    Hooks start with ``use-``, icons end with ``-icon`` and ``theme`` is its
    own category. Everything else is a component.
    """
    components: list[str] = []
    hooks: list[str] = []
    icons: list[str] = []
    theme: list[str] = []
    for name in names:
        if name.startswith(HOOK_PREFIX):
            hooks.append(name)
        elif name.endswith(ICON_SUFFIX):
            icons.append(name)
        elif name == THEME_SENTINEL:
            theme.append(name)
        else:
            components.append(name)
    return ComponentCategories(
        components=tuple(components),
        hooks=tuple(hooks),
        icons=tuple(icons),
        theme=tuple(theme),
    )
