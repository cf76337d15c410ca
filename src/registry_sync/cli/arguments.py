"""Validation of the raw command line into an immutable argument set.

Click parses the known flags; everything else (the component name and any
unrecognised flag) arrives as raw tokens and is checked here, before any
network call is made.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from registry_sync.core.errors import ArgumentError

USAGE_LINES = (
    "Usage: registry-sync [component-name] [--add-missing] [--add-all] [--force] [--diff]",
    "  --diff: Show differences between local and registry versions",
    "  --add-missing: Install all missing components",
    "  --add-all: Show what components would be installed (dry run)",
    "  --add-all --force: Install all registry components (overwriting existing ones)",
    "  --force: Install without confirmation",
)

FORCE_USAGE_LINES = (
    "Usage: registry-sync <component-name> --force",
    "Example: registry-sync button --force",
    "Or use: registry-sync --add-all --force",
)

DIFF_USAGE_LINES = (
    "Usage: registry-sync <component-name> --diff",
    "Example: registry-sync button --diff",
)


@dataclass(frozen=True)
class ParsedArguments:
    """Command-line intent, built once at startup and never mutated.

    Attributes:
        component: First positional token, if any
        add_missing: Install every verified-missing component
        add_all: Dry run (or with force, install) every registry component
        force: Skip confirmation and dry-run safeguards
        diff: Show a diff for ``component`` instead of installing it
        unknown: Unrecognised flags and extra positional tokens, in order
    """

    component: str | None = None
    add_missing: bool = False
    add_all: bool = False
    force: bool = False
    diff: bool = False
    unknown: tuple[str, ...] = ()

    @property
    def has_recognised_input(self) -> bool:
        return (
            self.component is not None
            or self.add_missing
            or self.add_all
            or self.force
            or self.diff
        )

    @property
    def has_no_args(self) -> bool:
        return not self.has_recognised_input and not self.unknown


def parse_arguments(
    tokens: Sequence[str],
    *,
    add_missing: bool = False,
    add_all: bool = False,
    force: bool = False,
    diff: bool = False,
) -> ParsedArguments:
    """Combine click's flags with the raw tokens and validate the combination.

    Raises:
        ArgumentError: If ``--force`` or ``--diff`` lacks a component, or if only
            unrecognised flags were given
    """
    component: str | None = None
    unknown: list[str] = []
    for token in tokens:
        if component is None and not token.startswith("-"):
            component = token
        else:
            unknown.append(token)

    arguments = ParsedArguments(
        component=component,
        add_missing=add_missing,
        add_all=add_all,
        force=force,
        diff=diff,
        unknown=tuple(unknown),
    )

    if arguments.force and arguments.component is None and not arguments.add_all:
        raise ArgumentError("--force flag requires a component name", FORCE_USAGE_LINES)

    if arguments.diff and arguments.component is None:
        raise ArgumentError("--diff flag requires a component name", DIFF_USAGE_LINES)

    if arguments.unknown and not arguments.has_recognised_input:
        raise ArgumentError("Unknown arguments or flags provided", USAGE_LINES)

    return arguments
