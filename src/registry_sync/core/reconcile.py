"""Registry-to-local name reconciliation and verification of mismatches.

Exact name matches are trusted without any installer call. Every other
registry name is probed through the installer, strictly one at a time, to tell
missing components apart from ones installed under a different file name.
"""

from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass

from registry_sync.core.installer.abc import Installer
from registry_sync.core.installer.operations import is_component_missing

ProgressCallback = Callable[[str], None]


@dataclass(frozen=True)
class NamePartition:
    """Registry names split by whether a local file carries the same name."""

    exact: tuple[str, ...]
    mismatched: tuple[str, ...]


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of verifying every registry name against the project.

    Attributes:
        exact: Names with a verbatim local match
        verified_missing: Mismatched names the installer would still write
        installed_under_different_name: Mismatched names the installer reports present
    """

    exact: tuple[str, ...]
    verified_missing: tuple[str, ...]
    installed_under_different_name: tuple[str, ...]


def partition_names(registry_names: Sequence[str], local_names: Collection[str]) -> NamePartition:
    """Split registry names into exact matches and mismatches, keeping order."""
    exact: list[str] = []
    mismatched: list[str] = []
    for name in registry_names:
        if name in local_names:
            exact.append(name)
        else:
            mismatched.append(name)
    return NamePartition(exact=tuple(exact), mismatched=tuple(mismatched))


def _noop(_message: str) -> None:
    return None


def verify_missing_components(
    installer: Installer,
    registry_names: Sequence[str],
    local_names: Collection[str],
    on_progress: ProgressCallback = _noop,
) -> VerificationResult:
    """Probe every mismatched registry name and classify it.

    Args:
        installer: Installer used for the non-mutating probes
        registry_names: Working registry component names, in registry order
        local_names: Names found by the local inventory scan
        on_progress: Receives one human-readable line per step

    Returns:
        VerificationResult with registry order preserved in every list
    """
    on_progress("📋 Analyzing component names...")
    partition = partition_names(registry_names, local_names)
    on_progress(f"✅ {len(partition.exact)} components found with exact name matches")

    if not partition.mismatched:
        on_progress("🎉 All registry components have exact matches - no verification needed")
        return VerificationResult(
            exact=partition.exact,
            verified_missing=(),
            installed_under_different_name=(),
        )

    total = len(partition.mismatched)
    on_progress(f"🔍 Verifying {total} components with potential name differences...")

    missing: list[str] = []
    present: list[str] = []
    for index, name in enumerate(partition.mismatched, start=1):
        on_progress(f"🔄 Checking {name} ({index}/{total})")
        if is_component_missing(installer, name):
            missing.append(name)
        else:
            present.append(name)

    on_progress(
        f"📊 Verification complete: {len(missing)} missing, {len(present)} already installed"
    )
    return VerificationResult(
        exact=partition.exact,
        verified_missing=tuple(missing),
        installed_under_different_name=tuple(present),
    )
