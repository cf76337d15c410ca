"""Positional text diff between local files and registry versions.

Lines are compared by index, with no longest-common-subsequence alignment:
an inserted or deleted line shifts every later line into the diff. The output
looks like a unified diff but carries no context lines.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from registry_sync.core.local_paths import resolve_local_path
from registry_sync.core.registry.types import ComponentDetails

logger = logging.getLogger(__name__)

HUNK_MARKER = "@@"


@dataclass(frozen=True)
class Hunk:
    """A run of consecutive differing line positions.

    Attributes:
        start: 1-based line number where the run begins on both sides
        lines: Diff lines prefixed with ``-`` (local) or ``+`` (registry),
            interleaved per position
    """

    start: int
    lines: tuple[str, ...]

    @property
    def local_count(self) -> int:
        return sum(1 for line in self.lines if line.startswith("-"))

    @property
    def registry_count(self) -> int:
        return sum(1 for line in self.lines if line.startswith("+"))

    def header(self) -> str:
        return (
            f"{HUNK_MARKER} -{self.start},{self.local_count} "
            f"+{self.start},{self.registry_count} {HUNK_MARKER}"
        )


@dataclass(frozen=True)
class DiffRecord:
    """Diff of one registry file against its local counterpart.

    ``local_path`` is None when no local file could be found; the diff then
    shows every registry line as added.
    """

    file_name: str
    diff_text: str
    local_path: Path | None


def compute_hunks(local_text: str, registry_text: str) -> list[Hunk]:
    """Group differing line positions into hunks.

    A line present on only one side always differs, even from an empty line.
    """
    local_lines = local_text.split("\n")
    registry_lines = registry_text.split("\n")

    hunks: list[Hunk] = []
    start: int | None = None
    pending: list[str] = []
    for index in range(max(len(local_lines), len(registry_lines))):
        local_line = local_lines[index] if index < len(local_lines) else None
        registry_line = registry_lines[index] if index < len(registry_lines) else None

        if local_line == registry_line:
            if start is not None:
                hunks.append(Hunk(start=start, lines=tuple(pending)))
                start = None
                pending = []
            continue

        if start is None:
            start = index + 1
        if local_line is not None:
            pending.append(f"-{local_line}")
        if registry_line is not None:
            pending.append(f"+{registry_line}")

    if start is not None:
        hunks.append(Hunk(start=start, lines=tuple(pending)))
    return hunks


def generate_diff(local_text: str, registry_text: str, label: str) -> str:
    """Render a diff of two texts with ``--- a/<label>`` / ``+++ b/<label>`` headers."""
    diff_lines = [f"--- a/{label}", f"+++ b/{label}"]
    for hunk in compute_hunks(local_text, registry_text):
        diff_lines.append(hunk.header())
        diff_lines.extend(hunk.lines)
    return "\n".join(diff_lines)


def has_differences(diff_text: str) -> bool:
    """True if the rendered diff contains at least one hunk."""
    return any(line.startswith(HUNK_MARKER) for line in diff_text.split("\n")[2:])


def _read_local_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("⚠️ Could not read local file %s: %s", path, e)
        return ""


def build_component_diff(project_root: Path, details: ComponentDetails) -> list[DiffRecord]:
    """Diff every file of a registry component against the local project.

    Files without a local counterpart, or whose local copy cannot be read, are
    diffed against empty text.
    """
    records: list[DiffRecord] = []
    for component_file in details.files:
        local_path = resolve_local_path(project_root, details.name, component_file.path)
        local_text = "" if local_path is None else _read_local_text(project_root / local_path)
        logger.debug("Diffing %s against %s", component_file.path, local_path)
        records.append(
            DiffRecord(
                file_name=component_file.path,
                diff_text=generate_diff(local_text, component_file.content, component_file.path),
                local_path=local_path,
            )
        )
    return records
