"""Interpretation of installer output text.

The installer prints a summary such as::

    ℹ Skipped 2 files: (files might be identical, use --overwrite to overwrite)
      - src/components/button.tsx
      - src/hooks/use-toast.ts

These helpers turn that text into decisions without touching any process.
"""

import re
from dataclasses import dataclass

from registry_sync.core.installer.types import UpdateOutcome

SKIPPED_KEYWORD = "Skipped"
IDENTICAL_MARKER = "files might be identical"

_SKIPPED_COUNT_PATTERN = re.compile(r"Skipped (\d+) files?:")
_SKIPPED_PATH_PATTERN = re.compile(r"^\s*-\s+(src/\S+)", re.MULTILINE)


@dataclass(frozen=True)
class SkipReport:
    """What an installer run says about skipped files.

    Attributes:
        declared_count: Count from "Skipped N files:", or None if absent
        paths: File paths listed on "  - src/..." lines
        mentions_identical: True if the output says files might be identical
    """

    declared_count: int | None
    paths: tuple[str, ...]
    mentions_identical: bool

    @property
    def counts_reconcile(self) -> bool:
        """True if a positive declared count matches the listed paths."""
        if self.declared_count is None or self.declared_count == 0:
            return False
        return len(self.paths) == self.declared_count


def parse_skip_report(output: str) -> SkipReport:
    """Extract the skipped-file summary from installer output."""
    count_match = _SKIPPED_COUNT_PATTERN.search(output)
    declared_count = int(count_match.group(1)) if count_match else None
    paths = tuple(_SKIPPED_PATH_PATTERN.findall(output))
    mentions_identical = SKIPPED_KEYWORD in output and IDENTICAL_MARKER in output
    return SkipReport(
        declared_count=declared_count,
        paths=paths,
        mentions_identical=mentions_identical,
    )


def is_component_present(probe_output: str) -> bool:
    """Decide from probe output whether a component is already installed.

    Present when every declared skipped file is listed, or, failing that, when
    the installer says the skipped files might be identical. Anything else
    means the installer would write or update files.
    """
    report = parse_skip_report(probe_output)
    if report.counts_reconcile:
        return True
    return report.mentions_identical


def classify_install_output(output: str) -> UpdateOutcome:
    """Classify the output of a successful install invocation."""
    if SKIPPED_KEYWORD in output and IDENTICAL_MARKER in output:
        return UpdateOutcome.SKIPPED
    # "Updated ..." and "Installing dependencies" both mean updated, as does any
    # other output from a run that did not fail.
    return UpdateOutcome.UPDATED
