"""Type definitions for installer operations."""

from dataclasses import dataclass
from enum import Enum


class UpdateOutcome(str, Enum):
    """Result of one installer invocation for one component."""

    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ComponentOutcome:
    """Entry of the session's append-only outcome log."""

    name: str
    outcome: UpdateOutcome
