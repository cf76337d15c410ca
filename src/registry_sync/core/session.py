"""Session state machine.

A session starts in ``LOADING`` and moves through at most two more states. The
transition function is pure: it inspects the event and the arguments and never
performs I/O, so every dispatch rule can be tested without a terminal.

    LOADING --LoadSucceeded--> SUMMARY | DRY_RUN | UP_TO_DATE | EMPTY_REGISTRY
                               | NOT_FOUND | DIFF | INSTALLING | CONFIRMING
    LOADING --Failed---------> ERROR
    DIFF --Failed------------> ERROR
    INSTALLING | CONFIRMING --ItemsProcessed--> RESULTS
"""

from dataclasses import dataclass
from enum import Enum

from registry_sync.cli.arguments import ParsedArguments
from registry_sync.core.errors import InvalidTransition
from registry_sync.core.reconcile import VerificationResult


class SessionState(str, Enum):
    LOADING = "loading"
    INSTALLING = "installing"
    CONFIRMING = "confirming"
    DIFF = "diff"
    SUMMARY = "summary"
    DRY_RUN = "dry_run"
    UP_TO_DATE = "up_to_date"
    EMPTY_REGISTRY = "empty_registry"
    NOT_FOUND = "not_found"
    RESULTS = "results"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        """True for states that accept no further events."""
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {
        SessionState.DRY_RUN,
        SessionState.UP_TO_DATE,
        SessionState.EMPTY_REGISTRY,
        SessionState.NOT_FOUND,
        SessionState.RESULTS,
        SessionState.ERROR,
    }
)

# Exit status 1 when the session ends in one of these states
FAILURE_STATES = frozenset(
    {SessionState.ERROR, SessionState.NOT_FOUND, SessionState.EMPTY_REGISTRY}
)


@dataclass(frozen=True)
class RegistrySnapshot:
    """Everything learned during loading. Read-only afterwards."""

    registry_names: tuple[str, ...]
    local_names: frozenset[str]
    verification: VerificationResult

    @property
    def verified_missing(self) -> tuple[str, ...]:
        return self.verification.verified_missing


@dataclass(frozen=True)
class LoadSucceeded:
    arguments: ParsedArguments
    snapshot: RegistrySnapshot


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class ItemsProcessed:
    pass


SessionEvent = LoadSucceeded | Failed | ItemsProcessed


def _dispatch(arguments: ParsedArguments, snapshot: RegistrySnapshot) -> SessionState:
    if arguments.add_all:
        if not snapshot.registry_names:
            return SessionState.EMPTY_REGISTRY
        if arguments.force:
            return SessionState.INSTALLING
        return SessionState.DRY_RUN

    if arguments.add_missing:
        if snapshot.verified_missing:
            return SessionState.INSTALLING
        return SessionState.UP_TO_DATE

    if arguments.component is not None:
        if arguments.component not in snapshot.registry_names:
            return SessionState.NOT_FOUND
        if arguments.diff:
            return SessionState.DIFF
        if arguments.force:
            return SessionState.INSTALLING
        return SessionState.CONFIRMING

    return SessionState.SUMMARY


def transition(state: SessionState, event: SessionEvent) -> SessionState:
    """Apply one event to the current state.

    Raises:
        InvalidTransition: If ``state`` does not accept ``event``
    """
    if state is SessionState.LOADING:
        if isinstance(event, LoadSucceeded):
            return _dispatch(event.arguments, event.snapshot)
        if isinstance(event, Failed):
            return SessionState.ERROR

    if state is SessionState.DIFF and isinstance(event, Failed):
        return SessionState.ERROR

    if state in (SessionState.INSTALLING, SessionState.CONFIRMING) and isinstance(
        event, ItemsProcessed
    ):
        return SessionState.RESULTS

    raise InvalidTransition(f"No transition from {state.value} on {type(event).__name__}")


def select_candidates(
    state: SessionState, arguments: ParsedArguments, snapshot: RegistrySnapshot
) -> tuple[str, ...]:
    """Components an item-processing state works through, in order."""
    if state is SessionState.INSTALLING:
        if arguments.add_all:
            return snapshot.registry_names
        if arguments.add_missing:
            return snapshot.verified_missing
        if arguments.component is not None:
            return (arguments.component,)
        return ()

    if state is SessionState.CONFIRMING:
        if arguments.component is not None:
            return (arguments.component,)
        return snapshot.verified_missing

    return ()


_YES_KEYS = frozenset({"\r", "\n", "y", "Y", ""})
_NO_KEYS = frozenset({"n", "N"})


def interpret_confirmation_key(key: str) -> bool | None:
    """Map a key press to a confirmation answer.

    Returns:
        True for Enter, ``y`` or an empty read; False for ``n``; None for any
        other key, which the prompt ignores
    """
    if key in _YES_KEYS:
        return True
    if key in _NO_KEYS:
        return False
    return None
