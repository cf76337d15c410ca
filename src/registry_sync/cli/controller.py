"""Session controller: runs one sync session from loading to its final state."""

import logging

from registry_sync.cli.arguments import ParsedArguments
from registry_sync.cli.rendering import SessionView
from registry_sync.core.breakdown import categorize
from registry_sync.core.context import SyncContext
from registry_sync.core.diff import build_component_diff
from registry_sync.core.errors import ComponentNotFound, RegistryMalformed, RegistryUnavailable
from registry_sync.core.installer.operations import install_component
from registry_sync.core.installer.types import ComponentOutcome, UpdateOutcome
from registry_sync.core.inventory import scan_local_components
from registry_sync.core.reconcile import verify_missing_components
from registry_sync.core.session import (
    FAILURE_STATES,
    Failed,
    ItemsProcessed,
    LoadSucceeded,
    RegistrySnapshot,
    SessionState,
    interpret_confirmation_key,
    select_candidates,
    transition,
)

logger = logging.getLogger(__name__)


class SessionController:
    """Sequences registry, scanner, verifier, installer and diff for one invocation.

    Every state transition goes through ``transition``. The controller owns the
    append-only outcome log; rendering is delegated to the view.
    """

    def __init__(self, ctx: SyncContext, arguments: ParsedArguments, view: SessionView) -> None:
        self._ctx = ctx
        self._arguments = arguments
        self._view = view
        self._state = SessionState.LOADING
        self._outcomes: list[ComponentOutcome] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def outcomes(self) -> tuple[ComponentOutcome, ...]:
        return tuple(self._outcomes)

    @property
    def succeeded(self) -> bool:
        """False when the session should exit with a non-zero status."""
        if self._state in FAILURE_STATES:
            return False
        return all(entry.outcome is not UpdateOutcome.FAILED for entry in self._outcomes)

    def run(self) -> SessionState:
        try:
            snapshot = self._load()
        except (RegistryUnavailable, RegistryMalformed, OSError) as e:
            logger.debug("Loading failed: %r", e)
            self._apply(Failed(str(e)))
            self._view.show_error(str(e))
            return self._state

        self._view.show_installed_under_different_name(
            snapshot.verification.installed_under_different_name
        )
        self._apply(LoadSucceeded(self._arguments, snapshot))

        if self._state is SessionState.SUMMARY:
            self._show_summary(snapshot)
        elif self._state is SessionState.DRY_RUN:
            self._view.show_dry_run(categorize(snapshot.registry_names))
        elif self._state is SessionState.EMPTY_REGISTRY:
            self._view.show_empty_registry()
        elif self._state is SessionState.UP_TO_DATE:
            self._view.show_up_to_date()
        elif self._state is SessionState.NOT_FOUND:
            assert self._arguments.component is not None
            self._view.show_not_found(self._arguments.component, snapshot.registry_names)
        elif self._state is SessionState.DIFF:
            self._show_diff()
        elif self._state is SessionState.INSTALLING:
            self._install_batch(select_candidates(self._state, self._arguments, snapshot))
        elif self._state is SessionState.CONFIRMING:
            self._confirm_each(select_candidates(self._state, self._arguments, snapshot))

        if self._state is SessionState.RESULTS:
            self._view.show_results(self._outcomes)
        return self._state

    def _apply(self, event: LoadSucceeded | Failed | ItemsProcessed) -> None:
        next_state = transition(self._state, event)
        logger.debug("Session %s -> %s", self._state.value, next_state.value)
        self._state = next_state

    def _load(self) -> RegistrySnapshot:
        config = self._ctx.config
        with self._view.loading() as progress:
            progress("🌐 Fetching registry components...")
            registry_names = self._ctx.registry.fetch_manifest().component_names()
            local_names = scan_local_components(
                self._ctx.cwd, config.scan_directories, config.stylesheet_path
            )
            progress(f"📦 Found {len(registry_names)} registry components")
            progress(f"💾 Found {len(local_names)} local components")

            verification = verify_missing_components(
                self._ctx.installer, registry_names, local_names, progress
            )
            progress("✨ Analysis complete")

        return RegistrySnapshot(
            registry_names=registry_names,
            local_names=local_names,
            verification=verification,
        )

    def _show_summary(self, snapshot: RegistrySnapshot) -> None:
        categories = categorize(snapshot.registry_names)
        self._view.show_summary(
            categories=categories,
            missing=categories.restricted_to(snapshot.verified_missing),
            installed=sorted(snapshot.local_names),
            verified_missing=snapshot.verified_missing,
        )

    def _show_diff(self) -> None:
        component = self._arguments.component
        assert component is not None
        try:
            details = self._ctx.registry.fetch_component_details(component)
        except (ComponentNotFound, RegistryMalformed) as e:
            message = f"Failed to fetch component details: {e}"
            self._apply(Failed(message))
            self._view.show_error(message)
            return
        self._view.show_diff(component, build_component_diff(self._ctx.cwd, details))

    def _batch_title(self) -> str:
        if self._arguments.add_all:
            return "Installing All Registry Components"
        if self._arguments.add_missing:
            return "Installing Missing Components"
        return f'Installing component "{self._arguments.component}" with --force'

    def _install_batch(self, candidates: tuple[str, ...]) -> None:
        with self._view.batch(self._batch_title(), len(candidates)) as progress:
            for name in candidates:
                progress.started(name)
                outcome = install_component(self._ctx.installer, name, force=True)
                entry = ComponentOutcome(name=name, outcome=outcome)
                self._outcomes.append(entry)
                progress.finished(entry)
        self._apply(ItemsProcessed())

    def _confirm_each(self, candidates: tuple[str, ...]) -> None:
        total = len(candidates)
        for index, name in enumerate(candidates, start=1):
            self._view.show_confirmation_prompt(name, index, total)
            confirmed = self._read_confirmation()
            self._view.show_confirmation_answer(confirmed)

            if confirmed:
                outcome = install_component(
                    self._ctx.installer, name, force=self._arguments.force
                )
            else:
                outcome = UpdateOutcome.SKIPPED
            self._outcomes.append(ComponentOutcome(name=name, outcome=outcome))
            self._view.show_confirmation_progress(self._outcomes, total)
        self._apply(ItemsProcessed())

    def _read_confirmation(self) -> bool:
        while True:
            key = self._ctx.keyboard.read_key()
            answer = interpret_confirmation_key(key)
            if answer is not None:
                return answer
            logger.debug("Ignoring key %r at confirmation prompt", key)
