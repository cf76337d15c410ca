"""Rich rendering of session states.

SessionView only formats and prints; it never decides what happens next.
Dynamic content is wrapped in ``Text`` so component names and diff lines are
never interpreted as console markup.
"""

import math
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status
from rich.table import Table
from rich.text import Text

from registry_sync.core.breakdown import ComponentCategories
from registry_sync.core.diff import DiffRecord, has_differences
from registry_sync.core.installer.types import ComponentOutcome, UpdateOutcome
from registry_sync.core.registry.real import component_url

PROGRESS_BAR_WIDTH = 20
RECENT_BATCH_OUTCOMES = 5
RECENT_CONFIRMATION_OUTCOMES = 3
RECENT_LOADING_MESSAGES = 5
INSTALLED_PREVIEW_LIMIT = 15

LOADING_TITLE = "🔍 Fetching and verifying registry components..."

OUTCOME_ICONS = {
    UpdateOutcome.UPDATED: "✅",
    UpdateOutcome.SKIPPED: "⏭️",
    UpdateOutcome.FAILED: "❌",
}
OUTCOME_STYLES = {
    UpdateOutcome.UPDATED: "green",
    UpdateOutcome.SKIPPED: "yellow",
    UpdateOutcome.FAILED: "red",
}


def format_progress_bar(done: int, total: int, width: int = PROGRESS_BAR_WIDTH) -> str:
    """Render ``[████░░░░] 40%`` for ``done`` of ``total`` items.

    Percentages round half up. An empty batch reads as 0%.
    """
    percent = 0 if total == 0 else math.floor(done * 100 / total + 0.5)
    filled = percent * width // 100
    return f"[{'█' * filled}{'░' * (width - filled)}] {percent}%"


def format_outcome(entry: ComponentOutcome) -> Text:
    icon = OUTCOME_ICONS[entry.outcome]
    return Text(f"{icon} {entry.name}", style=OUTCOME_STYLES[entry.outcome])


def format_installed_preview(names: Sequence[str], limit: int = INSTALLED_PREVIEW_LIMIT) -> str:
    """First ``limit`` names, with a count of the rest."""
    preview = ", ".join(names[:limit])
    if len(names) > limit:
        preview += f"... ({len(names) - limit} more)"
    return preview


def show_argument_error(console: Console, message: str, usage_lines: Sequence[str]) -> None:
    """Print an argument error and the usage text on the session console."""
    console.print(Text(f"❌ Error: {message}", style="red"))
    for line in usage_lines:
        console.print(Text(line))


class LoadingProgress:
    """Loading steps, printed dim and listed under the spinner."""

    def __init__(self, console: Console, status: Status) -> None:
        self._console = console
        self._status = status
        self._messages: list[str] = []

    def __call__(self, message: str) -> None:
        self._console.print(Text(message, style="dim"))
        self._messages.append(message)
        lines = [Text(LOADING_TITLE, style="blue")]
        lines.extend(Text(line, style="dim") for line in self._messages[-RECENT_LOADING_MESSAGES:])
        self._status.update(Text("\n").join(lines))


class BatchProgress:
    """Progress display for a batch install.

    The spinner line shows the bar, the processed count, the component being
    installed and the latest outcomes. Each finished item is also printed so
    the record survives in scrollback and in non-terminal output.
    """

    def __init__(self, console: Console, status: Status, total: int) -> None:
        self._console = console
        self._status = status
        self._total = total
        self._outcomes: list[ComponentOutcome] = []

    def started(self, name: str) -> None:
        self._status.update(self._render(current=name))

    def finished(self, entry: ComponentOutcome) -> None:
        self._outcomes.append(entry)
        self._console.print(format_outcome(entry))
        self._status.update(self._render(current=None))

    def _render(self, current: str | None) -> Text:
        done = len(self._outcomes)
        lines = [
            Text(f"Progress: {format_progress_bar(done, self._total)}"),
            Text(f"Processed: {done}/{self._total}"),
        ]
        if current is not None:
            lines.append(Text(f"Currently installing: {current}", style="yellow"))
        lines.extend(format_outcome(entry) for entry in self._outcomes[-RECENT_BATCH_OUTCOMES:])
        return Text("\n").join(lines)


class SessionView:
    """Terminal rendering for every session state."""

    def __init__(self, console: Console, registry_url: str) -> None:
        self._console = console
        self._registry_url = registry_url

    def _print(self, message: str = "", style: str | None = None) -> None:
        self._console.print(Text(message, style=style or ""))

    # Loading

    @contextmanager
    def loading(self) -> Iterator[LoadingProgress]:
        """Spinner shown while the registry is fetched and verified."""
        with self._console.status(Text(LOADING_TITLE, style="blue"), spinner="dots") as status:
            yield LoadingProgress(self._console, status)

    def show_installed_under_different_name(self, names: Sequence[str]) -> None:
        if not names:
            return
        self._print(
            f"✅ Found {len(names)} components already installed (but under different names):"
        )
        for name in names:
            self._print(f"   - {name}: already added")
        self._print()

    # Terminal states

    def show_error(self, message: str) -> None:
        self._print(f"❌ Error: {message}", style="red")
        self._print("Check your internet connection and try again.", style="bright_black")

    def show_empty_registry(self) -> None:
        self._print("❌ No registry components found to install!", style="red")

    def show_up_to_date(self) -> None:
        self._print("✨ All registry components are already installed!", style="green")

    def show_not_found(self, name: str, available: Sequence[str]) -> None:
        self._print(f'❌ Component "{name}" not found in registry', style="red")
        self._print(f"Available components: {', '.join(available)}")

    def show_dry_run(self, categories: ComponentCategories) -> None:
        self._print("🔍 DRY RUN: --add-all flag detected", style="cyan")
        self._print()
        self._print(f"📦 Would install {categories.total} registry components:")
        self._print()
        groups = (
            ("🧩 Components", categories.components),
            ("🪝 Hooks", categories.hooks),
            ("🎨 Icons", categories.icons),
            ("🎭 Theme", categories.theme),
        )
        for label, names in groups:
            if names:
                self._print(f"{label} ({len(names)}): {', '.join(names)}")
        self._print()
        self._print("💡 To actually install all components, run:", style="blue")
        self._print("   registry-sync --add-all --force")
        self._print()
        self._print(
            "⚠️  This will overwrite all existing components with registry versions!",
            style="yellow",
        )

    def show_summary(
        self,
        categories: ComponentCategories,
        missing: ComponentCategories,
        installed: Sequence[str],
        verified_missing: Sequence[str],
    ) -> None:
        self._print("🎯 Component Registry", style="bold magenta")
        self._print(f"Registry: {self._registry_url}", style="bright_black")
        self._print()
        self._print("📊 Registry Breakdown:", style="bold cyan")
        self._print()
        self._print(f" Total: {categories.total} items")

        table = Table(show_edge=False, pad_edge=False)
        table.add_column("Category")
        table.add_column("Items", justify="right")
        table.add_column("Available to install", justify="right")
        rows = [
            ("🧩 Components", categories.components, missing.components),
            ("🪝 Hooks", categories.hooks, missing.hooks),
            ("🎨 Icons", categories.icons, missing.icons),
        ]
        # The manifest filter drops "theme", so the row is left out unless it has items
        if categories.theme:
            rows.append(("🎭 Theme", categories.theme, missing.theme))
        for label, names, missing_names in rows:
            table.add_row(label, str(len(names)), str(len(missing_names)))
        self._console.print(table)

        self._print()
        self._print(" Currently Installed:")
        self._print()
        if installed:
            self._print(f" - ✅ {format_installed_preview(installed)}")
            self._print()
        self._print(f" Verified Missing: {len(verified_missing)} items")
        self._print()
        if verified_missing:
            self._print(f"Available components: {', '.join(verified_missing)}", style="green")
            self._print()
            self._print(
                "Run with --add-missing to install missing components "
                "or --add-all to see what would be installed.",
                style="green",
            )
            self._print(
                "💡 Use --add-all --force to actually install and overwrite "
                "all existing components with latest versions.",
                style="yellow",
            )

    def show_diff(self, name: str, records: Sequence[DiffRecord]) -> None:
        self._print(f"🔍 Component Diff: {name}", style="bold cyan")
        self._print(f"Registry: {component_url(self._registry_url, name)}", style="bright_black")
        self._print()

        if not any(has_differences(record.diff_text) for record in records):
            self._print(
                "✅ No differences found - your local component matches the registry version!",
                style="green",
            )
            return

        self._print("📝 Found differences between local and registry versions:", style="yellow")
        self._print()
        for record in records:
            self._print(f"📄 {record.file_name}", style="bold magenta")
            if record.local_path is not None:
                self._print(f"Local: {record.local_path.as_posix()}", style="bright_black")
            else:
                self._print("⚠️ Local file not found", style="red")
            self._print()
            if has_differences(record.diff_text):
                for line in record.diff_text.split("\n")[2:]:
                    self._print(line, style=_diff_line_style(line))
            else:
                self._print("No differences in content", style="green")
            self._print()

        self._print("💡 To update your component, run:", style="blue")
        self._print(f"   registry-sync {name}", style="bright_black")

    # Item processing

    @contextmanager
    def batch(self, title: str, total: int) -> Iterator[BatchProgress]:
        self._print(f"🔄 {title}", style="bold cyan")
        self._print()
        with self._console.status(
            Text(f"Progress: {format_progress_bar(0, total)}"), spinner="dots"
        ) as status:
            yield BatchProgress(self._console, status, total)

    def show_confirmation_prompt(self, name: str, index: int, total: int) -> None:
        self._print(f"🔄 Component Update Confirmation ({index}/{total})", style="bold cyan")
        self._print()
        prompt = Text(f'⚠️ Update component "{name}"? (Y/n): ', style="yellow")
        self._console.print(prompt, end="")

    def show_confirmation_answer(self, confirmed: bool) -> None:
        self._print("Yes" if confirmed else "No")
        self._print()

    def show_confirmation_progress(self, outcomes: Sequence[ComponentOutcome], total: int) -> None:
        self._print(f"Progress: {len(outcomes)}/{total} completed", style="bright_black")
        for entry in outcomes[-RECENT_CONFIRMATION_OUTCOMES:]:
            self._console.print(format_outcome(entry))
        self._print()

    def show_results(self, outcomes: Sequence[ComponentOutcome]) -> None:
        updated = [e for e in outcomes if e.outcome is UpdateOutcome.UPDATED]
        skipped = [e for e in outcomes if e.outcome is UpdateOutcome.SKIPPED]
        failed = [e for e in outcomes if e.outcome is UpdateOutcome.FAILED]

        self._print("📊 Installation Complete!", style="bold green")
        self._print()
        if updated:
            self._print(f"✅ Successfully installed: {len(updated)} components", style="green")
        if skipped:
            self._print(
                f"⏭️ Skipped (already up-to-date): {len(skipped)} components", style="yellow"
            )
        if failed:
            self._print(f"❌ Failed to install: {len(failed)} components", style="red")
            self._print(
                f" Failed components: {', '.join(e.name for e in failed)}", style="red"
            )
        self._print(f"📦 Total components processed: {len(outcomes)}")
        self._print()
        if not failed:
            self._print("🎉 All components are now synced with the registry!", style="green")
        else:
            self._print(
                "⚠️ Some components were processed successfully, but others failed.",
                style="yellow",
            )
            self._print("Check the console output above for detailed error messages.")


def _diff_line_style(line: str) -> str:
    if line.startswith("@@"):
        return "cyan"
    if line.startswith("-"):
        return "red"
    if line.startswith("+"):
        return "green"
    return "bright_black"
