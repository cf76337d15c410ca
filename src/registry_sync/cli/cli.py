import logging
import os

import click
from rich.console import Console

from registry_sync import __version__
from registry_sync.cli.arguments import parse_arguments
from registry_sync.cli.controller import SessionController
from registry_sync.cli.rendering import SessionView, show_argument_error
from registry_sync.core.context import create_context
from registry_sync.core.errors import ArgumentError
from registry_sync.error_boundary import cli_error_boundary

DEBUG_ENV = "REGISTRY_SYNC_DEBUG"

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"], ignore_unknown_options=True)


def _enable_debug_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.command("registry-sync", context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="registry-sync")
@click.option("--add-missing", is_flag=True, help="Install all missing components.")
@click.option(
    "--add-all",
    is_flag=True,
    help="Show what components would be installed (dry run). Installs with --force.",
)
@click.option("--force", is_flag=True, help="Install without confirmation.")
@click.option(
    "--diff", is_flag=True, help="Show differences between local and registry versions."
)
@click.option("--debug", is_flag=True, help=f"Enable debug logging (or set {DEBUG_ENV}).")
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED, metavar="[COMPONENT]")
@click.pass_context
def cli(
    ctx: click.Context,
    add_missing: bool,
    add_all: bool,
    force: bool,
    diff: bool,
    debug: bool,
    tokens: tuple[str, ...],
) -> None:
    """Sync UI components from a remote registry into this project.

    Without arguments, shows how the registry compares to the local project.
    """
    if debug or os.getenv(DEBUG_ENV):
        _enable_debug_logging()

    console = Console(soft_wrap=True, highlight=False)
    try:
        arguments = parse_arguments(
            tokens, add_missing=add_missing, add_all=add_all, force=force, diff=diff
        )
    except ArgumentError as e:
        show_argument_error(console, str(e), e.usage_lines)
        raise SystemExit(1) from None

    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)

    view = SessionView(console, ctx.obj.config.registry_url)
    controller = SessionController(ctx.obj, arguments, view)
    controller.run()

    if not controller.succeeded:
        raise SystemExit(1)


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
