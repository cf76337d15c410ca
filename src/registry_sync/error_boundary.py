"""Error boundary handling for CLI commands.

This module provides decorators to catch well-known exceptions at CLI entry points
and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from registry_sync.core.errors import SyncError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - SyncError: Registry and installer failures that escaped the session
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SyncError as e:
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from None
        except FileNotFoundError as e:
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from None
        except ValueError as e:
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from None
        except PermissionError as e:
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
