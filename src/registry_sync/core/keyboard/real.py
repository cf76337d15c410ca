"""Real keyboard implementation reading the controlling terminal."""

import click

from registry_sync.core.keyboard.abc import Keyboard


class RealKeyboard(Keyboard):
    """Production implementation using click.getchar()."""

    def read_key(self) -> str:
        """Read one key without waiting for Enter and without echo."""
        return click.getchar()
