"""Keystroke input abstraction for testing.

Confirmation prompts block on a single key press. This ABC lets tests script
the keys instead of reading a terminal.
"""

from abc import ABC, abstractmethod


class Keyboard(ABC):
    """Abstract single-key input for dependency injection."""

    @abstractmethod
    def read_key(self) -> str:
        """Block until one key is pressed and return it.

        Returns:
            The key as a string. Enter is returned as "\\r" or "\\n".
        """
        ...
