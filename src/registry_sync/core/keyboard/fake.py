"""Fake Keyboard implementation for testing.

FakeKeyboard replays a scripted sequence of key presses.
"""

from registry_sync.core.keyboard.abc import Keyboard


class FakeKeyboard(Keyboard):
    """In-memory fake implementation replaying scripted keys.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, keys: list[str] | None = None) -> None:
        """Create FakeKeyboard.

        Args:
            keys: Keys returned by successive read_key() calls, in order
        """
        self._keys = list(keys or [])
        self._reads: list[str] = []

    @property
    def reads(self) -> list[str]:
        """Get the keys that were handed out so far.

        This property is for test assertions only.
        """
        return self._reads.copy()

    @property
    def remaining(self) -> int:
        """Number of scripted keys not yet read.

        This property is for test assertions only.
        """
        return len(self._keys) - len(self._reads)

    def read_key(self) -> str:
        if self.remaining == 0:
            raise RuntimeError("FakeKeyboard ran out of scripted keys")
        key = self._keys[len(self._reads)]
        self._reads.append(key)
        return key
