"""Single-keystroke terminal input."""

from registry_sync.core.keyboard.abc import Keyboard
from registry_sync.core.keyboard.fake import FakeKeyboard
from registry_sync.core.keyboard.real import RealKeyboard

__all__ = ["FakeKeyboard", "Keyboard", "RealKeyboard"]
