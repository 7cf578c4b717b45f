"""Debounced "activate" signal shared by keyboard, mouse, and touch."""
from __future__ import annotations

from collections.abc import Hashable


class ActivateButton:
    """Turns press/release edges from any source into one impulse per press.

    A source that is already held produces nothing on repeated presses
    (key auto-repeat). Pending impulses do not accumulate: at most one is
    handed out per ``consume``.
    """

    def __init__(self) -> None:
        self._held: set[Hashable] = set()
        self._pending = False

    def press(self, source: Hashable) -> bool:
        """Register a press. Returns True if it produced an impulse."""
        if source in self._held:
            return False
        self._held.add(source)
        self._pending = True
        return True

    def release(self, source: Hashable) -> None:
        self._held.discard(source)

    def release_all(self) -> None:
        self._held.clear()

    def is_held(self, source: Hashable) -> bool:
        return source in self._held

    def consume(self) -> bool:
        pending = self._pending
        self._pending = False
        return pending
