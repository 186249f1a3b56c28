# controls.py
import logging
import threading
from typing import Optional, Protocol, Tuple

import keyboard  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT

logger = logging.getLogger(__name__)

Direction = Tuple[int, int]

KEY_DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def key_direction(name: Optional[str]) -> Optional[Direction]:
    """Arrow key name -> direction; anything else -> None."""
    if not name:
        return None
    return KEY_DIRECTIONS.get(name.lower())


def is_turn(current: Direction, candidate: Direction) -> bool:
    """True if candidate is on the other axis (no reversing, no repeats)."""
    return (current[0] == 0) != (candidate[0] == 0)


class InputSource(Protocol):
    def poll(self) -> Direction: ...


class DirectionState:
    """
    Latest accepted direction, shared between the keyboard thread and the game loop.
    Last write wins: two turns inside one tick keep only the second.
    """

    def __init__(self, initial: Direction = RIGHT):
        self._lock = threading.Lock()
        self._direction = initial

    def poll(self) -> Direction:
        with self._lock:
            return self._direction

    def turn(self, candidate: Direction) -> bool:
        """Apply candidate if it is a perpendicular turn. Returns whether it was accepted."""
        with self._lock:
            if not is_turn(self._direction, candidate):
                return False
            self._direction = candidate
            return True


class KeyboardListener(threading.Thread):
    """
    Global arrow-key hook on a background thread.
    If the hook can't be installed (e.g. not root on Linux) the error is
    logged and the thread ends; the game carries on with the last direction.
    """

    def __init__(self, state: DirectionState):
        super().__init__(name="keyboard-listener", daemon=True)
        self.state = state

    def on_key(self, name: Optional[str]) -> None:
        logger.debug("Key: %s", name)
        cand = key_direction(name)
        if cand is not None:
            self.state.turn(cand)

    def _on_press(self, event) -> None:
        self.on_key(event.name)

    def run(self) -> None:
        try:
            keyboard.on_press(self._on_press)
            keyboard.wait()
        except (ImportError, OSError) as exc:
            logger.error("Keyboard listener stopped: %s", exc)
