"""Per-frame keyboard and mouse state."""

from __future__ import annotations

from typing import Dict, Hashable, Tuple

MOUSE_KEY_BASE = 512
MOUSE_BUTTON_LEFT = 1
MOUSE_BUTTON_MIDDLE = 2
MOUSE_BUTTON_RIGHT = 3


def mouse_key(button: int) -> int:
    """Key code used for a mouse button number."""
    return MOUSE_KEY_BASE + button


MOUSE_LB = mouse_key(MOUSE_BUTTON_LEFT)
MOUSE_MB = mouse_key(MOUSE_BUTTON_MIDDLE)
MOUSE_RB = mouse_key(MOUSE_BUTTON_RIGHT)


class InputState:
    """Tracks each key's state in the previous and the current frame."""

    def __init__(self) -> None:
        self._keys: Dict[Hashable, Tuple[bool, bool]] = {
            MOUSE_LB: (False, False),
            MOUSE_RB: (False, False),
            MOUSE_MB: (False, False),
        }
        self.cursor: Tuple[float, float] = (0.0, 0.0)
        self.scroll_distance: Tuple[float, float] = (-1.0, -1.0)
        self.scrolling = False
        self.mouse_moving = False
        self.exit_requested = False

    def _state(self, key: Hashable) -> Tuple[bool, bool]:
        return self._keys.get(key, (False, False))

    def press(self, key: Hashable) -> None:
        previous, _ = self._state(key)
        self._keys[key] = (previous, True)

    def release(self, key: Hashable) -> None:
        previous, _ = self._state(key)
        self._keys[key] = (previous, False)

    def begin_frame(self) -> None:
        """Roll the current key states over into the previous frame."""
        self.scrolling = False
        self.mouse_moving = False
        self._keys = {key: (current, current) for key, (_, current) in self._keys.items()}

    def is_key_pressed(self, key: Hashable) -> bool:
        return self._state(key)[1]

    def is_key_down(self, key: Hashable) -> bool:
        previous, current = self._state(key)
        return current and not previous

    def is_key_up(self, key: Hashable) -> bool:
        previous, current = self._state(key)
        return previous and not current

    def set_cursor_from_window(self, x, y, width, height) -> None:
        """Store a window pixel position as centre-origin, y-up coordinates."""
        self.cursor = (float(x) - width / 2, -(float(y) - height / 2))