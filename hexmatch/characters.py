"""Clickable sprites and the blocks that sit on a game board."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from hexmatch.board import EMPTY_OBJECT, ObjectInformation
from hexmatch.input import InputState
from hexmatch.scene import GameObject

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]

DEFAULT_SIZE: Vec2 = (50.0, 100.0)

KEY_UP: Hashable = "UP"
KEY_DOWN: Hashable = "DOWN"
KEY_LEFT: Hashable = "LEFT"
KEY_RIGHT: Hashable = "RIGHT"


def _as_vec2(value) -> Vec2:
    x, y = value
    return (float(x), float(y))


class Character(GameObject):
    """A sprite with an image, a position and a rectangular hit box."""

    def __init__(self, image_path: str) -> None:
        super().__init__()
        self.size: Vec2 = DEFAULT_SIZE
        self.image_path = ""
        self.set_image(image_path)
        self.reset_position()

    @property
    def position(self) -> Vec2:
        x, y = self.transform.translation
        return (float(x), float(y))

    @position.setter
    def position(self, value) -> None:
        self.transform.translation = np.array(_as_vec2(value), dtype=float)

    def set_image(self, image_path: str) -> None:
        """Show a still image, replacing any animation."""
        self.image_path = image_path
        self.animation = None

    def reset_position(self) -> None:
        self.transform.translation = np.zeros(2)

    def collides(self, other: Optional["Character"]) -> bool:
        """Rectangle overlap test; this object's size is used for both boxes."""
        if other is None:
            return False
        ax, ay = self.position
        bx, by = other.position
        width, height = self.size
        overlap_x = ax < bx + width and ax + width > bx
        overlap_y = ay < by + height and ay + height > by
        return overlap_x and overlap_y

    def is_clicked(self, cursor, mouse_down: bool) -> bool:
        """True when the mouse went down with the cursor inside the box."""
        mx, my = _as_vec2(cursor)
        x, y = self.position
        width, height = self.size
        inside = x <= mx <= x + width and y <= my <= y + height
        clicked = inside and bool(mouse_down)
        if clicked:
            logger.debug("click")
        return clicked


class GameCharacter(Character):
    """A block on a board, carrying its cell information and game flags."""

    def __init__(self, image_path: str) -> None:
        self.information = ObjectInformation()
        super().__init__(image_path)
        self.block = -1
        self.switched = 0
        self.appear_flag = True
        self.click = False
        self.block_type = 0
        self.current_type = 0
        self.generate = False

    @Character.position.setter
    def position(self, value) -> None:
        point = _as_vec2(value)
        self.transform.translation = np.array(point, dtype=float)
        self.information.position = point

    def appear(self) -> None:
        self.visible = True

    def disappear(self) -> None:
        self.visible = False

    def place(self, stage: int, position_number: int, neighbors: Sequence[int], position) -> None:
        """Put the block on a board cell and move it there."""
        self.information.stage = stage
        self.information.position_number = position_number
        self.information.set_neighbors(neighbors)
        self.position = position

    def set_information(self, information: ObjectInformation) -> None:
        """Take a copy of the cell information without moving the sprite."""
        self.information = replace(information, neighbors=list(information.neighbors))

    def switch_position(self, other: "GameCharacter") -> None:
        """Swap board cells with another block and move both sprites."""
        self.information, other.information = other.information, self.information
        self.position = self.information.position
        other.position = other.information.position

    def drop(self, move=(0.0, 1.0), goal=(0.0, 0.0)) -> None:
        """Step by ``move`` until the block stands exactly on ``goal``."""
        x, y = self.position
        dx, dy = _as_vec2(move)
        gx, gy = _as_vec2(goal)
        steps = None
        for start, step, target in ((x, dx, gx), (y, dy, gy)):
            if step == 0:
                if start != target:
                    raise ValueError(f"goal {goal} is not reachable by {move}")
                continue
            count = (target - start) / step
            if count < 0 or count != int(count):
                raise ValueError(f"goal {goal} is not reachable by {move}")
            if steps is not None and steps != int(count):
                raise ValueError(f"goal {goal} is not reachable by {move}")
            steps = int(count)
        self.position = (gx, gy)

    def debug_move(self, input_state: InputState, speed: float) -> Vec2:
        """Nudge the block with the arrow keys and return its new position."""
        x, y = self.position
        if input_state.is_key_down(KEY_UP):
            y += speed
        if input_state.is_key_down(KEY_DOWN):
            y -= speed
        if input_state.is_key_down(KEY_LEFT):
            x -= speed
        if input_state.is_key_down(KEY_RIGHT):
            x += speed
        self.position = (x, y)
        logger.debug("x : %s y : %s", x, y)
        return self.position

    def blink_frames(self) -> List[str]:
        """Frames of the blink shown before a block disappears."""
        return [self.image_path, EMPTY_OBJECT, self.image_path, EMPTY_OBJECT]


def describe_appearance(objects: Iterable[GameCharacter]) -> List[str]:
    """One line per block giving its cell number and appear flag."""
    return [
        f"Pos number: {obj.information.position_number} Appear Bool: {int(obj.appear_flag)}"
        for obj in objects
    ]