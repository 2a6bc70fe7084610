"""Overlay pages, the score text and the scaled background."""

from __future__ import annotations

import enum
from typing import Optional

import numpy as np

from hexmatch.board import RESOURCE_DIR
from hexmatch.characters import Character
from hexmatch.scene import GameObject

BACKGROUND_DIR = f"{RESOURCE_DIR}/Image/Background"
_OBJECT_DIR = f"{RESOURCE_DIR}/Image/GameObject"
FONT_PATH = f"{RESOURCE_DIR}/Font/Inkfree.ttf"
DEFAULT_SCREEN_SIZE = (1920, 1080)


class JumpStatus(enum.IntEnum):
    PLAY = 1
    END = 2
    PAUSE = 3


def _button(image: str, position, z_index: float) -> Character:
    button = Character(f"{_OBJECT_DIR}/{image}")
    button.position = position
    button.z_index = z_index
    button.visible = False
    return button


class JumpPage(Character):
    """A pop-up page with play, cancel, pause, continue and stop buttons."""

    def __init__(self, image_path: str) -> None:
        super().__init__(image_path)
        self.status: Optional[JumpStatus] = None
        self.play_button = _button("playButtom.png", (60.5, -120.5), 13)
        self.cancel_button = _button("closeButton.png", (100, 146), 13)
        self.pause_button = _button("pauseButton.png", (-114.5, -258), 13)
        self.continue_button = _button("continueButtom.png", (0, 30), 14)
        self.stop_button = _button("stopButtom.png", (0, -30), 14)

    @property
    def buttons(self):
        return (
            self.play_button,
            self.cancel_button,
            self.pause_button,
            self.continue_button,
            self.stop_button,
        )

    def all_disappear(self) -> None:
        for button in self.buttons:
            button.visible = False
        self.visible = False

    def play_page(self, stage: int) -> None:
        self.all_disappear()
        self.play_button.visible = True
        self.cancel_button.visible = True
        if stage in (1, 2):
            self.set_image(f"{BACKGROUND_DIR}/stage{stage}Start.png")
        self.visible = True
        self.status = JumpStatus.PLAY

    def end_page(self, stage: int) -> None:
        self.all_disappear()
        self.cancel_button.visible = True
        if stage in (1, 2):
            self.set_image(f"{BACKGROUND_DIR}/stage{stage}End.png")
        self.status = JumpStatus.END
        self.visible = True

    def pause_page(self) -> None:
        self.all_disappear()
        self.continue_button.visible = True
        self.stop_button.visible = True
        self.set_image(f"{BACKGROUND_DIR}/pausePage.png")
        self.status = JumpStatus.PAUSE
        self.visible = True

    @staticmethod
    def _clicked(button: Character, cursor, mouse_down: bool) -> bool:
        return button.visible and button.is_clicked(cursor, mouse_down)

    def clicked_play(self, cursor, mouse_down: bool) -> bool:
        return self._clicked(self.play_button, cursor, mouse_down)

    def clicked_cancel(self, cursor, mouse_down: bool) -> bool:
        return self._clicked(self.cancel_button, cursor, mouse_down)

    def clicked_pause(self, cursor, mouse_down: bool) -> bool:
        return self._clicked(self.pause_button, cursor, mouse_down)

    def clicked_continue(self, cursor, mouse_down: bool) -> bool:
        return self._clicked(self.continue_button, cursor, mouse_down)

    def clicked_stop(self, cursor, mouse_down: bool) -> bool:
        return self._clicked(self.stop_button, cursor, mouse_down)

    def clicked_cancel_in_end(self, cursor, mouse_down: bool) -> bool:
        return (
            self._clicked(self.cancel_button, cursor, mouse_down)
            and self.status is JumpStatus.END
        )


class ScoreText(GameObject):
    """The score shown during a stage; the text changes on ``update_text``."""

    def __init__(self) -> None:
        super().__init__(z_index=100)
        self.font = FONT_PATH
        self.font_size = 50
        self.text = "0" + "\n" + ""
        self.value = 0
        self.position = (0.0, -270.0)

    @property
    def position(self):
        x, y = self.transform.translation
        return (float(x), float(y))

    @position.setter
    def position(self, value) -> None:
        self.transform.translation = np.array(value, dtype=float)

    def set_value(self, value: int) -> None:
        self.value = value

    def update_text(self) -> None:
        self.text = f"{self.value}\n"


class BackgroundImage(GameObject):
    """Full-screen background that keeps its aspect ratio when scaled."""

    def __init__(self) -> None:
        super().__init__(z_index=-1, pivot=(0.1, 0.5))
        self.image_path = f"{BACKGROUND_DIR}/initialImage.png"

    def next_image(self, phase: str) -> None:
        """Switch to the background image file named ``phase``."""
        self.image_path = f"{BACKGROUND_DIR}/{phase}"

    def scale_matrix(self, screen_size=DEFAULT_SCREEN_SIZE, image_size=None) -> np.ndarray:
        """Matrix fitting the image inside the screen, offset by the pivot."""
        if image_size is None:
            return np.identity(4)
        screen = np.array(screen_size, dtype=float)
        image = np.array(image_size, dtype=float)
        final_scale = float(min(screen / image))
        offset = self.pivot * image * final_scale
        translate = np.identity(4)
        translate[:2, 3] = -offset
        scale = np.diag([final_scale, final_scale, 1.0, 1.0])
        return translate @ scale