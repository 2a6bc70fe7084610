"""Board layouts, block kinds, resource paths and level progress."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

RESOURCE_DIR = "Resources"
_OBJECT_DIR = f"{RESOURCE_DIR}/Image/GameObject"

NEIGHBOR_DIRECTIONS = 6
LEVEL_COUNT = 12
OFF_SCREEN = (-100000.0, -100000.0)

Vec2 = Tuple[float, float]


class BlockColor(enum.IntEnum):
    BLUE = 1
    BROWN = 2
    GREEN = 3
    PINK = 4
    ORANGE = 5
    WHITE = 6
    YELLOW = 7


class BlockKind(enum.IntEnum):
    NORMAL = 1
    STRIPE = 2
    STRIPE_LEFT_RIGHT = 3
    STRIPE_RIGHT_LEFT = 4
    FLOWER = 5
    STARFLOWER = 6
    TRIANGLEFLOWER = 7
    RAINBOWBALL = 8
    FLOWER_COMBINED = 9
    FLOWER_STRIPE = 10
    STRIPE_COMBINED = 11


class GamePhase(enum.Enum):
    NORMAL = enum.auto()
    PAUSE_FOR_DISAPPEAR = enum.auto()
    DROPPING = enum.auto()


EMPTY_OBJECT = f"{_OBJECT_DIR}/emptyObject.png"
RAINBOWBALL_IMAGE = f"{_OBJECT_DIR}/rainbowBall.png"

_KIND_SUFFIX = {
    BlockKind.NORMAL: "Normal",
    BlockKind.STRIPE: "Line",
    BlockKind.STRIPE_LEFT_RIGHT: "LineLeftRight",
    BlockKind.STRIPE_RIGHT_LEFT: "LineRightLeft",
    BlockKind.FLOWER: "Flower",
    BlockKind.STARFLOWER: "StarFlower",
    BlockKind.TRIANGLEFLOWER: "TriangleFlower",
}

_LEVEL_NAMES = (
    "One", "Two", "Three", "Four", "Five", "Six",
    "Seven", "Eight", "Nine", "Ten", "Eleven", "Twelve",
)

# Index 0 is unused so that a list index equals the level number.
LEVEL_IMAGES: Tuple[str, ...] = ("",) + tuple(
    f"{_OBJECT_DIR}/level{name}.png" for name in _LEVEL_NAMES
)
CLEAR_IMAGES: Tuple[str, ...] = ("",) + tuple(
    f"{_OBJECT_DIR}/levelClear{name}.png" for name in _LEVEL_NAMES
)
CURRENT_IMAGES: Tuple[str, ...] = ("",) + tuple(
    f"{_OBJECT_DIR}/levelCurrent{name}.png" for name in _LEVEL_NAMES
)

STAGE_BUTTON_POSITIONS: Tuple[Vec2, ...] = (
    OFF_SCREEN,
    (-64.5, 87.5), (0.0, 87.5), (64.5, 87.5),
    (-64.5, 37.5), (0.0, 37.5), (64.5, 37.5),
    (-64.5, -27.5), (0.0, -27.5), (64.5, -27.5),
    (-64.5, -57.5), (0.0, -57.5), (64.5, -57.5),
)

POINT_POSITIONS: Tuple[Vec2, ...] = (
    OFF_SCREEN,
    (125.0, 210.0),
    (125.5, 260.5),
) + (OFF_SCREEN,) * 10

STAGE_POINT_GOALS: Tuple[int, ...] = (0, 10, 1000) + (40,) * 10

STAGE1_POSITIONS: Tuple[Vec2, ...] = (
    OFF_SCREEN,
    (-87, -70.5), (-87, -37.5), (-87, -4.5), (-87, 28.5),
    (-57, -85.5), (-57, -52.5), (-57, -19.5), (-57, 13.5), (-57, 46.5),
    (-27, -103.5), (-27, -67.5), (-27, -34.5), (-27, -1.5), (-27, 28.5), (-27, 61.5),
    (0, -118.5), (0, -84.5), (0, -52.5), (0, -19.5), (0, 13.5), (0, 46.5), (0, 79.5),
    (30, -103.5), (30, -70.5), (30, -37.5), (30, -4.5), (30, 31.5), (30, 61.5),
    (57, -82.5), (57, -49.5), (57, -16.5), (57, 13.5), (57, 47.5),
    (87, -70.5), (87, -37.5), (87, -1.5), (87, 31.5),
)

# Neighbours are listed clockwise, starting from the cell above.
STAGE1_NEIGHBORS: Tuple[Tuple[int, ...], ...] = (
    (-1, -1, -1, -1, -1, -1),
    (2, 6, 5, -1, -1, -1),
    (3, 7, 6, 1, -1, -1),
    (4, 8, 7, 2, -1, -1),
    (-1, 9, 8, 3, -1, -1),
    (6, 11, 10, -1, -1, 1),
    (7, 12, 11, 5, 1, 2),
    (8, 13, 12, 6, 2, 3),
    (9, 14, 13, 7, 3, 4),
    (-1, 15, 14, 8, 4, -1),
    (11, 17, 16, -1, -1, 5),
    (12, 18, 17, 10, 5, 6),
    (13, 19, 18, 11, 6, 7),
    (14, 20, 19, 12, 7, 8),
    (15, 21, 20, 13, 8, 9),
    (-1, 22, 21, 14, 9, -1),
    (17, 23, -1, -1, -1, 10),
    (18, 24, 23, 16, 10, 11),
    (19, 25, 24, 17, 11, 12),
    (20, 26, 25, 18, 12, 13),
    (21, 27, 26, 19, 13, 14),
    (22, 28, 27, 20, 14, 15),
    (-1, -1, 28, 21, 15, -1),
    (24, 29, -1, -1, 16, 17),
    (25, 30, 29, 23, 17, 18),
    (26, 31, 30, 24, 18, 19),
    (27, 32, 31, 25, 19, 20),
    (28, 33, 32, 26, 20, 21),
    (-1, -1, 33, 27, 21, 22),
    (30, 34, -1, -1, 23, 24),
    (31, 35, 34, 29, 24, 25),
    (32, 36, 35, 30, 25, 26),
    (33, 37, 36, 31, 26, 27),
    (-1, -1, 37, 32, 27, 28),
    (35, -1, -1, -1, 29, 30),
    (36, -1, -1, 34, 30, 31),
    (37, -1, -1, 35, 31, 32),
    (-1, -1, -1, 36, 32, 33),
)

STAGE2_POSITIONS: Tuple[Vec2, ...] = (
    OFF_SCREEN,
    (-119.5, -20.5),
    (-89.5, -40.5), (-89.5, -3),
    (-59.5, -58.5), (-59.5, -23), (-59.5, 12),
    (-29.5, -75.5), (-29.5, -40.5), (-29.5, -5.5), (-29.5, 29.5),
    (0.5, -93), (0.5, -60.5), (0.5, -23), (0.5, 12), (0.5, 47),
    (30.5, -108), (30.5, -75.5), (30.5, -40.5), (30.5, -5.5), (30.5, 32), (30.5, 64.5),
    (60.5, -125.5), (60.5, -90.5), (60.5, -55.5), (60.5, -20.5), (60.5, 14.5),
    (60.5, 47), (60.5, 84.5),
    (90.5, -143), (90.5, -108), (90.5, -73.5), (90.5, -40.5), (90.5, -5.5),
    (90.5, 29.5), (90.5, 64.5), (90.5, 102),
    (120.5, -160.5), (120.5, -128), (120.5, -93.5), (120.5, -58), (120.5, -23),
    (120.5, 12), (120.5, 47), (120.5, 84.5), (120.5, 117),
)

STAGE2_NEIGHBORS: Tuple[Tuple[int, ...], ...] = (
    (-1, -1, -1, -1, -1, -1),
    (-1, 3, 2, -1, -1, -1),
    (3, 5, 4, -1, -1, 1),
    (-1, 6, 5, 2, 1, -1),
    (5, 8, 7, -1, -1, 2),
    (6, 9, 8, 4, 2, 3),
    (-1, 10, 9, 5, 3, -1),
    (8, 12, 11, -1, -1, 4),
    (9, 13, 12, 7, 4, 5),
    (10, 14, 13, 8, 5, 6),
    (-1, 15, 14, 9, 6, -1),
    (12, 17, 16, -1, -1, 7),
    (13, 18, 17, 11, 7, 8),
    (14, 19, 18, 12, 8, 9),
    (15, 20, 19, 13, 9, 10),
    (-1, 21, 20, 14, 10, -1),
    (17, 23, 22, -1, -1, 11),
    (18, 24, 23, 16, 11, 12),
    (19, 25, 24, 17, 12, 13),
    (20, 26, 25, 18, 13, 14),
    (21, 27, 26, 19, 14, 15),
    (-1, 28, 27, 20, 15, -1),
    (23, 30, 29, -1, -1, 16),
    (24, 31, 30, 22, 16, 17),
    (25, 32, 31, 23, 17, 18),
    (26, 33, 32, 24, 18, 19),
    (27, 34, 33, 25, 19, 20),
    (28, 35, 34, 26, 20, 21),
    (-1, 36, 35, 27, 21, -1),
    (30, 38, 37, -1, -1, 22),
    (31, 39, 38, 29, 22, 23),
    (32, 40, 39, 30, 23, 24),
    (33, 41, 40, 31, 24, 25),
    (34, 42, 41, 32, 25, 26),
    (35, 43, 42, 33, 26, 27),
    (36, 44, 43, 34, 27, 28),
    (-1, 45, 44, 35, 28, -1),
    (38, -1, -1, -1, -1, 29),
    (39, -1, -1, 37, 29, 30),
    (40, -1, -1, 38, 30, 31),
    (41, -1, -1, 39, 31, 32),
    (42, -1, -1, 40, 32, 33),
    (43, -1, -1, 41, 33, 34),
    (44, -1, -1, 42, 34, 35),
    (45, -1, -1, 43, 35, 36),
    (-1, -1, -1, 44, 36, -1),
)

_STAGES = {
    1: (STAGE1_POSITIONS, STAGE1_NEIGHBORS),
    2: (STAGE2_POSITIONS, STAGE2_NEIGHBORS),
}


def _no_neighbors() -> List[int]:
    return [-1] * NEIGHBOR_DIRECTIONS


@dataclass
class ObjectInformation:
    """Where a block sits on a board: stage, cell number, neighbours, position."""

    stage: int = 0
    position_number: int = 0
    neighbors: List[int] = field(default_factory=_no_neighbors)
    position: Vec2 = (0.0, 0.0)

    def set_neighbors(self, neighbors: Sequence[int]) -> None:
        """Replace all six neighbours."""
        values = list(neighbors)
        if len(values) != NEIGHBOR_DIRECTIONS:
            raise ValueError(
                f"expected {NEIGHBOR_DIRECTIONS} neighbours, got {len(values)}"
            )
        self.neighbors = values

    def set_neighbor(self, neighbor: int, direction: int) -> None:
        """Set the neighbour in one direction (0..5, clockwise from above)."""
        if not 0 <= direction < NEIGHBOR_DIRECTIONS:
            raise IndexError(f"direction out of range: {direction}")
        self.neighbors[direction] = neighbor


def build_stage(stage: int) -> List[ObjectInformation]:
    """Cell records of a stage, indexed by cell number; index 0 is a sentinel."""
    try:
        positions, neighbors = _STAGES[stage]
    except KeyError:
        raise ValueError(f"no layout for stage {stage}") from None
    return [
        # Every layout records stage 1, as the game's tables do.
        ObjectInformation(
            stage=1,
            position_number=number,
            neighbors=list(cell_neighbors),
            position=(float(position[0]), float(position[1])),
        )
        for number, (position, cell_neighbors) in enumerate(zip(positions, neighbors))
    ]


def object_image(color: BlockColor, kind: BlockKind) -> str:
    """Image path for a block of the given colour and kind."""
    kind = BlockKind(kind)
    if kind is BlockKind.RAINBOWBALL:
        return RAINBOWBALL_IMAGE
    try:
        suffix = _KIND_SUFFIX[kind]
    except KeyError:
        raise ValueError(f"no image for block kind {kind.name}") from None
    color = BlockColor(color)
    return f"{_OBJECT_DIR}/{color.name.lower()}{suffix}.png"


def _check_level(level: int, lowest: int = 1) -> None:
    if not lowest <= level <= LEVEL_COUNT:
        raise ValueError(f"level out of range: {level}")


@dataclass
class Progress:
    """Which levels are cleared and the points scored in each."""

    cleared: List[bool] = field(
        default_factory=lambda: [True] + [False] * LEVEL_COUNT
    )
    points: List[int] = field(default_factory=lambda: [0] * (LEVEL_COUNT + 1))

    def is_cleared(self, level: int) -> bool:
        _check_level(level, lowest=0)
        return self.cleared[level]

    def mark_cleared(self, level: int) -> None:
        _check_level(level)
        self.cleared[level] = True

    def button_image(self, level: int) -> str:
        """Home-page button image: cleared, the next one to play, or locked."""
        _check_level(level)
        if self.cleared[level]:
            return CLEAR_IMAGES[level]
        if self.cleared[level - 1]:
            return CURRENT_IMAGES[level]
        return LEVEL_IMAGES[level]