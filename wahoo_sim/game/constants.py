"""Constants and hole identifiers for the Wahoo board."""

from dataclasses import dataclass
from typing import Tuple, Union

# Board configuration
DEFAULT_NUM_LEGS = 6
DEFAULT_LEG_HEIGHT = 5
MIN_NUM_LEGS = 2
MIN_LEG_HEIGHT = 2

# Dice
DIE_FACES = 6
BENCH_EXIT_ROLLS = frozenset({1, 6})
YOLO_EXIT_ROLL = 1
EXTRA_TURN_ROLL = 6

# Ordering of hole kinds when sorting marbles
_KIND_ORDER = {
    'bench': 0,
    'normal': 1,
    'endzone': 2,
    'yolo': 3,
}


@dataclass(frozen=True)
class Normal:
    """A hole on the main circular track."""
    index: int

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return (_KIND_ORDER['normal'], 0, self.index)

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class Bench:
    """One of a player's private staging holes."""
    player: int
    slot: int

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return (_KIND_ORDER['bench'], self.player, self.slot)

    def __str__(self) -> str:
        return f"bench_{self.player}_{self.slot}"


@dataclass(frozen=True)
class Endzone:
    """One of a player's private finishing holes."""
    player: int
    slot: int

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return (_KIND_ORDER['endzone'], self.player, self.slot)

    def __str__(self) -> str:
        return f"endzone_{self.player}_{self.slot}"


@dataclass(frozen=True)
class Yolo:
    """The shared hazard hole. Use the ``YOLO`` singleton."""

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return (_KIND_ORDER['yolo'], 0, 0)

    def __str__(self) -> str:
        return "yolo"


YOLO = Yolo()

HoleId = Union[Normal, Bench, Endzone, Yolo]


def hole_sort_key(hole: HoleId) -> Tuple[int, int, int]:
    """Key giving a total, stable order over every kind of hole."""
    return hole.sort_key
