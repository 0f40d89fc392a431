"""Board geometry derived from the number of legs and the leg height."""

from dataclasses import dataclass
from functools import cached_property
from typing import Optional, Tuple
import logging

from .constants import (
    DEFAULT_NUM_LEGS,
    DEFAULT_LEG_HEIGHT,
    MIN_NUM_LEGS,
    MIN_LEG_HEIGHT,
)
from .errors import ConfigurationError

# Setup logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Topology:
    """Geometric facts about a board with ``num_legs`` symmetric legs.

    Every leg contributes one bench exit, one endzone entry and one yolo
    entry/exit hole to the main track. All hole sets are tuples of Normal
    indices ordered by leg, so leg ``i`` belongs to player ``i``.

    Instances are immutable and can be shared between any number of games
    with the same parameters.
    """

    num_legs: int = DEFAULT_NUM_LEGS
    leg_height: int = DEFAULT_LEG_HEIGHT

    def validate(self) -> 'Topology':
        """Raise ConfigurationError for degenerate parameters."""
        if not isinstance(self.num_legs, int) or self.num_legs < MIN_NUM_LEGS:
            raise ConfigurationError(
                f"num_legs must be an integer >= {MIN_NUM_LEGS}, got {self.num_legs!r}")
        if not isinstance(self.leg_height, int) or self.leg_height < MIN_LEG_HEIGHT:
            raise ConfigurationError(
                f"leg_height must be an integer >= {MIN_LEG_HEIGHT}, got {self.leg_height!r}")
        return self

    @property
    def leg_perimeter(self) -> int:
        return 3 * self.leg_height - 3

    @property
    def track_length(self) -> int:
        return self.leg_perimeter * self.num_legs

    @property
    def marbles_per_player(self) -> int:
        return self.leg_height - 1

    def _per_leg(self, offset: int) -> Tuple[int, ...]:
        """Indices ``i * leg_perimeter + offset`` (mod track length), one per leg."""
        seen = []
        for leg in range(self.num_legs):
            index = (leg * self.leg_perimeter + offset) % self.track_length
            if index not in seen:
                seen.append(index)
        return tuple(seen)

    @cached_property
    def yolo_entries(self) -> Tuple[int, ...]:
        return self._per_leg(self.leg_height - 1)

    @property
    def yolo_exits(self) -> Tuple[int, ...]:
        """Where a marble lands when it leaves the yolo hole (same holes as the entries)."""
        return self.yolo_entries

    @cached_property
    def bench_exits(self) -> Tuple[int, ...]:
        return self._per_leg(0)

    @cached_property
    def endzone_entries(self) -> Tuple[int, ...]:
        return self._per_leg(-(self.leg_height // 2))

    def is_yolo_entry(self, index: int) -> bool:
        return index in self.yolo_entries

    def is_bench_exit(self, index: int) -> bool:
        return index in self.bench_exits

    def is_endzone_entry(self, index: int) -> bool:
        return index in self.endzone_entries

    def bench_exit_for(self, player: int) -> int:
        """The track hole a player's marbles enter from the bench."""
        return (player * self.leg_perimeter) % self.track_length

    def endzone_entry_for(self, player: int) -> int:
        """The track hole that diverts a player's marbles into their endzone."""
        return (player * self.leg_perimeter - self.leg_height // 2) % self.track_length

    def last_yolo_exit_for(self, player: int) -> int:
        """Yolo exit closest to the player's endzone entry without passing it."""
        return (player * self.leg_perimeter - (2 * self.leg_height - 2)) % self.track_length

    def endzone_owner(self, index: int) -> Optional[int]:
        """Player whose endzone is entered from ``index``, or None."""
        try:
            return self.endzone_entries.index(index)
        except ValueError:
            return None
