"""Basic type definitions for the Wahoo game."""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import HoleId, EXTRA_TURN_ROLL
from .errors import InvariantViolation


class TurnPhase(Enum):
    AWAITING_ROLL = 0
    AWAITING_CHOICE = 1
    RESOLVING = 2
    GAME_OVER = 3


@dataclass(frozen=True)
class Marble:
    """A marble. Its owner never changes, even when it is captured."""
    owner: int


@dataclass(frozen=True)
class Move:
    """Moves the marble at ``start`` to ``finish``."""
    start: HoleId
    finish: HoleId

    def __iter__(self):
        """Unpack as a ``(start, finish)`` pair."""
        yield self.start
        yield self.finish

    def __str__(self) -> str:
        return f"{self.start}->{self.finish}"

    @classmethod
    def coerce(cls, choice) -> 'Move':
        """Accept either a Move or a plain ``(start, finish)`` pair."""
        if isinstance(choice, cls):
            return choice
        try:
            start, finish = choice
        except (TypeError, ValueError) as e:
            raise InvariantViolation(f"Decision returned {choice!r}, not a (start, finish) pair") from e
        return cls(start, finish)


@dataclass
class TurnResult:
    """What happened during one turn."""
    turn: int
    player: int
    roll: int
    legal_moves: List[Move] = field(default_factory=list)
    move: Optional[Move] = None
    captured: Optional[Marble] = None
    winner: Optional[int] = None

    @property
    def extra_turn(self) -> bool:
        return self.winner is None and self.roll == EXTRA_TURN_ROLL
