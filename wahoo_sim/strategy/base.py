"""Decision interface shared by every Wahoo strategy."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..game.board import BoardView
from ..game.types import Move


class DecisionStrategy(ABC):
    """Picks one of the legal moves, or declines with None.

    Strategies are also callable with the signature the game expects from a
    decision function: ``strategy(player, moves, roll, board)``.
    """

    name: str = "strategy"

    @abstractmethod
    def choose(self, player: int, moves: Sequence[Move], roll: int,
               board: BoardView) -> Optional[Move]:
        """Return a move drawn from ``moves`` or None."""

    def __call__(self, player: int, moves: Sequence[Move], roll: int,
                 board: BoardView) -> Optional[Move]:
        return self.choose(player, moves, roll, board)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CompositeStrategy(DecisionStrategy):
    """Tries strategies in priority order; the first non-None choice wins."""

    name = "composite"

    def __init__(self, strategies: List[DecisionStrategy]):
        self.strategies = list(strategies)

    @property
    def priority(self) -> List[str]:
        return [strategy.name for strategy in self.strategies]

    def choose(self, player, moves, roll, board):
        for strategy in self.strategies:
            choice = strategy.choose(player, moves, roll, board)
            if choice is not None:
                return choice
        return None

    def __repr__(self) -> str:
        return f"CompositeStrategy({' '.join(self.priority)})"
