"""Heuristic move choices and the registry used to combine them."""

from typing import Dict, List, Optional, Sequence, Type

import numpy as np

from ..game.constants import Bench, Endzone, Yolo, Normal
from .base import DecisionStrategy, CompositeStrategy


class ObviousMove(DecisionStrategy):
    """Take the only move, or any move when everything left is leaving the bench."""

    name = "obvious"

    def choose(self, player, moves, roll, board):
        if not moves:
            return None
        if all(isinstance(move.start, Bench) for move in moves):
            return moves[0]
        if len(moves) == 1:
            return moves[0]
        return None


class SmartLeaveYolo(DecisionStrategy):
    """Leave the yolo hole onto the exit closest to our endzone."""

    name = "smart_leave_yolo"

    def choose(self, player, moves, roll, board):
        target = Normal(board.topology.last_yolo_exit_for(player))
        for move in moves:
            if isinstance(move.start, Yolo) and move.finish == target:
                return move
        return None


class EnterEndzone(DecisionStrategy):
    name = "enter_endzone"

    def choose(self, player, moves, roll, board):
        for move in moves:
            if isinstance(move.finish, Endzone) and not isinstance(move.start, Endzone):
                return move
        return None


class Capture(DecisionStrategy):
    """Land on an opposing marble."""

    name = "capture"

    def choose(self, player, moves, roll, board):
        for move in moves:
            if board.marble_at(move.finish) is not None:
                return move
        return None


class EnterYolo(DecisionStrategy):
    name = "enter_yolo"

    def choose(self, player, moves, roll, board):
        for move in moves:
            if isinstance(move.finish, Yolo):
                return move
        return None


class ScootEndzone(DecisionStrategy):
    """Move a marble further up the endzone."""

    name = "scoot_endzone"

    def choose(self, player, moves, roll, board):
        for move in moves:
            if isinstance(move.start, Endzone):
                return move
        return None


class LeaveBench(DecisionStrategy):
    name = "leave_bench"

    def choose(self, player, moves, roll, board):
        for move in moves:
            if isinstance(move.start, Bench):
                return move
        return None


class FirstLegal(DecisionStrategy):
    name = "first"

    def choose(self, player, moves, roll, board):
        return moves[0] if moves else None


class RandomMove(DecisionStrategy):
    """Uniformly random legal move, drawn from an injected generator."""

    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose(self, player, moves, roll, board):
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]


STRATEGY_REGISTRY: Dict[str, Type[DecisionStrategy]] = {
    cls.name: cls
    for cls in (ObviousMove, SmartLeaveYolo, EnterEndzone, Capture, EnterYolo,
                ScootEndzone, LeaveBench, FirstLegal, RandomMove)
}

# Fixed order used by `play` and `count-turns`; random is the last resort.
DEFAULT_PRIORITY = [
    "obvious",
    "smart_leave_yolo",
    "enter_endzone",
    "capture",
    "enter_yolo",
    "scoot_endzone",
    "random",
]

# Heuristics that random_priority shuffles between "obvious" and "random".
OPTIONAL_HEURISTICS = [
    "smart_leave_yolo",
    "enter_yolo",
    "enter_endzone",
    "leave_bench",
    "capture",
    "scoot_endzone",
]


def build_strategy(names: Sequence[str], rng: Optional[np.random.Generator] = None) -> CompositeStrategy:
    """Build a composite strategy from registry names, in priority order."""
    strategies: List[DecisionStrategy] = []
    for name in names:
        try:
            cls = STRATEGY_REGISTRY[name]
        except KeyError:
            raise ValueError(f"Unknown strategy '{name}'. Known: {sorted(STRATEGY_REGISTRY)}") from None
        strategies.append(cls(rng) if cls is RandomMove else cls())
    return CompositeStrategy(strategies)


def random_priority(rng: np.random.Generator) -> List[str]:
    """A random ordering of the optional heuristics between obvious and random."""
    shuffled = list(OPTIONAL_HEURISTICS)
    rng.shuffle(shuffled)
    return ["obvious"] + shuffled + ["random"]
