"""Game logic package for Wahoo."""

from .constants import HoleId, Normal, Bench, Endzone, Yolo, YOLO, DIE_FACES
from .errors import WahooError, ConfigurationError, InvariantViolation, UnreachableMove
from .topology import Topology
from .types import Marble, Move, TurnPhase, TurnResult
from .board import Board, BoardView
from .moves import MoveEngine
from .game_state import Game, GameContext, DecisionFunction

__all__ = [
    'HoleId',
    'Normal',
    'Bench',
    'Endzone',
    'Yolo',
    'YOLO',
    'DIE_FACES',
    'WahooError',
    'ConfigurationError',
    'InvariantViolation',
    'UnreachableMove',
    'Topology',
    'Marble',
    'Move',
    'TurnPhase',
    'TurnResult',
    'Board',
    'BoardView',
    'MoveEngine',
    'Game',
    'GameContext',
    'DecisionFunction',
]
