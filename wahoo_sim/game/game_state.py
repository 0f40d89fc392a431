"""Game state and turn sequencing for Wahoo."""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union
import logging

import numpy as np

from .constants import HoleId, DIE_FACES, EXTRA_TURN_ROLL
from .board import Board, BoardView
from .errors import ConfigurationError, InvariantViolation, UnreachableMove
from .moves import MoveEngine
from .topology import Topology
from .types import Marble, Move, TurnPhase, TurnResult

# Setup logger
logger = logging.getLogger(__name__)

Choice = Optional[Union[Move, Tuple[HoleId, HoleId]]]
DecisionFunction = Callable[[int, Sequence[Move], int, BoardView], Choice]


@dataclass
class GameContext:
    """Per-game services: the die-roll stream and the log sink.

    Each game owns its own context so that games stay reproducible from a
    seed and can run side by side in separate processes.
    """
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    logger: logging.Logger = field(default_factory=lambda: logger)

    @classmethod
    def seeded(cls, seed: Optional[int] = None,
               log: Optional[logging.Logger] = None) -> 'GameContext':
        return cls(rng=np.random.default_rng(seed), logger=log or logger)


class Game:
    """A single match: board, active player and turn counter.

    ``play_turn`` is the turn state machine. It rolls, asks the decision
    function for a choice among the legal moves, validates and executes the
    choice, and then either ends the game or hands the turn on.
    """

    def __init__(self,
                 topology: Optional[Topology] = None,
                 num_players: Optional[int] = None,
                 context: Optional[GameContext] = None,
                 first_player: int = 0,
                 board: Optional[Board] = None,
                 record_history: bool = False):
        self.topology = (topology or Topology()).validate()
        if num_players is None:
            num_players = self.topology.num_legs
        if not 1 <= num_players <= self.topology.num_legs:
            raise ConfigurationError(
                f"num_players must be between 1 and {self.topology.num_legs}, got {num_players}")
        if not 0 <= first_player < num_players:
            raise ConfigurationError(f"first_player {first_player} is not a player id")

        self.num_players = num_players
        self.context = context or GameContext()
        self.log = self.context.logger
        self.engine = MoveEngine(self.topology)
        self.board = board if board is not None else Board.for_players(self.topology, range(num_players))
        self.board.check_invariants()
        self.view = BoardView(self.board)

        self.active_player = first_player
        self.turn_counter = 0
        self.phase = TurnPhase.AWAITING_ROLL
        self.winner: Optional[int] = None
        self.record_history = record_history
        self.history: List[TurnResult] = []

    @property
    def is_over(self) -> bool:
        return self.phase == TurnPhase.GAME_OVER

    def winners(self) -> List[int]:
        return self.board.winners()

    def roll_die(self) -> int:
        return int(self.context.rng.integers(1, DIE_FACES + 1))

    def legal_moves(self, roll: int, player: Optional[int] = None) -> List[Move]:
        if player is None:
            player = self.active_player
        return self.engine.legal_moves(self.board, player, roll)

    def validate_move(self, move: Move, roll: int, legal_moves: Sequence[Move]) -> None:
        """Raise unless ``move`` is one the active player could legally make."""
        marble = self.board.marble_at(move.start)
        if marble is None:
            raise InvariantViolation(f"No marble at {move.start}")
        if marble.owner != self.active_player:
            raise InvariantViolation(
                f"Player {self.active_player} cannot move player {marble.owner}'s marble")
        if move.finish not in self.engine.remote_reachable_holes(move.start, roll, self.active_player):
            raise UnreachableMove(f"{move.finish} is not reachable from {move.start} with roll {roll}")
        if move not in legal_moves:
            raise InvariantViolation(f"Move {move} is not among the legal moves for roll {roll}")

    def execute_move(self, move: Move) -> Optional[Marble]:
        """Move a marble, capturing an opposing marble on the finish hole.

        Returns the captured marble, if any.
        """
        mover = self.board.marble_at(move.start)
        if mover is None:
            raise InvariantViolation(f"No marble at {move.start}")

        captured = self.board.marble_at(move.finish)
        if captured is not None:
            if captured.owner == mover.owner:
                raise InvariantViolation(f"Player {mover.owner} would capture their own marble at {move.finish}")
            self.log.debug(f"KILL {mover.owner} -> {captured.owner}'s marble at {move.finish}")
            self.board.clear(move.finish)
            self.board.place(self.board.lowest_empty_bench_slot(captured.owner), captured)

        self.board.clear(move.start)
        self.board.place(move.finish, mover)
        return captured

    def play_turn(self, decide: Optional[DecisionFunction] = None) -> TurnResult:
        """Play one turn for the active player."""
        if self.is_over:
            raise InvariantViolation("The game is already over")

        self.board.check_invariants()
        player = self.active_player
        roll = self.roll_die()
        result = TurnResult(turn=self.turn_counter, player=player, roll=roll)

        self.log.debug(f"Turn {self.turn_counter}")
        self.log.debug(f"player: {player}, roll: {roll}")
        self.log.debug(f"Marbles for player {player}: {[str(h) for h in self.board.marbles_owned_by(player)]}")

        self.phase = TurnPhase.AWAITING_CHOICE
        moves = self.legal_moves(roll, player)
        result.legal_moves = moves
        self.log.debug(f"moves for player {player}: {[str(m) for m in moves]}")

        choice = decide(player, list(moves), roll, self.view) if decide is not None else None
        self.log.debug(f"Player {player} is choosing {choice}")

        self.phase = TurnPhase.RESOLVING
        if choice is not None:
            move = Move.coerce(choice)
            self.validate_move(move, roll, moves)
            result.move = move
            result.captured = self.execute_move(move)

            winners = self.board.winners()
            if winners:
                self.winner = winners[0]
                result.winner = self.winner
                self.log.info(f"WINNER: player {self.winner}, after {self.turn_counter} turns")
                self.log.info(str(self.board))

        self.log.debug(str(self.board))

        if self.winner is not None:
            self.phase = TurnPhase.GAME_OVER
        else:
            if roll != EXTRA_TURN_ROLL:
                self.active_player = (self.active_player + 1) % self.num_players
            self.phase = TurnPhase.AWAITING_ROLL
        self.turn_counter += 1
        if self.record_history:
            self.history.append(result)
        return result

    def run(self, decide: Optional[DecisionFunction] = None) -> Optional[int]:
        """Play turns until somebody wins and return the winner.

        Never returns if no player can finish; callers that need a bound
        should drive ``play_turn`` themselves.
        """
        while not self.is_over:
            self.play_turn(decide)
        return self.winner

    def __str__(self) -> str:
        return (f"Game(turn={self.turn_counter}, active_player={self.active_player}, "
                f"phase={self.phase.name})\n{self.board}")
