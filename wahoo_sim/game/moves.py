"""Reachability, path search and legal move generation for Wahoo."""

from typing import List, Optional
import logging

from .constants import (
    HoleId,
    Normal,
    Bench,
    Endzone,
    Yolo,
    YOLO,
    BENCH_EXIT_ROLLS,
    YOLO_EXIT_ROLL,
    hole_sort_key,
)
from .errors import InvariantViolation, UnreachableMove
from .topology import Topology
from .types import Move

# Setup logger
logger = logging.getLogger(__name__)


def _unique(holes: List[HoleId]) -> List[HoleId]:
    """Drop duplicates while keeping generation order."""
    seen = []
    for hole in holes:
        if hole not in seen:
            seen.append(hole)
    return seen


class MoveEngine:
    """Generates and validates moves for one board geometry.

    The engine is stateless apart from its topology; the board to inspect is
    passed to the methods that need occupancy.
    """

    def __init__(self, topology: Topology):
        self.topology = topology

    def reachable_holes(self, start: HoleId, player: int, roll: int) -> List[HoleId]:
        """Holes one unit of movement away from ``start``, ignoring occupancy.

        Only the endzone owner can be diverted into an endzone. The result is
        in generation order; branch points give more than one hole.
        """
        topo = self.topology
        dests: List[HoleId] = []

        if isinstance(start, Normal):
            if topo.is_yolo_entry(start.index):
                dests.append(YOLO)
            if topo.endzone_owner(start.index) == player:
                dests.append(Endzone(player, 0))
            else:
                dests.append(Normal((start.index + 1) % topo.track_length))
        elif isinstance(start, Bench):
            dests.append(Normal(topo.bench_exit_for(start.player)))
        elif isinstance(start, Yolo):
            if roll == YOLO_EXIT_ROLL:
                dests.extend(Normal(index) for index in topo.yolo_exits)
        elif isinstance(start, Endzone):
            if start.slot + 1 < topo.marbles_per_player:
                dests.append(Endzone(start.player, start.slot + 1))
        else:
            raise TypeError(f"Unknown hole type: {start!r}")

        return _unique(dests)

    def remote_reachable_holes(self, start: HoleId, roll: int, player: int) -> List[HoleId]:
        """Holes a full move of ``roll`` can land on.

        Intermediate branches collapse onto their first candidate, and the
        yolo hole can only be the final landing hole, never a transit stop.
        """
        if roll == 0:
            return [start]
        if roll == 1 or isinstance(start, Bench):
            return self.reachable_holes(start, player, roll)

        current: Optional[HoleId] = start
        reachable: List[HoleId] = []
        for step in range(roll):
            if current is None:
                return []
            reachable = self.reachable_holes(current, player, roll)
            if step < roll - 1:
                candidates = [hole for hole in reachable if hole != YOLO]
                current = candidates[0] if candidates else None
        return _unique(reachable)

    def max_path_depth(self, roll: int) -> int:
        """Longest path (in edges) a single move with ``roll`` can take."""
        return max(roll, 1)

    def path(self, start: HoleId, finish: HoleId, player: int, roll: int,
             progress: int = 0) -> Optional[List[HoleId]]:
        """Depth-first search for the holes from ``start`` to ``finish``.

        Includes both ends. Branches are tried in the order reachable_holes
        generates them and the first that arrives wins; this is not a
        shortest-path search. Depth is bounded by max_path_depth(roll).
        """
        if start == finish:
            return [start]
        if progress >= self.max_path_depth(roll):
            return None
        if isinstance(start, Yolo) and roll != YOLO_EXIT_ROLL:
            return None

        neighbours = self.reachable_holes(start, player, roll)
        if finish in neighbours:
            return [start, finish]

        for hole in neighbours:
            next_path = self.path(hole, finish, player, roll, progress + 1)
            if next_path:
                return [start] + next_path
        return None

    def obstructed_path(self, board, start: HoleId, finish: HoleId, player: int, roll: int) -> bool:
        """True if one of the mover's own marbles sits on the path after ``start``.

        An opposing marble on ``finish`` is not an obstruction; it is captured
        when the move is executed.
        """
        mover = board.marble_at(start)
        if mover is None:
            raise InvariantViolation(f"No marble at {start}")

        holes = self.path(start, finish, player, roll)
        if holes is None:
            raise UnreachableMove(f"No path from {start} to {finish} with roll {roll}")

        for hole in holes[1:]:
            marble = board.marble_at(hole)
            if marble is not None and marble.owner == mover.owner:
                return True
        return False

    def legal_moves(self, board, player: int, roll: int) -> List[Move]:
        """All legal moves for ``player`` with ``roll``.

        Marbles are visited in hole order, destinations in generation order.
        """
        candidates: List[Move] = []
        for hole in sorted(board.marbles_owned_by(player), key=hole_sort_key):
            for finish in self.remote_reachable_holes(hole, roll, player):
                move = Move(hole, finish)
                if move not in candidates:
                    candidates.append(move)

        moves = []
        for move in candidates:
            start, finish = move
            if start == finish:
                continue
            if isinstance(start, Bench) and roll not in BENCH_EXIT_ROLLS:
                logger.debug(f"Cannot leave {start} unless roll is 1 or 6")
                continue
            if isinstance(start, Yolo) and roll != YOLO_EXIT_ROLL:
                continue
            if self.obstructed_path(board, start, finish, player, roll):
                logger.debug(f"Path between {start} and {finish} obstructed")
                continue
            moves.append(move)
        return moves
