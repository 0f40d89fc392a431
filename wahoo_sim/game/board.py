"""Marble placement on the Wahoo board."""

from typing import Dict, Iterable, List, Optional, Sequence
import logging

from .constants import HoleId, Normal, Bench, Endzone, YOLO, hole_sort_key
from .errors import InvariantViolation
from .topology import Topology
from .types import Marble

# Setup logger
logger = logging.getLogger(__name__)


class Board:
    """Represents the Wahoo board position.

    Holes are stored sparsely: a hole missing from ``pieces`` is empty.
    Marbles are only ever relocated, never created or destroyed, once the
    starting position has been set up.
    """

    def __init__(self, topology: Topology, players: Sequence[int] = ()):
        self.topology = topology
        self.players: List[int] = list(players)
        self.pieces: Dict[HoleId, Marble] = {}

    @classmethod
    def for_players(cls, topology: Topology, players: Iterable[int]) -> 'Board':
        """Create the starting position: every marble on its owner's bench."""
        board = cls(topology, list(players))
        logger.debug(f"Initializing board for players {board.players}")
        for player in board.players:
            for slot in range(topology.marbles_per_player):
                board.pieces[Bench(player, slot)] = Marble(player)
        return board

    def copy(self) -> 'Board':
        """Create a copy of the board. Marbles are immutable so they are shared."""
        new_board = Board(self.topology, self.players)
        new_board.pieces = self.pieces.copy()
        return new_board

    def marble_at(self, hole: HoleId) -> Optional[Marble]:
        """Get the marble in a hole, if any."""
        return self.pieces.get(hole)

    def is_empty(self, hole: HoleId) -> bool:
        return hole not in self.pieces

    def place(self, hole: HoleId, marble: Marble) -> None:
        """Put a marble into an empty hole."""
        if hole in self.pieces:
            raise InvariantViolation(f"Hole {hole} already holds a marble of player {self.pieces[hole].owner}")
        self.pieces[hole] = marble

    def clear(self, hole: HoleId) -> Optional[Marble]:
        """Remove and return the marble in a hole."""
        return self.pieces.pop(hole, None)

    def marbles_owned_by(self, player: int) -> List[HoleId]:
        """Holes holding the player's marbles, in a stable order."""
        holes = [hole for hole, marble in self.pieces.items() if marble.owner == player]
        return sorted(holes, key=hole_sort_key)

    def lowest_empty_bench_slot(self, player: int) -> Bench:
        """First free bench hole of a player, used when a marble is captured."""
        for slot in range(self.topology.marbles_per_player):
            hole = Bench(player, slot)
            if hole not in self.pieces:
                return hole
        raise InvariantViolation(f"Player {player} has no free bench slot")

    def has_won(self, player: int) -> bool:
        for slot in range(self.topology.marbles_per_player):
            marble = self.pieces.get(Endzone(player, slot))
            if marble is None or marble.owner != player:
                return False
        return True

    def winners(self) -> List[int]:
        """Players whose endzone is full, lowest player id first."""
        return [player for player in sorted(self.players) if self.has_won(player)]

    def check_invariants(self) -> None:
        """Raise InvariantViolation unless every player owns exactly their marbles."""
        expected = self.topology.marbles_per_player
        counts = {player: 0 for player in self.players}
        for hole, marble in self.pieces.items():
            if marble.owner not in counts:
                raise InvariantViolation(f"Marble at {hole} belongs to unknown player {marble.owner}")
            counts[marble.owner] += 1
        for player, count in counts.items():
            if count != expected:
                raise InvariantViolation(
                    f"Player {player} owns {count} marbles, expected {expected}")

    def __str__(self) -> str:
        """Text diagram: yolo, endzones, track, tick marks, benches, player labels.

        Empty holes show their role ('^' yolo entry, 'o' bench exit, '=' endzone
        entry, '-' plain track, 'b' bench, 'w' endzone); occupied holes show
        the owner's player id.
        """
        topo = self.topology
        length = topo.track_length

        def cell(hole: HoleId, empty_char: str) -> str:
            marble = self.pieces.get(hole)
            return str(marble.owner % 10) if marble else empty_char

        lines = ['']
        lines.append('  ' * (length // 2) + cell(YOLO, '!'))

        bench_lines = []
        endzone_lines = []
        for row in range(topo.marbles_per_player):
            bench_line = ''
            endzone_line = ''
            for col in range(length):
                if topo.is_bench_exit(col):
                    owner = col // topo.leg_perimeter
                    bench_line += cell(Bench(owner, row), 'b') + ' '
                else:
                    bench_line += '  '
                owner = topo.endzone_owner(col)
                if owner is not None:
                    endzone_line += cell(Endzone(owner, row), 'w') + ' '
                else:
                    endzone_line += '  '
            bench_lines.append(bench_line.rstrip())
            endzone_lines.append(endzone_line.rstrip())

        lines.extend(reversed(endzone_lines))

        normal_line = ''
        ticks_line = ''
        for i in range(length):
            if topo.is_yolo_entry(i):
                char = '^'
            elif topo.is_bench_exit(i):
                char = 'o'
            elif topo.is_endzone_entry(i):
                char = '='
            else:
                char = '-'
            normal_line += cell(Normal(i), char) + ' '
            ticks_line += (str(i) if i % 10 == 0 else '').ljust(2)
        lines.append(normal_line.rstrip())
        lines.append(ticks_line.rstrip())
        lines.extend(bench_lines)

        labels = ''
        for i in range(length):
            if i % topo.leg_perimeter == 0:
                labels += f"p{i // topo.leg_perimeter}".ljust(2)
            else:
                labels += '  '
        lines.append(labels.rstrip())
        return '\n'.join(lines) + '\n'


class BoardView:
    """Read-only window onto a Board for decision functions and observers."""

    def __init__(self, board: Board):
        self._board = board

    @property
    def topology(self) -> Topology:
        return self._board.topology

    @property
    def players(self) -> List[int]:
        return list(self._board.players)

    def marble_at(self, hole: HoleId) -> Optional[Marble]:
        return self._board.marble_at(hole)

    def is_empty(self, hole: HoleId) -> bool:
        return self._board.is_empty(hole)

    def marbles_owned_by(self, player: int) -> List[HoleId]:
        return self._board.marbles_owned_by(player)

    def winners(self) -> List[int]:
        return self._board.winners()

    def __str__(self) -> str:
        return str(self._board)
