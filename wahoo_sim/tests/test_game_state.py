"""Test turn sequencing, move execution and game termination."""

import logging
import unittest
from wahoo_sim.game.board import Board, BoardView
from wahoo_sim.game.constants import Normal, Bench, Endzone, YOLO
from wahoo_sim.game.errors import InvariantViolation, UnreachableMove
from wahoo_sim.game.game_state import Game, GameContext
from wahoo_sim.game.topology import Topology
from wahoo_sim.game.types import Marble, Move, TurnPhase
from wahoo_sim.strategy import FirstLegal


class ScriptedRng:
    """Stands in for a numpy Generator, returning preset die rolls."""

    def __init__(self, rolls):
        self.rolls = list(rolls)

    def integers(self, low, high=None):
        return self.rolls.pop(0)


def scripted_game(rolls, num_players=6, board=None, first_player=0):
    context = GameContext(rng=ScriptedRng(rolls))
    return Game(Topology(6, 5), num_players, context, first_player=first_player, board=board)


def choose(move):
    """Decision function that always picks ``move``."""
    return lambda player, moves, roll, board: move


class TestTurnSequencing(unittest.TestCase):

    def test_round_robin_without_sixes(self):
        game = scripted_game([3, 2, 4, 5, 3, 2, 4, 5])
        seen = []
        for _ in range(8):
            seen.append(game.active_player)
            game.play_turn()
        self.assertEqual(seen, [0, 1, 2, 3, 4, 5, 0, 1])
        self.assertEqual(game.turn_counter, 8)
        self.assertEqual(game.active_player, 2)

    def test_six_repeats_the_player(self):
        game = scripted_game([6, 6, 2, 3])
        results = [game.play_turn() for _ in range(4)]
        self.assertEqual([r.player for r in results], [0, 0, 0, 1])
        self.assertEqual([r.extra_turn for r in results], [True, True, False, False])

    def test_turn_counter_counts_turns_without_moves(self):
        game = scripted_game([2, 3, 4])
        for _ in range(3):
            result = game.play_turn(choose(None))
            self.assertEqual(result.legal_moves, [])
            self.assertIsNone(result.move)
        self.assertEqual(game.turn_counter, 3)

    def test_empty_turn_leaves_board_alone(self):
        game = scripted_game([4])
        before = dict(game.board.pieces)
        game.play_turn(choose(None))
        self.assertEqual(game.board.pieces, before)

    def test_first_player(self):
        game = scripted_game([2], first_player=3)
        self.assertEqual(game.play_turn().player, 3)
        self.assertEqual(game.active_player, 4)

    def test_phase_returns_to_awaiting_roll(self):
        game = scripted_game([2])
        self.assertEqual(game.phase, TurnPhase.AWAITING_ROLL)
        game.play_turn()
        self.assertEqual(game.phase, TurnPhase.AWAITING_ROLL)

    def test_decision_function_gets_a_read_only_view(self):
        game = scripted_game([6])
        calls = []

        def decide(player, moves, roll, board):
            calls.append((player, list(moves), roll, board))
            return moves[0]

        game.play_turn(decide)
        player, moves, roll, board = calls[0]
        self.assertEqual(player, 0)
        self.assertEqual(roll, 6)
        self.assertEqual(len(moves), 4)
        self.assertIsInstance(board, BoardView)
        self.assertEqual(game.board.marble_at(Normal(0)), Marble(0))


class TestMoveExecution(unittest.TestCase):

    def setUp(self):
        self.board = Board.for_players(Topology(6, 5), [0, 1])

    def _relocate(self, start, finish):
        marble = self.board.clear(start)
        self.board.place(finish, marble)

    def test_capture_sends_victim_to_lowest_empty_bench_slot(self):
        self._relocate(Bench(0, 3), Normal(10))
        self._relocate(Bench(1, 0), Normal(13))
        self._relocate(Bench(1, 2), Normal(30))
        game = scripted_game([3], num_players=2, board=self.board)

        result = game.play_turn(choose(Move(Normal(10), Normal(13))))

        self.assertEqual(result.captured, Marble(1))
        self.assertEqual(self.board.marble_at(Normal(13)), Marble(0))
        self.assertIsNone(self.board.marble_at(Normal(10)))
        self.assertEqual(self.board.marble_at(Bench(1, 0)), Marble(1))
        self.assertIsNone(self.board.marble_at(Bench(1, 2)))
        self.assertEqual(len(self.board.marbles_owned_by(0)), 4)
        self.assertEqual(len(self.board.marbles_owned_by(1)), 4)
        self.board.check_invariants()

    def test_capture_in_yolo(self):
        self._relocate(Bench(0, 3), Normal(2))
        self._relocate(Bench(1, 1), YOLO)
        game = scripted_game([3], num_players=2, board=self.board)

        game.play_turn(choose(Move(Normal(2), YOLO)))

        self.assertEqual(self.board.marble_at(YOLO), Marble(0))
        self.assertEqual(self.board.marble_at(Bench(1, 1)), Marble(1))

    def test_pair_is_accepted_as_a_move(self):
        game = scripted_game([6], num_players=2, board=self.board)
        result = game.play_turn(choose((Bench(0, 0), Normal(0))))
        self.assertEqual(result.move, Move(Bench(0, 0), Normal(0)))
        self.assertEqual(self.board.marble_at(Normal(0)), Marble(0))

    def test_self_capture_is_refused(self):
        self._relocate(Bench(0, 0), Normal(20))
        self._relocate(Bench(0, 1), Normal(23))
        game = scripted_game([], num_players=2, board=self.board)
        with self.assertRaises(InvariantViolation):
            game.execute_move(Move(Normal(20), Normal(23)))


class TestFatalChoices(unittest.TestCase):

    def setUp(self):
        self.board = Board.for_players(Topology(6, 5), [0, 1])
        marble = self.board.clear(Bench(0, 3))
        self.board.place(Normal(20), marble)
        marble = self.board.clear(Bench(1, 3))
        self.board.place(Normal(40), marble)

    def test_move_outside_legal_moves(self):
        game = scripted_game([3], num_players=2, board=self.board)
        with self.assertRaises(InvariantViolation):
            game.play_turn(choose(Move(Bench(0, 0), Normal(0))))

    def test_unreachable_finish(self):
        game = scripted_game([3], num_players=2, board=self.board)
        with self.assertRaises(UnreachableMove):
            game.play_turn(choose(Move(Normal(20), Normal(30))))

    def test_empty_start(self):
        game = scripted_game([3], num_players=2, board=self.board)
        with self.assertRaises(InvariantViolation):
            game.play_turn(choose(Move(Normal(21), Normal(24))))

    def test_moving_an_opponents_marble(self):
        game = scripted_game([3], num_players=2, board=self.board)
        with self.assertRaises(InvariantViolation):
            game.play_turn(choose(Move(Normal(40), Normal(43))))

    def test_choice_that_is_not_a_pair(self):
        for bad in ((Normal(20), Normal(23), 1), Normal(20), 5):
            game = scripted_game([3], num_players=2, board=self.board)
            with self.assertRaises(InvariantViolation):
                game.play_turn(choose(bad))
        self.assertEqual(self.board.marble_at(Normal(20)), Marble(0))

    def test_lost_marble_is_detected_before_the_roll(self):
        game = scripted_game([3], num_players=2, board=self.board)
        self.board.clear(Normal(20))
        with self.assertRaises(InvariantViolation):
            game.play_turn()


class TestGameOver(unittest.TestCase):

    def setUp(self):
        self.board = Board.for_players(Topology(6, 5), [0, 1])
        for slot in (1, 2, 3):
            self.board.clear(Bench(0, slot))
            self.board.place(Endzone(0, slot), Marble(0))
        self.board.clear(Bench(0, 0))
        self.board.place(Normal(70), Marble(0))

    def test_filling_the_endzone_wins(self):
        game = scripted_game([1], num_players=2, board=self.board)
        result = game.play_turn(choose(Move(Normal(70), Endzone(0, 0))))
        self.assertEqual(result.winner, 0)
        self.assertTrue(game.is_over)
        self.assertEqual(game.phase, TurnPhase.GAME_OVER)
        self.assertEqual(game.winner, 0)
        self.assertEqual(game.winners(), [0])
        self.assertEqual(game.turn_counter, 1)
        self.assertEqual(game.active_player, 0)

    def test_no_turns_after_game_over(self):
        game = scripted_game([1, 2], num_players=2, board=self.board)
        game.play_turn(choose(Move(Normal(70), Endzone(0, 0))))
        with self.assertRaises(InvariantViolation):
            game.play_turn()

    def test_run_returns_the_winner(self):
        game = scripted_game([1], num_players=2, board=self.board)
        self.assertEqual(game.run(FirstLegal()), 0)

    def test_winner_is_logged_to_the_context_logger(self):
        sink = logging.getLogger("wahoo_sim.tests.sink")
        context = GameContext(rng=ScriptedRng([1]), logger=sink)
        game = Game(Topology(6, 5), 2, context, board=self.board)
        with self.assertLogs(sink, level='INFO') as logs:
            game.play_turn(choose(Move(Normal(70), Endzone(0, 0))))
        self.assertTrue(any("WINNER: player 0" in line for line in logs.output))


class TestFullGames(unittest.TestCase):

    def test_first_legal_move_game_terminates(self):
        game = Game(Topology(6, 5), 6, GameContext.seeded(1234))
        decide = FirstLegal()
        while not game.is_over and game.turn_counter < 100000:
            game.play_turn(decide)
            for player in range(6):
                self.assertEqual(len(game.board.marbles_owned_by(player)), 4)
            self.assertLessEqual(len(game.board.pieces), 24)
        self.assertTrue(game.is_over)
        self.assertIn(game.winner, range(6))
        self.assertIn(game.winner, game.winners())

    def test_seeded_games_are_reproducible(self):
        def play(seed):
            game = Game(Topology(4, 4), 4, GameContext.seeded(seed), record_history=True)
            for _ in range(300):
                if game.is_over:
                    break
                game.play_turn(FirstLegal())
            return [(r.player, r.roll, r.move) for r in game.history]

        self.assertEqual(play(99), play(99))
        self.assertNotEqual(play(99), play(100))

    def test_history_is_kept_only_on_request(self):
        game = Game(Topology(4, 4), 4, GameContext.seeded(3))
        for _ in range(10):
            game.play_turn(FirstLegal())
        self.assertEqual(game.history, [])

        recorded = Game(Topology(4, 4), 4, GameContext.seeded(3), record_history=True)
        for _ in range(10):
            recorded.play_turn(FirstLegal())
        self.assertEqual([r.turn for r in recorded.history], list(range(10)))

    def test_rolls_are_between_one_and_six(self):
        game = Game(context=GameContext.seeded(5))
        rolls = {game.roll_die() for _ in range(500)}
        self.assertEqual(rolls, {1, 2, 3, 4, 5, 6})


if __name__ == '__main__':
    unittest.main()
