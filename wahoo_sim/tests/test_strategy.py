"""Test the individual heuristics and their composition."""

import unittest

import numpy as np

from wahoo_sim.game.board import Board, BoardView
from wahoo_sim.game.constants import Normal, Bench, Endzone, YOLO
from wahoo_sim.game.topology import Topology
from wahoo_sim.game.types import Move
from wahoo_sim.strategy import (
    CompositeStrategy,
    ObviousMove,
    SmartLeaveYolo,
    EnterEndzone,
    Capture,
    EnterYolo,
    ScootEndzone,
    LeaveBench,
    FirstLegal,
    RandomMove,
    STRATEGY_REGISTRY,
    DEFAULT_PRIORITY,
    build_strategy,
    random_priority,
)


class HeuristicTestCase(unittest.TestCase):

    def setUp(self):
        self.board = Board.for_players(Topology(6, 5), [0, 1])
        self.view = BoardView(self.board)

    def _relocate(self, start, finish):
        marble = self.board.clear(start)
        self.board.place(finish, marble)


class TestHeuristics(HeuristicTestCase):

    def test_obvious_takes_the_only_move(self):
        move = Move(Normal(30), Normal(33))
        self.assertEqual(ObviousMove().choose(0, [move], 3, self.view), move)

    def test_obvious_takes_any_bench_move(self):
        moves = [Move(Bench(0, slot), Normal(0)) for slot in range(4)]
        self.assertEqual(ObviousMove().choose(0, moves, 6, self.view), moves[0])

    def test_obvious_declines_a_real_choice(self):
        moves = [Move(Bench(0, 0), Normal(0)), Move(Normal(30), Normal(36))]
        self.assertIsNone(ObviousMove().choose(0, moves, 6, self.view))
        self.assertIsNone(ObviousMove().choose(0, [], 6, self.view))

    def test_smart_leave_yolo_targets_last_exit(self):
        moves = [Move(YOLO, Normal(i)) for i in (4, 16, 28, 40, 52, 64)]
        self.assertEqual(SmartLeaveYolo().choose(0, moves, 1, self.view), Move(YOLO, Normal(64)))
        self.assertEqual(SmartLeaveYolo().choose(1, moves, 1, self.view), Move(YOLO, Normal(4)))

    def test_smart_leave_yolo_without_yolo_moves(self):
        self.assertIsNone(SmartLeaveYolo().choose(0, [Move(Normal(3), Normal(4))], 1, self.view))

    def test_enter_endzone_ignores_moves_inside_the_endzone(self):
        inside = Move(Endzone(0, 0), Endzone(0, 1))
        entering = Move(Normal(69), Endzone(0, 0))
        self.assertIsNone(EnterEndzone().choose(0, [inside], 2, self.view))
        self.assertEqual(EnterEndzone().choose(0, [inside, entering], 2, self.view), entering)

    def test_capture_needs_an_occupied_finish(self):
        self._relocate(Bench(1, 0), Normal(13))
        quiet = Move(Normal(20), Normal(23))
        kill = Move(Normal(10), Normal(13))
        self.assertIsNone(Capture().choose(0, [quiet], 3, self.view))
        self.assertEqual(Capture().choose(0, [quiet, kill], 3, self.view), kill)

    def test_enter_yolo(self):
        moves = [Move(Normal(2), Normal(5)), Move(Normal(2), YOLO)]
        self.assertEqual(EnterYolo().choose(0, moves, 3, self.view), Move(Normal(2), YOLO))
        self.assertIsNone(EnterYolo().choose(0, moves[:1], 3, self.view))

    def test_scoot_endzone(self):
        moves = [Move(Normal(30), Normal(31)), Move(Endzone(0, 1), Endzone(0, 2))]
        self.assertEqual(ScootEndzone().choose(0, moves, 1, self.view), moves[1])

    def test_leave_bench(self):
        moves = [Move(Normal(30), Normal(36)), Move(Bench(0, 2), Normal(0))]
        self.assertEqual(LeaveBench().choose(0, moves, 6, self.view), moves[1])

    def test_first_legal(self):
        moves = [Move(Normal(30), Normal(36)), Move(Bench(0, 2), Normal(0))]
        self.assertEqual(FirstLegal().choose(0, moves, 6, self.view), moves[0])
        self.assertIsNone(FirstLegal().choose(0, [], 6, self.view))

    def test_random_move_is_seeded(self):
        moves = [Move(Normal(i), Normal(i + 2)) for i in range(20, 30, 2)]
        first = RandomMove(np.random.default_rng(7))
        second = RandomMove(np.random.default_rng(7))
        for _ in range(10):
            self.assertEqual(first.choose(0, moves, 2, self.view), second.choose(0, moves, 2, self.view))
        picker = RandomMove(np.random.default_rng(3))
        picks = {picker.choose(0, moves, 2, self.view) for _ in range(200)}
        self.assertEqual(picks, set(moves))
        self.assertIsNone(picker.choose(0, [], 2, self.view))

    def test_strategies_are_callable(self):
        move = Move(Normal(30), Normal(33))
        self.assertEqual(FirstLegal()(0, [move], 3, self.view), move)


class TestComposition(HeuristicTestCase):

    def test_first_non_empty_choice_wins(self):
        self._relocate(Bench(1, 0), Normal(13))
        kill = Move(Normal(10), Normal(13))
        yolo = Move(Normal(2), YOLO)
        moves = [yolo, kill]
        self.assertEqual(build_strategy(["capture", "enter_yolo"]).choose(0, moves, 3, self.view), kill)
        self.assertEqual(build_strategy(["enter_yolo", "capture"]).choose(0, moves, 3, self.view), yolo)

    def test_composite_declines_when_every_strategy_declines(self):
        strategy = CompositeStrategy([EnterYolo(), ScootEndzone()])
        self.assertIsNone(strategy.choose(0, [Move(Normal(30), Normal(33))], 3, self.view))

    def test_random_fallback_always_chooses(self):
        strategy = build_strategy(DEFAULT_PRIORITY, np.random.default_rng(0))
        moves = [Move(Normal(30), Normal(33)), Move(Normal(40), Normal(43))]
        self.assertIn(strategy.choose(0, moves, 3, self.view), moves)

    def test_priority_names(self):
        strategy = build_strategy(DEFAULT_PRIORITY)
        self.assertEqual(strategy.priority, DEFAULT_PRIORITY)
        self.assertIn('obvious', repr(strategy))

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            build_strategy(["obvious", "teleport"])

    def test_registry_covers_every_heuristic(self):
        for name in DEFAULT_PRIORITY + ["leave_bench", "first"]:
            self.assertIn(name, STRATEGY_REGISTRY)


class TestRandomPriority(unittest.TestCase):

    def test_shape(self):
        priority = random_priority(np.random.default_rng(1))
        self.assertEqual(priority[0], "obvious")
        self.assertEqual(priority[-1], "random")
        self.assertEqual(sorted(priority[1:-1]),
                         sorted(["smart_leave_yolo", "enter_yolo", "enter_endzone",
                                 "leave_bench", "capture", "scoot_endzone"]))

    def test_seeded(self):
        self.assertEqual(random_priority(np.random.default_rng(5)),
                         random_priority(np.random.default_rng(5)))

    def test_orders_vary(self):
        rng = np.random.default_rng(11)
        orders = {tuple(random_priority(rng)) for _ in range(30)}
        self.assertGreater(len(orders), 1)


if __name__ == '__main__':
    unittest.main()
