import threading
import unittest

from game import BoardEngine, SOLUTION_MOVES, replay_solution, UP, DOWN


class TestSolutionReplay(unittest.TestCase):
    def test_given_default_layout_when_replaying_solution_then_every_step_succeeds_and_last_wins(self):
        e = BoardEngine()
        played = replay_solution(e)
        self.assertEqual(len(played), len(SOLUTION_MOVES))
        self.assertTrue(all(res.success for _, res in played))
        self.assertTrue(played[-1][1].won)
        self.assertFalse(any(res.won for _, res in played[:-1]))
        self.assertEqual(e.board.stack(0, 2), ['c8', 'c7', 'c9'])
        self.assertEqual(e.board.stack(1, 2), ['c2', 'c4', 'c5'])
        self.assertEqual(e.board.stack(2, 2), ['c6', 'c3', 'c1'])
        self.assertEqual(len(e.history), len(SOLUTION_MOVES))

    def test_given_dirty_engine_when_replaying_then_reset_first(self):
        e = BoardEngine()
        e.move('c1', UP)
        played = replay_solution(e)
        self.assertTrue(played[-1][1].won)

    def test_given_bad_step_when_replaying_then_stops_at_first_failure(self):
        e = BoardEngine()
        seen = []
        moves = [('c1', UP), ('c1', DOWN), ('c1', DOWN), ('c2', UP)]
        played = replay_solution(e, moves=moves, on_step=lambda i, mv, res: seen.append(i))
        self.assertEqual(len(played), 3)
        self.assertFalse(played[-1][1].success)
        self.assertEqual(played[-1][1].reason, 'Out of bounds')
        self.assertEqual(seen, [0, 1, 2])

    def test_given_replay_in_progress_when_another_thread_moves_then_it_waits_for_the_sequence(self):
        e = BoardEngine()
        waiting = []

        def on_step(i, mv, res):
            if i == 0:
                t = threading.Thread(target=e.move, args=('c2', UP))
                t.start()
                t.join(timeout=0.2)
                self.assertTrue(t.is_alive())
                waiting.append(t)

        played = replay_solution(e, on_step=on_step)
        waiting[0].join()
        self.assertTrue(all(res.success for _, res in played))
        self.assertTrue(played[-1][1].won)
        self.assertEqual(len(e.history), len(SOLUTION_MOVES) + 1)
        self.assertEqual(e.history[-1].token_id, 'c2')


if __name__ == '__main__':
    unittest.main(verbosity=2)
