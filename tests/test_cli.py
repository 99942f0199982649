import io
import logging
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from game import BoardEngine
from stackgrid_core.cli import main, play
from stackgrid_core.config import load_settings
from stackgrid_core.logging_config import LOGGER_NAME, setup_logging


def _reader(lines):
    it = iter(lines)

    def read(_prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


class TestCli(unittest.TestCase):
    def test_given_scripted_input_when_playing_then_moves_applied_and_rejections_printed(self):
        e = BoardEngine()
        buf = io.StringIO()
        with redirect_stdout(buf):
            play(e, read=_reader(["c1 up", "c4 up", "c9 sideways", "moves", "garbage", "quit"]))
        out = buf.getvalue()
        self.assertEqual(e.position_of('c1'), (1, 0))
        self.assertIn('rejected: Can only move the TOP circle', out)
        self.assertIn('Invalid direction', out)
        self.assertIn('Legal moves:', out)
        self.assertIn('Could not parse', out)
        self.assertEqual([h.success for h in e.history], [True, False])

    def test_given_solve_flag_when_running_then_board_solved_and_csv_written(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'history.csv')
            buf = io.StringIO()
            with redirect_stdout(buf):
                main(['--solve', '--delay-ms', '0', '--csv', path, '--log-level', 'WARNING'])
            self.assertIn('solved!', buf.getvalue())
            with open(path, encoding='utf-8') as f:
                self.assertEqual(len(f.read().splitlines()), 24)

    def test_given_unwritable_csv_path_when_playing_then_error_printed_and_loop_continues(self):
        e = BoardEngine()
        with tempfile.TemporaryDirectory() as tmp:
            bad = os.path.join(tmp, 'missing', 'history.csv')
            buf = io.StringIO()
            with redirect_stdout(buf):
                play(e, read=_reader([f"csv {bad}", "c1 up", "quit"]))
        out = buf.getvalue()
        self.assertIn(f"Could not write {bad}", out)
        self.assertEqual(e.position_of('c1'), (1, 0))


class TestLogging(unittest.TestCase):
    def tearDown(self):
        logging.getLogger(LOGGER_NAME).handlers.clear()

    def test_given_repeated_setup_when_configuring_then_single_handler_at_level(self):
        setup_logging("debug")
        logger = setup_logging("WARNING")
        self.assertEqual(logger.name, LOGGER_NAME)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)
        self.assertFalse(logger.propagate)

    def test_given_unknown_level_when_configuring_then_info(self):
        self.assertEqual(setup_logging("chatty").level, logging.INFO)


class TestSettings(unittest.TestCase):
    def setUp(self):
        self._saved = {k: os.environ.get(k) for k in ('PORT', 'FLASK_DEBUG', 'STACKGRID_SOLVE_DELAY_MS')}

    def tearDown(self):
        for k, v in self._saved.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v

    def test_given_env_when_loading_settings_then_values_parsed(self):
        os.environ['PORT'] = '8123'
        os.environ['FLASK_DEBUG'] = 'yes'
        os.environ['STACKGRID_SOLVE_DELAY_MS'] = 'abc'
        s = load_settings()
        self.assertEqual(s.port, 8123)
        self.assertTrue(s.debug)
        self.assertEqual(s.solve_delay_ms, 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
