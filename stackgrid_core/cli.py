from __future__ import annotations

import argparse
from typing import List, Optional

from .config import load_settings
from .engine import BoardEngine, MoveResult
from .logging_config import setup_logging
from .rules import parse_direction
from .solution import replay_solution


def _show(engine: BoardEngine) -> None:
    state = engine.describe_state()
    print(engine.board.pretty(state['colors']))


def _describe(result: MoveResult) -> str:
    if not result.success:
        return f"rejected: {result.reason}"
    return "ok, solved!" if result.won else "ok"


def _write_csv(engine: BoardEngine, path: str) -> bool:
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(engine.history_csv())
    except OSError as e:
        print(f"Could not write {path}: {e}")
        return False
    print(f"History written to {path}")
    return True


def play(engine: BoardEngine, read=input) -> None:
    """Interactive loop. Lines are '<id> <direction>', or one of: moves, reset, csv <path>, quit."""
    _show(engine)
    while True:
        try:
            text = read('> ').strip()
        except EOFError:
            return
        if not text:
            continue
        parts = text.split()
        cmd = parts[0].lower()
        if cmd in ('quit', 'exit', 'q'):
            return
        if cmd == 'reset':
            engine.reset()
            _show(engine)
            continue
        if cmd == 'moves':
            print('Legal moves:', ', '.join(f"{tid} {d}" for tid, d in engine.legal_moves()) or 'none')
            continue
        if cmd == 'csv':
            if len(parts) != 2:
                print('Usage: csv <path>')
                continue
            _write_csv(engine, parts[1])
            continue
        if len(parts) != 2:
            print('Could not parse. Enter: <id> <up|down|left|right>')
            continue
        try:
            direction = parse_direction(parts[1])
        except ValueError as e:
            print(e)
            continue
        result = engine.move(parts[0], direction)
        print(_describe(result))
        if result.success:
            _show(engine)


def main(argv: Optional[List[str]] = None) -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Stackgrid stacking puzzle')
    parser.add_argument('--play', action='store_true', help='Play interactively in the terminal')
    parser.add_argument('--solve', action='store_true', help='Replay the fixed winning sequence')
    parser.add_argument('--delay-ms', type=int, default=settings.solve_delay_ms,
                        help='Pause between auto-solve steps')
    parser.add_argument('--csv', default=None, help='Write move history CSV to this path on exit')
    parser.add_argument('--log-level', default=settings.log_level, help='Logging level')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    engine = BoardEngine()

    if args.solve:
        print('Initial board:')
        _show(engine)

        def _on_step(i: int, mv, res: MoveResult) -> None:
            print(f"\n{i + 1:2d}. {mv[0]} {mv[1]}: {_describe(res)}")
            _show(engine)

        replay_solution(engine, delay_s=max(0, args.delay_ms) / 1000.0, on_step=_on_step)
    elif args.play:
        play(engine)
    else:
        print('Initial board:')
        _show(engine)
        print('Legal moves:', ', '.join(f"{tid} {d}" for tid, d in engine.legal_moves()))

    if args.csv:
        _write_csv(engine, args.csv)


if __name__ == '__main__':
    main()
