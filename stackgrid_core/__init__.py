"""
Stackgrid core Python package.

Pure-logic pieces of the stacking puzzle, kept apart from the Flask app and
the CLI so they can be tested on their own.
Modules:
- board.py: Board (grid of stacks), Token, Coord, colors
- rules.py: directions and move validation
- engine.py: BoardEngine, the stateful owner of board, registry and history
- history.py: MoveRecord and CSV export
- layouts.py / solution.py: default layout and the fixed auto-solve sequence
"""
