"""
Reversi core Python package.

This package contains the rule engine and persisted-state model of the game,
kept free of any presentation code so drivers (CLI, JSON API) stay thin.
Modules:
- disk.py: Disk, SIDES, save-format symbols
- board.py: Board, Coord
- state.py: GameState, Player
- moves.py: flips, legality, move application, turn advance, scoring
- serializer.py: text save format
- storage.py: the on-disk save slot
- ai.py: player agents
- session.py: GameSession driver
- errors.py, config.py: exceptions and REVERSI_* settings
- cli.py: terminal game
"""
