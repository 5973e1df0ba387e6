"""Rules engine for N-in-a-row games on a board that can grow at its edges."""

from luffar.game import apply_move, grow, start, validate_move
from luffar.models import Board, Cell, GameError, GameState, Player, Winner
from luffar.win_check import LineFamily, evaluate, find_winning_line, iter_lines

__all__ = [
    "Board",
    "Cell",
    "GameError",
    "GameState",
    "LineFamily",
    "Player",
    "Winner",
    "apply_move",
    "evaluate",
    "find_winning_line",
    "grow",
    "iter_lines",
    "start",
    "validate_move",
]
