"""Game logic: starting a game, move validation, board growth and turn transitions."""

from __future__ import annotations

import logging

from luffar.config import load_settings
from luffar.models import Board, GameError, GameState, Row, empty_board
from luffar.win_check import evaluate

logger = logging.getLogger(__name__)


def start(
    initial_size: int | None = None,
    required_run_length: int | None = None,
    *,
    grow_board: bool | None = None,
    wrap_diagonals: bool | None = None,
) -> GameState:
    """Create a fresh game on an empty ``initial_size`` x ``initial_size`` board.

    The environment settings are only read when the size or the run length is
    left as ``None``; the flags then follow the settings too. With both given,
    flags left as ``None`` are off.
    Raises ``ValueError`` for a size below 1 or a run length below 2.
    """
    if initial_size is None or required_run_length is None:
        settings = load_settings()
        initial_size = settings.board_size if initial_size is None else initial_size
        required_run_length = settings.run_length if required_run_length is None else required_run_length
        grow_board = settings.grow_board if grow_board is None else grow_board
        wrap_diagonals = settings.wrap_diagonals if wrap_diagonals is None else wrap_diagonals

    grow_board = bool(grow_board)
    wrap_diagonals = bool(wrap_diagonals)

    if initial_size < 1:
        raise ValueError(f"initial_size must be at least 1, got {initial_size}")

    state = GameState(
        board=empty_board(initial_size, initial_size),
        required_run_length=required_run_length,
        grow_board=grow_board,
        wrap_diagonals=wrap_diagonals,
    )
    logger.debug(
        "Started %dx%d game, run length %d (grow=%s, wrap=%s)",
        initial_size, initial_size, required_run_length, grow_board, wrap_diagonals,
    )
    return state


def validate_move(state: GameState, row: int, col: int) -> GameError | None:
    """Return the error for this move, or None if it is legal."""
    if state.winner is not None:
        return GameError.GAME_OVER
    if row < 0 or row >= state.rows or col < 0 or col >= state.cols:
        return GameError.INVALID_POSITION
    if state.board[row][col] is not None:
        return GameError.INVALID_POSITION
    return None


def grow(board: Board, row: int, col: int) -> Board:
    """Add an empty row/column on each edge that (row, col) touches."""
    last_row = len(board) - 1
    last_col = len(board[0]) - 1

    rows: list[Row] = list(board)
    if col == 0:
        rows = [(None,) + r for r in rows]
    if col == last_col:
        rows = [r + (None,) for r in rows]

    width = len(rows[0])
    if row == 0:
        rows.insert(0, (None,) * width)
    if row == last_row:
        rows.append((None,) * width)

    return tuple(rows)


def apply_move(state: GameState, row: int, col: int) -> GameState:
    """Place the next player's mark at (row, col) and return the resulting state.

    Illegal moves are not raised; they come back as the same board with
    ``last_error`` set. The given state is never modified.
    """
    error = validate_move(state, row, col)
    if error is not None:
        logger.debug("Rejected move (%d, %d) by %s: %s", row, col, state.next_player.value, error.value)
        return state.model_copy(update={"last_error": error})

    mover = state.next_player
    placed = state.board[row][:col] + (mover,) + state.board[row][col + 1 :]
    board = state.board[:row] + (placed,) + state.board[row + 1 :]

    if state.grow_board:
        grown = grow(board, row, col)
        if len(grown) != len(board) or len(grown[0]) != len(board[0]):
            logger.debug(
                "Board grew from %dx%d to %dx%d",
                len(board), len(board[0]), len(grown), len(grown[0]),
            )
        board = grown

    winner = evaluate(board, mover, state.required_run_length, state.wrap_diagonals)
    if winner is not None:
        logger.debug("Game over after %d moves: %s", state.move_count + 1, winner.value)

    return state.model_copy(
        update={
            "board": board,
            "next_player": mover.opponent,
            "winner": winner,
            "last_error": None,
            "move_count": state.move_count + 1,
        }
    )
