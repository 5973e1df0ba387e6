"""Win detection: line enumeration, run counting and draw detection."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum

from luffar.models import MIN_RUN_LENGTH, Board, Player, Winner

Coord = tuple[int, int]  # (row, col)
Line = list[Coord]


class LineFamily(str, Enum):
    ROW = "row"
    COLUMN = "column"
    FORWARD_DIAGONAL = "forward_diagonal"  # ↘
    BACKWARD_DIAGONAL = "backward_diagonal"  # ↙


def iter_lines(board: Board, family: LineFamily, wrap_diagonals: bool = False) -> Iterator[Line]:
    """Yield every line of ``family`` as an ordered list of coordinates.

    Rows run left to right, columns top to bottom, forward diagonals from the
    top-left end and backward diagonals from the top-right end. With
    ``wrap_diagonals`` the forward diagonals re-enter from the left edge once
    they run off the right one, giving exactly one line per column.
    """
    height = len(board)
    width = len(board[0]) if height else 0

    if family is LineFamily.ROW:
        for r in range(height):
            yield [(r, c) for c in range(width)]

    elif family is LineFamily.COLUMN:
        for c in range(width):
            yield [(r, c) for r in range(height)]

    elif family is LineFamily.FORWARD_DIAGONAL:
        if wrap_diagonals:
            for x in range(width):
                yield [(y, (y + x) % width) for y in range(height)]
        else:
            # offset = col - row
            for offset in range(-(height - 1), width):
                yield [(r, r + offset) for r in range(max(0, -offset), min(height, width - offset))]

    elif family is LineFamily.BACKWARD_DIAGONAL:
        # total = col + row
        for total in range(height + width - 1):
            yield [(r, total - r) for r in range(max(0, total - width + 1), min(height, total + 1))]

    else:
        raise ValueError(f"Unknown line family: {family!r}")


def _check_run_length(required_run_length: int) -> None:
    if required_run_length < MIN_RUN_LENGTH:
        raise ValueError(f"required_run_length must be at least {MIN_RUN_LENGTH}, got {required_run_length}")


def winning_run(board: Board, line: Sequence[Coord], player: Player, required_run_length: int) -> Line | None:
    """Return the first run of ``required_run_length`` cells owned by ``player`` on ``line``."""
    _check_run_length(required_run_length)
    count = 0
    for i, (r, c) in enumerate(line):
        if board[r][c] == player:
            count += 1
        else:
            count = 0
        if count >= required_run_length:
            return list(line[i - required_run_length + 1 : i + 1])
    return None


def find_winning_line(
    board: Board,
    player: Player,
    required_run_length: int,
    wrap_diagonals: bool = False,
) -> Line | None:
    """Scan rows, columns and both diagonal families; stop at the first win."""
    _check_run_length(required_run_length)
    for family in LineFamily:
        for line in iter_lines(board, family, wrap_diagonals):
            if len(line) < required_run_length:
                continue
            run = winning_run(board, line, player, required_run_length)
            if run is not None:
                return run
    return None


def has_winning_line(
    board: Board,
    player: Player,
    required_run_length: int,
    wrap_diagonals: bool = False,
) -> bool:
    return find_winning_line(board, player, required_run_length, wrap_diagonals) is not None


def is_full(board: Board) -> bool:
    return all(cell is not None for row in board for cell in row)


def evaluate(
    board: Board,
    player: Player,
    required_run_length: int,
    wrap_diagonals: bool = False,
) -> Winner | None:
    """Decide the outcome after ``player`` has moved.

    A completed line wins even when it fills the last empty cell; a full board
    is a draw only when ``player`` has no line.
    """
    if has_winning_line(board, player, required_run_length, wrap_diagonals):
        return Winner.for_player(player)
    if is_full(board):
        return Winner.DRAW
    return None
