"""Pydantic models for the game state: players, board, outcome and errors."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Player(str, Enum):
    CROSS = "cross"
    CIRCLE = "circle"

    @property
    def opponent(self) -> Player:
        return Player.CIRCLE if self is Player.CROSS else Player.CROSS


class Winner(str, Enum):
    CROSS = "cross"
    CIRCLE = "circle"
    DRAW = "draw"

    @classmethod
    def for_player(cls, player: Player) -> Winner:
        return cls(player.value)


class GameError(str, Enum):
    INVALID_POSITION = "invalid_position"
    GAME_OVER = "game_over"


Cell = Player | None
Row = tuple[Cell, ...]
Board = tuple[Row, ...]

MIN_RUN_LENGTH = 2


def empty_board(rows: int, cols: int) -> Board:
    return tuple((None,) * cols for _ in range(rows))


class GameState(BaseModel):
    """One immutable snapshot of a game.

    Every turn produces a new instance; nothing here is ever changed in place.
    """

    model_config = ConfigDict(frozen=True)

    board: Board
    next_player: Player = Player.CROSS
    winner: Winner | None = None
    required_run_length: int
    last_error: GameError | None = None
    grow_board: bool = False
    wrap_diagonals: bool = False
    move_count: int = Field(default=0, ge=0)

    @field_validator("required_run_length")
    @classmethod
    def _check_run_length(cls, value: int) -> int:
        if value < MIN_RUN_LENGTH:
            raise ValueError(f"required_run_length must be at least {MIN_RUN_LENGTH}, got {value}")
        return value

    @model_validator(mode="after")
    def _check_board_shape(self) -> GameState:
        if not self.board or not self.board[0]:
            raise ValueError("board must have at least one row and one column")
        width = len(self.board[0])
        if any(len(row) != width for row in self.board):
            raise ValueError("board rows must all have the same length")
        return self

    @property
    def rows(self) -> int:
        return len(self.board)

    @property
    def cols(self) -> int:
        return len(self.board[0])

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def cell(self, row: int, col: int) -> Cell:
        return self.board[row][col]
