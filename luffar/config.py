"""Default game settings, read from the environment (and an optional .env file)."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BOARD_SIZE = 15
DEFAULT_RUN_LENGTH = 5

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    board_size: int = Field(default=DEFAULT_BOARD_SIZE, ge=1)
    run_length: int = Field(default=DEFAULT_RUN_LENGTH, ge=2)
    grow_board: bool = False
    wrap_diagonals: bool = False


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        board_size=int(os.getenv("LUFFAR_BOARD_SIZE", DEFAULT_BOARD_SIZE)),
        run_length=int(os.getenv("LUFFAR_RUN_LENGTH", DEFAULT_RUN_LENGTH)),
        grow_board=_flag("LUFFAR_GROW_BOARD"),
        wrap_diagonals=_flag("LUFFAR_WRAP_DIAGONALS"),
    )
