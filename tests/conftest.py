import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("LUFFAR_BOARD_SIZE", "LUFFAR_RUN_LENGTH", "LUFFAR_GROW_BOARD", "LUFFAR_WRAP_DIAGONALS"):
        monkeypatch.delenv(name, raising=False)
