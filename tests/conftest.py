import pytest
from fastapi.testclient import TestClient

from sudokuwiki.api import create_app
from sudokuwiki.config import Settings


SAMPLE_BOARD = "530070000600195000098000060800060003400803001700020006060000280000419005000080"


@pytest.fixture
def settings(tmp_path):
    pages_dir = tmp_path / "data"
    boards_dir = tmp_path / "sudoku"
    pages_dir.mkdir()
    boards_dir.mkdir()
    return Settings(pages_dir=pages_dir, boards_dir=boards_dir)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    return TestClient(app)


@pytest.fixture
def sample_board_file(settings):
    path = settings.boards_dir / "easy.txt"
    path.write_text(SAMPLE_BOARD + "\n")
    return path
