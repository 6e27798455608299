import random

import pytest

from sudokuwiki.board_parser import BoardParseError, parse_board
from sudokuwiki.schemas import CellOrigin

from conftest import SAMPLE_BOARD


def test_sample_board_cells():
    board = parse_board("easy", SAMPLE_BOARD)

    assert board.id == "easy"
    assert board.grid[0][0] == 5
    assert board.grid[0][1] == 3
    assert board.grid[0][2] == 0
    assert board.origin[0][0] == CellOrigin.GIVEN
    assert board.origin[0][2] == CellOrigin.EMPTY
    assert board.grid[1] == [6, 0, 0, 1, 9, 5, 0, 0, 0]


def test_short_input_leaves_trailing_cells_empty():
    # 78 digits: the last three cells of row 8 stay empty
    board = parse_board("easy", SAMPLE_BOARD)

    assert board.grid[8] == [0, 0, 0, 0, 8, 0, 0, 0, 0]
    assert board.origin[8][6:] == [0, 0, 0]


def test_origin_marks_exactly_non_zero_cells():
    rng = random.Random(42)
    raw = "".join(rng.choice("0123456789") for _ in range(81))
    board = parse_board("rnd", raw)

    for i in range(9):
        for j in range(9):
            assert board.grid[i][j] == int(raw[i * 9 + j])
            assert (board.origin[i][j] == 1) == (board.grid[i][j] != 0)


def test_parse_is_deterministic():
    raw = b"123456789" * 9
    assert parse_board("a", raw) == parse_board("a", raw)


def test_bytes_and_str_give_same_board():
    assert parse_board("a", SAMPLE_BOARD) == parse_board("a", SAMPLE_BOARD.encode())


def test_trailing_newline_is_ignored():
    raw = "0" * 80 + "9\r\n"
    board = parse_board("a", raw)

    assert board.grid[8][8] == 9
    assert board.is_given(8, 8)


def test_non_digit_raises():
    with pytest.raises(BoardParseError, match="position 3"):
        parse_board("bad", "123x" + "0" * 77)


def test_too_long_raises():
    with pytest.raises(BoardParseError):
        parse_board("bad", "0" * 82)


def test_parse_error_is_value_error():
    assert issubclass(BoardParseError, ValueError)


def test_str_prints_grid_rows():
    board = parse_board("a", "123456789" * 9)
    lines = str(board).splitlines()

    assert len(lines) == 9
    assert lines[0] == "1 2 3 4 5 6 7 8 9"
