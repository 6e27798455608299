from typing import List, Union

from .schemas import BOARD_SIZE, Board, CellOrigin


CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class BoardParseError(ValueError):
    """
    Содержимое файла доски не соответствует формату.
    """


def parse_board(board_id: str, raw: Union[bytes, str]) -> Board:
    """
    Разбирает строку из 81 цифры в доску судоку.

    Символ i задаёт клетку (i // 9, i % 9), '0' означает пустую клетку.
    Завершающие пробельные символы отбрасываются. Более короткая строка
    допускается: оставшиеся клетки считаются пустыми.
    """

    if isinstance(raw, str):
        raw = raw.encode("ascii", errors="replace")

    data = raw.rstrip()
    if len(data) > CELL_COUNT:
        raise BoardParseError(
            f"Board '{board_id}' has {len(data)} cells, expected at most {CELL_COUNT}")

    grid: List[List[int]] = [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for i, byte in enumerate(data):
        value = byte - ord('0')
        if not 0 <= value <= 9:
            raise BoardParseError(
                f"Board '{board_id}': invalid character {chr(byte)!r} at position {i}")
        grid[i // BOARD_SIZE][i % BOARD_SIZE] = value

    origin = [
        [int(CellOrigin.GIVEN if value != 0 else CellOrigin.EMPTY) for value in row]
        for row in grid
    ]

    return Board(id=board_id, grid=grid, origin=origin)
