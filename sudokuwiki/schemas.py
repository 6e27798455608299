from enum import IntEnum
from typing import List

from pydantic import BaseModel, Field


BOARD_SIZE = 9


class CellOrigin(IntEnum):
    """
    Происхождение значения клетки доски.
    """

    EMPTY = 0
    GIVEN = 1


class Page(BaseModel):
    """
    Страница вики.
    Заголовок одновременно является именем файла без расширения.
    """

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Board(BaseModel):
    """
    Доска судоку 9x9.

    grid хранит цифры (0 - пустая клетка),
    origin отмечает клетки, заполненные в исходном файле.
    """

    id: str
    grid: List[List[int]] = Field(..., min_length=BOARD_SIZE, max_length=BOARD_SIZE)
    origin: List[List[int]] = Field(..., min_length=BOARD_SIZE, max_length=BOARD_SIZE)

    def is_given(self, row: int, col: int) -> bool:
        return self.origin[row][col] == CellOrigin.GIVEN

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self.grid)
