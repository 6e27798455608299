"""
Хранилища страниц и досок поверх файловой системы.

Каждая сущность лежит в отдельном файле <id>.txt.
Кэша нет: каждое чтение обращается к диску.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from .board_parser import parse_board
from .schemas import Board, Page


logger = logging.getLogger(__name__)

FILE_SUFFIX = ".txt"
FILE_MODE = 0o600


def _list_ids(directory: Path) -> List[str]:
    """
    Возвращает идентификаторы всех *.txt файлов папки,
    отсортированные по имени файла.
    """

    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)

    ids = []
    for entry in entries:
        if entry.is_file() and entry.name.endswith(FILE_SUFFIX):
            ids.append(entry.name[:-len(FILE_SUFFIX)])
    return ids


class PageStore:
    def __init__(self, pages_dir: Union[str, Path]):
        self.pages_dir = Path(pages_dir)

    def _path(self, title: str) -> Path:
        return self.pages_dir / f"{title}{FILE_SUFFIX}"

    def load(self, title: str) -> Page:
        """
        Читает страницу. Если файла нет, выбрасывает FileNotFoundError.
        """

        body = self._path(title).read_bytes()
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """
        Записывает страницу на диск, создавая или перезаписывая файл.

        Имя файла приводится к нижнему регистру только при записи,
        чтение регистр не меняет.
        """

        path = self._path(page.title.lower())
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(page.body)
        logger.info("Saved page %s (%d bytes)", path.name, len(page.body))

    def list(self) -> List[Page]:
        """
        Загружает все страницы папки. Первая же ошибка чтения прерывает список.
        """

        return [self.load(title) for title in _list_ids(self.pages_dir)]


class BoardStore:
    def __init__(self, boards_dir: Union[str, Path]):
        self.boards_dir = Path(boards_dir)

    def load(self, board_id: str) -> Board:
        raw = (self.boards_dir / f"{board_id}{FILE_SUFFIX}").read_bytes()
        board = parse_board(board_id, raw)
        logger.debug("Loaded board %s:\n%s", board_id, board)
        return board

    def list(self) -> List[Board]:
        return [self.load(board_id) for board_id in _list_ids(self.boards_dir)]
