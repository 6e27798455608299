import logging
import re
from typing import Awaitable, Callable, Dict, Optional, Tuple

from fastapi import Request, Response


logger = logging.getLogger(__name__)

VERBS = ("edit", "save", "view", "sudoku")
VALID_PATH = re.compile(r"/(edit|save|view|sudoku)/([a-zA-Z0-9]+)")

Handler = Callable[[Request, str], Awaitable[Response]]


class Dispatcher:
    """
    Сопоставляет путь запроса с обработчиком.

    Путь должен иметь вид /<verb>/<id>, где id состоит только
    из латинских букв и цифр. HTTP метод не учитывается.
    """

    def __init__(self, handlers: Dict[str, Handler]):
        unknown = set(handlers) - set(VERBS)
        if unknown:
            raise ValueError(f"Unknown verbs: {sorted(unknown)}")
        self.handlers = handlers

    @staticmethod
    def match(path: str) -> Optional[Tuple[str, str]]:
        m = VALID_PATH.fullmatch(path)
        if m is None:
            return None
        return m.group(1), m.group(2)

    async def dispatch(self, request: Request) -> Response:
        path = request.url.path
        matched = self.match(path)
        logger.debug("Dispatch %s %s -> %s", request.method, path, matched)

        if matched is None:
            return Response(status_code=404)

        verb, identifier = matched
        handler = self.handlers.get(verb)
        if handler is None:
            return Response(status_code=404)

        return await handler(request, identifier)
