import logging
from typing import Dict

import jinja2
from fastapi import Request, Response
from fastapi.responses import PlainTextResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from .board_parser import BoardParseError
from .dispatcher import Handler
from .renderer import TemplateRenderer
from .schemas import Page
from .storage import BoardStore, PageStore


logger = logging.getLogger(__name__)


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=302)


def internal_error(error: Exception) -> PlainTextResponse:
    """
    Ответ 500 с текстом исходной ошибки.
    """

    return PlainTextResponse(str(error), status_code=500)


class Handlers:
    """
    Обработчики запросов: по одному на пару действие/ресурс.

    Хранилища и шаблоны передаются при создании,
    между запросами обработчики ничего не хранят.
    """

    def __init__(self,
                 pages: PageStore,
                 boards: BoardStore,
                 renderer: TemplateRenderer,
                 default_page: str = "FrontPage"):
        self.pages = pages
        self.boards = boards
        self.renderer = renderer
        self.default_page = default_page

    def routes(self) -> Dict[str, Handler]:
        """
        Обработчики для путей вида /<verb>/<id>.
        """

        return {
            "view": self.view_page,
            "edit": self.edit_page,
            "save": self.save_page,
            "sudoku": self.view_board,
        }

    def _render(self, request: Request, name: str, **context) -> Response:
        try:
            return self.renderer.render(request, name, **context)
        except jinja2.TemplateError as e:
            logger.exception("Template %s failed", name)
            return internal_error(e)

    async def root(self, request: Request) -> Response:
        return redirect(f"/view/{self.default_page}")

    async def view_page(self, request: Request, title: str) -> Response:
        try:
            page = await run_in_threadpool(self.pages.load, title)
        except OSError as e:
            logger.info("Page %s not loaded (%s), redirecting to edit", title, e)
            return redirect(f"/edit/{title}")

        return self._render(request, "view", page=page)

    async def edit_page(self, request: Request, title: str) -> Response:
        try:
            page = await run_in_threadpool(self.pages.load, title)
        except OSError:
            page = Page(title=title)

        return self._render(request, "edit", page=page)

    async def save_page(self, request: Request, title: str) -> Response:
        form = await request.form()
        # Как и для HTML форм: сначала тело запроса, затем строка запроса
        body = form.get("body")
        if body is None:
            body = request.query_params.get("body", "")
        if not isinstance(body, str):
            body = (await body.read()).decode("utf-8", errors="replace")

        page = Page(title=title, body=body.encode("utf-8"))
        try:
            await run_in_threadpool(self.pages.save, page)
        except OSError as e:
            logger.warning("Saving page %s failed: %s", title, e)
            return internal_error(e)

        return redirect(f"/view/{title}")

    async def view_board(self, request: Request, board_id: str) -> Response:
        logger.info("View board %s", board_id)
        try:
            board = await run_in_threadpool(self.boards.load, board_id)
        except (OSError, BoardParseError) as e:
            logger.warning("Loading board %s failed: %s", board_id, e)
            return internal_error(e)

        return self._render(request, "sudoku", board=board)

    async def list_pages(self, request: Request) -> Response:
        try:
            pages = await run_in_threadpool(self.pages.list)
        except OSError as e:
            logger.warning("Listing pages failed: %s", e)
            return internal_error(e)

        return self._render(request, "all", pages=pages)

    async def list_boards(self, request: Request) -> Response:
        try:
            boards = await run_in_threadpool(self.boards.list)
        except (OSError, BoardParseError) as e:
            logger.warning("Listing boards failed: %s", e)
            return internal_error(e)

        return self._render(request, "all-sudokus", boards=boards)
