from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request

from .config import Settings, load_settings
from .dispatcher import Dispatcher
from .handlers import Handlers
from .logging_config import setup_logging
from .renderer import TemplateRenderer
from .storage import BoardStore, PageStore


# Маршруты не различают HTTP методы
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Собирает приложение.

    Хранилища, шаблоны и обработчики создаются здесь один раз
    и передаются явно, глобального состояния нет.
    """

    if settings is None:
        settings = load_settings()

    pages = PageStore(settings.pages_dir)
    boards = BoardStore(settings.boards_dir)
    renderer = TemplateRenderer(settings.templates_dir)
    handlers = Handlers(pages, boards, renderer, default_page=settings.default_page)
    dispatcher = Dispatcher(handlers.routes())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        print("Starting wiki server...")
        settings.pages_dir.mkdir(parents=True, exist_ok=True)
        settings.boards_dir.mkdir(parents=True, exist_ok=True)
        print(f"Pages: {settings.pages_dir}")
        print(f"Boards: {settings.boards_dir}")

        yield

        print("Stopping wiki server...")

    app = FastAPI(title="Sudoku wiki", lifespan=lifespan)
    app.state.settings = settings

    @app.api_route("/", methods=ALL_METHODS)
    async def root(request: Request):
        return await handlers.root(request)

    @app.api_route("/all/", methods=ALL_METHODS)
    @app.api_route("/all/{rest:path}", methods=ALL_METHODS)
    async def list_pages(request: Request):
        """
        Список всех страниц.
        """

        return await handlers.list_pages(request)

    @app.api_route("/sudoku/all", methods=ALL_METHODS)
    async def list_boards(request: Request):
        """
        Список всех досок.
        """

        return await handlers.list_boards(request)

    # /edit/<id>, /save/<id>, /view/<id>, /sudoku/<id>; остальное - 404
    @app.api_route("/{path:path}", methods=ALL_METHODS)
    async def dispatch(request: Request):
        return await dispatcher.dispatch(request)

    return app


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    print(f"Running at http://{settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
