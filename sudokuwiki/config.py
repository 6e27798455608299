import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"


class Settings(BaseModel):
    """
    Настройки сервера.

    Все пути хранятся как есть, относительные пути
    считаются от рабочей директории процесса.
    """

    pages_dir: Path = Field(default=Path("./data"), description="Папка со страницами")
    boards_dir: Path = Field(default=Path("./sudoku"), description="Папка с досками судоку")
    templates_dir: Path = Field(default=DEFAULT_TEMPLATES_DIR)
    default_page: str = Field(default="FrontPage", pattern=r"^[a-zA-Z0-9]+$")
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = "INFO"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Загружает настройки из .env файла и переменных окружения.
    Пустые переменные игнорируются.
    """

    load_dotenv(env_file)

    mapping = {
        "pages_dir": "WIKI_PAGES_DIR",
        "boards_dir": "WIKI_BOARDS_DIR",
        "templates_dir": "WIKI_TEMPLATES_DIR",
        "default_page": "WIKI_DEFAULT_PAGE",
        "host": "WIKI_HOST",
        "port": "WIKI_PORT",
        "log_level": "WIKI_LOG_LEVEL",
    }

    values = {}
    for field_name, env_name in mapping.items():
        value = os.environ.get(env_name)
        if value:
            values[field_name] = value

    return Settings(**values)
