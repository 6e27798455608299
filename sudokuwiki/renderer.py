from pathlib import Path
from typing import Any, Union

import jinja2
from fastapi import Request
from fastapi.templating import Jinja2Templates


TEMPLATE_NAMES = ("edit", "view", "all", "all-sudokus", "sudoku")


class TemplateRenderer:
    """
    Набор шаблонов страниц.

    Создаётся один раз при сборке приложения и передаётся в обработчики,
    после создания не изменяется. Все шаблоны компилируются сразу,
    поэтому отсутствующий шаблон обнаруживается при старте.
    """

    def __init__(self, templates_dir: Union[str, Path]):
        self.templates_dir = Path(templates_dir)
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            undefined=jinja2.StrictUndefined,
        )
        self.templates = Jinja2Templates(env=env)

        for name in TEMPLATE_NAMES:
            self.templates.get_template(f"{name}.html")

    def render(self, request: Request, name: str, **context: Any):
        """
        Рендерит шаблон name.html с переданными сущностями.
        Ошибки шаблона (jinja2.TemplateError) пробрасываются вызывающему.
        """

        return self.templates.TemplateResponse(request, f"{name}.html", context)
