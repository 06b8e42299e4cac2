from pathlib import Path
from typing import Any, Mapping, Protocol

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound, select_autoescape

from todo_app.core.errors import InternalError


class ViewRenderer(Protocol):
    def render(self, view_name: str, context: Mapping[str, Any]) -> bytes:
        ...


class JinjaRenderer:
    """Rendu HTML via Jinja2 ; toute erreur de template devient une InternalError."""

    def __init__(self, templates_dir: Path):
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, view_name: str, context: Mapping[str, Any]) -> bytes:
        try:
            template = self.env.get_template(view_name)
            return template.render(**context).encode("utf-8")
        except TemplateNotFound as e:
            raise InternalError(f"Missing view: {view_name}") from e
        except TemplateError as e:
            raise InternalError(f"Rendering {view_name} failed") from e
