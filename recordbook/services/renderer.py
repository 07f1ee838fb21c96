"""
Recordbook — Template Renderer
===============================

What:  Renders the named HTML views (index, new, show, edit).
How:   Jinja2 templates loaded from the templates directory by view name
       (`<view>.html`). Undefined names raise instead of rendering blank,
       so a data/template mismatch is reported as an error.
Who:   Injected into the route handlers via `Depends(get_renderer)`.

View data contract:
    index → records: list of Record
    show  → record: Record
    edit  → record: Record
    new   → (nothing)

The page is rendered completely before an HTMLResponse is built, so a render
failure never leaves a half-written page behind: the client gets the error
response instead.
"""

import logging
from typing import Any, Optional

import jinja2
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from recordbook.config import settings
from recordbook.exceptions import TemplateError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html"


class TemplateRenderer:
    """Renders views from a templates directory into complete HTML pages."""

    def __init__(self, templates_dir: Optional[str] = None):
        self.templates_dir = templates_dir or settings.templates_dir
        self.templates = Jinja2Templates(directory=self.templates_dir)
        self.templates.env.undefined = jinja2.StrictUndefined

    def render(self, view: str, **data: Any) -> str:
        """
        Render `view` with `data` and return the finished page.

        Raises:
            TemplateError if the template is missing, malformed, or fails
            while rendering.
        """
        name = f"{view}{TEMPLATE_SUFFIX}"
        try:
            template = self.templates.get_template(name)
        except jinja2.TemplateNotFound:
            raise TemplateError(
                view,
                message=f"template '{view}' not found in {self.templates_dir}",
                context={"template": name},
            )
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(
                view,
                message=f"template '{view}' is invalid: {e.message} (line {e.lineno})",
                context={"template": name, "lineno": e.lineno},
            )

        try:
            return template.render(**data)
        except jinja2.TemplateError as e:
            logger.error("Rendering view %s failed: %s", view, str(e))
            raise TemplateError(
                view,
                message=f"template '{view}' failed to render: {e}",
                context={"template": name},
                phase="render",
            )

    def response(self, view: str, **data: Any) -> HTMLResponse:
        """Render `view` into a 200 HTMLResponse."""
        return HTMLResponse(content=self.render(view, **data))


# ── Singleton Instance ────────────────────────────────────────────────────
template_renderer = TemplateRenderer()


def get_renderer() -> TemplateRenderer:
    """FastAPI dependency returning the application's template renderer."""
    return template_renderer
