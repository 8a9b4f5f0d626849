"""
Jinja2 page rendering
"""

import os
from datetime import datetime
from typing import Any

from fastapi.templating import Jinja2Templates

from app.utils.i18n import SUPPORTED_LOCALES, get_translator
from app.utils.images import is_allowed_image_url

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "..", "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.trim_blocks = True
templates.env.lstrip_blocks = True
templates.env.globals.update(
    is_allowed_image_url=is_allowed_image_url,
    supported_locales=SUPPORTED_LOCALES,
)


def render_page(template_name: str, locale: str, **context: Any) -> str:
    """Render a page with the locale's translator bound as ``t``"""
    template = templates.get_template(template_name)
    return template.render(
        locale=locale,
        t=get_translator(locale),
        current_year=datetime.now().year,
        **context
    )
