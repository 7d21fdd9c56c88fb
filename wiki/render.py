import pathlib

import markdown
from fastapi.templating import Jinja2Templates

from wiki.naming import kebab_to_title

TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
templates.env.filters["heading"] = kebab_to_title


def markdown_to_html(text: str) -> str:
    """Convert page markdown to an HTML fragment"""
    if not text:
        return ""
    return markdown.markdown(text)
