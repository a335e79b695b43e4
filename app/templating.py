import logging
from pathlib import Path

from fastapi.templating import Jinja2Templates

from app.services.content_parser import get_highlight_css
from app.settings import settings
from app.utils import days_ago

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _days_ago_filter(value) -> str:
    try:
        return days_ago(value, locale=settings.RELATIVE_TIME_LOCALE)
    except ValueError:
        logger.warning(f"Unparseable post date: {value!r}")
        return str(value)


templates.env.filters["days_ago"] = _days_ago_filter
templates.env.globals["settings"] = settings
templates.env.globals["highlight_css"] = get_highlight_css(settings.HIGHLIGHT_STYLE)
