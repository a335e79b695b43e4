import logging

import markdown
from markdown.extensions.codehilite import CodeHiliteExtension
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.extensions.tables import TableExtension
from markdown.extensions.toc import TocExtension
from pygments.formatters import HtmlFormatter

from app.services.image_service import process_image_references

logger = logging.getLogger(__name__)

HIGHLIGHT_CSS_CLASS = "highlight"


def _extensions() -> list:
    return [
        FencedCodeExtension(),
        CodeHiliteExtension(css_class=HIGHLIGHT_CSS_CLASS, guess_lang=False),
        TableExtension(),
        TocExtension(),
        "sane_lists",
    ]


def render_markdown(text: str) -> str:
    """Convert markdown (without front-matter) to HTML."""
    md = markdown.Markdown(extensions=_extensions(), output_format="html")
    return md.convert(text or "")


def render_post_content(markdown_text: str, image_base_url: str) -> str:
    """Rewrite image references to the image endpoint, then render to HTML."""
    processed = process_image_references(markdown_text, image_base_url)
    logger.debug(f"Rendering {len(processed)} chars of markdown")
    return render_markdown(processed)


def get_highlight_css(style: str = "default") -> str:
    """Pygments stylesheet matching the markup produced by render_markdown."""
    return HtmlFormatter(style=style).get_style_defs(f".{HIGHLIGHT_CSS_CLASS}")
