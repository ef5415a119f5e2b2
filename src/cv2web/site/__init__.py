"""Resume site generator: resume.yaml to page, layout and stylesheet sources."""

from cv2web.site.layout import generate_layout
from cv2web.site.markup import escape_html, format_multiline
from cv2web.site.page import generate_page
from cv2web.site.resume import load_resume
from cv2web.site.styles import generate_globals_css

__all__ = [
    "generate_layout",
    "escape_html",
    "format_multiline",
    "generate_page",
    "load_resume",
    "generate_globals_css",
]
