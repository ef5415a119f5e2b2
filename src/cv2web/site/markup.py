"""Text helpers shared by the page, layout and stylesheet generators."""

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text) -> str:
    """Escape text for embedding in markup. Falsy values become ``""``."""
    if not text:
        return ""
    out = str(text)
    # "&" first so the other entities are not double-escaped
    for raw, entity in _HTML_ESCAPES:
        out = out.replace(raw, entity)
    return out


def format_multiline(text) -> str:
    """Trim every line and drop blank ones."""
    if not text:
        return ""
    return "\n".join(line.strip() for line in str(text).split("\n") if line.strip())


def js_number(value) -> str:
    """Render a number the way a JS template literal would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def js_string_array(items) -> str:
    """``["a", "b"]`` with each item HTML-escaped."""
    return ", ".join(f'"{escape_html(item)}"' for item in (items or []))
