"""HTML and plain-text rendering of reader views."""

from typing import Optional
from ..core.types import ReaderView
from ..catalog.schema import GuideCatalog

_HTML_ESCAPES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

def escape_html(text: Optional[str]) -> str:
    """Escape text for use in element content and quoted attributes."""
    if not text:
        return ""
    for raw, entity in _HTML_ESCAPES:
        text = text.replace(raw, entity)
    return text

def _header(name: str, count_label: str) -> str:
    return (
        '<div class="file-header">'
        f'<span class="file-name">{escape_html(name)}</span>'
        f'<span class="count">{count_label}</span>'
        '</div>'
    )

def render_placeholder(message: Optional[str] = None) -> str:
    return f'<div class="placeholder">{escape_html(message or "📁 选择文件")}</div>'

def render_error(message: str) -> str:
    return f'<div class="error">❌ {escape_html(message)}</div>'

def render_view(view: ReaderView) -> str:
    """
    Render a reader view as an HTML fragment.

    Args:
        view: View returned by GuideReader

    Returns:
        str: HTML fragment with every piece of document text escaped
    """
    if view.kind == "error":
        return render_error(view.message or "")
    if view.kind == "placeholder":
        return render_placeholder(view.message)
    if view.kind == "empty":
        return _header(view.display_name, "空文件") + render_placeholder("📭 没有内容")

    items = "".join(f'<div class="sentence-item">{escape_html(s)}</div>'
                    for s in view.sentences)
    return (_header(view.display_name, f"{view.count} 句")
            + f'<div class="sentence-list">{items}</div>')

def render_options(catalog: GuideCatalog, current_file: str = "") -> str:
    """Render catalog entries as <option> elements, marking the current one."""
    options = []
    for entry in catalog.entries:
        selected = " selected" if entry.file == current_file else ""
        options.append(f'<option value="{escape_html(entry.file)}"{selected}>'
                       f'{escape_html(entry.name)}</option>')
    return "".join(options)

def render_text(view: ReaderView) -> str:
    """Render a reader view for a terminal."""
    if view.kind == "error":
        return f"❌ {view.message}"
    if view.kind == "placeholder":
        return view.message or ""
    if view.kind == "empty":
        return f"{view.display_name} (空文件)"

    width = len(str(view.count))
    lines = [f"{view.display_name} ({view.count} 句)"]
    lines.extend(f"{i:>{width}}. {s}" for i, s in enumerate(view.sentences, 1))
    return "\n".join(lines)
