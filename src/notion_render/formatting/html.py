"""HTML rendering for the content IR.

Rendering flows strictly upward: text is escaped, each run is wrapped in its
inline tags, runs are joined into rich text, blocks map to structural markup,
and ``render_document`` groups consecutive list items into ``<ul>``/``<ol>``
containers. Every function here is pure and never raises for IR input.
"""

from typing import Callable, Iterable, Union

from notion_render.formatting.ir import (
    DEFAULT_CALLOUT_ICON,
    DEFAULT_CODE_LANGUAGE,
    Bookmark,
    BulletedListItem,
    Callout,
    Code,
    ContentBlock,
    Divider,
    Heading,
    Image,
    NumberedListItem,
    Paragraph,
    Quote,
    TextRun,
    Toggle,
)
from notion_render.utils.logging import get_logger

logger = get_logger(__name__)

LINK_ATTRIBUTES = 'target="_blank" rel="noopener noreferrer"'


def escape_html(text: str) -> str:
    """Escape the HTML-significant characters ``&``, ``<`` and ``>``.

    ``&`` is replaced first so entities produced by the later rules are
    never escaped twice.
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def compose_run(run: TextRun) -> str:
    """Render one text run as inline markup.

    Wrappers are applied innermost first: strong, em, del, u, code, and
    finally the anchor when the run carries a link.
    """
    content = escape_html(run.text)

    if run.bold:
        content = f"<strong>{content}</strong>"
    if run.italic:
        content = f"<em>{content}</em>"
    if run.strikethrough:
        content = f"<del>{content}</del>"
    if run.underline:
        content = f"<u>{content}</u>"
    if run.code:
        content = f"<code>{content}</code>"
    if run.link:
        content = f'<a href="{run.link}" {LINK_ATTRIBUTES}>{content}</a>'

    return content


def render_runs(runs: Iterable[TextRun]) -> str:
    """Concatenate the inline markup of a run sequence."""
    return "".join(compose_run(run) for run in runs)


# =============================================================================
# Block renderers
# =============================================================================

def _render_paragraph(block: Paragraph) -> str:
    text = render_runs(block.runs)
    # Empty paragraphs are spacing in Notion; they emit nothing
    return f"<p>{text}</p>" if text else ""


def _render_heading(block: Heading) -> str:
    tag = f"h{block.level}"
    return f"<{tag}>{render_runs(block.runs)}</{tag}>"


def _render_list_item(block: Union[BulletedListItem, NumberedListItem]) -> str:
    return f"<li>{render_runs(block.runs)}</li>"


def _render_quote(block: Quote) -> str:
    return f"<blockquote>{render_runs(block.runs)}</blockquote>"


def _render_code(block: Code) -> str:
    language = block.language or DEFAULT_CODE_LANGUAGE
    code = render_runs(block.runs)
    return f'<pre><code class="language-{language}">{code}</code></pre>'


def _render_divider(block: Divider) -> str:
    return "<hr />"


def _render_image(block: Image) -> str:
    # alt reuses the caption markup rather than a plain-text extraction
    caption = render_runs(block.caption)
    figcaption = f"<figcaption>{caption}</figcaption>" if caption else ""
    return (
        f'<figure><img src="{block.url}" alt="{caption}" loading="lazy" />'
        f"{figcaption}</figure>"
    )


def _render_callout(block: Callout) -> str:
    icon = block.icon or DEFAULT_CALLOUT_ICON
    return (
        f'<div class="callout"><span class="callout-icon">{icon}</span>'
        f"<div>{render_runs(block.runs)}</div></div>"
    )


def _render_toggle(block: Toggle) -> str:
    return f"<details><summary>{render_runs(block.summary)}</summary></details>"


def _render_bookmark(block: Bookmark) -> str:
    return (
        f'<a href="{block.url}" class="bookmark" {LINK_ATTRIBUTES}>'
        f"{block.url}</a>"
    )


# Map block classes to their renderers
BLOCK_RENDERERS: dict[type, Callable[..., str]] = {
    Paragraph: _render_paragraph,
    Heading: _render_heading,
    BulletedListItem: _render_list_item,
    NumberedListItem: _render_list_item,
    Quote: _render_quote,
    Code: _render_code,
    Divider: _render_divider,
    Image: _render_image,
    Callout: _render_callout,
    Toggle: _render_toggle,
    Bookmark: _render_bookmark,
}


def render_block(block: ContentBlock) -> str:
    """Render a single block to its HTML fragment.

    List items render as bare ``<li>`` elements; wrapping them in a list
    container is ``render_document``'s job. Unknown blocks render to an
    empty string.
    """
    renderer = BLOCK_RENDERERS.get(type(block))
    if renderer is None:
        logger.debug(f"Skipping unsupported block: {block!r}")
        return ""
    return renderer(block)


def render_document(blocks: Iterable[ContentBlock]) -> str:
    """Render a block sequence to one HTML string.

    Consecutive bulleted items share a ``<ul>`` and consecutive numbered
    items share an ``<ol>``. Any other block, including an unsupported one,
    closes the open list so a later item starts a fresh container.
    Fragments are joined with newlines.
    """
    html_parts: list[str] = []
    in_bullet_list = False
    in_numbered_list = False

    for block in blocks:
        is_bullet = isinstance(block, BulletedListItem)
        is_numbered = isinstance(block, NumberedListItem)

        if not is_bullet and in_bullet_list:
            html_parts.append("</ul>")
            in_bullet_list = False
        if not is_numbered and in_numbered_list:
            html_parts.append("</ol>")
            in_numbered_list = False

        if is_bullet and not in_bullet_list:
            html_parts.append("<ul>")
            in_bullet_list = True
        if is_numbered and not in_numbered_list:
            html_parts.append("<ol>")
            in_numbered_list = True

        html_parts.append(render_block(block))

    if in_bullet_list:
        html_parts.append("</ul>")
    if in_numbered_list:
        html_parts.append("</ol>")

    return "\n".join(html_parts)
