"""Tests for HTML rendering of the content IR."""

import pytest

from notion_render.formatting.html import (
    compose_run,
    escape_html,
    render_block,
    render_document,
    render_runs,
)
from notion_render.formatting.ir import (
    Annotation,
    Bookmark,
    BulletedListItem,
    Callout,
    Code,
    Divider,
    Heading,
    Image,
    NumberedListItem,
    Paragraph,
    Quote,
    TextRun,
    Toggle,
    UnsupportedBlock,
)


def runs(text: str) -> tuple[TextRun, ...]:
    return (TextRun(text),)


class TestEscapeHtml:
    """Tests for escape_html."""

    def test_escapes_all_three_characters(self):
        assert escape_html("a&b<c>d") == "a&amp;b&lt;c&gt;d"

    def test_does_not_double_escape(self):
        assert escape_html("<&>") == "&lt;&amp;&gt;"
        assert "&amp;amp;" not in escape_html("&lt;")

    def test_empty_string(self):
        assert escape_html("") == ""

    def test_quotes_untouched(self):
        assert escape_html('"quoted" \'text\'') == '"quoted" \'text\''


class TestComposeRun:
    """Tests for compose_run."""

    def test_plain_run_is_escaped_text(self):
        run = TextRun("x < y & z")
        assert compose_run(run) == escape_html(run.text)

    def test_bold(self):
        run = TextRun("hi", Annotation.BOLD)
        assert compose_run(run) == "<strong>hi</strong>"

    def test_strikethrough_and_underline(self):
        run = TextRun("hi", Annotation.STRIKETHROUGH | Annotation.UNDERLINE)
        assert compose_run(run) == "<u><del>hi</del></u>"

    def test_bold_italic_code_nesting(self):
        run = TextRun("X", Annotation.BOLD | Annotation.ITALIC | Annotation.CODE)
        assert compose_run(run) == "<code><em><strong>X</strong></em></code>"

    def test_all_flags_with_link(self):
        """The anchor is the outermost wrapper."""
        all_flags = (
            Annotation.BOLD
            | Annotation.ITALIC
            | Annotation.STRIKETHROUGH
            | Annotation.UNDERLINE
            | Annotation.CODE
        )
        run = TextRun("X", all_flags, link="https://example.com")

        assert compose_run(run) == (
            '<a href="https://example.com" target="_blank" '
            'rel="noopener noreferrer">'
            "<code><u><del><em><strong>X</strong></em></del></u></code></a>"
        )

    def test_link_only(self):
        run = TextRun("site", link="https://example.com")
        assert compose_run(run) == (
            '<a href="https://example.com" target="_blank" '
            'rel="noopener noreferrer">site</a>'
        )

    def test_text_escaped_inside_wrappers(self):
        run = TextRun("<b>", Annotation.ITALIC)
        assert compose_run(run) == "<em>&lt;b&gt;</em>"


class TestRenderRuns:
    """Tests for render_runs."""

    def test_empty_sequence(self):
        assert render_runs(()) == ""

    def test_concatenates_without_separator(self):
        result = render_runs(
            (TextRun("a"), TextRun("b", Annotation.BOLD), TextRun("c"))
        )
        assert result == "a<strong>b</strong>c"


class TestRenderBlock:
    """Tests for render_block."""

    def test_paragraph(self):
        assert render_block(Paragraph(runs("Hello"))) == "<p>Hello</p>"

    def test_empty_paragraph_renders_nothing(self):
        assert render_block(Paragraph()) == ""

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_heading(self, level: int):
        result = render_block(Heading(level, runs("Title")))
        assert result == f"<h{level}>Title</h{level}>"

    def test_empty_heading_still_emitted(self):
        assert render_block(Heading(2)) == "<h2></h2>"

    def test_list_items_are_bare(self):
        assert render_block(BulletedListItem(runs("a"))) == "<li>a</li>"
        assert render_block(NumberedListItem(runs("b"))) == "<li>b</li>"

    def test_quote(self):
        assert render_block(Quote(runs("wise"))) == "<blockquote>wise</blockquote>"

    def test_code_with_language(self):
        result = render_block(Code(runs("x = 1"), language="python"))
        assert result == '<pre><code class="language-python">x = 1</code></pre>'

    def test_code_without_language(self):
        result = render_block(Code(runs("a < b")))
        assert result == (
            '<pre><code class="language-plaintext">a &lt; b</code></pre>'
        )

    def test_code_with_empty_language(self):
        result = render_block(Code(runs("x"), language=""))
        assert 'class="language-plaintext"' in result

    def test_divider(self):
        assert render_block(Divider()) == "<hr />"

    def test_image_without_caption(self):
        result = render_block(Image(url="https://img/a.png"))
        assert result == (
            '<figure><img src="https://img/a.png" alt="" loading="lazy" />'
            "</figure>"
        )

    def test_image_caption_reused_in_alt(self):
        caption = (TextRun("A "), TextRun("cat", Annotation.BOLD))
        result = render_block(Image(url="u.png", caption=caption))
        assert result == (
            '<figure><img src="u.png" alt="A <strong>cat</strong>" '
            'loading="lazy" />'
            "<figcaption>A <strong>cat</strong></figcaption></figure>"
        )

    def test_callout_with_icon(self):
        result = render_block(Callout(runs("Note"), icon="⚠️"))
        assert result == (
            '<div class="callout"><span class="callout-icon">⚠️</span>'
            "<div>Note</div></div>"
        )

    def test_callout_default_icon(self):
        result = render_block(Callout(runs("Tip")))
        assert '<span class="callout-icon">💡</span>' in result

    def test_toggle(self):
        result = render_block(Toggle(runs("More")))
        assert result == "<details><summary>More</summary></details>"

    def test_bookmark(self):
        result = render_block(Bookmark(url="https://example.com"))
        assert result == (
            '<a href="https://example.com" class="bookmark" target="_blank" '
            'rel="noopener noreferrer">https://example.com</a>'
        )

    def test_urls_not_escaped(self):
        result = render_block(Bookmark(url="https://x.com/?a=1&b=2"))
        assert 'href="https://x.com/?a=1&b=2"' in result

    def test_unsupported_block(self):
        assert render_block(UnsupportedBlock(type="table")) == ""


class TestRenderDocument:
    """Tests for list grouping in render_document."""

    def test_empty_document(self):
        assert render_document([]) == ""

    def test_single_bullet_item(self):
        result = render_document([BulletedListItem(runs("a"))])
        assert result == "<ul>\n<li>a</li>\n</ul>"

    def test_mixed_lists_and_paragraph(self):
        blocks = [
            BulletedListItem(runs("a")),
            BulletedListItem(runs("b")),
            NumberedListItem(runs("c")),
            Paragraph(runs("d")),
        ]
        assert render_document(blocks) == "\n".join([
            "<ul>",
            "<li>a</li>",
            "<li>b</li>",
            "</ul>",
            "<ol>",
            "<li>c</li>",
            "</ol>",
            "<p>d</p>",
        ])

    def test_trailing_numbered_list_closed(self):
        blocks = [Paragraph(runs("intro")), NumberedListItem(runs("x"))]
        assert render_document(blocks) == "<p>intro</p>\n<ol>\n<li>x</li>\n</ol>"

    def test_interleaved_lists_alternate(self):
        blocks = [
            BulletedListItem(runs("a")),
            NumberedListItem(runs("b")),
            BulletedListItem(runs("c")),
        ]
        result = render_document(blocks)

        assert result.count("<ul>") == 2
        assert result.count("</ul>") == 2
        assert result.count("<ol>") == 1
        assert result.count("</ol>") == 1
        assert result.index("</ul>") < result.index("<ol>")

    def test_unsupported_block_breaks_list(self):
        blocks = [
            BulletedListItem(runs("a")),
            UnsupportedBlock(type="table"),
            BulletedListItem(runs("b")),
        ]
        assert render_document(blocks) == "\n".join([
            "<ul>",
            "<li>a</li>",
            "</ul>",
            "",
            "<ul>",
            "<li>b</li>",
            "</ul>",
        ])

    def test_unsupported_block_breaks_numbered_list(self):
        blocks = [
            NumberedListItem(runs("a")),
            UnsupportedBlock(type="table"),
            NumberedListItem(runs("b")),
        ]
        assert render_document(blocks) == "\n".join([
            "<ol>",
            "<li>a</li>",
            "</ol>",
            "",
            "<ol>",
            "<li>b</li>",
            "</ol>",
        ])

    def test_empty_paragraph_keeps_separator(self):
        blocks = [Paragraph(runs("a")), Paragraph(), Paragraph(runs("b"))]
        assert render_document(blocks) == "<p>a</p>\n\n<p>b</p>"

    def test_render_is_repeatable(self):
        blocks = [BulletedListItem(runs("a"))]
        assert render_document(blocks) == render_document(blocks)

    def test_accepts_generator(self):
        result = render_document(Paragraph(runs(t)) for t in ["x", "y"])
        assert result == "<p>x</p>\n<p>y</p>"
