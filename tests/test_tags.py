"""Tests for the built-in tag table."""

import unittest

from bbhtml import BBCode, OutputBuffer, Tag


def render(text, **kwargs):
    return BBCode().render(text, **kwargs)


PAIRED_TAGS = {
    "b": ("<strong>", "</strong>"),
    "i": ("<em>", "</em>"),
    "s": ("<del>", "</del>"),
    "u": ('<span style="text-decoration: underline">', "</span>"),
    "code": ("<pre><code>", "</code></pre>"),
    "quote": ("<blockquote>", "</blockquote>"),
    "left": ('<div style="text-align: left">', "</div>"),
    "center": ('<div style="text-align: center">', "</div>"),
    "right": ('<div style="text-align: right">', "</div>"),
    "spoiler": ('<div class="spoiler">', "</div>"),
    "li": ("<li>", "</li>"),
}


class TestPairedTags(unittest.TestCase):
    def test_paired_tags_wrap_content(self):
        for name, (open_html, close_html) in PAIRED_TAGS.items():
            with self.subTest(tag=name):
                assert render(f"[{name}]x[/{name}]") == f"{open_html}x{close_html}"


class TestLinks(unittest.TestCase):
    def test_url_auto_link(self):
        html = render("[url]http://example.com[/url]")
        assert html == '<a href="http://example.com">http://example.com</a>'

    def test_url_auto_link_keeps_markup_out_of_href(self):
        html = render("[url][b]http://x.org[/b][/url]")
        assert html == '<a href="http://x.org"><strong>http://x.org</strong></a>'

    def test_url_auto_link_drops_unfinished_markup_from_href(self):
        html = render("[url]a[img]b[/url]")
        assert html == '<a href="a">a<img src="b</a>" />'

    def test_url_with_property(self):
        assert render("[url=http://x.org]X[/url]") == '<a href="http://x.org">X</a>'

    def test_url_after_text(self):
        html = render("see [url]http://x.org[/url] now")
        assert html == 'see <a href="http://x.org">http://x.org</a> now'

    def test_email_with_property(self):
        html = render("[email=foo@bar.com]contact[/email]")
        assert html == '<a href="mailto:foo@bar.com">contact</a>'

    def test_email_from_visible_text(self):
        html = render("[email]foo@bar.com[/email]")
        assert html == '<a href="mailto:foo@bar.com">foo@bar.com</a>'

    def test_email_after_text(self):
        html = render("mail: [email]a@b.c[/email]!")
        assert html == 'mail: <a href="mailto:a@b.c">a@b.c</a>!'

    def test_img(self):
        assert render("[img]http://x.org/a.png[/img]") == '<img src="http://x.org/a.png" />'


class TestLists(unittest.TestCase):
    def test_unordered_list(self):
        assert render("[list][*]a[*]b[/list]") == "<ul><li>a</li><li>b</li></ul>"

    def test_ordered_list(self):
        assert render("[list=1][*]a[/list]") == "<ol><li>a</li></ol>"

    def test_alphabetic_list(self):
        html = render("[list=a][*]a[/list]")
        assert html == '<ol style="list-style-type: lower-alpha"><li>a</li></ol>'

    def test_empty_lists(self):
        assert render("[list][/list]") == "<ul></ul>"
        assert render("[list=1][/list]") == "<ol></ol>"

    def test_explicit_items(self):
        assert render("[list][li]a[/li][/list]") == "<ul><li>a</li></ul>"
        assert render("[list=1][li]a[/li][/list]") == "<ol><li>a</li></ol>"

    def test_nested_lists(self):
        html = render("[list][*]a[list=1][*]b[/list][/list]")
        assert html == "<ul><li>a<ol><li>b</li></ol></li></ul>"

    def test_unterminated_list(self):
        assert render("[list][*]a") == "<ul><li>a</li></ul>"

    def test_star_outside_list_closes_previous_item(self):
        assert render("[*]x") == "</li><li>x"

    def test_star_has_no_closing_tag(self):
        assert render("[list][*]a[/*][/list]") == "<ul><li>a</li></ul>"


class TestQuote(unittest.TestCase):
    def test_quote_with_author(self):
        html = render("[quote=Alice]hi[/quote]")
        assert html == '<blockquote><span class="author">Alice:</span><br/>hi</blockquote>'


class TestYouTube(unittest.TestCase):
    def test_default_size(self):
        html = render("[youtube]abc[/youtube]")
        assert html == (
            '<iframe class="youtube-player" type="text/html" width="640" height="385" '
            'src="http://www.youtube.com/embed/abc" frameborder="0"></iframe>'
        )

    def test_configured_size(self):
        bbcode = BBCode()
        bbcode.youtube_width = 320
        bbcode.youtube_height = -1
        html = bbcode.render("[youtube]abc[/youtube]")
        assert 'width="320" height="-1"' in html


class TestStyleSpans(unittest.TestCase):
    def test_font(self):
        assert render("[font=Arial]x[/font]") == '<span style="font-family: Arial">x</span>'

    def test_size(self):
        assert render("[size=120]x[/size]") == '<span style="font-size: 120%">x</span>'

    def test_color(self):
        assert render("[color=#f00]x[/color]") == '<span style="color: #f00">x</span>'

    def test_missing_property_emits_nothing(self):
        assert render("[color]x[/color]") == "x"

    def test_close_is_unconditional(self):
        """Forcing a close for a property-less span still yields </span>."""
        bbcode = BBCode()
        buffer = OutputBuffer("x")
        opening = Tag("size")
        closing = Tag("size", opening=False, position=1)
        assert bbcode.generator.generate(opening, buffer) is None
        assert bbcode.generator.generate(closing, buffer, opening) == "</span>"


if __name__ == "__main__":
    unittest.main()
