"""Tests for the bracket scanning state machine."""

import unittest

from bbhtml import BBCode


def render(text, **kwargs):
    return BBCode().render(text, **kwargs)


class TestPlainText(unittest.TestCase):
    def test_text_without_brackets_is_unchanged(self):
        assert render("hello world", escape=False, keep_lines=False) == "hello world"

    def test_empty_input(self):
        assert render("") == ""

    def test_newline_gets_line_break(self):
        """The newline itself is kept after the <br/>."""
        assert render("a\nb") == "a<br/>\nb"

    def test_newline_without_keep_lines(self):
        assert render("a\nb", keep_lines=False) == "a\nb"

    def test_carriage_return_dropped_when_keeping_lines(self):
        assert render("a\r\nb") == "a<br/>\nb"

    def test_carriage_return_kept_without_keep_lines(self):
        assert render("a\r\nb", keep_lines=False) == "a\r\nb"

    def test_multibyte_text(self):
        assert render("[b]héllo wörld ✓[/b]") == "<strong>héllo wörld ✓</strong>"


class TestEscaping(unittest.TestCase):
    def test_angle_brackets_escaped(self):
        assert render("<x>") == "&lt;x&gt;"

    def test_other_characters_untouched(self):
        assert render("a & b \"c\" 'd'") == "a & b \"c\" 'd'"

    def test_escaping_disabled(self):
        assert render("<x>", escape=False) == "<x>"

    def test_angle_brackets_in_bracket_go_to_output(self):
        """Escaped characters inside a bracket are emitted, the tag keeps its name."""
        assert render("[b<]x[/b]") == "&lt;<strong>x</strong>"

    def test_angle_brackets_in_bracket_leave_property_alone(self):
        assert render("[url=a<b]x[/url]") == '&lt;<a href="ab">x</a>'
        html = render("[quote=<b>]x[/quote]")
        assert html == '&lt;&gt;<blockquote><span class="author">b:</span><br/>x</blockquote>'

    def test_angle_brackets_in_property_raw_when_disabled(self):
        html = render("[quote=<b>]x[/quote]", escape=False)
        assert html == '<blockquote><span class="author"><b>:</span><br/>x</blockquote>'


class TestTagScanning(unittest.TestCase):
    def test_names_are_case_insensitive(self):
        assert render("[B]x[/B]") == "<strong>x</strong>"

    def test_property_after_equals(self):
        assert render("[url=http://a.com]site[/url]") == '<a href="http://a.com">site</a>'

    def test_quoted_property_may_contain_brackets(self):
        html = render('[url="http://a.com/?q=[x]"]go[/url]')
        assert html == '<a href="http://a.com/?q=[x]">go</a>'

    def test_property_keeps_case(self):
        assert render("[color=Red]x[/color]") == '<span style="color: Red">x</span>'

    def test_quote_in_name_invalidates_tag(self):
        assert render('[b"]x') == "x"

    def test_double_slash_invalidates_tag(self):
        assert render("[b]x[//b]") == "<strong>x</strong>"

    def test_slash_after_name_invalidates_tag(self):
        assert render("[b/]x") == "x"

    def test_equals_without_name_invalidates_tag(self):
        assert render("[=x]y") == "y"

    def test_unknown_tag_vanishes(self):
        assert render("[foo]x[/foo]") == "x"

    def test_unterminated_bracket_is_dropped(self):
        assert render("a[b") == "a"

    def test_empty_brackets_vanish(self):
        assert render("a[]b") == "ab"


class TestNesting(unittest.TestCase):
    def test_unterminated_tag_is_auto_closed(self):
        assert render("[b]x") == render("[b]x[/b]")

    def test_unmatched_closing_tag_is_dropped(self):
        assert render("x[/b]") == render("x")

    def test_same_name_nesting(self):
        assert render("[b]a[b]b[/b]c[/b]") == "<strong>a<strong>b</strong>c</strong>"

    def test_mixed_nesting(self):
        assert render("[b][i]x[/i][/b]") == "<strong><em>x</em></strong>"

    def test_auto_close_follows_first_seen_name_order(self):
        """Open tags are closed per name, in the order names were first pushed."""
        assert render("[i]a[b]b") == "<em>a<strong>b</em></strong>"

    def test_auto_close_same_name_oldest_first(self):
        """Still-open tags of one name are closed front to back."""
        assert render("[list][*]a[list=1][*]b") == "<ul><li>a<ol><li>b</li></ul></li></ol>"

    def test_auto_close_url_without_property(self):
        assert render("[url]http://x.org") == '<a href="http://x.org">http://x.org</a>'


class TestRenderRaw(unittest.TestCase):
    def test_strips_every_bracket_span(self):
        bbcode = BBCode()
        assert bbcode.render_raw("[b]hello[/b] [url=http://x]world[/url]") == "hello world"

    def test_strips_across_newlines(self):
        assert BBCode().render_raw("a[b\n]c") == "ac"

    def test_uses_stored_text(self):
        assert BBCode("[i]x[/i]").render_raw() == "x"

    def test_does_not_escape(self):
        assert BBCode().render_raw("<x>[b]y[/b]") == "<x>y"


if __name__ == "__main__":
    unittest.main()
