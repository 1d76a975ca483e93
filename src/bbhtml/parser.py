"""BBCode converter entry point."""

import re

from .constants import YOUTUBE_HEIGHT, YOUTUBE_WIDTH
from .generator import TagGenerator
from .tokenizer import Renderer, RenderOpts
from .tokens import StrictModeError

__all__ = ["BBCode", "StrictModeError", "render", "render_raw"]

_BRACKET_PATTERN = re.compile(r"\[(.*?)\]", re.IGNORECASE | re.DOTALL)


def normalize_name(name):
    """Lower-case a tag name one character at a time, as the scanner does."""
    return "".join(ch.lower() for ch in name)


class BBCode:
    """Converts text with BBCode tags to HTML.

    Configuration (custom tags, ignored tags, YouTube iframe size) lives on the
    instance and applies to every render. Each ``render`` call runs its own
    ``Renderer``, so one converter can be shared by threads as long as nobody
    changes the configuration while another thread renders.

    Example::

        bbcode = BBCode()
        bbcode.add_tag("hl", lambda tag, html, opening: "<mark>" if tag.opening else "</mark>")
        bbcode.render("[b]bold[/b] and [hl]marked[/hl]")
    """

    __slots__ = (
        "collect_errors",
        "custom_tags",
        "debug",
        "errors",
        "generator",
        "ignored_tags_list",
        "strict",
        "text",
        "youtube_height",
        "youtube_width",
    )

    def __init__(self, text=None, *, collect_errors=False, strict=False, debug=False):
        self.text = text
        self.collect_errors = bool(collect_errors)
        self.strict = bool(strict)
        self.debug = bool(debug)
        self.custom_tags = {}
        self.ignored_tags_list = []
        self.youtube_width = YOUTUBE_WIDTH
        self.youtube_height = YOUTUBE_HEIGHT
        self.errors = []
        self.generator = TagGenerator(self)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"BBCode(text={self.text!r})"

    def set_text(self, text):
        self.text = text

    def _resolve_text(self, text):
        if text is None:
            text = self.text
        return text or ""

    def render_raw(self, text=None):
        """Return the text with every bracketed token removed."""
        return _BRACKET_PATTERN.sub("", self._resolve_text(text))

    def render(self, text=None, escape=True, keep_lines=True):
        """Render BBCode to HTML.

        ``escape`` replaces ``<`` and ``>`` (and only those) with entities;
        ``keep_lines`` turns each newline into ``<br/>`` followed by the
        newline. Errors from the pass are left in ``self.errors`` when error
        collection or strict mode is enabled.
        """
        opts = RenderOpts(
            escape=escape,
            keep_lines=keep_lines,
            collect_errors=self.collect_errors,
            strict=self.strict,
        )
        renderer = Renderer(self.generator, opts)
        try:
            return renderer.run(self._resolve_text(text))
        finally:
            self.errors = renderer.errors

    def add_tag(self, name, renderer):
        """Register a custom tag.

        ``renderer(tag, html, opening_tag)`` receives the tag, the live
        ``OutputBuffer`` and, for closing tags, the matching opening tag. It
        returns the fragment to append. Built-in tag names cannot be
        overridden this way.
        """
        if not callable(renderer):
            raise TypeError(f"Renderer for tag {name!r} must be callable")
        self.custom_tags[normalize_name(name)] = renderer

    def forget_tag(self, name):
        self.custom_tags.pop(normalize_name(name), None)

    def ignore_tag(self, name):
        name = normalize_name(name)
        if name not in self.ignored_tags_list:
            self.ignored_tags_list.append(name)

    def permit_tag(self, name):
        name = normalize_name(name)
        if name in self.ignored_tags_list:
            self.ignored_tags_list.remove(name)

    @property
    def ignored_tags(self):
        return list(self.ignored_tags_list)


def render(text, *, escape=True, keep_lines=True, **kwargs):
    """Render ``text`` with a fresh converter."""
    return BBCode(**kwargs).render(text, escape=escape, keep_lines=keep_lines)


def render_raw(text):
    return BBCode().render_raw(text)
