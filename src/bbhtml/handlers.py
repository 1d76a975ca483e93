import logging
import re

from bbhtml.constants import (
    ANCHOR_CLOSE,
    EMAIL_OPEN_PREFIX,
    HREF_END,
    LIST_ALPHA_PROPERTY,
    LIST_FRESH_OPENINGS,
    LIST_ITEM_CLOSE,
    LIST_ITEM_OPEN,
    LIST_OPEN_OL,
    LIST_OPEN_OL_ALPHA,
    LIST_OPEN_UL,
    QUOTE_AUTHOR,
    QUOTE_CLOSE,
    QUOTE_OPEN,
    SPAN_CLOSE,
    STYLE_SPAN_TEMPLATES,
    TAG_EMAIL,
    TAG_LI_STAR,
    TAG_LIST,
    TAG_QUOTE,
    TAG_URL,
    TAG_YOUTUBE,
    URL_OPEN_PREFIX,
    WRAPPER_FRAGMENTS,
    YOUTUBE_CLOSE,
    YOUTUBE_OPEN,
)

logger = logging.getLogger(__name__)

# An unfinished tag at the end (e.g. an open `<img src="`) runs to the end of the text
_MARKUP_PATTERN = re.compile(r"<[^>]*(?:>|\Z)", re.DOTALL)


def strip_markup(text):
    """Remove every ``<...>`` run, and a trailing unfinished ``<...``, from rendered HTML."""
    return _MARKUP_PATTERN.sub("", text)


class TagHandler:
    """Base class for built-in tag rendering.

    ``handle_open`` and ``handle_close`` return the fragment to append, or
    None to emit nothing. Returning None from ``handle_open`` also keeps the
    tag off the open-tag stack.
    """

    def __init__(self, generator, name):
        self.generator = generator
        self.name = name

    def debug(self, message):
        # Only format when debugging is on
        if self.generator.debug_enabled:
            logger.debug("%s[%s]: %s", self.__class__.__name__, self.name, message)

    def handle_open(self, tag, buffer):
        return None

    def handle_close(self, tag, buffer, opening_tag):
        return None


class WrapperTagHandler(TagHandler):
    """Tags that always emit the same opening and closing fragment."""

    def __init__(self, generator, name, open_fragment, close_fragment):
        super().__init__(generator, name)
        self.open_fragment = open_fragment
        self.close_fragment = close_fragment

    def handle_open(self, tag, buffer):
        return self.open_fragment

    def handle_close(self, tag, buffer, opening_tag):
        return self.close_fragment


class EmailTagHandler(TagHandler):
    def handle_open(self, tag, buffer):
        if tag.property:
            return f"{EMAIL_OPEN_PREFIX}{tag.property}{HREF_END}"
        return EMAIL_OPEN_PREFIX

    def handle_close(self, tag, buffer, opening_tag):
        if opening_tag.property:
            return ANCHOR_CLOSE
        # The address was emitted as plain text right after the open prefix
        address = buffer.read_from(opening_tag.position + len(EMAIL_OPEN_PREFIX))
        self.debug(f"completing mailto href with {address!r}")
        return f"{HREF_END}{address}{ANCHOR_CLOSE}"


class UrlTagHandler(TagHandler):
    def handle_open(self, tag, buffer):
        if tag.property:
            return f"{URL_OPEN_PREFIX}{tag.property}{HREF_END}"
        return URL_OPEN_PREFIX

    def handle_close(self, tag, buffer, opening_tag):
        if opening_tag.property:
            return ANCHOR_CLOSE
        href_start = opening_tag.position + len(URL_OPEN_PREFIX)
        partial = buffer.read_from(href_start)
        buffer.truncate(href_start)
        buffer.append(f"{strip_markup(partial)}{HREF_END}{partial}{ANCHOR_CLOSE}")
        self.debug(f"auto-linked {partial!r}")
        return ""


class ListTagHandler(TagHandler):
    def handle_open(self, tag, buffer):
        if not tag.property:
            return LIST_OPEN_UL
        if tag.property == LIST_ALPHA_PROPERTY:
            return LIST_OPEN_OL_ALPHA
        return LIST_OPEN_OL

    def handle_close(self, tag, buffer, opening_tag):
        # Order matters: nested lists rely on the first suffix that matches
        if buffer.endswith(LIST_OPEN_UL):
            return "</ul>"
        if buffer.endswith(LIST_OPEN_OL):
            return "</ol>"
        if buffer.endswith(LIST_OPEN_OL_ALPHA):
            return "</ol>"
        if buffer.endswith(LIST_ITEM_CLOSE) and opening_tag.property:
            return "</ol>"
        if buffer.endswith(LIST_ITEM_CLOSE) and not opening_tag.property:
            return "</ul>"
        if opening_tag.property:
            return f"{LIST_ITEM_CLOSE}</ol>"
        return f"{LIST_ITEM_CLOSE}</ul>"


class ListItemShorthandHandler(TagHandler):
    """``[*]`` items close the previous item instead of having a closing tag."""

    def handle_open(self, tag, buffer):
        tag.opening = False
        for fresh in LIST_FRESH_OPENINGS:
            if buffer.endswith(fresh):
                return LIST_ITEM_OPEN
        return f"{LIST_ITEM_CLOSE}{LIST_ITEM_OPEN}"


class QuoteTagHandler(TagHandler):
    def handle_open(self, tag, buffer):
        if tag.property:
            return QUOTE_OPEN + QUOTE_AUTHOR.format(author=tag.property)
        return QUOTE_OPEN

    def handle_close(self, tag, buffer, opening_tag):
        return QUOTE_CLOSE


class YouTubeTagHandler(TagHandler):
    def handle_open(self, tag, buffer):
        converter = self.generator.converter
        return YOUTUBE_OPEN.format(width=converter.youtube_width, height=converter.youtube_height)

    def handle_close(self, tag, buffer, opening_tag):
        return YOUTUBE_CLOSE


class StyleSpanTagHandler(TagHandler):
    """``font``, ``size`` and ``color``: the span only opens with a property.

    The close is unconditional, so a caller that forces a close for a
    property-less opening gets an unmatched ``</span>``.
    """

    def __init__(self, generator, name, template):
        super().__init__(generator, name)
        self.template = template

    def handle_open(self, tag, buffer):
        if not tag.property:
            self.debug("no property, emitting nothing")
            return None
        return self.template.format(value=tag.property)

    def handle_close(self, tag, buffer, opening_tag):
        return SPAN_CLOSE


def build_builtin_handlers(generator):
    """Create the name -> handler table for every built-in tag."""
    handlers = {}
    for name, (open_fragment, close_fragment) in WRAPPER_FRAGMENTS.items():
        handlers[name] = WrapperTagHandler(generator, name, open_fragment, close_fragment)
    for name, template in STYLE_SPAN_TEMPLATES.items():
        handlers[name] = StyleSpanTagHandler(generator, name, template)
    handlers[TAG_EMAIL] = EmailTagHandler(generator, TAG_EMAIL)
    handlers[TAG_URL] = UrlTagHandler(generator, TAG_URL)
    handlers[TAG_LIST] = ListTagHandler(generator, TAG_LIST)
    handlers[TAG_LI_STAR] = ListItemShorthandHandler(generator, TAG_LI_STAR)
    handlers[TAG_QUOTE] = QuoteTagHandler(generator, TAG_QUOTE)
    handlers[TAG_YOUTUBE] = YouTubeTagHandler(generator, TAG_YOUTUBE)
    return handlers
