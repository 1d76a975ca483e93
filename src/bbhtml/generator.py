"""Maps a completed tag to the HTML fragment it produces."""

import logging

from .handlers import build_builtin_handlers

logger = logging.getLogger(__name__)


class TagGenerator:
    """Dispatches tags to built-in handlers, then to the converter's custom renderers.

    The converter supplies ``custom_tags``, ``ignored_tags_list``, ``youtube_width``,
    ``youtube_height`` and ``debug``; they are read on every call so changes
    made between renders take effect immediately.
    """

    __slots__ = ("converter", "handlers")

    def __init__(self, converter):
        self.converter = converter
        self.handlers = build_builtin_handlers(self)

    @property
    def debug_enabled(self):
        return self.converter.debug

    def is_known(self, name):
        return name in self.handlers or name in self.converter.custom_tags

    def is_ignored(self, name):
        return name in self.converter.ignored_tags_list

    def generate(self, tag, buffer, opening_tag=None):
        """Return the fragment for ``tag``, or None to emit nothing.

        ``buffer`` is the live output; handlers for ``url`` and custom tags may
        rewrite it before returning.
        """
        if self.is_ignored(tag.name):
            if self.debug_enabled:
                logger.debug("ignored tag %r", tag.name)
            return None

        handler = self.handlers.get(tag.name)
        if handler is not None:
            if tag.opening:
                return handler.handle_open(tag, buffer)
            return handler.handle_close(tag, buffer, opening_tag)

        renderer = self.converter.custom_tags.get(tag.name)
        if renderer is None:
            return None
        code = renderer(tag, buffer, opening_tag)
        # Registered tags always take part in stack bookkeeping
        return "" if code is None else str(code)
