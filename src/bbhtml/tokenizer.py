import logging

from .buffer import OutputBuffer
from .constants import ESCAPED_CHARS, LINE_BREAK
from .tokens import ParseError, StrictModeError, Tag

logger = logging.getLogger(__name__)


class RenderOpts:
    __slots__ = ("collect_errors", "escape", "keep_lines", "strict")

    def __init__(self, escape=True, keep_lines=True, collect_errors=False, strict=False):
        self.escape = bool(escape)
        self.keep_lines = bool(keep_lines)
        self.strict = bool(strict)
        # Strict mode needs the error records to raise with
        self.collect_errors = bool(collect_errors) or self.strict


class Renderer:
    """Single pass bracket markup to HTML state machine.

    One instance handles one render; the open-tag stacks, the output buffer
    and the collected errors all belong to that pass.
    """

    __slots__ = (
        "buffer",
        "current_tag",
        "errors",
        "generator",
        "in_name",
        "in_string",
        "in_tag",
        "opts",
        "pos",
        "tags",
    )

    def __init__(self, generator, opts=None):
        self.generator = generator
        self.opts = opts or RenderOpts()
        self.buffer = OutputBuffer()
        self.errors = []
        self.tags = {}
        self.current_tag = None
        self.in_tag = False
        self.in_name = False
        self.in_string = False
        self.pos = 0

    def run(self, text):
        self.buffer = OutputBuffer()
        self.errors = []
        self.tags = {}
        self.current_tag = None
        self.in_tag = False
        self.in_name = False
        self.in_string = False

        for pos, c in enumerate(text or ""):
            self.pos = pos
            self._consume(c)

        self._finish()
        return self.buffer.getvalue()

    def _consume(self, c):
        opts = self.opts
        if opts.keep_lines and c == "\r":
            return
        if opts.escape and c in ESCAPED_CHARS:
            # Goes straight to output, even inside a bracket
            self.buffer.append(ESCAPED_CHARS[c])
            return

        if self.in_tag:
            self._consume_in_tag(c)
            return

        if c == "[":
            self.in_tag = True
            self.in_name = True
            self.current_tag = Tag(position=len(self.buffer), source_position=self.pos)
            return

        if c == "\n" and opts.keep_lines:
            self.buffer.append(LINE_BREAK)
        self.buffer.append(c)

    def _consume_in_tag(self, c):
        tag = self.current_tag

        if c == '"':
            if self.in_string:
                self.in_string = False
            elif self.in_name:
                tag.valid = False
            else:
                self.in_string = True
            return

        if c == "]" and not self.in_string:
            self._close_bracket()
            return

        if not self.in_name:
            tag.property += c
            return

        if c == "/":
            if tag.name or not tag.opening:
                tag.valid = False
            else:
                tag.opening = False
        elif c == "=":
            if tag.name:
                self.in_name = False
            else:
                tag.valid = False
        else:
            tag.name += c.lower()

    def _close_bracket(self):
        tag = self.current_tag
        self.current_tag = None
        self.in_tag = False
        self.in_name = False
        self.in_string = False

        if not tag.valid:
            self._emit_error("invalid-tag", tag.source_position, "Malformed tag dropped")
            return

        recognized = self._check_recognized(tag)

        if tag.opening:
            code = self.generator.generate(tag, self.buffer)
            # The generator may turn an opening tag into a self-closing one
            if code is not None and tag.opening:
                self.tags.setdefault(tag.name, []).append(tag)
            if code:
                self.buffer.append(code)
            return

        opening_tag = self._pop_tag(tag.name)
        if opening_tag is None:
            if recognized:
                self._emit_error(
                    "unmatched-closing-tag",
                    tag.source_position,
                    f"Closing tag [/{tag.name}] has no open tag",
                )
            return
        code = self.generator.generate(tag, self.buffer, opening_tag)
        if code:
            self.buffer.append(code)

    def _check_recognized(self, tag):
        generator = self.generator
        if generator.is_ignored(tag.name):
            return False
        if generator.is_known(tag.name):
            return True
        self._emit_error("unknown-tag", tag.source_position, f"No renderer for tag {tag.name!r}")
        return False

    def _pop_tag(self, name):
        stack = self.tags.get(name)
        if not stack:
            return None
        return stack.pop()

    def _finish(self):
        if self.in_tag:
            self._emit_error("unterminated-tag", self.current_tag.source_position, "Tag not closed with ']'")
            self.current_tag = None
            self.in_tag = False

        for name, stack in self.tags.items():
            if not stack:
                continue
            closing_tag = Tag(name, opening=False, position=len(self.buffer))
            for opening_tag in stack:
                self._emit_error("unclosed-tag", opening_tag.source_position, f"Tag [{name}] closed at end of input")
                if self.generator.debug_enabled:
                    logger.debug("auto-closing %r", opening_tag)
                code = self.generator.generate(closing_tag, self.buffer, opening_tag)
                if code:
                    self.buffer.append(code)
            stack.clear()

    def _emit_error(self, code, position, message):
        if not self.opts.collect_errors:
            return
        error = ParseError(code, position, message)
        self.errors.append(error)
        if self.opts.strict:
            raise StrictModeError(error)
