from .buffer import OutputBuffer
from .parser import BBCode, StrictModeError, render, render_raw
from .tokenizer import RenderOpts
from .tokens import ParseError, Tag

__all__ = [
    "BBCode",
    "OutputBuffer",
    "ParseError",
    "RenderOpts",
    "StrictModeError",
    "Tag",
    "render",
    "render_raw",
]
