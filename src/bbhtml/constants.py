"""Built-in tag names and the HTML fragments they emit.

The closing logic of ``url``, ``email`` and ``list`` inspects already-rendered
output by literal suffix and by fixed prefix lengths, so the strings below are
part of the output contract and must not change.

Usage:
    from bbhtml.constants import TAG_B, LIST_OPEN_UL
"""

TAG_B = "b"
TAG_I = "i"
TAG_S = "s"
TAG_U = "u"
TAG_CODE = "code"
TAG_EMAIL = "email"
TAG_URL = "url"
TAG_IMG = "img"
TAG_LIST = "list"
TAG_LI_STAR = "*"
TAG_LI = "li"
TAG_QUOTE = "quote"
TAG_YOUTUBE = "youtube"
TAG_FONT = "font"
TAG_SIZE = "size"
TAG_COLOR = "color"
TAG_LEFT = "left"
TAG_CENTER = "center"
TAG_RIGHT = "right"
TAG_SPOILER = "spoiler"

BUILTIN_TAGS = [
    TAG_B,
    TAG_I,
    TAG_S,
    TAG_U,
    TAG_CODE,
    TAG_EMAIL,
    TAG_URL,
    TAG_IMG,
    TAG_LIST,
    TAG_LI_STAR,
    TAG_LI,
    TAG_QUOTE,
    TAG_YOUTUBE,
    TAG_FONT,
    TAG_SIZE,
    TAG_COLOR,
    TAG_LEFT,
    TAG_CENTER,
    TAG_RIGHT,
    TAG_SPOILER,
]

# Plain open/close pairs
WRAPPER_FRAGMENTS = {
    TAG_B: ("<strong>", "</strong>"),
    TAG_I: ("<em>", "</em>"),
    TAG_S: ("<del>", "</del>"),
    TAG_U: ('<span style="text-decoration: underline">', "</span>"),
    TAG_CODE: ("<pre><code>", "</code></pre>"),
    TAG_IMG: ('<img src="', '" />'),
    TAG_LI: ("<li>", "</li>"),
    TAG_LEFT: ('<div style="text-align: left">', "</div>"),
    TAG_CENTER: ('<div style="text-align: center">', "</div>"),
    TAG_RIGHT: ('<div style="text-align: right">', "</div>"),
    TAG_SPOILER: ('<div class="spoiler">', "</div>"),
}

ANCHOR_CLOSE = "</a>"
EMAIL_OPEN_PREFIX = '<a href="mailto:'
URL_OPEN_PREFIX = '<a href="'
HREF_END = '">'

LIST_OPEN_UL = "<ul>"
LIST_OPEN_OL = "<ol>"
LIST_OPEN_OL_ALPHA = '<ol style="list-style-type: lower-alpha">'
LIST_ALPHA_PROPERTY = "a"
LIST_FRESH_OPENINGS = (LIST_OPEN_UL, LIST_OPEN_OL, LIST_OPEN_OL_ALPHA)
LIST_ITEM_OPEN = "<li>"
LIST_ITEM_CLOSE = "</li>"

QUOTE_OPEN = "<blockquote>"
QUOTE_AUTHOR = '<span class="author">{author}:</span><br/>'
QUOTE_CLOSE = "</blockquote>"

YOUTUBE_OPEN = (
    '<iframe class="youtube-player" type="text/html" width="{width}" '
    'height="{height}" src="http://www.youtube.com/embed/'
)
YOUTUBE_CLOSE = '" frameborder="0"></iframe>'
YOUTUBE_WIDTH = 640
YOUTUBE_HEIGHT = 385

# Style spans that only open when a property is given
STYLE_SPAN_TEMPLATES = {
    TAG_FONT: '<span style="font-family: {value}">',
    TAG_SIZE: '<span style="font-size: {value}%">',
    TAG_COLOR: '<span style="color: {value}">',
}
SPAN_CLOSE = "</span>"

LINE_BREAK = "<br/>"

ESCAPED_CHARS = {
    "<": "&lt;",
    ">": "&gt;",
}
