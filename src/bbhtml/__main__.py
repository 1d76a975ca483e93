"""Command line wrapper: ``python -m bbhtml [FILE]``."""

import argparse
import logging
import sys

from .parser import BBCode, StrictModeError


def build_arg_parser():
    parser = argparse.ArgumentParser(prog="bbhtml", description="Convert BBCode to HTML")
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (default: stdin)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Strip all tags instead of rendering HTML",
    )
    parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Do not escape '<' and '>'",
    )
    parser.add_argument(
        "--no-lines",
        action="store_true",
        help="Do not turn newlines into <br/>",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Ignore tag NAME (repeatable)",
    )
    parser.add_argument(
        "--youtube-width",
        type=int,
        default=None,
        help="Width of YouTube iframes in pixels",
    )
    parser.add_argument(
        "--youtube-height",
        type=int,
        default=None,
        help="Height of YouTube iframes in pixels",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first markup error",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log tag dispatch to stderr",
    )
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    bbcode = BBCode(strict=args.strict, debug=args.debug)
    for name in args.ignore:
        bbcode.ignore_tag(name)
    if args.youtube_width is not None:
        bbcode.youtube_width = args.youtube_width
    if args.youtube_height is not None:
        bbcode.youtube_height = args.youtube_height

    text = args.file.read()
    if args.file is not sys.stdin:
        args.file.close()
    if args.raw:
        sys.stdout.write(bbcode.render_raw(text))
        return 0

    try:
        html = bbcode.render(text, escape=not args.no_escape, keep_lines=not args.no_lines)
    except StrictModeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
