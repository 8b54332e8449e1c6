import argparse
import logging
import sys

from i2a.aa import AalibRenderer
from i2a.config import DEFAULT_BLUR, DEFAULT_TERM_WIDTH_MUL, Config
from i2a.converter import convert
from i2a.errors import ArgumentError, I2AError
from i2a.terminal import get_terminal_size

VERSION = "1.2.2"
VERSION_TEXT = f"""i2a v{VERSION}
Copyright (c) 2017 molko <molkoback@gmail.com>
Distributed under WTFPL v2"""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


def _positive(kind, name):
    def parse(value):
        try:
            number = kind(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid {name} given: {value!r}") from None
        if number <= 0:
            raise argparse.ArgumentTypeError(f"invalid {name} given: {value!r}")
        return number

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="i2a", usage="%(prog)s [options] <image>", add_help=False)
    parser.add_argument("image", nargs="?", help=argparse.SUPPRESS)
    parser.add_argument("-h", dest="help", action="store_true", help="print this help message")
    parser.add_argument("-x", dest="max_width", type=_positive(int, "width"), default=0, help="maximum width")
    parser.add_argument("-y", dest="max_height", type=_positive(int, "height"), default=0, help="maximum height")
    parser.add_argument(
        "-m",
        dest="term_width_mul",
        type=_positive(float, "multiplier"),
        default=DEFAULT_TERM_WIDTH_MUL,
        help=f"terminal width multiplier (default: {DEFAULT_TERM_WIDTH_MUL})",
    )
    parser.add_argument(
        "-t", dest="term_size", action="store_true", help="use the terminal size as maximum width and height"
    )
    parser.add_argument(
        "-b",
        dest="blur",
        type=_positive(float, "blur"),
        default=DEFAULT_BLUR,
        help=f"resize blur factor, above 1 softens (default: {DEFAULT_BLUR})",
    )
    parser.add_argument("-i", dest="invert", action="store_true", help="invert colors")
    parser.add_argument("-o", dest="optimize", action="store_true", help="remove whitespace from the right")
    parser.add_argument("-I", dest="info", action="store_true", help="print size and character count")
    parser.add_argument("-V", dest="version", action="store_true", help="print version")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        print(f"error: {e}", file=sys.stderr)
        parser.print_usage(sys.stdout)
        return 1

    if args.help:
        parser.print_help(sys.stdout)
        return 0
    if args.version:
        print(VERSION_TEXT)
        return 0
    if args.image is None:
        parser.print_usage(sys.stdout)
        return 1

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    max_width, max_height = args.max_width, args.max_height
    if args.term_size:
        max_width, max_height = get_terminal_size()

    config = Config(
        file=args.image,
        invert=args.invert,
        optimize=args.optimize,
        max_width=max_width,
        max_height=max_height,
        term_width_mul=args.term_width_mul,
        blur=args.blur,
        info=args.info,
    )

    try:
        matrix = convert(config, renderer_factory=AalibRenderer)
    except I2AError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    with matrix:
        matrix.print()
        if config.info:
            print(f"size: {matrix.width}x{matrix.height}")
            print(f"characters: {matrix.char_count()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
