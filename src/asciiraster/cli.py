import argparse
import sys
from typing import Callable

from asciiraster.converter import image_to_ascii_png
from asciiraster.encoder import OUTPUT_NAME
from asciiraster.errors import AsciiRasterError
from asciiraster.model import DEFAULT_SETTINGS
from asciiraster.resampler import validate_width
from asciiraster.resolver import resolve_input


class ArgumentParser(argparse.ArgumentParser):
    """Parser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    settings = DEFAULT_SETTINGS
    parser = ArgumentParser(description="Render an image as ASCII art into a PNG file")
    parser.add_argument("input", help="Path to input image")
    parser.add_argument(
        "-c", "--color", action="store_true", default=False, help="Draw each character in its source pixel's colour"
    )
    parser.add_argument(
        "-w",
        "--width",
        default=str(settings.default_width),
        help=f"ASCII width in characters ({settings.min_width}-{settings.max_width}, default: {settings.default_width})",
    )
    return parser


def main(argv: list[str] | None = None, read_line: Callable[[], str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        # Reject a bad width before paying for a decode
        cols = validate_width(args.width, DEFAULT_SETTINGS)
        image_path = resolve_input(args.input, read_line=read_line)
        output = image_to_ascii_png(image_path, OUTPUT_NAME, width=cols, colour=args.color)
    except AsciiRasterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unhandled error: {e}", file=sys.stderr)
        return 1

    print(f"Saved ASCII art to {output}")
    return 0


def run():
    sys.exit(main())
