import argparse
import logging
import os
import sys
from pathlib import Path

from asciiraster.converter import image_to_ascii
from asciiraster.errors import RenderError
from asciiraster.planner import MAX_WIDTH
from asciiraster.ramps import DEFAULT_RAMP, Ramp


def get_terminal_width() -> int:
    """Return the terminal's column count, or 80 if stdout is not a tty."""
    if not sys.stdout.isatty():
        return 80
    return os.get_terminal_size().columns


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s",
        "--size",
        type=int,
        default=None,
        help=f"Output width in columns, at most {MAX_WIDTH} (default: terminal width)",
    )
    parser.add_argument(
        "-r",
        "--ramp",
        default=DEFAULT_RAMP.name.lower(),
        choices=Ramp.names(),
        help=f"Glyph ramp to use (default: {DEFAULT_RAMP.name.lower()})",
    )
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert brightness")
    parser.add_argument("-o", "--output", default=None, help="Write the art to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    width = args.size if args.size is not None else get_terminal_width()

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    try:
        art = image_to_ascii(image_path, width=width, ramp=args.ramp, invert=args.invert)
    except OSError:
        print(f"Could not load image: {image_path}", file=sys.stderr)
        sys.exit(1)
    except RenderError as e:
        print(f"Could not render image: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        try:
            Path(args.output).write_text(art, encoding="utf-8")
        except OSError as e:
            print(f"Could not write output: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        sys.stdout.write(art)
