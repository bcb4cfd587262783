"""Command-line entry point: write, read or edit SLImage files."""

from __future__ import annotations

import sys
from typing import Sequence

from slimage.display import view_image
from slimage.editor import create_default_editor_window
from slimage.image import InvalidImageError, generate_test_data, read_image, write

USAGE = "Usage: slimage <mode> <filename> <width> <height>"
VALID_MODES = "Valid modes: w (Write), r (Read)"
FALLBACK_FILE_NAME = "image.slmg"
EDITOR_SIZE = 512


def _atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does; 0 if none."""
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (without the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) < 2:
        print(USAGE)
        return 1

    mode = args[0][:1]
    file_name = args[1] or FALLBACK_FILE_NAME

    if mode == "w":
        if len(args) < 4:
            print(USAGE)
            return 1
        x_size, y_size = _atoi(args[2]), _atoi(args[3])
        try:
            write(file_name, x_size, y_size, generate_test_data(x_size, y_size))
        except (ValueError, OSError) as exc:
            print(exc)
            return 1
    elif mode == "r":
        try:
            image = read_image(file_name)
        except InvalidImageError:
            print("Not a valid SLImage")
            return 2
        except OSError as exc:
            print(exc)
            return 1
        print(f"xSize: {image.x_size}")
        print(f"ySize: {image.y_size}")
        try:
            view_image(image)
        except RuntimeError as exc:
            print(exc)
            return 1
    elif mode == "e":
        try:
            create_default_editor_window(EDITOR_SIZE, EDITOR_SIZE)
        except RuntimeError as exc:
            print(exc)
            return 1
    else:
        print(VALID_MODES)

    return 0


if __name__ == "__main__":
    sys.exit(main())