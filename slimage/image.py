"""The SLImage file format: an in-memory image type plus reading and writing.

An SLImage file is laid out as follows, all integers little-endian:

* 4 bytes of magic: ``FF A5 FF E8``
* width as an unsigned 32-bit integer
* height as an unsigned 32-bit integer
* ``width * height`` pixels, each an unsigned 32-bit integer, row by row
"""

from __future__ import annotations

import math
import os
import struct
from dataclasses import dataclass, field
from typing import Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]

MAGIC = bytes((0xFF, 0xA5, 0xFF, 0xE8))
DEFAULT_FILE_NAME = "unnamed.slmg"
WHITE = 0xFFFFFFFF

_U32_MASK = 0xFFFFFFFF
_HEADER = struct.Struct("<4sII")


class InvalidImageError(ValueError):
    """Raised when a file is not a well-formed SLImage."""


@dataclass
class SLImage:
    """A raster image of 32-bit pixels stored row by row."""

    file_name: str
    x_size: int
    y_size: int
    data: list[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of pixels in the image."""
        return self.x_size * self.y_size


def _check_dimensions(x_size: int, y_size: int) -> None:
    for name, value in (("x_size", x_size), ("y_size", y_size)):
        if not 0 <= value <= _U32_MASK:
            raise ValueError(f"{name} must fit in an unsigned 32-bit integer, got {value}")


def read_image(path: PathLike) -> SLImage:
    """Read an SLImage file and return the image it holds."""
    with open(path, "rb") as stream:
        raw = stream.read()

    if raw[: len(MAGIC)] != MAGIC:
        raise InvalidImageError(f"{os.fspath(path)!s} is not a valid SLImage")
    if len(raw) < _HEADER.size:
        raise InvalidImageError("SLImage header is truncated")

    _, x_size, y_size = _HEADER.unpack_from(raw)
    count = x_size * y_size
    needed = _HEADER.size + 4 * count
    if len(raw) < needed:
        raise InvalidImageError(
            f"SLImage pixel data is truncated: expected {needed} bytes, found {len(raw)}"
        )

    data = list(struct.unpack_from(f"<{count}I", raw, _HEADER.size))
    return SLImage(os.fspath(path), x_size, y_size, data)


def write(path: PathLike, x_size: int, y_size: int, data: Sequence[int]) -> None:
    """Write ``x_size * y_size`` pixels from ``data`` to ``path`` as an SLImage."""
    _check_dimensions(x_size, y_size)
    count = x_size * y_size
    if len(data) < count:
        raise ValueError(f"expected at least {count} pixels, got {len(data)}")

    try:
        pixels = struct.pack(f"<{count}I", *data[:count])
    except struct.error as exc:
        raise ValueError(f"pixel values must be unsigned 32-bit integers: {exc}") from exc

    with open(path, "wb") as stream:
        stream.write(_HEADER.pack(MAGIC, x_size, y_size))
        stream.write(pixels)


def write_image(image: SLImage) -> None:
    """Write ``image`` to its own file name."""
    write(image.file_name, image.x_size, image.y_size, image.data)


def _to_u32(value: float) -> int:
    """Truncate toward zero and wrap into the unsigned 32-bit range."""
    if not math.isfinite(value):
        return 0
    return int(value) & _U32_MASK


def generate_test_data(x_size: int, y_size: int) -> list[int]:
    """Generate a tangent-based gradient pattern of ``x_size * y_size`` pixels."""
    _check_dimensions(x_size, y_size)
    if x_size == 0 or y_size == 0:
        return []

    log_width = _to_u32(math.log(x_size))

    def column_bits(x: int) -> int:
        numerator = math.tan(x) * 255
        if log_width == 0:
            ratio = math.nan if numerator == 0 else math.copysign(math.inf, numerator)
        else:
            ratio = numerator / log_width
        return (_to_u32(ratio) << 19) & _U32_MASK

    columns = [column_bits(x) for x in range(x_size)]
    data: list[int] = []
    for y in range(y_size):
        row_bits = ((_to_u32(math.tan(y)) * 255) & _U32_MASK) // y_size
        data.extend(row_bits | col for col in columns)
    return data


def white_image(x_size: int, y_size: int) -> list[int]:
    """Return pixel data for an all-white image."""
    _check_dimensions(x_size, y_size)
    return [WHITE] * (x_size * y_size)


def create_empty_image(x_size: int, y_size: int) -> SLImage:
    """Create a white image named ``unnamed.slmg``."""
    return SLImage(DEFAULT_FILE_NAME, x_size, y_size, white_image(x_size, y_size))