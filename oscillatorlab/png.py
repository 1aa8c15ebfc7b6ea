"""Writing 8-bit RGB images as PNG files."""

from __future__ import annotations

import os
import struct
import zlib
from typing import Union

__all__ = ["encode_rgb8_png", "write_rgb8_png"]

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_COLOR_TYPE_RGB = 2
_BIT_DEPTH = 8


def _chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def encode_rgb8_png(data: bytes, width: int, height: int) -> bytes:
    """Encode RGB pixels as PNG.

    The pixel rows are stored bottom row first, as read back from a frame
    buffer, so the last row of ``data`` becomes the top of the image.
    """
    if width < 1 or height < 1:
        raise ValueError("image dimensions must be positive")
    pixels = bytes(data)
    stride = 3 * width
    if len(pixels) != stride * height:
        raise ValueError(
            f"expected {stride * height} bytes of RGB data, got {len(pixels)}"
        )
    raw = b"".join(
        b"\x00" + pixels[row * stride:(row + 1) * stride]
        for row in reversed(range(height))
    )
    header = struct.pack(
        ">IIBBBBB", width, height, _BIT_DEPTH, _COLOR_TYPE_RGB, 0, 0, 0
    )
    return (
        PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", zlib.compress(raw))
        + _chunk(b"IEND", b"")
    )


def write_rgb8_png(
    path: Union[str, os.PathLike], data: bytes, width: int, height: int
) -> None:
    """Write RGB pixels to ``path`` as a PNG file."""
    encoded = encode_rgb8_png(data, width, height)
    with open(path, "wb") as handle:
        handle.write(encoded)