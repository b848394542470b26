# ABOUTME: Reads pixel dimensions from cover image file headers.
# ABOUTME: Supports PNG, GIF, JPEG and WebP; anything else is reported as undecodable.

import struct
from pathlib import Path

# Enough for PNG/GIF/WebP headers; JPEG is scanned segment by segment.
_HEADER_SIZE = 32

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# JPEG start-of-frame markers carry the image size (C4, C8 and CC are not SOF).
_JPEG_SOF_MARKERS = {0xC0, 0xC1, 0xC2, 0xC3, 0xC5, 0xC6, 0xC7, 0xC9, 0xCA, 0xCB, 0xCD, 0xCE, 0xCF}


def _png_size(header: bytes) -> tuple[int, int] | None:
    if len(header) < 24 or header[12:16] != b"IHDR":
        return None
    width, height = struct.unpack(">II", header[16:24])
    return width, height


def _gif_size(header: bytes) -> tuple[int, int] | None:
    if len(header) < 10:
        return None
    width, height = struct.unpack("<HH", header[6:10])
    return width, height


def _webp_size(header: bytes) -> tuple[int, int] | None:
    if len(header) < 30:
        return None
    chunk = header[12:16]
    if chunk == b"VP8 ":
        width, height = struct.unpack("<HH", header[26:30])
        return width & 0x3FFF, height & 0x3FFF
    if chunk == b"VP8L":
        bits = int.from_bytes(header[21:25], "little")
        return (bits & 0x3FFF) + 1, ((bits >> 14) & 0x3FFF) + 1
    if chunk == b"VP8X":
        width = int.from_bytes(header[24:27], "little") + 1
        height = int.from_bytes(header[27:30], "little") + 1
        return width, height
    return None


def _jpeg_size(path: Path) -> tuple[int, int] | None:
    """Walk JPEG segments until a start-of-frame segment is found."""
    with open(path, "rb") as f:
        if f.read(2) != b"\xff\xd8":
            return None
        while True:
            byte = f.read(1)
            while byte and byte != b"\xff":
                byte = f.read(1)
            while byte == b"\xff":
                byte = f.read(1)
            if not byte:
                return None
            marker = byte[0]
            if marker in (0xD8, 0x01) or 0xD0 <= marker <= 0xD7:
                continue  # standalone markers carry no length
            length_bytes = f.read(2)
            if len(length_bytes) < 2:
                return None
            (length,) = struct.unpack(">H", length_bytes)
            if length < 2:
                return None
            if marker in _JPEG_SOF_MARKERS:
                frame = f.read(5)
                if len(frame) < 5:
                    return None
                height, width = struct.unpack(">HH", frame[1:5])
                return width, height
            f.seek(length - 2, 1)


def image_dimensions(path: Path) -> tuple[int, int] | None:
    """Return (width, height) of an image file, or None.

    None is returned when the file is missing, in an unsupported format or
    too short to contain a valid header.
    """
    try:
        with open(path, "rb") as f:
            header = f.read(_HEADER_SIZE)
    except (FileNotFoundError, IsADirectoryError):
        return None

    if header.startswith(_PNG_SIGNATURE):
        size = _png_size(header)
    elif header[:6] in (b"GIF87a", b"GIF89a"):
        size = _gif_size(header)
    elif header[:4] == b"RIFF" and header[8:12] == b"WEBP":
        size = _webp_size(header)
    elif header[:2] == b"\xff\xd8":
        size = _jpeg_size(path)
    else:
        return None

    if size is None or size[0] == 0 or size[1] == 0:
        return None
    return size
