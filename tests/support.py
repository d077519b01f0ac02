"""Shared fixtures for the test-suite."""
from __future__ import annotations

import io

from PIL import Image

MIB = 1024 * 1024


def png_bytes(size=(8, 8), color=(200, 40, 40)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


def oversize_bytes(megabytes: int = 6) -> bytes:
    return b"\x00" * (megabytes * MIB)


def bomb_png_bytes(side: int = 14000) -> bytes:
    """A tiny PNG whose pixel count trips Pillow's decompression-bomb guard."""
    buf = io.BytesIO()
    Image.new("1", (side, side)).save(buf, format="PNG")
    return buf.getvalue()


class FrozenClock:
    def __init__(self, seconds: float = 1_700_000_000.0) -> None:
        self.seconds = seconds

    def __call__(self) -> float:
        return self.seconds

    def advance(self, seconds: float) -> None:
        self.seconds += seconds
