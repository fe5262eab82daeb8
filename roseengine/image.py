"""Decoded image pixels, stored bottom row first as textures expect."""

from __future__ import annotations

from pathlib import Path

from PIL import Image as PILImage

_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


class Image:
    """Pixel data of an image file, flipped vertically on load."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.data: bytes | None = None
        self.width = 0
        self.height = 0
        self.channels = 0
        if path is not None:
            self.generate(path)

    def generate(self, path: str | Path) -> None:
        """Load ``path``; raises OSError if it cannot be read or decoded."""
        with PILImage.open(path) as source:
            image = source.transpose(PILImage.Transpose.FLIP_TOP_BOTTOM)
        if image.mode not in _CHANNELS:
            image = image.convert("RGBA")
        self.data = image.tobytes()
        self.width, self.height = image.size
        self.channels = _CHANNELS[image.mode]