"""Floating-point raster images with values normalised to the range 0.0-1.0."""

from __future__ import annotations

import os
from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image

_CHANNELS_BY_MODE = {
    "L": 1,
    "LA": 2,
    "RGB": 3,
    "RGBA": 4,
}

_MODE_BY_CHANNELS = {count: mode for mode, count in _CHANNELS_BY_MODE.items()}

PathLike = Union[str, "os.PathLike[str]"]


def channel_count(mode: str) -> int:
    """Return the number of channels kept for a Pillow image mode.

    Grayscale, grayscale with alpha, RGB and RGBA keep their own channel
    count; every other mode is treated as RGB.
    """
    return _CHANNELS_BY_MODE.get(mode, 3)


class FloatImage:
    """An image stored as a (height, width, channels) array of doubles."""

    def __init__(
        self,
        width: int,
        height: int,
        channels: int,
        data: Union[np.ndarray, Sequence[float]],
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image size must not be negative: {width}x{height}")
        if channels < 1:
            raise ValueError(f"an image needs at least one channel, got {channels}")
        array = np.asarray(data, dtype=np.float64)
        expected = width * height * channels
        if array.size != expected:
            raise ValueError(
                f"expected {expected} values for a {width}x{height}x{channels} "
                f"image, got {array.size}"
            )
        self.width = width
        self.height = height
        self.channels = channels
        self.data = array.reshape(height, width, channels)
        self.path: Optional[str] = None

    @classmethod
    def blank(cls, width: int, height: int, channels: int) -> "FloatImage":
        """Create an image of the given size with every value set to zero."""
        return cls(width, height, channels, np.zeros(max(width * height * channels, 0)))

    @classmethod
    def from_file(cls, path: PathLike) -> "FloatImage":
        """Load an image file, scaling each 8-bit value into 0.0-1.0."""
        with Image.open(path) as source:
            source.load()
            channels = channel_count(source.mode)
            target_mode = _MODE_BY_CHANNELS[channels]
            converted = source if source.mode == target_mode else source.convert(target_mode)
            pixels = np.asarray(converted, dtype=np.float64) / 255.0
        height, width = pixels.shape[:2]
        image = cls(width, height, channels, pixels)
        image.path = os.fspath(path)
        return image

    def _check_index(self, x: int, y: int, channel: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height and 0 <= channel < self.channels):
            raise IndexError(
                f"pixel ({x}, {y}, channel {channel}) is outside a "
                f"{self.width}x{self.height}x{self.channels} image"
            )

    def get_pixel(self, x: int, y: int, channel: int) -> float:
        """Return the value of one channel of the pixel at column x, row y."""
        self._check_index(x, y, channel)
        return float(self.data[y, x, channel])

    def set_pixel(self, x: int, y: int, channel: int, value: float) -> None:
        """Set the value of one channel of the pixel at column x, row y."""
        self._check_index(x, y, channel)
        self.data[y, x, channel] = value

    def copy(self) -> "FloatImage":
        """Return an independent copy of this image."""
        duplicate = FloatImage(self.width, self.height, self.channels, self.data.copy())
        duplicate.path = self.path
        return duplicate

    def to_bytes(self) -> bytes:
        """Return the pixels as 8-bit RGBA bytes, row by row.

        Values are clamped to 0.0-1.0 and scaled by 255 with truncation.
        Images without an alpha channel become fully opaque; grayscale
        images are spread over the red, green and blue channels.
        """
        scaled = np.clip(self.data * 255.0, 0.0, 255.0).astype(np.uint8)
        rgba = np.empty((self.height, self.width, 4), dtype=np.uint8)
        if self.channels >= 3:
            rgba[..., :3] = scaled[..., :3]
        else:
            rgba[..., :3] = scaled[..., :1]
        if self.channels == 4:
            rgba[..., 3] = scaled[..., 3]
        elif self.channels == 2:
            rgba[..., 3] = scaled[..., 1]
        else:
            rgba[..., 3] = 255
        return rgba.tobytes()

    def save(self, filename: PathLike) -> None:
        """Write the image as an RGBA file; the format follows the file name."""
        output = Image.frombytes("RGBA", (self.width, self.height), self.to_bytes())
        output.save(filename)

    def __repr__(self) -> str:
        return f"FloatImage(width={self.width}, height={self.height}, channels={self.channels})"