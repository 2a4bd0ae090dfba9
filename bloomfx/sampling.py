"""Bilinear sampling, tent-filter upsampling, box-filter downsampling and blending."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from bloomfx.image import FloatImage

# 3x3 tent filter used when doubling an image.
_UPSAMPLE_TAPS: Tuple[Tuple[float, float, float], ...] = (
    (-1.0, 1.0, 0.0625), (0.0, 1.0, 0.125), (1.0, 1.0, 0.0625),
    (-1.0, 0.0, 0.125), (0.0, 0.0, 0.25), (1.0, 0.0, 0.125),
    (-1.0, -1.0, 0.0625), (0.0, -1.0, 0.125), (1.0, -1.0, 0.0625),
)

# 13-tap filter used when halving an image: an inner box of four samples
# and an outer 3x3 ring.
_DOWNSAMPLE_TAPS: Tuple[Tuple[float, float, float], ...] = (
    (-1.0, 1.0, 0.125), (1.0, 1.0, 0.125),
    (-1.0, -1.0, 0.125), (1.0, -1.0, 0.125),
    (-2.0, 2.0, 0.0555555), (0.0, 2.0, 0.0555555), (2.0, 2.0, 0.0555555),
    (-2.0, 0.0, 0.0555555), (0.0, 0.0, 0.0555555), (2.0, 0.0, 0.0555555),
    (-2.0, -2.0, 0.0555555), (0.0, -2.0, 0.0555555), (2.0, -2.0, 0.0555555),
)


def bilinear_tap(image: FloatImage, x: float, y: float, channel: int) -> float:
    """Sample one channel at normalised coordinates (x, y) in 0.0-1.0.

    (0, 0) is the centre of the top-left pixel and (1, 1) the centre of
    the bottom-right one; values in between are interpolated bilinearly.
    """
    if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
        raise ValueError(f"normalised coordinates must lie in 0.0-1.0, got ({x}, {y})")
    if not 0 <= channel < image.channels:
        raise IndexError(f"channel {channel} is outside an image with {image.channels} channels")
    if image.width == 0 or image.height == 0:
        raise ValueError("cannot sample an empty image")
    grid = _tap_grid(image, np.array([x]), np.array([y]))
    return float(grid[0, 0, channel])


def _tap_grid(image: FloatImage, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Bilinear samples for every (ys[i], xs[j]) pair, shaped (rows, cols, channels)."""
    w = image.width - 1
    h = image.height - 1
    px = xs * w
    py = ys * h
    x0 = px.astype(np.int64)
    y0 = py.astype(np.int64)
    x1 = np.minimum(x0 + 1, w)
    y1 = np.minimum(y0 + 1, h)
    dx = (px - x0)[None, :, None]
    dy = (py - y0)[:, None, None]

    data = image.data
    top_left = data[y0[:, None], x0[None, :], :]
    top_right = data[y0[:, None], x1[None, :], :]
    bottom_left = data[y1[:, None], x0[None, :], :]
    bottom_right = data[y1[:, None], x1[None, :], :]

    top = top_left + dx * (top_right - top_left)
    bottom = bottom_left + dx * (bottom_right - bottom_left)
    return top + dy * (bottom - top)


def _filter(
    image: FloatImage,
    new_w: int,
    new_h: int,
    offset: float,
    taps: Sequence[Tuple[float, float, float]],
) -> FloatImage:
    result = FloatImage.blank(new_w, new_h, image.channels)
    if new_w == 0 or new_h == 0:
        return result
    inv_new_w = 1.0 / new_w
    inv_new_h = 1.0 / new_h
    cols = np.arange(new_w, dtype=np.float64) + offset
    rows = np.arange(new_h, dtype=np.float64) + offset
    acc = np.zeros((new_h, new_w, image.channels), dtype=np.float64)
    for ox, oy, weight in taps:
        xs = np.clip((cols + ox) * inv_new_w, 0.0, 1.0)
        ys = np.clip((rows + oy) * inv_new_h, 0.0, 1.0)
        acc += _tap_grid(image, xs, ys) * weight
    result.data[...] = acc
    return result


def upsample(image: FloatImage) -> FloatImage:
    """Return the image at twice its width and height, smoothed by a 3x3 tent filter."""
    return _filter(image, image.width * 2, image.height * 2, 0.0, _UPSAMPLE_TAPS)


def downsample(image: FloatImage) -> FloatImage:
    """Return the image at half its width and height (rounded down), filtered by 13 taps."""
    return _filter(image, image.width // 2, image.height // 2, 0.5, _DOWNSAMPLE_TAPS)


def lerp(a: FloatImage, b: FloatImage, t: float) -> FloatImage:
    """Blend two images of the same shape: a * (1 - t) + b * t."""
    if (a.width, a.height, a.channels) != (b.width, b.height, b.channels):
        raise ValueError(
            f"cannot blend a {a.width}x{a.height}x{a.channels} image with a "
            f"{b.width}x{b.height}x{b.channels} image"
        )
    blended = a.data * (1.0 - t) + b.data * t
    return FloatImage(a.width, a.height, a.channels, blended)