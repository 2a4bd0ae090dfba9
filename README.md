# bloomfx

Building blocks for a bloom (glow) filter on raster images.

Images are held as floating-point pixels normalised to 0.0–1.0, stored as a
`(height, width, channels)` NumPy array of doubles.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `bloomfx.image`

- `FloatImage(width, height, channels, data)` — an image built from
  `width * height * channels` values. Raises `ValueError` for a negative size,
  fewer than one channel, or the wrong number of values.
- `FloatImage.blank(width, height, channels)` — an all-zero image.
- `FloatImage.from_file(path)` — loads a file with Pillow and scales each
  8-bit value into 0.0–1.0. Grayscale (`L`), grayscale with alpha (`LA`),
  `RGB` and `RGBA` keep their channel count; any other mode is converted
  to RGB. The path is kept in `image.path`.
- `get_pixel(x, y, channel)` / `set_pixel(x, y, channel, value)` — read and
  write one value; out-of-range indices raise `IndexError`.
- `copy()` — an independent copy.
- `to_bytes()` — 8-bit RGBA bytes, row by row: values are clamped to 0.0–1.0
  and scaled by 255 with truncation; images without alpha become opaque and
  grayscale is spread over red, green and blue.
- `save(filename)` — writes the image as RGBA; the format follows the file
  name.
- `channel_count(mode)` — the channel count kept for a Pillow image mode.

### `bloomfx.sampling`

- `bilinear_tap(image, x, y, channel)` — bilinear sample at normalised
  coordinates, where (0, 0) is the centre of the top-left pixel and (1, 1)
  the centre of the bottom-right one.
- `downsample(image)` — half width and height (rounded down), filtered by a
  13-tap filter: an inner box of four samples and an outer 3x3 ring.
- `upsample(image)` — twice the width and height, smoothed by a 3x3 tent
  filter.
- `lerp(a, b, t)` — `a * (1 - t) + b * t` for two images of the same shape;
  mismatched shapes raise `ValueError`.

## Example

```python
import numpy as np

from bloomfx.image import FloatImage
from bloomfx.sampling import downsample, lerp, upsample

image = FloatImage.from_file("photo.png")

levels = [image]
for _ in range(4):
    levels.append(downsample(levels[-1]))

result = levels[-1]
for level in reversed(levels[:-1]):
    result = lerp(upsample(result), level, 0.2)

result.data[...] = np.clip(result.data * 6.0, 0.0, 1.0)
result.save("glow.png")
```

Each halving needs the image to still be at least one pixel in each
direction, so small images call for fewer levels. Upsampling a level whose
size was rounded down gives an image that no longer matches the level above
it, and `lerp` then raises `ValueError`; image sizes divisible by two for
every level avoid this.

## What the package does not do

The package has no ready-made bloom function and no command-line tool: it
provides the image type, the filters and the blend, and the bloom chain is
put together by the caller as in the example above. It has no viewer window
for showing results either; results are written to files with
`FloatImage.save`.