import numpy as np
import pytest
from PIL import Image

from bloomfx.image import FloatImage, channel_count


@pytest.mark.parametrize(
    "mode, expected",
    [("L", 1), ("LA", 2), ("RGB", 3), ("RGBA", 4), ("CMYK", 3), ("P", 3)],
)
def test_channel_count(mode, expected):
    assert channel_count(mode) == expected


def test_blank_is_all_zero():
    image = FloatImage.blank(4, 3, 3)
    assert (image.width, image.height, image.channels) == (4, 3, 3)
    assert image.data.shape == (3, 4, 3)
    assert np.all(image.data == 0.0)


def test_init_rejects_wrong_data_length():
    with pytest.raises(ValueError):
        FloatImage(2, 2, 3, [0.0] * 11)


def test_init_rejects_zero_channels():
    with pytest.raises(ValueError):
        FloatImage(2, 2, 0, [])


def test_flat_data_layout_is_row_major_interleaved():
    values = list(range(2 * 3 * 2))
    image = FloatImage(3, 2, 2, values)
    for y in range(2):
        for x in range(3):
            for ch in range(2):
                assert image.get_pixel(x, y, ch) == values[(y * 3 + x) * 2 + ch]


def test_set_then_get_pixel():
    image = FloatImage.blank(5, 5, 4)
    image.set_pixel(2, 3, 1, 0.75)
    assert image.get_pixel(2, 3, 1) == 0.75
    assert image.get_pixel(3, 2, 1) == 0.0


@pytest.mark.parametrize("x, y, channel", [(5, 0, 0), (0, 5, 0), (0, 0, 3), (-1, 0, 0)])
def test_pixel_access_out_of_range(x, y, channel):
    image = FloatImage.blank(5, 5, 3)
    with pytest.raises(IndexError):
        image.get_pixel(x, y, channel)
    with pytest.raises(IndexError):
        image.set_pixel(x, y, channel, 1.0)


def test_copy_is_independent():
    image = FloatImage.blank(2, 2, 3)
    image.set_pixel(0, 0, 0, 0.5)
    duplicate = image.copy()
    duplicate.set_pixel(0, 0, 0, 0.25)
    assert image.get_pixel(0, 0, 0) == 0.5
    assert duplicate.get_pixel(0, 0, 0) == 0.25


def test_to_bytes_clamps_and_adds_opaque_alpha():
    image = FloatImage(3, 1, 3, [1.0, 0.0, 2.0, -1.0, 1.0, 0.0, 0.0, 0.0, 1.0])
    assert image.to_bytes() == bytes(
        [255, 0, 255, 255, 0, 255, 0, 255, 0, 0, 255, 255]
    )


def test_to_bytes_keeps_alpha_channel():
    image = FloatImage(1, 1, 4, [0.0, 1.0, 0.0, 0.0])
    assert image.to_bytes() == bytes([0, 255, 0, 0])


def test_to_bytes_spreads_grayscale():
    image = FloatImage(1, 1, 1, [1.0])
    assert image.to_bytes() == bytes([255, 255, 255, 255])


def test_from_file_normalises_rgb(tmp_path):
    path = tmp_path / "input.png"
    source = Image.new("RGB", (2, 1))
    source.putdata([(255, 0, 255), (0, 255, 0)])
    source.save(path)

    image = FloatImage.from_file(path)
    assert (image.width, image.height, image.channels) == (2, 1, 3)
    assert image.get_pixel(0, 0, 0) == 1.0
    assert image.get_pixel(0, 0, 1) == 0.0
    assert image.get_pixel(1, 0, 1) == 1.0
    assert image.path == str(path)


def test_from_file_keeps_alpha(tmp_path):
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (3, 2), (255, 255, 255, 0)).save(path)
    image = FloatImage.from_file(path)
    assert image.channels == 4
    assert np.all(image.data[..., 3] == 0.0)
    assert np.all(image.data[..., :3] == 1.0)


def test_save_and_reload_round_trip(tmp_path):
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(4, 5, 4)).astype(np.float64) / 255.0
    image = FloatImage(5, 4, 4, pixels)
    path = tmp_path / "out.png"
    image.save(path)

    reloaded = FloatImage.from_file(path)
    assert (reloaded.width, reloaded.height, reloaded.channels) == (5, 4, 4)
    assert np.allclose(reloaded.data, pixels, atol=1.0 / 255.0)


def test_saved_rgb_file_is_opaque_rgba(tmp_path):
    image = FloatImage.blank(2, 2, 3)
    path = tmp_path / "rgb.png"
    image.save(path)
    with Image.open(path) as written:
        assert written.mode == "RGBA"
        assert written.size == (2, 2)
        assert all(pixel[3] == 255 for pixel in written.getdata())