import math

import numpy as np
import pytest
from PIL import Image

from asciirender.errors import ScaleOutOfBound
from asciirender.sampling import check_scale, downscale, luma_grid, sample_brightness, target_size, to_8bit


@pytest.mark.parametrize("scale", [0.0, -0.5, 1.2, 2.0, math.nan])
def test_check_scale_rejects_out_of_range(scale):
    with pytest.raises(ScaleOutOfBound, match="between 0 and 1"):
        check_scale(scale)


@pytest.mark.parametrize("scale", [0.01, 0.33, 1.0])
def test_check_scale_accepts_in_range(scale):
    assert check_scale(scale) == scale


def test_target_size_uses_larger_side():
    assert target_size(100, 50, 0.5) == 50
    assert target_size(50, 100, 0.5) == 50
    assert target_size(10, 10, 1.0) == 10


def test_target_size_rounds():
    assert target_size(100, 100, 0.336) == 34
    assert target_size(100, 100, 0.334) == 33


def test_target_size_never_zero():
    assert target_size(3, 1, 0.1) == 1


def test_target_size_checks_scale():
    with pytest.raises(ScaleOutOfBound):
        target_size(100, 100, 1.5)


def test_downscale_preserves_aspect():
    img = Image.new("RGB", (200, 100), (10, 20, 30))
    small = downscale(img, 0.5)
    assert small.size == (100, 50)


def test_downscale_portrait():
    img = Image.new("RGB", (60, 120), (10, 20, 30))
    small = downscale(img, 0.25)
    assert small.size == (15, 30)


def test_downscale_full_scale_keeps_size(grey_image):
    assert downscale(grey_image, 1.0).size == (10, 10)


def test_downscale_converts_to_rgb():
    img = Image.new("L", (20, 20), 100)
    assert downscale(img, 0.5).mode == "RGB"


def test_sample_brightness_uniform(grey_image, dark_image):
    assert sample_brightness(grey_image) == 128
    assert sample_brightness(dark_image) == 30


def test_sample_brightness_extremes():
    assert sample_brightness(Image.new("RGB", (8, 8), (0, 0, 0))) == 0
    assert sample_brightness(Image.new("RGB", (8, 8), (255, 255, 255))) == 255


def test_sample_brightness_is_deterministic():
    rng = np.random.default_rng(7)
    img = Image.fromarray(rng.integers(0, 256, (40, 30, 3), dtype=np.uint8))
    first = sample_brightness(img)
    assert sample_brightness(img) == first
    assert 0 <= first <= 255


def test_sample_brightness_tracks_content():
    rng = np.random.default_rng(3)
    dark = Image.fromarray(rng.integers(0, 80, (20, 20, 3), dtype=np.uint8))
    light = Image.fromarray(rng.integers(180, 256, (20, 20, 3), dtype=np.uint8))
    assert sample_brightness(dark) < sample_brightness(light)


def test_luma_grid_shape_and_values():
    img = Image.new("RGB", (7, 3), (200, 200, 200))
    grid = luma_grid(img)
    assert grid.shape == (3, 7)
    assert grid.dtype == np.uint8
    np.testing.assert_array_equal(grid, 200)


def _save_16bit_grey(path, value, size=(10, 10)):
    Image.fromarray(np.full(size[::-1], value, dtype=np.uint16)).save(path)
    return path


def test_16bit_png_mid_grey(tmp_path):
    path = _save_16bit_grey(tmp_path / "grey16.png", 32768)
    with Image.open(path) as img:
        small = downscale(img, 1.0)
        assert sample_brightness(img) == 128
    assert small.mode == "RGB"
    assert small.size == (10, 10)
    assert sample_brightness(small) == 128


def test_16bit_luma_grid_scaled(tmp_path):
    path = _save_16bit_grey(tmp_path / "dark16.png", 30 * 256, size=(4, 3))
    with Image.open(path) as img:
        grid = luma_grid(img)
    assert grid.shape == (3, 4)
    np.testing.assert_array_equal(grid, 30)


def test_to_8bit_leaves_8bit_images_alone(grey_image):
    assert to_8bit(grey_image) is grey_image
