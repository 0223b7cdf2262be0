"""Tests for css_colours.core.pixels — Pillow/numpy interop."""

from pathlib import Path

import numpy as np
import pytest
from css_colours.core.pixels import average, from_pixel, open_image, sample, swatch, to_pixel
from css_colours.core.types import RGB, RGBA
from PIL import Image


class TestFromPixel:
    def test_rgb_tuple(self):
        assert from_pixel((250, 128, 114)) == RGB(250, 128, 114)

    def test_rgba_tuple_opaque(self):
        assert from_pixel((250, 128, 114, 255)) == RGBA(250, 128, 114, 1.0)

    def test_rgba_tuple_transparent(self):
        assert from_pixel((250, 128, 114, 0)) == RGBA(250, 128, 114, 0.0)

    def test_numpy_row(self):
        px = np.array([1, 2, 3], dtype=np.uint8)
        colour = from_pixel(px)
        assert colour == RGB(1, 2, 3)
        assert type(colour.r) is int

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            from_pixel((1, 2))


class TestToPixel:
    def test_rgb(self):
        assert to_pixel(RGB(1, 2, 3)) == (1, 2, 3)

    def test_rgba_opaque(self):
        assert to_pixel(RGBA(1, 2, 3, 1.0)) == (1, 2, 3, 255)

    def test_rgba_rounds_alpha(self):
        assert to_pixel(RGBA(1, 2, 3, 0.5)) == (1, 2, 3, 128)

    def test_alpha_above_one_clamped(self):
        assert to_pixel(RGBA(1, 2, 3, 1.5)) == (1, 2, 3, 255)

    def test_negative_alpha_clamped(self):
        assert to_pixel(RGBA(1, 2, 3, -0.5)) == (1, 2, 3, 0)

    def test_infinite_alpha(self):
        with pytest.raises(ValueError, match='no pixel value'):
            to_pixel(RGBA(1, 2, 3, float('inf')))

    def test_nan_alpha(self):
        with pytest.raises(ValueError):
            to_pixel(RGBA(1, 2, 3, float('nan')))


class TestSwatch:
    def test_rgb_swatch(self):
        img = swatch(RGB(250, 128, 114), 4)
        assert img.mode == 'RGB'
        assert img.size == (4, 4)
        assert img.getpixel((3, 3)) == (250, 128, 114)

    def test_rgba_swatch(self):
        img = swatch(RGBA(250, 128, 114, 1.0), (3, 2))
        assert img.mode == 'RGBA'
        assert img.size == (3, 2)
        assert img.getpixel((0, 0)) == (250, 128, 114, 255)


class TestSample:
    def test_round_trip_rgb(self):
        colour = RGB(5, 10, 255)
        assert sample(swatch(colour, 2), (1, 1)) == colour

    def test_round_trip_rgba(self):
        colour = RGBA(5, 10, 255, 1.0)
        assert sample(swatch(colour, 2), (0, 0)) == colour

    def test_greyscale_converted_to_rgb(self):
        img = Image.new('L', (1, 1), 128)
        assert sample(img, (0, 0)) == RGB(128, 128, 128)

    def test_out_of_bounds(self):
        with pytest.raises(IndexError):
            sample(swatch(RGB(0, 0, 0), 2), (2, 0))

    def test_negative_coordinates(self):
        with pytest.raises(IndexError):
            sample(swatch(RGB(0, 0, 0), 2), (-1, 0))


class TestAverage:
    def test_solid(self):
        assert average(swatch(RGB(250, 128, 114), 3)) == RGB(250, 128, 114)

    def test_two_pixels(self):
        img = Image.new('RGB', (2, 1), (0, 0, 0))
        img.putpixel((1, 0), (100, 50, 20))
        assert average(img) == RGB(50, 25, 10)

    def test_alpha_averaged_as_fraction(self):
        img = Image.new('RGBA', (2, 1), (0, 0, 0, 0))
        img.putpixel((1, 0), (0, 0, 0, 255))
        assert average(img) == RGBA(0, 0, 0, 0.5)

    def test_empty_image(self):
        with pytest.raises(ValueError):
            average(Image.new('RGB', (0, 0)))


class TestOpenImage:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match='image not found'):
            open_image(str(tmp_path / 'nope.png'))

    def test_opens_png(self, tmp_path: Path) -> None:
        path = tmp_path / 'swatch.png'
        swatch(RGB(1, 2, 3), 2).save(path)
        with open_image(str(path)) as img:
            assert img.size == (2, 2)
