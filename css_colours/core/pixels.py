"""Pixel interop — convert between colour values and Pillow/numpy pixels.

Pillow stores alpha as a 0-255 byte, CSS as a 0.0-1.0 fraction. from_pixel
divides by 255; to_pixel multiplies by 255, rounds and clamps to 0-255.
"""

import math
import os
from collections.abc import Sequence

import numpy as np
from PIL import Image

from css_colours.core.types import RGB, RGBA, Colour


def open_image(path: str) -> Image.Image:
    """Open an image file. Raises FileNotFoundError naming the path if it is missing."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f'image not found: {path}')
    return Image.open(path)


def from_pixel(pixel: Sequence[int]) -> Colour:
    """(r, g, b) -> RGB, (r, g, b, a) -> RGBA. Accepts tuples, lists and numpy rows."""
    values = [int(v) for v in pixel]
    if len(values) == 3:
        r, g, b = values
        return RGB(r=r, g=g, b=b)
    if len(values) == 4:
        r, g, b, a = values
        return RGBA(r=r, g=g, b=b, a=a / 255)
    raise ValueError(f'Expected 3 or 4 channels, got {len(values)}')


def to_pixel(colour: Colour) -> tuple[int, ...]:
    """Colour value -> Pillow pixel tuple.

    Alpha outside 0.0-1.0 is clamped to the byte range; nan and inf have no
    byte value and raise ValueError.
    """
    if isinstance(colour, RGBA):
        if not math.isfinite(colour.a):
            raise ValueError(f'alpha has no pixel value: {colour.a}')
        alpha = min(255, max(0, round(colour.a * 255)))
        return (colour.r, colour.g, colour.b, alpha)
    return (colour.r, colour.g, colour.b)


def _mode_for(image: Image.Image) -> str:
    # Keep alpha only where the image actually has it
    return 'RGBA' if image.mode in ('RGBA', 'LA', 'PA') else 'RGB'


def sample(image: Image.Image, xy: tuple[int, int]) -> Colour:
    """Colour of a single pixel. Raises IndexError outside the image."""
    x, y = xy
    if not (0 <= x < image.width and 0 <= y < image.height):
        raise IndexError(f'pixel ({x}, {y}) outside {image.width}x{image.height} image')
    mode = _mode_for(image)
    if image.mode != mode:
        image = image.convert(mode)
    return from_pixel(image.getpixel(xy))


def average(image: Image.Image) -> Colour:
    """Mean colour over every pixel of the image."""
    if image.width == 0 or image.height == 0:
        raise ValueError('Cannot average an empty image')
    mode = _mode_for(image)
    arr = np.array(image.convert(mode), dtype=np.float64)
    pixels = arr.reshape(-1, len(mode))
    mean = pixels.mean(axis=0)
    r, g, b = (round(float(v)) for v in mean[:3])
    if mode == 'RGBA':
        return RGBA(r=r, g=g, b=b, a=float(mean[3]) / 255)
    return RGB(r=r, g=g, b=b)


def swatch(colour: Colour, size: int | tuple[int, int] = 64) -> Image.Image:
    """Solid image filled with the colour. RGBA colours give an RGBA image."""
    if isinstance(size, int):
        size = (size, size)
    mode = 'RGBA' if isinstance(colour, RGBA) else 'RGB'
    return Image.new(mode, size, to_pixel(colour))
