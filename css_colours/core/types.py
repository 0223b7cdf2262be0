"""Colour value types for css-colours: RGB and RGBA.

Both are frozen dataclasses: structural equality, hashable, never mutated
in place. Neither type clamps or validates its channels. Callers keep
r/g/b within 0-255; alpha is accepted as given, even outside 0.0-1.0.

See the CSS Color Module Level 3:
  https://www.w3.org/TR/2018/REC-css-color-3-20180619/#rgb-color
  https://www.w3.org/TR/2018/REC-css-color-3-20180619/#rgba-color
"""

from __future__ import annotations

from dataclasses import dataclass


def format_alpha(value: float) -> str:
    """Shortest round-trip decimal text for an alpha value, without a trailing '.0'.

    >>> format_alpha(1.0), format_alpha(0.5), format_alpha(0.75)
    ('1', '0.5', '0.75')
    """
    text = repr(float(value))
    if text.endswith('.0'):
        return text[:-2]
    return text


@dataclass(frozen=True)
class RGB:
    """How much red, green and blue make up an opaque colour."""

    r: int  # red, 0-255
    g: int  # green, 0-255
    b: int  # blue, 0-255

    def __str__(self) -> str:
        return f'rgb({self.r}, {self.g}, {self.b})'

    def to_css(self) -> str:
        """Render as CSS, e.g. 'rgb(250, 128, 114)'."""
        return str(self)

    def to_rgba(self) -> RGBA:
        """Same channels with a fully opaque alpha of 1.0."""
        return RGBA(r=self.r, g=self.g, b=self.b, a=1.0)


@dataclass(frozen=True)
class RGBA:
    """An RGB colour plus an alpha fraction (0.0 transparent, 1.0 opaque)."""

    r: int  # red, 0-255
    g: int  # green, 0-255
    b: int  # blue, 0-255
    a: float  # alpha, 0.0-1.0 by convention

    def __str__(self) -> str:
        return f'rgba({self.r}, {self.g}, {self.b}, {format_alpha(self.a)})'

    def to_css(self) -> str:
        """Render as CSS, e.g. 'rgba(250, 128, 114, 0.5)'."""
        return str(self)

    def to_rgb(self) -> RGB:
        """Drop the alpha value and keep the three colour channels."""
        return RGB(r=self.r, g=self.g, b=self.b)


Colour = RGB | RGBA
