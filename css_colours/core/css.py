"""Constructors and CSS rendering for colour values."""

from css_colours.core.types import RGB, RGBA, Colour, format_alpha

__all__ = ['format_alpha', 'rgb', 'rgba', 'to_css']


def rgb(red: int, green: int, blue: int) -> RGB:
    """Build an RGB colour from three channel values.

    >>> rgb(250, 128, 114)
    RGB(r=250, g=128, b=114)
    """
    return RGB(r=red, g=green, b=blue)


def rgba(red: int, green: int, blue: int, alpha: float) -> RGBA:
    """Build an RGBA colour. Alpha is stored as given, with no range check.

    >>> rgba(250, 128, 114, 0.5)
    RGBA(r=250, g=128, b=114, a=0.5)
    """
    return RGBA(r=red, g=green, b=blue, a=alpha)


def to_css(colour: Colour) -> str:
    """Render either colour type in CSS functional notation."""
    return colour.to_css()
