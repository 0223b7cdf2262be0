"""Report builder — text and JSON output for css-colours results."""

import json
from typing import Any

from css_colours.core.types import RGBA, Colour


def to_dict(colour: Colour) -> dict[str, Any]:
    """Plain dict of the colour's CSS text and channels."""
    obj: dict[str, Any] = {
        'css': colour.to_css(),
        'r': colour.r,
        'g': colour.g,
        'b': colour.b,
    }
    if isinstance(colour, RGBA):
        obj['a'] = colour.a
    return obj


def format_text(colour: Colour) -> str:
    """Format a colour as CSS text."""
    return colour.to_css()


def format_json(colour: Colour) -> str:
    """Format a colour as JSON."""
    return json.dumps(to_dict(colour), indent=2)
