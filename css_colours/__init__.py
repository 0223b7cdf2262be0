"""css-colours — CSS rgb()/rgba() colour values.

    >>> from css_colours import rgb, rgba
    >>> rgb(250, 128, 114).to_css()
    'rgb(250, 128, 114)'
    >>> rgba(250, 128, 114, 0.5).to_css()
    'rgba(250, 128, 114, 0.5)'
"""

from css_colours.core.css import format_alpha, rgb, rgba, to_css
from css_colours.core.types import RGB, RGBA, Colour

__all__ = ['RGB', 'RGBA', 'Colour', 'format_alpha', 'rgb', 'rgba', 'to_css']
