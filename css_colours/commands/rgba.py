"""Render a translucent colour as CSS rgba() notation.

Alpha is printed in its shortest decimal form: 1.0 prints as 1, 0.50 as 0.5.
Alpha is not range checked.

Example:
    css-colours rgba 250 128 114 0.5
    rgba(250, 128, 114, 0.5)
"""

from css_colours.core.command import Command, channel
from css_colours.core.css import rgba
from css_colours.core.types import RGBA

command = Command(name='rgba', help='Render a translucent colour as rgba(R, G, B, A).')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('red', type=channel)
    parser.add_argument('green', type=channel)
    parser.add_argument('blue', type=channel)
    parser.add_argument('alpha', type=float)


@command.run
def run(args) -> RGBA:
    return rgba(args.red, args.green, args.blue, args.alpha)
