"""Render an opaque colour as CSS rgb() notation.

Each channel must be an integer 0-255; anything else is a usage error.

Example:
    css-colours rgb 250 128 114
    rgb(250, 128, 114)
"""

from css_colours.core.command import Command, channel
from css_colours.core.css import rgb
from css_colours.core.types import RGB

command = Command(name='rgb', help='Render an opaque colour as rgb(R, G, B).')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('red', type=channel)
    parser.add_argument('green', type=channel)
    parser.add_argument('blue', type=channel)


@command.run
def run(args) -> RGB:
    return rgb(args.red, args.green, args.blue)
