"""Write a solid colour swatch image.

Without ALPHA the swatch is an RGB image; with ALPHA it is RGBA, alpha
scaled to 0-255. The edge length defaults to CSS_COLOURS_SWATCH_SIZE
(64 if unset). Prints the colour written.

Example:
    css-colours swatch ./salmon.png 250 128 114
    css-colours swatch ./salmon.png 250 128 114 0.5 --size 16
"""

import sys

from css_colours.core.command import Command, channel, positive
from css_colours.core.css import rgb, rgba
from css_colours.core.env import swatch_size
from css_colours.core.pixels import swatch
from css_colours.core.types import Colour

command = Command(name='swatch', help='Write a solid colour swatch PNG.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('out', help='Output image path')
    parser.add_argument('red', type=channel)
    parser.add_argument('green', type=channel)
    parser.add_argument('blue', type=channel)
    parser.add_argument('alpha', type=float, nargs='?', default=None)
    parser.add_argument('-s', '--size', type=positive, default=None, metavar='N', help='Edge length in pixels')


@command.run
def run(args) -> Colour:
    if args.alpha is None:
        colour: Colour = rgb(args.red, args.green, args.blue)
    else:
        colour = rgba(args.red, args.green, args.blue, args.alpha)
    size = args.size if args.size is not None else swatch_size()
    swatch(colour, size).save(args.out)
    print(f'css-colours: wrote {args.out} ({size}×{size})', file=sys.stderr)
    return colour
