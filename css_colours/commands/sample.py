"""Print the colour of one pixel of an image.

Images with an alpha channel give rgba(); everything else is converted
to RGB first and gives rgb().

Example:
    css-colours sample screenshot.png 10 20
    css-colours sample screenshot.png 10 20 --opaque
"""

from css_colours.core.command import Command
from css_colours.core.pixels import open_image, sample
from css_colours.core.types import RGBA, Colour

command = Command(name='sample', help='Print the colour of the pixel at X, Y.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to PNG/JPG')
    parser.add_argument('x', type=int)
    parser.add_argument('y', type=int)
    parser.add_argument('-o', '--opaque', action='store_true', help='Drop any alpha channel')


@command.run
def run(args) -> Colour:
    with open_image(args.image) as image:
        colour = sample(image, (args.x, args.y))
    if args.opaque and isinstance(colour, RGBA):
        return colour.to_rgb()
    return colour
