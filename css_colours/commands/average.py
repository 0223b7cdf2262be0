"""Print the mean colour of an image.

Averages every pixel with numpy, rounding channels to integers. Images
with an alpha channel also average alpha and give rgba().

Example:
    css-colours average screenshot.png
"""

from css_colours.core.command import Command
from css_colours.core.pixels import average, open_image
from css_colours.core.types import Colour

command = Command(name='average', help='Print the mean colour of an image.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to PNG/JPG')


@command.run
def run(args) -> Colour:
    with open_image(args.image) as image:
        return average(image)
