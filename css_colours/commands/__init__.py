"""css-colours subcommands, one module each.

A module's docstring is its `css-colours help <name>` text, and its
module-level `command` is what the CLI runs.
"""

from css_colours.commands import average, rgb, rgba, sample, swatch

COMMANDS = [average.command, rgb.command, rgba.command, sample.command, swatch.command]
