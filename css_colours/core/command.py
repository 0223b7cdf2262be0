"""CLI commands and the argument types they share."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any

from css_colours.core.env import parse_size
from css_colours.core.types import Colour


def channel(text: str) -> int:
    """argparse type: narrow a decimal string to an 8-bit colour channel."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid channel value: {text!r}') from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f'channel out of range 0-255: {value}')
    return value


def positive(text: str) -> int:
    """argparse type: a pixel length of at least 1."""
    try:
        return parse_size(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


class Command:
    """A css-colours subcommand.

    Usage in a command module:

        command = Command(name='rgb', help='Render an opaque colour')

        @command.arguments
        def arguments(parser):
            parser.add_argument('red', type=channel)

        @command.run
        def run(args):
            return rgb(args.red, ...)

    The run function returns the colour to print.
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable[[Any], Colour] | None = None
        self._arguments_fn: Callable[[argparse.ArgumentParser], None] | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function adding positional/optional arguments."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: Any) -> Colour:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(args)
