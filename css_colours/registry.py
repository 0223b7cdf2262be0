"""Command lookup by name, built from css_colours.commands.COMMANDS."""

from css_colours.core.command import Command


def all_commands() -> dict[str, Command]:
    """Every command keyed by its name."""
    from css_colours.commands import COMMANDS

    return {cmd.name: cmd for cmd in COMMANDS}


def get(name: str) -> Command:
    """Get a command by name."""
    commands = all_commands()
    if name not in commands:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}')
    return commands[name]
