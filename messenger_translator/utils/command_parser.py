"""Chat command grammar.

A message is read as ``[prefix][name][ argument]`` where the prefix is zero
to two dashes, the name runs up to the first space and the argument is
everything after that space, kept verbatim. Matching is anchored to the
whole message:

    help, -help, --help            -> HELP
    lang <arg>, --language <arg>   -> LANGUAGE(<arg>)

Anything else is plain text to translate.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandName(str, Enum):
    HELP = "help"
    LANGUAGE = "language"


@dataclass
class Command:
    name: CommandName
    argument: Optional[str] = None


# name -> (command, takes_argument)
COMMAND_TABLE = {
    "help": (CommandName.HELP, False),
    "lang": (CommandName.LANGUAGE, True),
    "language": (CommandName.LANGUAGE, True),
}

MAX_PREFIX_DASHES = 2

# characters a single-line argument may not contain
LINE_TERMINATORS = ("\n", "\r", "\u2028", "\u2029")


def _strip_prefix(text: str) -> str:
    for _ in range(MAX_PREFIX_DASHES):
        if text.startswith("-"):
            text = text[1:]
    return text


def parse_command(text: Optional[str]) -> Optional[Command]:
    """
    Parse a chat message into a command.

    Args:
        text: Full message text

    Returns:
        Command, or None if the message is not a command
    """
    if not text:
        return None

    name, separator, argument = _strip_prefix(text).partition(" ")
    entry = COMMAND_TABLE.get(name.lower())
    if entry is None:
        return None

    command, takes_argument = entry
    if not takes_argument:
        return Command(command) if not separator else None

    if not argument or any(char in argument for char in LINE_TERMINATORS):
        return None
    return Command(command, argument)
