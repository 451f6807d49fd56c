import os
import sys

from typing import Sequence, TextIO
from recipe import Command

def can_use_ansi(stream: TextIO):
    # Respect NO_COLOR standard
    if os.environ.get('NO_COLOR'):
        return False

    # Avoid dumb terminals
    if os.environ.get('TERM') == 'dumb':
        return False

    # Must be a terminal
    if not stream.isatty():
        return False

    return True

BOLD = "\033[1m"
RESET = "\033[0m"

def _bold(s, stream: TextIO):
    if can_use_ansi(stream):
        return BOLD + s + RESET

    return s

def print_commands(commands: Sequence[Command], stream: TextIO | None = None):
    """
    List the names of the given commands, one per line, in order.
    """
    stream = stream or sys.stderr

    print(_bold("Available commands:", stream), file=stream)

    for command in commands:
        print(f"  {command.name}", file=stream)
