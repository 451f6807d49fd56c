from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import help
from recipe import Action, Command

log = logging.getLogger(__name__)

HELP = "help"


def _error(*msg: str):
    print(*msg, file=sys.stderr)


class Maker:
    """
    Collects named commands and runs one of them.

    Commands are registered with cmd() and picked by make(), which runs the
    command named by the first command line argument, or the default. A
    Maker can only make once.
    """
    commands: list[Command]
    default_name: str | None
    done: bool

    def __init__(self):
        self.commands = []
        self.default_name = None
        self.done = False

    @classmethod
    def with_(cls) -> Maker:
        return cls()

    def _check_open(self):
        if self.done:
            raise RuntimeError("This Maker has already made its command")

    def default(self, name: str) -> Maker:
        self._check_open()
        self.default_name = name
        return self

    def cmd(self, name: str, action: Action) -> Maker:
        self._check_open()
        self.commands.append(Command(name, action))
        return self

    def command(self, name: str):
        """
        Decorator form of cmd(), registers the decorated function.
        """
        def decorator(fn: Action) -> Action:
            self.cmd(name, fn)
            return fn

        return decorator

    def _take(self, name: str) -> Command | None:
        for i, command in enumerate(self.commands):
            if command.name == name:
                return self.commands.pop(i)

        return None

    def _requested(self, argv: Sequence[str]) -> str | None:
        if len(argv) > 1:
            return argv[1]

        return self.default_name

    def make(self, argv: Sequence[str] | None = None):
        """
        Runs the requested command. Problems are reported on stderr, never
        raised: an unknown name, a missing name, or an error raised by the
        command itself.
        """
        self._check_open()
        self.done = True

        if argv is None:
            argv = sys.argv

        name = self._requested(argv)

        if name is None:
            _error("No command was given")
            return

        command = self._take(name)

        if command is not None:
            log.debug("making %s", name)

            try:
                command()
            except Exception as ex:
                _error("An error occurred:")
                _error(str(ex))

            return

        if name == HELP:
            help.print_commands(self.commands)
        else:
            _error(f"Unknown command: {name}")
