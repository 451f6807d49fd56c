import shlex

import env

from typing import TypeAlias, Callable, Sequence
from typing_extensions import override

Action: TypeAlias = Callable[[], None]


class ScriptError(Exception):
    status: env.ExitStatus

    def __init__(self, status: env.ExitStatus):
        super().__init__(f"Script returned error code {status.returncode}.")
        self.status = status


class Command:
    """
    A named action that can be invoked once.
    """
    name: str
    _action: Action | None

    def __init__(self, name: str, action: Action):
        self.name = name
        self._action = action

    @property
    def spent(self) -> bool:
        return self._action is None

    def __call__(self):
        action = self._action

        if action is None:
            raise RuntimeError(f"Command {self.name} was already invoked")

        self._action = None
        action()

    @override
    def __repr__(self):
        return f"Command({self.name!r})"


class Script:
    cmd: str
    args: Sequence[str]
    echo: bool
    check: bool

    def __init__(self, cmd: str, args: Sequence[str], echo: bool = True, check: bool = True):
        self.cmd = cmd
        self.args = list(args)
        self.echo = echo
        self.check = check

    def __call__(self):
        if self.echo:
            print("> " + shlex.join([self.cmd, *self.args]))

        status = env.run(self.cmd, self.args)

        if self.check and not status.success:
            raise ScriptError(status)

    @override
    def __repr__(self):
        return f"Script({shlex.join([self.cmd, *self.args])!r})"


def script(cmd: str, *args: str, echo: bool = True, check: bool = True) -> Script:
    return Script(cmd, args, echo, check)
