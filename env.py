import logging
import os
import subprocess

from collections.abc import Mapping, Sequence
from typing_extensions import override

log = logging.getLogger(__name__)


class SpawnError(OSError):
    command: str

    def __init__(self, command: str, error: OSError):
        super().__init__(error.errno, f"Failed to run {command}: {error.strerror or error}")
        self.command = command


class ExitStatus:
    """
    The way a child process ended. A process killed by a signal has no
    exit code, its signal number is recorded instead.
    """
    returncode: int

    def __init__(self, returncode: int):
        self.returncode = returncode

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def code(self) -> int | None:
        return self.returncode if self.returncode >= 0 else None

    @property
    def signal(self) -> int | None:
        return -self.returncode if self.returncode < 0 else None

    def __bool__(self):
        return self.success

    @override
    def __eq__(self, other):
        if isinstance(other, ExitStatus):
            return self.returncode == other.returncode

        return NotImplemented

    @override
    def __hash__(self):
        return hash(self.returncode)

    @override
    def __repr__(self):
        return f"ExitStatus({self.returncode})"

    @override
    def __str__(self):
        if self.signal is not None:
            return f"signal: {self.signal}"

        return f"exit status: {self.returncode}"


class Environment:
    cwd: str | None
    envars: dict[str, str]

    def __init__(self, cwd: str | None = None, envars: Mapping[str, str] | None = None):
        self.cwd = cwd
        self.envars = dict(envars or {})

    def execute(self, command: str, args: Sequence[str] = ()) -> ExitStatus:
        """
        Runs command with the given arguments and waits for it to exit.
        The child writes directly to our stdout and stderr.
        """
        argv = [command, *(os.fspath(a) for a in args)]
        envars = {**os.environ, **self.envars} if self.envars else None

        log.debug("spawning %s", argv)

        try:
            p = subprocess.Popen(argv, cwd=self.cwd, env=envars)
        except OSError as ex:
            raise SpawnError(command, ex) from ex

        p.wait()

        return ExitStatus(p.returncode)


environment = Environment()


def run(command: str, args: Sequence[str] = ()) -> ExitStatus:
    return environment.execute(command, args)


def env_or(name: str, default: str) -> str:
    return os.environ.get(name, default)
