"""
Helpers for writing build scripts in Python.

A build script registers its commands with a Maker and lets the command
line pick one:

    from makeshift import Maker, copy, create_dir, glob, run

    def build():
        create_dir("out")
        copy(glob("assets/*.png"), "out")
        run("cc", ["-o", "out/app", "app.c"])

    Maker().cmd("build", build).default("build").make()
"""

from env import Environment, ExitStatus, SpawnError, env_or, run
from files import CopyError, copy, create_dir, path_str
from maker import Maker
from recipe import Command, ScriptError, script
from target import Glob, PatternError, glob, is_newer, to_paths

__all__ = [
    "Command",
    "CopyError",
    "Environment",
    "ExitStatus",
    "Glob",
    "Maker",
    "PatternError",
    "ScriptError",
    "SpawnError",
    "copy",
    "create_dir",
    "env_or",
    "glob",
    "is_newer",
    "path_str",
    "run",
    "script",
    "to_paths",
]
