from __future__ import annotations

import glob as _glob
import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TypeAlias
from typing_extensions import override


class PatternError(ValueError):
    pattern: str
    pos: int

    def __init__(self, pattern: str, pos: int, msg: str):
        super().__init__(f"Invalid glob pattern {pattern!r} at {pos}: {msg}")
        self.pattern = pattern
        self.pos = pos


def _check_pattern(pattern: str):
    i = 0
    n = len(pattern)

    while i < n:
        c = pattern[i]

        if c == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1

            stars = j - i
            if stars > 2:
                raise PatternError(pattern, i, "wildcards are either regular `*` or recursive `**`")

            if stars == 2:
                before = pattern[i - 1] if i > 0 else "/"
                after = pattern[j] if j < n else "/"
                if before not in "/\\" or after not in "/\\":
                    raise PatternError(pattern, i, "recursive wildcards must form a single path component")

            i = j
        elif c == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1

            # a leading ] is part of the class
            if j < n and pattern[j] == "]":
                j += 1

            close = pattern.find("]", j)
            if close < 0:
                raise PatternError(pattern, i, "unmatched `[`")

            i = close + 1
        else:
            i += 1


class Glob:
    """
    A glob pattern used as a source of paths.

    The pattern is checked when the Glob is created, matches are read from
    the file system each time the Glob is iterated.
    """
    pattern: str

    def __init__(self, pattern: str | os.PathLike):
        pattern = os.fspath(pattern)
        _check_pattern(pattern)
        self.pattern = pattern

    def __iter__(self) -> Iterator[Path]:
        # per directory level, like a depth first walk
        names = _glob.iglob(self.pattern, recursive=True, include_hidden=True)

        for name in sorted(names, key=lambda p: Path(p).parts):
            try:
                os.stat(name)
            except OSError:
                # unreadable entries are skipped, not reported
                continue

            yield Path(name)

    @override
    def __repr__(self):
        return f"Glob({self.pattern!r})"

    @override
    def __str__(self):
        return self.pattern


PathLike: TypeAlias = "str | os.PathLike"
PathSource: TypeAlias = "PathLike | Glob | Iterable[PathLike]"


def glob(pattern: str | os.PathLike) -> Glob:
    return Glob(pattern)


def to_paths(source: PathSource) -> list[Path]:
    """
    Resolves a path source to a list of paths.

    A single path (str or PathLike) always yields exactly that path, whether
    it exists or not. A Glob yields its current matches, any other iterable
    yields its items.
    """
    if isinstance(source, (str, os.PathLike)):  # note that str is Iterable
        return [Path(source)]

    return [Path(p) for p in source]


def is_newer(target: PathLike, base: PathLike) -> bool:
    """
    Tells whether target was modified after base. Raises OSError if the
    modification time of either can't be read.
    """
    target_mtime = os.stat(target).st_mtime_ns
    base_mtime = os.stat(base).st_mtime_ns

    return target_mtime > base_mtime
