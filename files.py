from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from target import PathLike, PathSource, is_newer, to_paths

log = logging.getLogger(__name__)

ErrorHook: TypeAlias = Callable[[Path, Path, OSError], None]


class CopyError(Exception):
    pass


def _destination(source: Path, dest: Path) -> Path:
    if not dest.is_dir():
        return dest

    if source.name in ("", ".", ".."):
        raise CopyError(f"Source has no filename and dest is a dir: {source}")

    return dest / source.name


def _should_copy(source: Path, dest: Path) -> bool:
    try:
        return is_newer(source, dest)
    except OSError:
        # not comparable, e.g. dest doesn't exist yet
        return True


def copy(sources: PathSource, dest: PathLike, on_error: ErrorHook | None = None):
    """
    Copies each of the sources to dest, unless dest is at least as new as
    the source. If dest is a directory, each source is copied into it
    under its own name.

    Copying is best effort: a file that can't be copied is skipped. Pass
    on_error to learn about such files.
    """
    dest = Path(dest)

    for source in to_paths(sources):
        target = _destination(source, dest)

        if not _should_copy(source, target):
            log.debug("%s is up to date", target)
            continue

        try:
            shutil.copyfile(source, target)
            shutil.copymode(source, target)
        except OSError as ex:
            log.debug("failed to copy %s to %s: %s", source, target, ex)

            if on_error is not None:
                on_error(source, target, ex)


def create_dir(path: PathLike):
    os.makedirs(path, exist_ok=True)


def path_str(path: PathLike | bytes) -> str:
    # undecodable bytes become U+FFFD
    return os.fsencode(path).decode("utf-8", errors="replace")
