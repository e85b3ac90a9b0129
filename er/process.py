import os
import shutil
import subprocess

import psutil
from loguru import logger

from er.config import EXE_SUFFIX


def resolve_executable(name, search_path):
    """
    Find `name` in the directories of `search_path`, first match wins.
    Names that already contain a directory part are returned unchanged.
    Returns: full path, or None if nothing matched
    """
    if os.path.dirname(name):
        return name
    if EXE_SUFFIX and not name.lower().endswith(EXE_SUFFIX):
        name += EXE_SUFFIX
    return shutil.which(name, path=search_path)


def spawn_process(name, args, stdin=None, piped=False, search_path=None):
    """
    Start one pipeline stage.

    stdin is the read end of the previous stage's pipe, or None to inherit
    the interactive input. With piped=True the child's stdout becomes a new
    pipe whose read end is available as handle.stdout.

    Returns: psutil.Popen handle
    Raises: FileNotFoundError if the program is not on the search path,
            OSError if it cannot be started
    """
    path = resolve_executable(name, search_path)
    if path is None:
        raise FileNotFoundError("command not found")

    handle = psutil.Popen(
        [name, *args],
        executable=path,
        stdin=stdin,
        stdout=subprocess.PIPE if piped else None,
    )
    logger.debug("spawned {} pid={} piped={}", path, handle.pid, piped)
    return handle
