"""Launching aliased executables."""
import logging
import os
import subprocess
from typing import Callable, List, Optional

from plz.errors import ProcessSpawnFailure
from plz.utils.paths import normalize_path, parent_directory


def launch(path: str, runner: Callable[[List[str]], int] = subprocess.call,
           logger: Optional[logging.Logger] = None) -> int:
    """Run the executable at `path` from its own directory and wait for it to exit.

    Games commonly load assets relative to the working directory, so the
    process chdirs to the executable's parent before spawning.

    Raises PathHasNoParent if `path` is a filesystem root, and
    ProcessSpawnFailure if the directory cannot be entered or the process
    cannot be started.
    """
    cwd = parent_directory(path)
    target = normalize_path(path)
    try:
        os.chdir(cwd)
    except OSError as e:
        if logger:
            logger.warning(f"cannot enter {cwd}: {e}")
        raise ProcessSpawnFailure(f"failed to run `{path}`: cannot enter directory `{cwd}`: {e}") from e
    if logger:
        logger.info(f"launching {target} (cwd={cwd})")
    try:
        code = runner([target])
    except OSError as e:
        if logger:
            logger.warning(f"failed to spawn {target}: {e}")
        raise ProcessSpawnFailure(f"failed to run `{path}`: {e}") from e
    if logger:
        logger.info(f"{target} exited with status {code}")
    return code
