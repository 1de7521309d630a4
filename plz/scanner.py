"""Autoadd: walk a games directory and interactively name the executables found.

The walk stops descending as soon as a directory holds at least one game
executable; only directories without executables are searched further. That
keeps `bin/`, `tools/` and redistributable folders of an already matched game
out of the prompts.
"""
import logging
import os
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from plz.errors import DirectoryReadError
from plz.registry import AliasRegistry, ConfirmOverwrite
from plz.utils.constants import EXECUTABLE_SUFFIXES, EXECUTABLE_BLACKLIST
from plz.utils.paths import normalize_path

# ask_name(path) -> alias name, or None/"" to ignore the executable from now on
AskName = Callable[[str], Optional[str]]


@dataclass
class ScanSummary:
    added: int = 0
    ignored: int = 0
    skipped: int = 0
    declined: int = 0
    directories: int = 0


def is_game_executable(filename: str) -> bool:
    name = filename.lower()
    return name.endswith(EXECUTABLE_SUFFIXES) and name not in EXECUTABLE_BLACKLIST


def scan_directory(directory: str) -> Tuple[List[str], List[str]]:
    """Read one directory and split it into (executables, subdirectories), both full paths sorted by name."""
    executables = []
    subdirectories = []
    try:
        with os.scandir(directory) as it:
            for entry in it:
                if entry.is_dir(follow_symlinks=False):
                    subdirectories.append(entry.path)
                elif entry.is_file() and is_game_executable(entry.name):
                    executables.append(entry.path)
    except OSError as e:
        raise DirectoryReadError(f"could not read directory `{directory}`: {e}") from e

    def by_name(p):
        return os.path.basename(p).lower()

    return sorted(executables, key=by_name), sorted(subdirectories, key=by_name)


def autoadd(root: str, registry: AliasRegistry, ask_name: AskName,
            confirm: Optional[ConfirmOverwrite] = None,
            logger: Optional[logging.Logger] = None) -> ScanSummary:
    """Walk `root` depth-first and register the executables the user names.

    Only the registry's in-memory state is changed; the caller persists it.
    A DirectoryReadError aborts the whole walk.
    """
    summary = ScanSummary()
    _walk(normalize_path(root), registry, ask_name, confirm, logger, summary)
    return summary


def _walk(directory, registry, ask_name, confirm, logger, summary):
    summary.directories += 1
    executables, subdirectories = scan_directory(directory)

    if executables:
        known = registry.targets()
        for exe in executables:
            path = normalize_path(exe)
            if registry.is_ignored(path) or path in known:
                summary.skipped += 1
                continue

            name = ask_name(path)
            if not name or not name.strip():
                registry.ignore(path, save=False)
                summary.ignored += 1
                if logger:
                    logger.info(f"autoadd: ignored {path}")
                continue

            if registry.add(name.strip(), path, confirm=confirm, save=False):
                summary.added += 1
                known.add(path)
            else:
                summary.declined += 1
        return

    for sub in subdirectories:
        _walk(sub, registry, ask_name, confirm, logger, summary)
