import os

from plz.errors import PathHasNoParent


def normalize_path(path: str) -> str:
    """Return the absolute, normalized form used for ignore-list and target comparisons."""
    return os.path.normpath(os.path.abspath(os.path.expanduser(path)))


def parent_directory(path: str) -> str:
    """Directory a stored executable should be launched from.

    Raises PathHasNoParent when the path resolves to a filesystem root.
    """
    full = normalize_path(path)
    parent = os.path.dirname(full)
    if not parent or parent == full:
        raise PathHasNoParent(f"path `{path}` has no parent directory")
    return parent
