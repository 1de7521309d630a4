# Utilities package for plz
from .names import normalize_for_match, slugify
from .paths import normalize_path, parent_directory
from .constants import EXECUTABLE_SUFFIXES, EXECUTABLE_BLACKLIST, PROVIDERS, FALLBACKS

__all__ = [
    "normalize_for_match",
    "slugify",
    "normalize_path",
    "parent_directory",
    "EXECUTABLE_SUFFIXES",
    "EXECUTABLE_BLACKLIST",
    "PROVIDERS",
    "FALLBACKS",
]
