"""Alias registry: name -> executable path, backed by the persisted document."""
import logging
import os
import random as _random
from typing import Callable, List, Optional, Set, Tuple

from plz.errors import AliasNotFound, EmptyRegistry, InvalidAliasName
from plz.store import Store
from plz.utils.paths import normalize_path

# confirm(name, old_path, new_path) -> True to overwrite
ConfirmOverwrite = Callable[[str, str, str], bool]


class AliasRegistry:
    """Alias map and autoadd ignore list owned by a single Store.

    Mutating methods persist through the store unless called with save=False;
    callers that batch several mutations (autoadd) call save() themselves.
    """

    def __init__(self, store: Store, logger: Optional[logging.Logger] = None):
        self.store = store
        self.logger = logger or logging.getLogger('plz.registry')

    @property
    def aliases(self):
        return self.store.document.aliases

    @property
    def ignore_list(self) -> List[str]:
        return self.store.document.autoadd_ignore

    def __len__(self):
        return len(self.aliases)

    def __contains__(self, name):
        return name in self.aliases

    def save(self):
        self.store.save()

    def add(self, name: str, path: str, confirm: Optional[ConfirmOverwrite] = None, save: bool = True) -> bool:
        """Bind name to path. An existing binding is replaced only if confirm() agrees.

        Returns True when the registry holds name -> path afterwards.
        """
        name = name.strip()
        if not name:
            raise InvalidAliasName("alias name cannot be empty")

        existing = self.aliases.get(name)
        if existing == path:
            return True
        if existing is not None:
            if confirm is None or not confirm(name, existing, path):
                self.logger.info(f"kept alias {name} -> {existing} (overwrite declined)")
                return False
            self.logger.info(f"overwriting alias {name}: {existing} -> {path}")
        else:
            self.logger.info(f"adding alias {name} -> {path}")

        self.aliases[name] = path
        if save:
            self.save()
        return True

    def remove(self, name: str, save: bool = True):
        if name not in self.aliases:
            raise AliasNotFound(name)
        path = self.aliases.pop(name)
        self.logger.info(f"removed alias {name} (was {path})")
        if save:
            self.save()

    def get(self, name: str) -> str:
        try:
            return self.aliases[name]
        except KeyError:
            raise AliasNotFound(name) from None

    def list(self) -> List[Tuple[str, str]]:
        """Aliases ordered by name length, longest first. Ties keep insertion order."""
        return sorted(self.aliases.items(), key=lambda item: len(item[0]), reverse=True)

    def random(self, rng: Optional[_random.Random] = None) -> Tuple[str, str]:
        """Uniformly pick one alias."""
        if not self.aliases:
            raise EmptyRegistry()
        chooser = rng or _random
        return chooser.choice(list(self.aliases.items()))

    # --- autoadd support ---

    def targets(self) -> Set[str]:
        """Normalized paths that some alias already points at."""
        return {normalize_path(p) for p in self.aliases.values()}

    def is_ignored(self, path: str) -> bool:
        return normalize_path(path) in self.ignore_list

    def ignore(self, path: str, save: bool = True):
        p = normalize_path(path)
        if p not in self.ignore_list:
            self.ignore_list.append(p)
            self.logger.info(f"ignoring {p} for autoadd")
        if save:
            self.save()

    # --- consistency check ---

    def check(self) -> List[str]:
        """Return warnings for stale aliases and prune ignore entries whose target is gone."""
        warnings = []
        for name, path in self.list():
            if not os.path.isfile(path):
                warnings.append(f"alias `{name}` points to `{path}`, which does not exist")

        kept = [p for p in self.ignore_list if os.path.exists(p)]
        if len(kept) != len(self.ignore_list):
            pruned = len(self.ignore_list) - len(kept)
            self.store.document.autoadd_ignore = kept
            self.logger.info(f"pruned {pruned} missing path(s) from autoadd ignore list")
            self.save()
        return warnings
