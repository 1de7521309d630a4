"""Config record operations (`plz config <key> [value]`)."""
from typing import Dict

from plz.errors import PlzError
from plz.store import Store
from plz.utils.constants import PROVIDERS, PROVIDER_URLS
from plz.utils.paths import normalize_path

# Accept the short name used by older config files
KEY_ALIASES = {
    'games_dir': 'games_directory',
}

KEYS = ('games_directory', 'check_for_updates', 'provider_preference')

TRUE_VALUES = {'true', 'yes', 'y', 'on', '1'}
FALSE_VALUES = {'false', 'no', 'n', 'off', '0'}


class UnknownConfigKey(PlzError):
    def __init__(self, key: str):
        super().__init__(f"unknown config key `{key}` (expected one of: {', '.join(KEYS)})")


class InvalidConfigValue(PlzError):
    pass


def parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in TRUE_VALUES:
        return True
    if v in FALSE_VALUES:
        return False
    raise InvalidConfigValue(f"`{value}` is not a boolean (use true or false)")


class Config:
    def __init__(self, store: Store):
        self.store = store

    @property
    def games_directory(self) -> str:
        return self.store.document.games_directory

    @property
    def check_for_updates(self) -> bool:
        return self.store.document.check_for_updates

    @property
    def provider_preference(self) -> str:
        return self.store.document.provider_preference

    def provider_urls(self) -> Dict[str, str]:
        """Base URL per provider, with overrides from the document applied."""
        urls = dict(PROVIDER_URLS)
        urls.update(self.store.document.provider_urls)
        return urls

    @staticmethod
    def resolve_key(key: str) -> str:
        k = KEY_ALIASES.get(key, key)
        if k not in KEYS:
            raise UnknownConfigKey(key)
        return k

    def get(self, key: str):
        return getattr(self.store.document, self.resolve_key(key))

    def set(self, key: str, value: str):
        """Validate and store a value, then persist. Returns the stored value."""
        k = self.resolve_key(key)
        doc = self.store.document
        if k == 'games_directory':
            doc.games_directory = normalize_path(value) if value else ""
        elif k == 'check_for_updates':
            doc.check_for_updates = parse_bool(value)
        elif k == 'provider_preference':
            v = value.strip().lower()
            if v not in PROVIDERS:
                raise InvalidConfigValue(
                    f"unknown provider `{value}` (expected one of: {', '.join(PROVIDERS)})"
                )
            doc.provider_preference = v
        self.store.save()
        return getattr(doc, k)
