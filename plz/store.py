"""Persisted alias/config document.

The document is a single JSON file holding the config record, the autoadd
ignore list and the alias map. It is created with defaults on first use and
rewritten in full on every save.
"""
import json
import logging
import os
import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Optional

from plz.errors import ConfigParseError
from plz.utils.constants import CONFIG_FILENAME, CONFIG_ENV_VAR, DEFAULT_PROVIDER, PROVIDERS

logger = logging.getLogger('plz.store')


@dataclass
class PlzDocument:
    games_directory: str = ""
    check_for_updates: bool = True
    provider_preference: str = DEFAULT_PROVIDER
    autoadd_ignore: List[str] = field(default_factory=list)
    aliases: Dict[str, str] = field(default_factory=dict)
    provider_urls: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> 'PlzDocument':
        """Build a document from parsed JSON, filling in missing keys with defaults."""
        if not isinstance(data, dict):
            raise ConfigParseError("top-level value must be an object")
        doc = cls()

        games_directory = data.get('games_directory', doc.games_directory)
        if not isinstance(games_directory, str):
            raise ConfigParseError("`games_directory` must be a string")

        check = data.get('check_for_updates', doc.check_for_updates)
        if not isinstance(check, bool):
            raise ConfigParseError("`check_for_updates` must be true or false")

        preference = data.get('provider_preference', doc.provider_preference)
        if preference not in PROVIDERS:
            raise ConfigParseError(
                f"`provider_preference` must be one of {', '.join(PROVIDERS)}"
            )

        ignore = data.get('autoadd_ignore', [])
        if not isinstance(ignore, list) or not all(isinstance(p, str) for p in ignore):
            raise ConfigParseError("`autoadd_ignore` must be a list of strings")

        aliases = data.get('aliases', {})
        if not isinstance(aliases, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in aliases.items()
        ):
            raise ConfigParseError("`aliases` must map names to path strings")

        urls = data.get('provider_urls', {})
        if not isinstance(urls, dict) or not all(
            k in PROVIDERS and isinstance(v, str) for k, v in urls.items()
        ):
            raise ConfigParseError("`provider_urls` must map provider names to URLs")

        return cls(
            games_directory=games_directory,
            check_for_updates=check,
            provider_preference=preference,
            autoadd_ignore=list(ignore),
            aliases=dict(aliases),
            provider_urls=dict(urls),
        )


def default_config_path() -> Path:
    """Location of the document: $PLZ_CONFIG, else next to the running executable."""
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path(sys.argv[0]).resolve().parent / CONFIG_FILENAME


def load_document(path: Path) -> PlzDocument:
    """Load the document, creating and persisting a default one when the file is missing."""
    path = Path(path)
    if not path.exists():
        print(f"Could not read file `{path.name}`, creating new one", file=sys.stderr)
        doc = PlzDocument()
        save_document(path, doc)
        logger.info(f"created default config at {path}")
        return doc

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"unable to load data from `{path}`: {e}") from e
    except OSError as e:
        raise ConfigParseError(f"unable to read `{path}`: {e}") from e

    try:
        return PlzDocument.from_dict(data)
    except ConfigParseError as e:
        raise ConfigParseError(f"unable to load data from `{path}`: {e}") from e


def save_document(path: Path, doc: PlzDocument):
    """Write the document as indented JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(doc.to_dict(), f, indent=2, ensure_ascii=False)


class Store:
    """Owns the in-memory document and the file it is persisted to."""

    def __init__(self, path: Path, document: Optional[PlzDocument] = None):
        self.path = Path(path)
        self.document = document if document is not None else load_document(self.path)

    def save(self):
        save_document(self.path, self.document)
        logger.debug(f"saved {self.path}")
