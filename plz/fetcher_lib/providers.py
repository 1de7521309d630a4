"""Provider adapters: one per mirror listing site.

Each adapter turns a game name into a page URL, fetches it, and hands the HTML
to its parser. Outcomes are a FetchResult, ProviderNotFound, or
TransportError; the orchestrator treats the last two alike but reports them
differently.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import requests

from plz.errors import ProviderNotFound, TransportError
from plz.fetcher_lib.fetch import fetch_game_page
from plz.fetcher_lib.parse import parse_gamevault_page, parse_mirrorhub_page, parse_linkdepot_page
from plz.utils.constants import PROVIDER_URLS, REQUEST_TIMEOUT
from plz.utils.names import slugify

NOT_FOUND_STATUSES = (404, 410)


@dataclass
class FetchResult:
    title: str
    entries: List[Tuple[str, str]] = field(default_factory=list)
    provider: str = ''
    url: str = ''


class Provider:
    """Base adapter. Subclasses set `name`, `path_template` and `parser`."""

    name = ''
    path_template = '/{slug}'
    parser: Callable[..., Optional[Dict]] = None

    def __init__(self, session: requests.Session, base_url: Optional[str] = None,
                 timeout: float = REQUEST_TIMEOUT, logger: Optional[logging.Logger] = None):
        self.session = session
        self.base_url = (base_url or PROVIDER_URLS[self.name]).rstrip('/')
        self.timeout = timeout
        self.logger = logger

    def page_url(self, game_name: str) -> str:
        slug = slugify(game_name)
        if not slug:
            raise ProviderNotFound(f"{self.name}: `{game_name}` is not a searchable game name")
        return self.base_url + self.path_template.format(slug=slug)

    def fetch(self, game_name: str) -> FetchResult:
        url = self.page_url(game_name)
        if self.logger:
            self.logger.info(f"{self.name}: GET {url}")
        try:
            response = fetch_game_page(self.session, url, timeout=self.timeout)
        except requests.exceptions.HTTPError as e:
            status = getattr(e.response, 'status_code', None)
            if status in NOT_FOUND_STATUSES:
                raise ProviderNotFound(f"{self.name}: no page for `{game_name}` ({status})") from e
            raise TransportError(f"{self.name}: HTTP {status} from {url}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"{self.name}: {e.__class__.__name__} fetching {url}") from e

        # Look the parser up on the class so it is not bound as a method
        data = type(self).parser(response.text, page_url=url, logger=self.logger)
        if not data:
            raise ProviderNotFound(f"{self.name}: page for `{game_name}` has no download links")
        return FetchResult(title=data['title'], entries=list(data['entries']),
                           provider=self.name, url=url)


class GameVaultProvider(Provider):
    name = 'gamevault'
    path_template = '/game/{slug}/'
    parser = parse_gamevault_page


class MirrorHubProvider(Provider):
    name = 'mirrorhub'
    path_template = '/{slug}'
    parser = parse_mirrorhub_page


class LinkDepotProvider(Provider):
    name = 'linkdepot'
    path_template = '/games/{slug}.html'
    parser = parse_linkdepot_page


PROVIDER_CLASSES = {
    cls.name: cls for cls in (GameVaultProvider, MirrorHubProvider, LinkDepotProvider)
}


def build_providers(session: requests.Session, urls: Optional[Dict[str, str]] = None,
                    logger: Optional[logging.Logger] = None) -> Dict[str, Provider]:
    """Instantiate every provider, applying base URL overrides from `urls`."""
    urls = urls or {}
    return {
        name: cls(session, base_url=urls.get(name), logger=logger)
        for name, cls in PROVIDER_CLASSES.items()
    }
