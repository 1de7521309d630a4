"""HTML parsing helpers for provider pages.

Every parser takes the raw page HTML and returns
`{'title': str, 'entries': [(label, url), ...]}`, or None when the page does
not have the markup the provider is known to use. Parsers never raise on
unexpected markup.
"""
import logging
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup
from urllib.parse import urljoin, urlparse


def hostname_label(url: str) -> str:
    """Human label for a download URL: the first host component, capitalized.

    'https://www.example.com/x' -> 'Example'
    'https://1fichier.com/?abc' -> '1Fichier'
    """
    rest = url.strip()
    if '://' in rest:
        rest = rest.split('://', 1)[1]
    if rest.lower().startswith('www.'):
        rest = rest[4:]
    rest = rest.split('.', 1)[0]
    # Uppercase only the first letter, wherever it is
    for i, ch in enumerate(rest):
        if ch.isalpha():
            return rest[:i] + ch.upper() + rest[i + 1:]
    return rest


def _resolve_href(href, page_url: str) -> Optional[str]:
    """Absolute http(s) URL for an href, or None for anything else (mailto:, javascript:, #...)."""
    if not href:
        return None
    if isinstance(href, (list, tuple)):
        href = href[0]
    href = str(href).strip()
    if not href or href.startswith('#'):
        return None
    resolved = urljoin(page_url, href) if page_url else href
    if urlparse(resolved).scheme not in ('http', 'https'):
        return None
    return resolved


def _add_entry(entries: List[Tuple[str, str]], seen: set, label: str, url: str):
    if url in seen:
        return
    seen.add(url)
    entries.append((label, url))


def _result(title: str, entries: List[Tuple[str, str]]) -> Optional[Dict]:
    if not title or not entries:
        return None
    return {'title': title, 'entries': entries}


def parse_gamevault_page(html_content: str, page_url: str = '', logger: Optional[logging.Logger] = None) -> Optional[Dict]:
    """Parse a GameVault game page.

    Title is the `h1.entry-title`; links are every anchor inside
    `div.download-links`, labelled by hostname.
    """
    soup = BeautifulSoup(html_content, 'html.parser')
    heading = soup.find('h1', class_='entry-title')
    container = soup.find('div', class_='download-links')
    if not heading or not container:
        if logger:
            logger.info(f"gamevault: expected markup missing on {page_url or 'page'}")
        return None

    title = heading.get_text(' ', strip=True)
    entries = []
    seen = set()
    for a in container.find_all('a', href=True):
        url = _resolve_href(a.get('href'), page_url)
        if url:
            _add_entry(entries, seen, hostname_label(url), url)
    return _result(title, entries)


def parse_mirrorhub_page(html_content: str, page_url: str = '', logger: Optional[logging.Logger] = None) -> Optional[Dict]:
    """Parse a MirrorHub game page.

    Title is the `h2.game-title`; each `ul.mirrors > li` holds one link whose
    text is the mirror name. Unnamed links fall back to the hostname label.
    """
    soup = BeautifulSoup(html_content, 'html.parser')
    heading = soup.find('h2', class_='game-title')
    mirrors = soup.find('ul', class_='mirrors')
    if not heading or not mirrors:
        if logger:
            logger.info(f"mirrorhub: expected markup missing on {page_url or 'page'}")
        return None

    title = heading.get_text(' ', strip=True)
    entries = []
    seen = set()
    for li in mirrors.find_all('li', recursive=False):
        a = li.find('a', href=True)
        if not a:
            continue
        url = _resolve_href(a.get('href'), page_url)
        if not url:
            continue
        label = a.get_text(' ', strip=True) or hostname_label(url)
        _add_entry(entries, seen, label, url)
    return _result(title, entries)


def parse_linkdepot_page(html_content: str, page_url: str = '', logger: Optional[logging.Logger] = None) -> Optional[Dict]:
    """Parse a LinkDepot game page.

    Title comes from the og:title meta tag, else from <title> up to the
    ' - ' site suffix. Links are the rows of `table.downloads`: first cell is
    the label, first anchor in the row is the URL.
    """
    soup = BeautifulSoup(html_content, 'html.parser')

    title = ''
    og = soup.find('meta', attrs={'property': 'og:title'})
    if og and og.get('content'):
        title = str(og.get('content')).strip()
    elif soup.title and soup.title.string:
        title = soup.title.string.split(' - ')[0].strip()

    table = soup.find('table', class_='downloads')
    if not title or not table:
        if logger:
            logger.info(f"linkdepot: expected markup missing on {page_url or 'page'}")
        return None

    entries = []
    seen = set()
    for row in table.find_all('tr'):
        cells = row.find_all('td')
        a = row.find('a', href=True)
        if not cells or not a:
            continue
        url = _resolve_href(a.get('href'), page_url)
        if not url:
            continue
        label = cells[0].get_text(' ', strip=True) or hostname_label(url)
        _add_entry(entries, seen, label, url)
    return _result(title, entries)
