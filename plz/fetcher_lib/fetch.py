"""Network fetch helpers for provider pages."""
import requests

from plz import __version__
from plz.utils.constants import REQUEST_TIMEOUT, USER_AGENT_TEMPLATE

USER_AGENT = USER_AGENT_TEMPLATE.format(version=__version__)


def new_session() -> requests.Session:
    """Return a session carrying the fixed plz user agent."""
    session = requests.Session()
    session.headers.update({
        'User-Agent': USER_AGENT,
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    })
    return session


def fetch_game_page(session: requests.Session, url: str, timeout: float = REQUEST_TIMEOUT):
    """Fetch a provider page. Raises requests exceptions for transport errors and error statuses."""
    headers = {'User-Agent': USER_AGENT}
    response = session.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    return response
