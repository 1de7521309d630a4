"""Check GitHub releases for a newer plz."""
import logging
from typing import Optional

import requests

from plz.fetcher_lib.fetch import USER_AGENT
from plz.utils.constants import RELEASES_URL, REQUEST_TIMEOUT


def _strip_v(tag: str) -> str:
    return tag[1:] if tag[:1] in ('v', 'V') else tag


def check_for_updates(current_version: str, session: Optional[requests.Session] = None,
                      url: str = RELEASES_URL, logger: Optional[logging.Logger] = None) -> Optional[str]:
    """Return the latest release tag if it differs from `current_version`, else None.

    Failures never propagate; an update check must not stop a command.
    """
    owns_session = session is None
    if owns_session:
        session = requests.Session()
    try:
        response = session.get(url, headers={'User-Agent': USER_AGENT}, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        tag = response.json().get('tag_name')
    except requests.exceptions.RequestException as e:
        if logger:
            logger.warning(f"update check failed: {e}")
        return None
    except (ValueError, AttributeError) as e:
        if logger:
            logger.warning(f"update check returned unexpected data: {e}")
        return None
    finally:
        if owns_session:
            session.close()

    if not tag or not isinstance(tag, str):
        return None
    if _strip_v(tag.strip()) == _strip_v(current_version):
        return None
    if logger:
        logger.info(f"update available: {tag} (running {current_version})")
    return tag
