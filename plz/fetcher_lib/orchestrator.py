"""Try providers in order until one has the game."""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from plz.errors import ProviderNotFound, TransportError
from plz.fetcher_lib.providers import FetchResult
from plz.utils.constants import FALLBACKS


class FetchState(Enum):
    TRYING = 'trying'
    SUCCEEDED = 'succeeded'
    EXHAUSTED = 'exhausted'


# Outcome labels recorded per attempt
FOUND = 'found'
NOT_FOUND = 'not found'
TRANSPORT_ERROR = 'transport error'


@dataclass
class FetchReport:
    state: FetchState = FetchState.TRYING
    result: Optional[FetchResult] = None
    # (provider, outcome, detail) in the order they were tried
    attempts: List[Tuple[str, str, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state is FetchState.SUCCEEDED


def provider_order(primary: str, fallbacks: Optional[Dict[str, Tuple[str, ...]]] = None) -> List[str]:
    """Primary provider followed by its two fallbacks."""
    table = fallbacks or FALLBACKS
    if primary not in table:
        raise KeyError(f"unknown provider `{primary}`")
    return [primary] + list(table[primary])


def fetch_game(game_name: str, providers: Dict, primary: str, fallback: bool = True,
               fallbacks: Optional[Dict[str, Tuple[str, ...]]] = None,
               logger: Optional[logging.Logger] = None) -> FetchReport:
    """Query providers strictly one after another, stopping at the first result.

    `providers` maps provider names to objects with a `fetch(game_name)` method.
    With fallback=False only the primary provider is tried.
    """
    order = provider_order(primary, fallbacks)
    if not fallback:
        order = order[:1]

    report = FetchReport()
    for name in order:
        provider = providers[name]
        try:
            result = provider.fetch(game_name)
        except ProviderNotFound as e:
            report.attempts.append((name, NOT_FOUND, str(e)))
            if logger:
                logger.info(f"fetch: {e}")
            continue
        except TransportError as e:
            report.attempts.append((name, TRANSPORT_ERROR, str(e)))
            if logger:
                logger.warning(f"fetch: {e}")
            continue

        report.attempts.append((name, FOUND, result.url))
        report.result = result
        report.state = FetchState.SUCCEEDED
        if logger:
            logger.info(f"fetch: `{game_name}` found on {name} ({len(result.entries)} links)")
        return report

    report.state = FetchState.EXHAUSTED
    if logger:
        logger.warning(f"fetch: `{game_name}` not found on any of {', '.join(order)}")
    return report
