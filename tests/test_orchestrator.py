import pytest

from plz.errors import ProviderNotFound, TransportError
from plz.fetcher_lib.orchestrator import (
    FetchState,
    fetch_game,
    provider_order,
    FOUND,
    NOT_FOUND,
    TRANSPORT_ERROR,
)
from plz.fetcher_lib.providers import FetchResult


class FakeProvider:
    def __init__(self, name, outcome, log):
        self.name = name
        self.outcome = outcome
        self.log = log

    def fetch(self, game_name):
        self.log.append(self.name)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def providers_with(outcomes, log):
    return {name: FakeProvider(name, outcome, log) for name, outcome in outcomes.items()}


def result(provider):
    return FetchResult(title='Celeste', entries=[('Mega', 'https://mega.nz/x')], provider=provider,
                       url=f'https://{provider}.test/celeste')


def test_provider_order_table():
    assert provider_order('gamevault') == ['gamevault', 'mirrorhub', 'linkdepot']
    assert provider_order('mirrorhub') == ['mirrorhub', 'gamevault', 'linkdepot']
    assert provider_order('linkdepot') == ['linkdepot', 'mirrorhub', 'gamevault']


def test_unknown_primary():
    with pytest.raises(KeyError):
        provider_order('elsewhere')


def test_first_success_stops():
    log = []
    providers = providers_with({
        'gamevault': result('gamevault'),
        'mirrorhub': result('mirrorhub'),
        'linkdepot': result('linkdepot'),
    }, log)
    report = fetch_game('celeste', providers, 'gamevault')
    assert report.state is FetchState.SUCCEEDED
    assert report.result.provider == 'gamevault'
    assert log == ['gamevault']


def test_falls_back_to_third_provider_and_stops():
    log = []
    providers = providers_with({
        'mirrorhub': ProviderNotFound('mirrorhub: no page'),
        'gamevault': ProviderNotFound('gamevault: no page'),
        'linkdepot': result('linkdepot'),
    }, log)

    report = fetch_game('celeste', providers, 'mirrorhub')

    assert report.succeeded
    assert report.result.provider == 'linkdepot'
    assert log == ['mirrorhub', 'gamevault', 'linkdepot']
    assert [outcome for _, outcome, _ in report.attempts] == [NOT_FOUND, NOT_FOUND, FOUND]


def test_transport_error_also_falls_back_but_is_reported_distinctly():
    log = []
    providers = providers_with({
        'gamevault': TransportError('gamevault: Timeout'),
        'mirrorhub': result('mirrorhub'),
        'linkdepot': result('linkdepot'),
    }, log)
    report = fetch_game('celeste', providers, 'gamevault')
    assert report.result.provider == 'mirrorhub'
    assert report.attempts[0] == ('gamevault', TRANSPORT_ERROR, 'gamevault: Timeout')
    assert log == ['gamevault', 'mirrorhub']


def test_all_fail_is_exhausted():
    log = []
    providers = providers_with({
        'gamevault': ProviderNotFound('a'),
        'mirrorhub': TransportError('b'),
        'linkdepot': ProviderNotFound('c'),
    }, log)
    report = fetch_game('celeste', providers, 'linkdepot')
    assert report.state is FetchState.EXHAUSTED
    assert report.result is None
    assert log == ['linkdepot', 'mirrorhub', 'gamevault']
    assert len(report.attempts) == 3


def test_no_fallback_tries_only_primary():
    log = []
    providers = providers_with({
        'gamevault': result('gamevault'),
        'mirrorhub': result('mirrorhub'),
        'linkdepot': ProviderNotFound('c'),
    }, log)
    report = fetch_game('celeste', providers, 'linkdepot', fallback=False)
    assert report.state is FetchState.EXHAUSTED
    assert log == ['linkdepot']
