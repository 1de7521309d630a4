"""Pytest configuration for plz tests."""
import sys
from pathlib import Path

import pytest

# Make the repository root importable when running pytest without installing
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

FIXTURES = Path(__file__).parent / 'fixtures'


@pytest.fixture(autouse=True)
def no_update_check(monkeypatch):
    """Never hit the releases endpoint from tests."""
    monkeypatch.setattr('plz.cli.check_for_updates', lambda *a, **kw: None)


@pytest.fixture
def store(tmp_path):
    from plz.store import Store
    return Store(tmp_path / 'plz_config.json')


@pytest.fixture
def registry(store):
    from plz.registry import AliasRegistry
    return AliasRegistry(store)
