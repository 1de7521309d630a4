import os
import random

import pytest

from plz.errors import AliasNotFound, EmptyRegistry, InvalidAliasName
from plz.registry import AliasRegistry
from plz.store import Store


def always(answer):
    calls = []

    def confirm(name, old, new):
        calls.append((name, old, new))
        return answer
    confirm.calls = calls
    return confirm


def test_add_persists(registry, store):
    assert registry.add('hk', '/games/hk/hollow_knight.exe')
    assert Store(store.path).document.aliases == {'hk': '/games/hk/hollow_knight.exe'}


def test_add_nonexistent_path_is_allowed(registry):
    assert registry.add('ghost', '/definitely/not/here.exe')
    assert registry.get('ghost') == '/definitely/not/here.exe'


def test_overwrite_requires_confirmation(registry):
    registry.add('x', '/p1.exe')

    assert registry.add('x', '/p2.exe') is False
    assert registry.get('x') == '/p1.exe'

    no = always(False)
    assert registry.add('x', '/p2.exe', confirm=no) is False
    assert no.calls == [('x', '/p1.exe', '/p2.exe')]
    assert registry.get('x') == '/p1.exe'

    yes = always(True)
    assert registry.add('x', '/p2.exe', confirm=yes) is True
    assert registry.get('x') == '/p2.exe'


def test_readding_same_pair_does_not_prompt(registry):
    registry.add('x', '/p1.exe')
    confirm = always(False)
    assert registry.add('x', '/p1.exe', confirm=confirm)
    assert confirm.calls == []


def test_declined_overwrite_is_not_persisted(registry, store):
    registry.add('x', '/p1.exe')
    registry.add('x', '/p2.exe', confirm=always(False))
    assert Store(store.path).document.aliases['x'] == '/p1.exe'


def test_empty_name_rejected(registry):
    with pytest.raises(InvalidAliasName):
        registry.add('   ', '/p.exe')


def test_remove(registry, store):
    registry.add('a', '/a.exe')
    registry.remove('a')
    assert 'a' not in registry
    assert Store(store.path).document.aliases == {}


def test_remove_missing_raises(registry):
    with pytest.raises(AliasNotFound):
        registry.remove('nope')


def test_get_missing_raises(registry):
    with pytest.raises(AliasNotFound) as exc:
        registry.get('nope')
    assert 'nope' in str(exc.value)


def test_each_name_maps_to_one_path(registry):
    yes = always(True)
    ops = [
        ('add', 'a', '/1'), ('add', 'b', '/2'), ('add', 'a', '/3'),
        ('remove', 'b', None), ('add', 'b', '/4'), ('add', 'c', '/1'),
        ('remove', 'a', None), ('add', 'a', '/5'),
    ]
    for op, name, path in ops:
        if op == 'add':
            registry.add(name, path, confirm=yes)
        else:
            registry.remove(name)
    assert registry.aliases == {'b': '/4', 'c': '/1', 'a': '/5'}
    assert len(registry.list()) == len(set(n for n, _ in registry.list()))


def test_list_orders_by_name_length_descending(registry):
    for name in ('ab', 'a', 'abc'):
        registry.add(name, f'/{name}.exe')
    assert [n for n, _ in registry.list()] == ['abc', 'ab', 'a']


def test_list_ties_keep_insertion_order(registry):
    for name in ('xy', 'q', 'ab', 'long', 'zz'):
        registry.add(name, f'/{name}')
    assert [n for n, _ in registry.list()] == ['long', 'xy', 'ab', 'zz', 'q']


def test_random_on_empty_registry(registry):
    with pytest.raises(EmptyRegistry):
        registry.random()


def test_random_is_reproducible_with_seeded_rng(registry):
    for i in range(10):
        registry.add(f'game{i}', f'/g{i}.exe')
    first = registry.random(random.Random(42))
    second = registry.random(random.Random(42))
    assert first == second
    assert first in registry.aliases.items()


def test_random_covers_every_alias(registry):
    for name in ('a', 'b', 'c'):
        registry.add(name, f'/{name}')
    rng = random.Random(0)
    seen = {registry.random(rng)[0] for _ in range(200)}
    assert seen == {'a', 'b', 'c'}


def test_ignore_uses_normalized_paths(registry, tmp_path):
    exe = tmp_path / 'Game' / 'game.exe'
    registry.ignore(str(tmp_path / 'Game' / '..' / 'Game' / 'game.exe'))
    assert registry.ignore_list == [os.path.normpath(str(exe))]
    assert registry.is_ignored(str(exe))
    registry.ignore(str(exe))
    assert len(registry.ignore_list) == 1


def test_check_warns_on_stale_aliases_and_prunes_ignore_list(registry, store, tmp_path):
    real = tmp_path / 'real.exe'
    real.write_text('stub')
    kept = tmp_path / 'kept.exe'
    kept.write_text('stub')
    registry.add('real', str(real))
    registry.add('gone', str(tmp_path / 'gone.exe'))
    registry.ignore(str(kept))
    registry.ignore(str(tmp_path / 'deleted.exe'))

    warnings = registry.check()

    assert len(warnings) == 1
    assert '`gone`' in warnings[0]
    assert registry.ignore_list == [str(kept)]
    assert Store(store.path).document.autoadd_ignore == [str(kept)]
    # stale aliases are only reported, never removed
    assert 'gone' in registry
