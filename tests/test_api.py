"""Tests for the functional API."""

import pytest

from familystore import (
    InvalidArgumentError,
    Resolution,
    family_stats,
    find_owners,
    resolution_order,
    walk,
)


@pytest.fixture
def populated(five_generations):
    f1, f2, f3, f4, f5 = five_generations
    f5.set('a', 1)
    f4.set('b', 2)
    f3.set('c', 3)
    f1.set('d', 4)
    f2.set('e', 5)
    f4.set('a', 'shadowed')
    return f1, f2, f3, f4, f5


def test_resolution_order(populated):
    *_, f5 = populated
    assert resolution_order(f5) == ['f5', 'f4', 'f3', 'f1', 'f2']


def test_walk(populated):
    *_, f5 = populated
    assert [(node.name, depth) for node, depth in walk(f5)] == [
        ('f5', 0), ('f4', 1), ('f3', 1), ('f1', 2), ('f2', 2),
    ]
    assert [node.name for node, _ in walk(f5, max_depth=1)] == ['f5', 'f4', 'f3']


def test_find_owners(populated):
    f1, f2, f3, f4, f5 = populated

    assert find_owners(f5, 'a') == [
        Resolution(value=1, owner=f5, depth=0),
        Resolution(value='shadowed', owner=f4, depth=1),
    ]
    assert find_owners(f5, 'a')[0] == f5.get_owner('a')
    assert find_owners(f5, 'missing') == []


def test_family_stats(populated):
    f1, f2, f3, f4, f5 = populated

    assert family_stats(f5) == {
        'nodes': 5,
        'max_depth': 2,
        'own_keys': 1,
        'resolved_keys': 5,
    }
    assert family_stats(f1) == {
        'nodes': 1,
        'max_depth': 0,
        'own_keys': 1,
        'resolved_keys': 1,
    }


@pytest.mark.parametrize("func", [resolution_order, family_stats, lambda s: list(walk(s))])
def test_rejects_non_stores(func):
    with pytest.raises(InvalidArgumentError):
        func(object())


def test_find_owners_rejects_non_stores():
    with pytest.raises(InvalidArgumentError):
        find_owners(None, 'a')
