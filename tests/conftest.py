"""Shared fixtures for the FamilyStore test suite."""

from collections import OrderedDict

import pytest

from familystore import DictBackend, FamilyStore, MappingBackend


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large families, excluded by run_tests.py")


def _dict_storage(initial=None):
    return DictBackend(initial)


def _mapping_storage(initial=None):
    return MappingBackend(OrderedDict(initial or {}))


@pytest.fixture(params=[_dict_storage, _mapping_storage], ids=["dict-backend", "mapping-backend"])
def storage(request):
    """Backend factory: storage(initial=None) -> fresh backend.

    Every test using it runs once per bundled in-memory backend.
    """
    return request.param


@pytest.fixture
def make_store(storage):
    """Factory building a FamilyStore over a fresh backend."""
    def _make(name, initial=None, inherit=None):
        return FamilyStore(name, storage(initial), inherit=inherit)
    return _make


@pytest.fixture
def five_generations(make_store):
    """The cross-generation diamond used across several tests.

    f1
    f2 -> f1
    f3 -> f2, f1
    f4 -> f1
    f5 -> f4, f3
    """
    f1 = make_store('f1')
    f2 = make_store('f2', inherit=[f1])
    f3 = make_store('f3', inherit=[f2, f1])
    f4 = make_store('f4', inherit=[f1])
    f5 = make_store('f5', inherit=[f4, f3])
    return f1, f2, f3, f4, f5
