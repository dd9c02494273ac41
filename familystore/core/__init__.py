"""Core components of FamilyStore."""

from .node import FamilyStore
from .backend import BackendAdapter
from .contracts import is_backend, is_family_store
from .traverser import FamilyTraverser, BreadthFirstTraverser, default_traverser
from .collector import (
    Resolution,
    DataCollector,
    ValueCollector,
    OwnerCollector,
    OwnersCollector,
    KeyCollector,
    PairCollector,
    MappingCollector,
    NodeCollector,
    CustomCollector,
)

__all__ = [
    'FamilyStore',
    'BackendAdapter',
    'is_backend',
    'is_family_store',
    'FamilyTraverser',
    'BreadthFirstTraverser',
    'default_traverser',
    'Resolution',
    'DataCollector',
    'ValueCollector',
    'OwnerCollector',
    'OwnersCollector',
    'KeyCollector',
    'PairCollector',
    'MappingCollector',
    'NodeCollector',
    'CustomCollector',
]
