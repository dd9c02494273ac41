"""FamilyStore - Key/Value Stores with Multiple Inheritance.

A FamilyStore wraps any key/value backend and may inherit from any number of
other stores. Reads resolve breadth-first through the store and its
ancestors; writes only touch the store's own backend.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from familystore import FamilyStore, DictBackend

    defaults = FamilyStore('defaults', DictBackend({'retries': 3}))
    local = FamilyStore('local', DictBackend(), inherit=[defaults])
    local.get('retries')  # 3
━━━━━━━━━━━━━━━━━━━━━━━━━━

Diamonds and cycles in the parent graph are fine: every store is consulted
at most once per lookup.
"""

import logging

__version__ = "1.0.0"

from .core import (
    FamilyStore,
    BackendAdapter,
    is_backend,
    is_family_store,
    FamilyTraverser,
    BreadthFirstTraverser,
    Resolution,
    DataCollector,
    CustomCollector,
)
from .backends import DictBackend, MappingBackend, ShelfBackend
from ._common.config import FamilyConfig
from .exceptions import (
    FamilyStoreError,
    InvalidArgumentError,
    InconsistentComparisonError,
)
from .api import walk, resolution_order, find_owners, family_stats

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "FamilyStore",
    "BackendAdapter",
    "is_backend",
    "is_family_store",
    "FamilyTraverser",
    "BreadthFirstTraverser",
    "Resolution",
    "DataCollector",
    "CustomCollector",
    # Backends
    "DictBackend",
    "MappingBackend",
    "ShelfBackend",
    # Config
    "FamilyConfig",
    # Errors
    "FamilyStoreError",
    "InvalidArgumentError",
    "InconsistentComparisonError",
    # API
    "walk",
    "resolution_order",
    "find_owners",
    "family_stats",
]
