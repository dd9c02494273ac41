"""Ready-made backends for FamilyStore.

Any object with get/set/keys and delete (or remove) works as a backend;
these cover the common cases.
"""

from .memory import DictBackend, MappingBackend
from .shelf import ShelfBackend

__all__ = [
    'DictBackend',
    'MappingBackend',
    'ShelfBackend',
]
