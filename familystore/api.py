"""High-level API for FamilyStore.

This module provides simple, functional interfaces for inspecting a family
of stores. They wrap the traversal engine and collectors for the common
questions: what does the walk look like, who defines a key, and how big is
the family.
"""

from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from .core.collector import NodeCollector, OwnersCollector, Resolution
from .core.contracts import backend_of, is_family_store
from .core.traverser import FamilyTraverser, default_traverser
from .exceptions import InvalidArgumentError


def _check_store(store: Any) -> None:
    if not is_family_store(store):
        raise InvalidArgumentError("Not a family store compatible object")


def walk(store: Any,
         max_depth: Optional[int] = None,
         traverser: FamilyTraverser = default_traverser) -> Iterator[Tuple[Any, int]]:
    """Iterate over a store and its ancestors in resolution order.

    Args:
        store: Starting store
        max_depth: Maximum depth to walk (None = unlimited, 0 = store only)
        traverser: Traversal strategy (breadth-first by default)

    Yields:
        Tuples of (node, depth)

    Example:
        >>> for node, depth in walk(child):
        ...     print('  ' * depth + node.name)
    """
    _check_store(store)
    yield from traverser.traverse(store, max_depth=max_depth)


def resolution_order(store: Any) -> List[str]:
    """Return the names of the stores a lookup consults, in order.

    This is the order in which get() tries backends, so the first name
    holding a key is the one whose value wins.
    """
    _check_store(store)
    collector = NodeCollector()
    default_traverser.search(store, collector)
    return [node.name for node, _ in collector.result()]


def find_owners(store: Any, key: Hashable) -> List[Resolution]:
    """Return every store in the family that holds a value for key.

    The first entry is what get_owner() reports; the remaining entries are
    values shadowed by it, in the order they would take over if the ones
    before them were deleted.

    Args:
        store: Starting store
        key: Key to look for

    Returns:
        List of Resolution records, possibly empty
    """
    _check_store(store)
    collector = OwnersCollector(key)
    default_traverser.search(store, collector)
    return collector.result()


def family_stats(store: Any) -> Dict[str, Any]:
    """Summarize a store's family.

    Returns:
        Dictionary containing:
        - nodes: Number of distinct stores reachable, the store included
        - max_depth: Depth of the farthest ancestor (0 with no parents)
        - own_keys: Number of keys in the store's own backend
        - resolved_keys: Number of keys visible through the store
    """
    _check_store(store)
    nodes = list(default_traverser.traverse(store))

    resolved = set()
    for node, _ in nodes:
        resolved.update(backend_of(node).keys())

    return {
        'nodes': len(nodes),
        'max_depth': max(depth for _, depth in nodes),
        'own_keys': len(list(backend_of(store).keys())),
        'resolved_keys': len(resolved),
    }
