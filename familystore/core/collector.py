"""Data collection strategies for FamilyStore reads.

A collector is the visitor handed to the traversal engine. It is called once
per visited node with ``(backend, node, depth)``. Returning a non-None value
stops the walk; returning None keeps it going. Accumulating collectors always
return None so the walk reaches every node, and expose what they gathered
through result().

The collision policy for every accumulating collector is "first seen wins":
the engine visits shallower and earlier-declared nodes first, so recording a
key only the first time it appears is exactly what makes a store's own value
shadow an ancestor's.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Hashable, List, Optional, Set, Tuple


@dataclass(frozen=True)
class Resolution:
    """Where a key resolved: the value, the store holding it and its depth.

    The empty record ``Resolution()`` means the key resolved nowhere and is
    falsy.
    """

    value: Any = None
    owner: Any = None
    depth: Optional[int] = None

    def __bool__(self) -> bool:
        return self.owner is not None


class DataCollector(ABC):
    """Abstract base class for traversal visitors."""

    @abstractmethod
    def collect(self, backend: Any, node: Any, depth: int) -> Optional[Any]:
        """Collect data from one visited node.

        Args:
            backend: The node's own backend
            node: The node being visited
            depth: Distance from the traversal root

        Returns:
            A value to stop the walk with, or None to continue
        """
        pass

    def result(self) -> Any:
        """Return the accumulated data (None for short-circuit collectors)."""
        return None

    def __call__(self, backend: Any, node: Any, depth: int) -> Optional[Any]:
        return self.collect(backend, node, depth)


class ValueCollector(DataCollector):
    """Stops at the first backend holding a value for key."""

    def __init__(self, key: Hashable):
        self.key = key

    def collect(self, backend: Any, node: Any, depth: int) -> Optional[Any]:
        return backend.get(self.key)


class OwnerCollector(DataCollector):
    """Like ValueCollector, but reports which store held the value."""

    def __init__(self, key: Hashable):
        self.key = key

    def collect(self, backend: Any, node: Any, depth: int) -> Optional[Resolution]:
        value = backend.get(self.key)
        if value is None:
            return None
        return Resolution(value=value, owner=node, depth=depth)


class OwnersCollector(DataCollector):
    """Collects every store defining key, in traversal order.

    The first entry is the effective resolution; the rest are shadowed.
    """

    def __init__(self, key: Hashable):
        self.key = key
        self._owners: List[Resolution] = []

    def collect(self, backend: Any, node: Any, depth: int) -> None:
        value = backend.get(self.key)
        if value is not None:
            self._owners.append(Resolution(value=value, owner=node, depth=depth))
        return None

    def result(self) -> List[Resolution]:
        return self._owners


class KeyCollector(DataCollector):
    """Collects every key seen, deduplicated, in first-seen order.

    Keys are recorded whatever their value, so a key whose only value is
    None is still listed.
    """

    def __init__(self):
        self._keys: List[Hashable] = []
        self._seen: Set[Hashable] = set()

    def collect(self, backend: Any, node: Any, depth: int) -> None:
        for key in backend.keys():
            if key not in self._seen:
                self._seen.add(key)
                self._keys.append(key)
        return None

    def result(self) -> List[Hashable]:
        return self._keys


class PairCollector(DataCollector):
    """Collects (key, value) pairs, keeping the first present value per key.

    A key is only claimed once a node actually holds a value for it, so a
    None in a shallow node does not hide a real value further up.
    """

    def __init__(self):
        self._pairs: List[Tuple[Hashable, Any]] = []
        self._seen: Set[Hashable] = set()

    def collect(self, backend: Any, node: Any, depth: int) -> None:
        for key in backend.keys():
            if key in self._seen:
                continue
            value = backend.get(key)
            if value is not None:
                self._seen.add(key)
                self._pairs.append((key, value))
        return None

    def result(self) -> List[Tuple[Hashable, Any]]:
        return self._pairs


class MappingCollector(DataCollector):
    """Collects resolved pairs into a dict, leaving out skipped keys."""

    def __init__(self, skip_keys: FrozenSet[Hashable] = frozenset()):
        self.skip_keys = skip_keys
        self._mapping: Dict[Hashable, Any] = {}

    def collect(self, backend: Any, node: Any, depth: int) -> None:
        for key in backend.keys():
            if key in self.skip_keys or key in self._mapping:
                continue
            value = backend.get(key)
            if value is not None:
                self._mapping[key] = value
        return None

    def result(self) -> Dict[Hashable, Any]:
        return self._mapping


class NodeCollector(DataCollector):
    """Records every visited node with its depth, in visit order."""

    def __init__(self):
        self._nodes: List[Tuple[Any, int]] = []

    def collect(self, backend: Any, node: Any, depth: int) -> None:
        self._nodes.append((node, depth))
        return None

    def result(self) -> List[Tuple[Any, int]]:
        return self._nodes


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom visitors without subclassing.
    """

    def __init__(self, collect_func: Callable[[Any, Any, int], Optional[Any]]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(backend, node, depth) -> Optional[Any]
        """
        self.collect_func = collect_func

    def collect(self, backend: Any, node: Any, depth: int) -> Optional[Any]:
        return self.collect_func(backend, node, depth)
