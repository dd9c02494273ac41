"""FamilyStore: a key/value node with multiple inheritance.

A FamilyStore wraps one backend it exclusively writes to and declares zero
or more parent stores. Reads resolve breadth-first through the store and its
transitive parents, first value found wins; writes only ever touch the
store's own backend.

The parent relation is an explicit object graph rather than Python class
inheritance: it changes at runtime, allows many parents, and may contain
cycles.
"""

import functools
import json
import logging
import threading
from contextlib import nullcontext
from typing import Any, Hashable, Iterator, List, Mapping, Optional, Tuple, Union

from .backend import BackendAdapter
from .collector import (
    KeyCollector,
    MappingCollector,
    OwnerCollector,
    PairCollector,
    Resolution,
    ValueCollector,
)
from .contracts import is_family_store
from .traverser import FamilyTraverser, Visitor, default_traverser
from .._common.config import FamilyConfig
from ..exceptions import InconsistentComparisonError, InvalidArgumentError

logger = logging.getLogger(__name__)


def _compare_keys(a: Tuple[Hashable, Any], b: Tuple[Hashable, Any]) -> int:
    """Order two (key, value) pairs by key.

    Raises:
        InconsistentComparisonError: If the keys are neither equal, less nor
            greater than one another
    """
    ka, kb = a[0], b[0]
    try:
        if ka == kb:
            return 0
        if ka < kb:
            return -1
        if ka > kb:
            return 1
    except TypeError as e:
        raise InconsistentComparisonError(f"Unstable sort: {ka!r} vs {kb!r}") from e
    raise InconsistentComparisonError(f"Unstable sort: {ka!r} vs {kb!r}")


class FamilyStore:
    """Key/value store that reads through an ordered list of parents.

    Example:
        >>> base = FamilyStore('base', DictBackend({'color': 'red', 'size': 1}))
        >>> child = FamilyStore('child', DictBackend({'size': 2}), inherit=[base])
        >>> child.get('color'), child.get('size')
        ('red', 2)
        >>> child.to_dict()
        {'size': 2, 'color': 'red'}
    """

    # All stores share the stateless breadth-first engine
    traverser: FamilyTraverser = default_traverser

    def __init__(self,
                 name: str,
                 backend: Any,
                 config: Union[FamilyConfig, Mapping[str, Any], None] = None,
                 *,
                 inherit: Optional[List[Any]] = None):
        """Create a store.

        Args:
            name: Non-empty identifying string, used to reject duplicate parents
            backend: Object satisfying the backend contract (get, set, keys,
                delete or remove, optional clear); may be pre-populated
            config: FamilyConfig or a plain mapping of options such as
                ``{"inherit": [parent]}``
            inherit: Extra parents attached after those in config

        Raises:
            InvalidArgumentError: If name, backend or config is invalid, or a
                configured parent does not satisfy the node contract
        """
        if not isinstance(name, str) or name == '':
            raise InvalidArgumentError("Name must be a non-empty string")

        adapter = BackendAdapter(backend)

        try:
            config = FamilyConfig.from_options(config)
        except TypeError as e:
            raise InvalidArgumentError(str(e)) from e
        config_errors = config.validate()
        if config_errors:
            raise InvalidArgumentError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )
        if inherit is not None and (isinstance(inherit, (str, bytes))
                                    or not isinstance(inherit, (list, tuple))):
            raise InvalidArgumentError("inherit must be a list of parent stores")

        self._name = name
        self._adapter = adapter
        self._parents: List[Any] = []
        self._skip_keys = config.skipped_keys
        self._lock = threading.Lock() if config.thread_safe else nullcontext()

        initial_parents = list(config.inherit) + list(inherit or ())
        for parent in initial_parents:
            if not is_family_store(parent):
                raise InvalidArgumentError("Not a family store compatible object")
        for parent in initial_parents:
            self.inherit(parent)

    # Identity

    @property
    def name(self) -> str:
        return self._name

    @property
    def backend(self) -> Any:
        """The raw backend this store owns."""
        return self._adapter.raw

    @property
    def store(self) -> Any:
        """Alias of backend, for nodes that expect the ``store`` field."""
        return self._adapter.raw

    @property
    def parents(self) -> Tuple[Any, ...]:
        """Snapshot of the parent list in declaration order."""
        return tuple(self._parents)

    @staticmethod
    def is_store(value: Any) -> bool:
        """Check if value satisfies the family store contract.

        FamilyStore instances always do; other objects qualify by shape (see
        familystore.core.contracts.is_family_store).
        """
        return is_family_store(value)

    # Inheritance

    def inherit(self, parent: Any) -> bool:
        """Append parent to this store's parents unless it is a duplicate.

        A parent is a duplicate if it is this store itself, or already one of
        its parents, compared by identity or by name. Duplicates are skipped,
        not rejected, so inheriting is idempotent.

        Args:
            parent: Object satisfying the family store contract

        Returns:
            True if parent was added, False if it was a duplicate

        Raises:
            InvalidArgumentError: If parent does not satisfy the contract
        """
        if not is_family_store(parent):
            raise InvalidArgumentError("Not a family store compatible object")

        with self._lock:
            candidates = self._parents + [self]
            duplicates = [
                current for current in candidates
                if current is parent or current.name == parent.name
            ]
            if duplicates:
                logger.debug("Store %r: skipping duplicate parent %r", self._name, parent.name)
                return False

            self._parents.append(parent)

        logger.debug("Store %r now inherits from %r", self._name, parent.name)
        return True

    inherits = inherit

    # Traversal

    def traverse(self, visitor: Visitor) -> Optional[Any]:
        """Walk this store and its ancestors breadth-first.

        Args:
            visitor: Callable(backend, node, depth) -> Optional[Any]. It must
                not modify the graph it is walking.

        Returns:
            The visitor's first non-None result, or None
        """
        return self.traverser.search(self, visitor)

    # Reads

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the first value for key found breadth-first, else default."""
        value = self.traverse(ValueCollector(key))
        return default if value is None else value

    def get_own(self, key: Hashable, default: Any = None) -> Any:
        """Read key from this store's own backend only."""
        value = self._adapter.get(key)
        return default if value is None else value

    def get_owner(self, key: Hashable) -> Resolution:
        """Resolve key and report which store supplied the value.

        Returns:
            Resolution(value, owner, depth), or the empty Resolution() when
            no store in the family holds key
        """
        return self.traverse(OwnerCollector(key)) or Resolution()

    def keys(self) -> List[Hashable]:
        """All keys visible through this store, first-seen order, no duplicates."""
        collector = KeyCollector()
        self.traverse(collector)
        return collector.result()

    def own_keys(self) -> List[Hashable]:
        return self._adapter.keys()

    def pairs(self) -> List[Tuple[Hashable, Any]]:
        """Resolved (key, value) pairs, first present value per key."""
        collector = PairCollector()
        self.traverse(collector)
        return collector.result()

    def own_pairs(self) -> List[Tuple[Hashable, Any]]:
        return [(key, self._adapter.get(key)) for key in self._adapter.keys()]

    def to_dict(self) -> dict:
        """Resolve every visible key into a plain dict.

        The key ``__proto`` is always left out, along with any hidden_keys
        from the store's configuration.
        """
        collector = MappingCollector(self._skip_keys)
        self.traverse(collector)
        return collector.result()

    def to_json(self, **kwargs) -> str:
        """Serialize to_dict() with json.dumps; kwargs are passed through."""
        return json.dumps(self.to_dict(), **kwargs)

    def equals(self, other: Any) -> bool:
        """Compare resolved contents, ignoring order and family structure.

        Two stores are equal when pairs() yields the same key/value set for
        both, however the values got there.

        Raises:
            InvalidArgumentError: If other does not satisfy the contract
            InconsistentComparisonError: If keys cannot be ordered
        """
        if other is self:
            return True
        if not is_family_store(other):
            raise InvalidArgumentError("Not a family store compatible object")

        collector = PairCollector()
        self.traverser.search(other, collector)
        a, b = self.pairs(), collector.result()

        if len(a) != len(b):
            return False

        a.sort(key=functools.cmp_to_key(_compare_keys))
        b.sort(key=functools.cmp_to_key(_compare_keys))

        for (key_a, value_a), (key_b, value_b) in zip(a, b):
            if key_a != key_b or value_a != value_b:
                return False
        return True

    # Writes - own backend only

    def set(self, key: Hashable, value: Any) -> 'FamilyStore':
        self._adapter.set(key, value)
        return self

    def delete(self, key: Hashable) -> 'FamilyStore':
        """Delete key from this store's backend; parents are never touched."""
        self._adapter.delete(key)
        return self

    remove = delete

    def clear(self) -> 'FamilyStore':
        """Empty this store's backend.

        Keys previously held here fall through to whatever the parents
        provide.
        """
        self._adapter.clear()
        return self

    # Python protocol

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())

    def __repr__(self) -> str:
        parent_names = [parent.name for parent in self._parents]
        return f"{self.__class__.__name__}(name={self._name!r}, parents={parent_names!r})"
