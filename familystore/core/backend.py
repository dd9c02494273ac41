"""BackendAdapter abstraction for FamilyStore.

The BackendAdapter gives a FamilyStore a uniform way to write to whatever
backend it was constructed with. Backends only have to satisfy a small
contract (get/set/keys plus delete or remove); the adapter probes once for
the optional capabilities and hides the differences.
"""

import logging
from typing import Any, Hashable, List, Optional

from .contracts import is_backend
from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class BackendAdapter:
    """Adapter over a raw key/value backend owned by a single store.

    Capability probing happens at construction:

    - ``delete`` is preferred; ``remove`` is used when ``delete`` is missing
    - ``clear`` is used when present, otherwise emulated by deleting every
      key the backend reports

    The adapter never reaches into any other store's backend. Handing the
    same raw backend to two stores is a caller error and its behavior is
    undefined.
    """

    def __init__(self, backend: Any):
        """Initialize adapter with a raw backend.

        Args:
            backend: Object satisfying the backend contract

        Raises:
            InvalidArgumentError: If backend does not satisfy the contract
        """
        if not is_backend(backend):
            raise InvalidArgumentError(
                "Backend must provide get, set, keys and delete (or remove), "
                f"got {type(backend).__name__}"
            )

        self._backend = backend
        self._delete = getattr(backend, 'delete', None)
        if not callable(self._delete):
            self._delete = backend.remove
        self._clear = getattr(backend, 'clear', None)
        if not callable(self._clear):
            self._clear = None

    @property
    def raw(self) -> Any:
        """The wrapped backend object."""
        return self._backend

    def get(self, key: Hashable) -> Optional[Any]:
        """Read a value; None means absent."""
        return self._backend.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        self._backend.set(key, value)

    def keys(self) -> List[Hashable]:
        """Return the backend's keys as a list, in backend order."""
        return list(self._backend.keys())

    def delete(self, key: Hashable) -> None:
        self._delete(key)

    def clear(self) -> None:
        """Remove every key from the backend.

        Keys are snapshotted before deleting so backends that return a live
        view from keys() are not mutated while being iterated.
        """
        if self._clear is not None:
            self._clear()
            return

        keys = self.keys()
        logger.debug("Emulating clear() on %s: deleting %d keys",
                     type(self._backend).__name__, len(keys))
        for key in keys:
            self._delete(key)

    # Capability flags - report what the wrapped backend provides natively

    def supports_delete(self) -> bool:
        """Check if the backend exposes ``delete`` (as opposed to ``remove``)."""
        return callable(getattr(self._backend, 'delete', None))

    def supports_remove(self) -> bool:
        return callable(getattr(self._backend, 'remove', None))

    def supports_clear(self) -> bool:
        """Check if the backend clears itself, or clear() is emulated."""
        return self._clear is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._backend!r})"
