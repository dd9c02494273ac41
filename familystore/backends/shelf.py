"""Persistent backend on top of the standard library shelve module.

ShelfBackend deliberately exposes ``remove`` instead of ``delete`` and has
no ``clear``: FamilyStore probes for both and falls back accordingly.
"""

import logging
import shelve
from typing import Any, List, Optional

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class ShelfBackend:
    """Backend persisting values to a shelve database file.

    Keys must be strings (a shelve restriction); values must be picklable.
    Writing or removing a non-string key raises InvalidArgumentError, while
    reading one returns None: such a key can never be stored here, so for a
    lookup it is simply absent and resolution moves on to the parents.

    Example:
        >>> with ShelfBackend('/tmp/defaults.db') as backend:
        ...     store = FamilyStore('defaults', backend)
        ...     store.set('retries', 3)
    """

    def __init__(self, filename: str, flag: str = 'c', writeback: bool = False):
        """Open (or create) the shelf.

        Args:
            filename: Path of the database file, as passed to shelve.open
            flag: dbm open flag ('r', 'w', 'c' or 'n')
            writeback: Passed through to shelve.open
        """
        self.filename = filename
        self._shelf = shelve.open(filename, flag=flag, writeback=writeback)
        logger.debug("Opened shelf backend %s (flag=%s)", filename, flag)

    @staticmethod
    def _check_key(key: Any) -> str:
        if not isinstance(key, str):
            raise InvalidArgumentError(
                f"ShelfBackend keys must be strings, got {type(key).__name__}"
            )
        return key

    def get(self, key: Any) -> Optional[Any]:
        if not isinstance(key, str):
            return None
        return self._shelf.get(key)

    def set(self, key: str, value: Any) -> None:
        self._shelf[self._check_key(key)] = value

    def keys(self) -> List[str]:
        return list(self._shelf.keys())

    def remove(self, key: str) -> None:
        self._shelf.pop(self._check_key(key), None)

    def sync(self) -> None:
        self._shelf.sync()

    def close(self) -> None:
        self._shelf.close()
        logger.debug("Closed shelf backend %s", self.filename)

    def __enter__(self) -> 'ShelfBackend':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return None

    def __repr__(self) -> str:
        return f"ShelfBackend({self.filename!r})"
