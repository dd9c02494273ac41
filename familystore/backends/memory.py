"""In-memory backends."""

from typing import Any, Dict, Hashable, List, MutableMapping, Optional


class DictBackend:
    """Plain object store holding its data in a private dict.

    The initial mapping is copied, so the caller's dict is never written to.
    """

    def __init__(self, initial: Optional[Dict[Hashable, Any]] = None):
        self._data: Dict[Hashable, Any] = dict(initial or {})

    def get(self, key: Hashable) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        self._data[key] = value

    def keys(self) -> List[Hashable]:
        return list(self._data)

    def delete(self, key: Hashable) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data = {}

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"DictBackend({self._data!r})"


class MappingBackend:
    """Backend over an existing MutableMapping.

    Unlike DictBackend the mapping is shared, not copied: writes through the
    store are visible in the mapping and vice versa. Useful for wrapping an
    OrderedDict, a ChainMap's first map, or a mapping owned by other code.
    """

    def __init__(self, mapping: Optional[MutableMapping[Hashable, Any]] = None):
        self.mapping = mapping if mapping is not None else {}

    def get(self, key: Hashable) -> Optional[Any]:
        return self.mapping.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        self.mapping[key] = value

    def keys(self) -> List[Hashable]:
        return list(self.mapping.keys())

    def delete(self, key: Hashable) -> None:
        self.mapping.pop(key, None)

    def clear(self) -> None:
        self.mapping.clear()

    def __len__(self) -> int:
        return len(self.mapping)

    def __repr__(self) -> str:
        return f"MappingBackend({self.mapping!r})"
