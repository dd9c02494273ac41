"""Structural capability checks for backends and family stores.

FamilyStore accepts any object "by shape": a backend does not need to
subclass anything, and a parent does not need to be a FamilyStore instance
as long as it exposes the same attributes. These helpers are the single
place where that shape is defined.
"""

from typing import Any, Optional, Sequence


def _has_method(obj: Any, name: str) -> bool:
    return callable(getattr(obj, name, None))


def is_backend(value: Any) -> bool:
    """Check if value satisfies the writable backend contract.

    A backend must provide callable ``get``, ``set`` and ``keys``, plus
    either ``delete`` or ``remove``. ``clear`` is optional.

    Args:
        value: Object to check

    Returns:
        True if value can be wrapped as a store's own backend
    """
    if value is None:
        return False
    if not all(_has_method(value, name) for name in ('get', 'set', 'keys')):
        return False
    return _has_method(value, 'delete') or _has_method(value, 'remove')


def is_readable_backend(value: Any) -> bool:
    """Check if value can be read during traversal (``get`` and ``keys``)."""
    return value is not None and _has_method(value, 'get') and _has_method(value, 'keys')


def backend_of(node: Any) -> Optional[Any]:
    """Return the backend of a conforming node.

    Nodes built outside this library may call the field ``store`` instead
    of ``backend``; both are accepted, ``backend`` first.
    """
    backend = getattr(node, 'backend', None)
    if backend is None:
        backend = getattr(node, 'store', None)
    return backend


def parents_of(node: Any) -> Sequence[Any]:
    """Return the ordered parent sequence of a conforming node."""
    return getattr(node, 'parents', None) or ()


def is_family_store(value: Any) -> bool:
    """Check if value satisfies the family store (node) contract.

    Conformance is structural:

    - ``name`` is a non-empty string
    - ``backend`` (or ``store``) is readable: callable ``get`` and ``keys``
    - ``parents`` is a list or tuple

    Args:
        value: Object to check

    Returns:
        True if value may be used as a parent or compared with equals()
    """
    if value is None:
        return False

    name = getattr(value, 'name', None)
    if not isinstance(name, str) or name == '':
        return False

    if not is_readable_backend(backend_of(value)):
        return False

    return isinstance(getattr(value, 'parents', None), (list, tuple))
