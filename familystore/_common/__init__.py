"""Common components shared across FamilyStore modules.

This internal package contains pure configuration code. It should NOT be
imported directly by users.

Important: This package must NEVER import from core or backends to avoid
circular dependencies.
"""

from .config import FamilyConfig, PROTO_KEY

__all__ = [
    'FamilyConfig',
    'PROTO_KEY',
]
