"""Configuration for FamilyStore construction.

FamilyConfig is how users specify what a store starts with: the parents it
inherits from and the keys to keep out of to_dict().
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Mapping, Union


# Never exported by to_dict(), whatever the configuration says
PROTO_KEY = '__proto'


@dataclass
class FamilyConfig:
    """Options applied when a FamilyStore is constructed."""

    # Parents attached in list order via inherit()
    inherit: List[Any] = field(default_factory=list)

    # Extra keys skipped by to_dict() on top of PROTO_KEY
    hidden_keys: FrozenSet[str] = frozenset()

    # Serialize inherit() calls on the same store
    thread_safe: bool = True

    @property
    def skipped_keys(self) -> FrozenSet[str]:
        """All keys to_dict() must leave out."""
        return frozenset(self.hidden_keys) | {PROTO_KEY}

    @classmethod
    def from_options(cls, options: Union['FamilyConfig', Mapping[str, Any], None]) -> 'FamilyConfig':
        """Build a config from whatever a caller handed to the constructor.

        Args:
            options: None, an existing FamilyConfig, or a plain mapping such
                as ``{"inherit": [parent]}``. Unknown mapping keys are ignored.

        Returns:
            FamilyConfig instance (the same object if one was passed in)

        Raises:
            TypeError: If options is none of the accepted types
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise TypeError(
                f"options must be a FamilyConfig or a mapping, got {type(options).__name__}"
            )

        config = cls()
        if options.get('inherit') is not None:
            config.inherit = options['inherit']
        if options.get('hidden_keys') is not None:
            hidden = options['hidden_keys']
            # A bare string is left as-is so validate() can reject it
            config.hidden_keys = hidden if isinstance(hidden, (str, bytes)) else frozenset(hidden)
        if 'thread_safe' in options:
            config.thread_safe = options['thread_safe']
        return config

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if isinstance(self.inherit, (str, bytes)) or not isinstance(self.inherit, (list, tuple)):
            errors.append("inherit must be a list of parent stores")

        if isinstance(self.hidden_keys, (str, bytes)):
            errors.append("hidden_keys must be a collection of keys, not a single string")
        else:
            try:
                frozenset(self.hidden_keys)
            except TypeError:
                errors.append("hidden_keys must be a collection of hashable keys")

        if not isinstance(self.thread_safe, bool):
            errors.append("thread_safe must be a bool")

        return errors
