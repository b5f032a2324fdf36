"""
Keyed collection builder.

Turns an arbitrary iterable into a ``dict`` keyed by a caller supplied
function, which is the input shape the join helpers expect. Internally this
is a thin wrapper around a Python dict; the only interesting part is how
key collisions are handled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, Optional, TypeVar

from .errors import DuplicateKeyError, ValidationError


logger = logging.getLogger(__name__)

T = TypeVar("T")

COLLISION_MODES = {"ignore", "override"}


@dataclass
class KeyedIndex:
    """
    Dict-backed index enforcing a collision mode on insert.

    mode:
      - None: duplicate keys raise DuplicateKeyError
      - "ignore": the first value for a key wins
      - "override": the last value for a key wins
    """

    mode: Optional[str] = None
    _entries: Dict[Hashable, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.mode is not None and self.mode not in COLLISION_MODES:
            raise ValidationError(
                f"Unsupported collision mode {self.mode!r}. "
                f"Supported modes: {sorted(COLLISION_MODES)}"
            )

    def insert(self, key: Hashable, value: Any) -> None:
        """
        Insert a key->value mapping, applying the collision mode.
        """
        if key not in self._entries:
            self._entries[key] = value
            return

        if self.mode == "override":
            logger.debug("Overriding value for duplicate key %r", key)
            self._entries[key] = value
        elif self.mode == "ignore":
            logger.debug("Ignoring value for duplicate key %r", key)
        else:
            raise DuplicateKeyError(key)

    def as_dict(self) -> Dict[Hashable, Any]:
        return self._entries

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def from_iterable(
    iterable: Iterable[T],
    key_fn: Callable[[T, int], Hashable],
    mode: Optional[str] = None,
) -> Dict[Hashable, T]:
    """
    Build a dict from `iterable`, keyed by ``key_fn(value, index)``.

    `index` is the zero-based position of the value in the iterable.
    See `KeyedIndex` for the accepted `mode` values.
    """
    index = KeyedIndex(mode=mode)
    for position, value in enumerate(iterable):
        index.insert(key_fn(value, position), value)

    logger.debug("Built keyed collection with %d keys", len(index))
    return index.as_dict()
