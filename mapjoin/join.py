"""
Join two mappings by key.

The join walks the left mapping first, then the right one, and hands every key
to a select predicate. Keys it accepts go through `resolve`, and the result is
yielded. Keys present in both mappings are handled in the left pass only:

    for key, left_value in left:              # pass 1
        right_value = right.get(key, MISSING)
        ...
    for key, right_value in right:            # pass 2, right-only keys
        ...

Argument checks happen when `join` is called; rows are produced lazily as the
returned iterator is consumed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterator, Mapping as MappingT, TypeVar, Union

from .errors import ValidationError
from .predicates import (
    MISSING,
    Missing,
    Select,
    SelectOrType,
    full_select,
    inner_select,
    left_outer_select,
    left_select,
    outer_select,
    predicate_for_type,
    right_outer_select,
    right_select,
)


logger = logging.getLogger(__name__)

K = TypeVar("K")
L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")

Resolve = Callable[[Union[L, Missing], Union[R, Missing], K], U]


def join(
    left: MappingT[K, L],
    right: MappingT[K, R],
    select_or_type: SelectOrType,
    resolve: Resolve,
) -> Iterator[U]:
    """
    Join `left` and `right`.

    - `select_or_type`: a JoinType (or its string value) or a custom
      ``select(left_value, right_value, key) -> bool`` function
    - `resolve`: ``resolve(left_value, right_value, key)`` builds one output
      element per selected key. The missing side is passed as `MISSING`.

    Returns an iterator; nothing is selected or resolved until it is consumed.
    """
    if not isinstance(left, Mapping) or not isinstance(right, Mapping):
        raise ValidationError("Left and right members must be Mapping instances")

    if callable(select_or_type):
        select = select_or_type
    else:
        select = predicate_for_type(select_or_type)

    if not callable(resolve):
        raise ValidationError("A resolve function is required")

    logger.debug(
        "Joining %d left keys with %d right keys using %r",
        len(left),
        len(right),
        select_or_type,
    )
    return _iterate(left, right, select, resolve)


def _iterate(
    left: MappingT[K, L],
    right: MappingT[K, R],
    select: Select,
    resolve: Resolve,
) -> Iterator[Any]:
    for key, left_value in left.items():
        right_value = right.get(key, MISSING)
        if select(left_value, right_value, key):
            yield resolve(left_value, right_value, key)

    for key, right_value in right.items():
        # Already evaluated in the left pass, matched or not.
        if key in left:
            continue
        if select(MISSING, right_value, key):
            yield resolve(MISSING, right_value, key)


# ----------------------------------------------------------------------
# Named joins
# ----------------------------------------------------------------------
def left_join(
    left: MappingT[K, L],
    right: MappingT[K, R],
    resolve: Callable[[L, Union[R, Missing], K], U],
) -> Iterator[U]:
    """Keep every key of `left`; `right_value` may be MISSING."""
    return join(left, right, left_select, resolve)


def right_join(
    left: MappingT[K, L],
    right: MappingT[K, R],
    resolve: Callable[[Union[L, Missing], R, K], U],
) -> Iterator[U]:
    """Keep every key of `right`; `left_value` may be MISSING."""
    return join(left, right, right_select, resolve)


def inner_join(
    left: MappingT[K, L],
    right: MappingT[K, R],
    resolve: Callable[[L, R, K], U],
) -> Iterator[U]:
    """Keep keys present in both mappings."""
    return join(left, right, inner_select, resolve)


def outer_join(
    left: MappingT[K, L],
    right: MappingT[K, R],
    resolve: Callable[[Union[L, Missing], Union[R, Missing], K], U],
) -> Iterator[U]:
    """Keep keys present in exactly one of the mappings."""
    return join(left, right, outer_select, resolve)


def full_join(
    left: MappingT[K, L],
    right: MappingT[K, R],
    resolve: Callable[[Union[L, Missing], Union[R, Missing], K], U],
) -> Iterator[U]:
    """Keep every key of either mapping."""
    return join(left, right, full_select, resolve)


def left_outer_join(
    left: MappingT[K, L],
    right: MappingT[K, Any],
    resolve: Callable[[L, Missing, K], U],
) -> Iterator[U]:
    """Keep keys only found in `left`; `right_value` is always MISSING."""
    return join(left, right, left_outer_select, resolve)


def right_outer_join(
    left: MappingT[K, Any],
    right: MappingT[K, R],
    resolve: Callable[[Missing, R, K], U],
) -> Iterator[U]:
    """Keep keys only found in `right`; `left_value` is always MISSING."""
    return join(left, right, right_outer_select, resolve)
