"""
Built-in select predicates, one per join type.

A predicate is called as ``select(left_value, right_value, key)`` where the
side missing the key is passed as `MISSING`. It never sees both sides missing.
Stored values, None included, always count as present.
The key is accepted by every built-in predicate but does not affect the result.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Union

from .errors import UnknownJoinTypeError


class Missing:
    """
    Marker for the side of a join a key is absent from.

    Falsy, so ``left["value"] if left else 0`` style resolvers keep working.
    """

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing()

Select = Callable[[Any, Any, Any], bool]


class JoinType(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    INNER = "inner"
    OUTER = "outer"
    FULL = "full"
    LEFT_OUTER = "leftOuter"
    RIGHT_OUTER = "rightOuter"


SelectOrType = Union[Select, JoinType, str]


def left_select(left: Any, right: Any, key: Any = None) -> bool:
    return left is not MISSING


def right_select(left: Any, right: Any, key: Any = None) -> bool:
    return right is not MISSING


def inner_select(left: Any, right: Any, key: Any = None) -> bool:
    return left is not MISSING and right is not MISSING


def outer_select(left: Any, right: Any, key: Any = None) -> bool:
    # Both sides missing cannot happen, so this is "exactly one side present".
    return not (left is not MISSING and right is not MISSING)


def full_select(left: Any, right: Any, key: Any = None) -> bool:
    return left is not MISSING or right is not MISSING


def left_outer_select(left: Any, right: Any, key: Any = None) -> bool:
    return left is not MISSING and right is MISSING


def right_outer_select(left: Any, right: Any, key: Any = None) -> bool:
    return right is not MISSING and left is MISSING


def never_select(left: Any, right: Any, key: Any = None) -> bool:
    return False


_SELECTS: Dict[JoinType, Select] = {
    JoinType.LEFT: left_select,
    JoinType.RIGHT: right_select,
    JoinType.INNER: inner_select,
    JoinType.OUTER: outer_select,
    JoinType.FULL: full_select,
    JoinType.LEFT_OUTER: left_outer_select,
    JoinType.RIGHT_OUTER: right_outer_select,
}


def as_join_type(value: Any) -> JoinType:
    """
    Coerce a JoinType or its string value, e.g. ``"leftOuter"``.
    """
    if isinstance(value, JoinType):
        return value
    try:
        return JoinType(value)
    except (TypeError, ValueError) as exc:
        raise UnknownJoinTypeError(value) from exc


def predicate_for_type(join_type: Union[JoinType, str]) -> Select:
    """
    Return the select function for a named join type.
    """
    return _SELECTS[as_join_type(join_type)]
