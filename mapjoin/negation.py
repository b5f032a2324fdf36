"""
Logical complement of a join type or select function.

For every input ``x`` and every call ``(left, right, key)``::

    negate(x)(left, right, key) == (not x(left, right, key))

Named types map onto other named types where one exists. ``full`` selects every
key, so its complement is a predicate that selects nothing.
"""

from __future__ import annotations

from typing import Dict, Union

from .predicates import JoinType, Select, SelectOrType, as_join_type, never_select


_COMPLEMENTS: Dict[JoinType, Union[JoinType, Select]] = {
    JoinType.LEFT: JoinType.RIGHT_OUTER,
    JoinType.RIGHT: JoinType.LEFT_OUTER,
    JoinType.INNER: JoinType.OUTER,
    JoinType.OUTER: JoinType.INNER,
    JoinType.FULL: never_select,
    JoinType.LEFT_OUTER: JoinType.RIGHT,
    JoinType.RIGHT_OUTER: JoinType.LEFT,
}


def negate(select_or_type: SelectOrType) -> Union[JoinType, Select]:
    """
    Return the complement of a select function or named join type.
    """
    if callable(select_or_type):
        select = select_or_type

        def negated(left, right, key):
            return not select(left, right, key)

        return negated
    return _COMPLEMENTS[as_join_type(select_or_type)]
