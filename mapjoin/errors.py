"""
Exceptions raised by the join helpers.

Everything derives from the matching built-in type so callers that already
catch ``TypeError`` / ``ValueError`` keep working.
"""

from __future__ import annotations

from typing import Any


class JoinError(Exception):
    """Base class for all mapjoin errors."""


class ValidationError(JoinError, TypeError):
    """
    Raised synchronously when a call is malformed: non-mapping inputs,
    a non-callable resolve function, an unknown collision mode.
    """


class UnknownJoinTypeError(ValidationError, ValueError):
    def __init__(self, join_type: Any) -> None:
        super().__init__(f"Unexpected join type: {join_type!r}")
        self.join_type = join_type


class DuplicateKeyError(JoinError, ValueError):
    def __init__(self, key: Any) -> None:
        super().__init__(f"Key {key!r} already exists")
        self.key = key
