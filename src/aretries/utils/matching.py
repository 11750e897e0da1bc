r"""Deep partial matching of errors against shape patterns.

``is_match`` is the default strategy used by ``if_error_matches`` for
mapping patterns. It checks that every key of the pattern is present on
the candidate (as a mapping key or an attribute) with a matching value;
keys absent from the pattern are ignored.

Strings, bytes and numbers are compared with ``==``. Other leaf values are
compared with ``coola``, which is imported on first use so that callers
who only match scalars, predicates or exception classes never need it
installed.
"""

from __future__ import annotations

__all__ = ["MatchStrategy", "is_match"]

import numbers
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias

MatchStrategy: TypeAlias = Callable[[Any, Any], bool]

_MISSING = object()

_SCALAR_TYPES = (str, bytes, numbers.Number)


def is_match(obj: Any, pattern: Any) -> bool:
    """Return whether ``obj`` partially matches ``pattern``.

    Matching rules:
    - mapping pattern: every key must resolve on ``obj`` (``obj[key]``
      for mappings, ``getattr(obj, key)`` otherwise) to a value that
      matches the pattern value, recursively.
    - list or tuple pattern: ``obj`` must be a non-string sequence and
      every pattern element must match at least one of its elements.
    - string, bytes or number pattern: ``obj`` must be a string, bytes
      or number comparing equal with ``==``, so a ``str`` enum member
      matches its value and ``503.0`` matches ``503``.
    - anything else: ``obj`` must be equal to the pattern, as compared
      by ``coola``.

    Args:
        obj: The candidate, typically an exception.
        pattern: The partial shape to look for.

    Returns:
        ``True`` if the candidate matches the pattern.

    Example:
        ```pycon
        >>> from aretries.utils.matching import is_match
        >>> class DatabaseError(Exception):
        ...     def __init__(self, code):
        ...         super().__init__(code)
        ...         self.code = code
        ...
        >>> is_match(DatabaseError("DB_INSUFFICIENT_SCALE"), {"code": "DB_INSUFFICIENT_SCALE"})
        True
        >>> is_match(DatabaseError("DB_LOCKED"), {"code": "DB_INSUFFICIENT_SCALE"})
        False
        >>> is_match({"meta": {"status": 503, "region": "eu"}}, {"meta": {"status": 503}})
        True

        ```
    """
    if isinstance(pattern, Mapping):
        for key, expected in pattern.items():
            actual = _lookup(obj, key)
            if actual is _MISSING or not is_match(actual, expected):
                return False
        return True
    if isinstance(pattern, (list, tuple)):
        if not _is_sequence(obj):
            return False
        return all(any(is_match(item, expected) for item in obj) for expected in pattern)
    return _leaf_equal(obj, pattern)


def _lookup(obj: Any, key: Any) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    if not isinstance(key, str):
        return _MISSING
    return getattr(obj, key, _MISSING)


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def _leaf_equal(actual: Any, expected: Any) -> bool:
    if isinstance(actual, _SCALAR_TYPES) and isinstance(expected, _SCALAR_TYPES):
        return bool(actual == expected)
    from coola.equality import objects_are_equal

    return objects_are_equal(actual, expected)
