"""assert_function, assert_type and assert_semigroup preconditions.

Combinators call these before running any variant logic. All of them are
skipped when assertions are disabled through configuration
(``VARIANTKIT_ASSERTIONS=none`` or ``init(assertions=False)``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from variantkit._config import get_config
from variantkit.errors import PreconditionError

__all__ = ['assert_function', 'assert_semigroup', 'assert_type', 'concat_values']

# Built-ins that form a semigroup under `+` but have no `concat` method.
_ADDITIVE_SEMIGROUPS = (list, tuple, str, bytes)


def assert_function(method: str, value: object) -> None:
    """Raise PreconditionError unless value is callable.

    Example:
        ```python
        assert_function('Validation.Success#map', lambda x: x)  # passes
        assert_function('Validation.Success#map', 42)  # raises PreconditionError
        ```
    """
    if get_config().assertions and not callable(value):
        raise PreconditionError(method, 'a function', value)


def assert_type(expected: Any, method: str, value: object) -> None:
    """Raise PreconditionError unless value belongs to the expected union or variant.

    Args:
        expected: A union or variant type exposing ``has_instance``.
        method: Qualified name of the calling method, used in the message.
        value: The value to check.
    """
    if get_config().assertions and not expected.has_instance(value):
        name = getattr(expected, 'type_id', None) or expected.__name__
        raise PreconditionError(method, f'a value of type {name}', value)


def _has_concat(value: object) -> bool:
    return callable(getattr(value, 'concat', None)) or isinstance(value, _ADDITIVE_SEMIGROUPS)


def assert_semigroup(method: str, value: object) -> None:
    """Raise PreconditionError unless value can be combined with concat_values()."""
    if get_config().assertions and not _has_concat(value):
        raise PreconditionError(method, 'a semigroup (a value with a `concat` method)', value)


def concat_values(method: str, left: Any, right: Any) -> Any:
    """Combine two semigroup values, left first.

    Values with a ``concat`` method use it; lists, tuples, strings and bytes
    fall back to ``+``.
    """
    assert_semigroup(method, left)
    concat: Callable[[Any], Any] | None = getattr(left, 'concat', None)
    if callable(concat):
        return concat(right)
    return left + right
