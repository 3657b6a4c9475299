"""Structural equality for union values.

Installs ``equals``, ``__eq__``, ``__ne__`` and ``__hash__`` on the union type.
Two values are equal when they belong to the same union, carry the same tag,
and every field compares equal.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from variantkit.adt.union import TaggedUnion

__all__ = ['equality', 'structural_equals']


def structural_equals(left: Any, right: Any) -> bool:
    """Compare two field values.

    Identical values are equal. A value with its own ``equals`` decides for
    itself. Lists and tuples compare element-wise against the same kind of
    sequence, mappings key-wise; everything else falls back to ``==``.
    """
    if left is right:
        return True
    equals = getattr(left, 'equals', None)
    if callable(equals) and not isinstance(left, type):
        return bool(equals(right))
    if isinstance(left, (list, tuple)) and type(left) is type(right):
        return len(left) == len(right) and all(map(structural_equals, left, right))
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return left.keys() == right.keys() and all(structural_equals(left[key], right[key]) for key in left)
    return bool(left == right)


def _field_values(value: TaggedUnion) -> Sequence[Any]:
    return [getattr(value, name) for name in value.fields]


def _hash_fields(value: TaggedUnion) -> int:
    return hash((value.type_id, value.tag, *_field_values(value)))


def _hash_tag(value: TaggedUnion) -> int:
    # A custom comparison may equate values whose fields hash differently.
    return hash((value.type_id, value.tag))


def _create_derivation(
    values_equal: Callable[[Any, Any], bool],
    hash_value: Callable[[TaggedUnion], int],
) -> Callable[..., None]:
    def equality(variants: Sequence[type[TaggedUnion]], union_type: type[TaggedUnion]) -> None:
        def equals(self: TaggedUnion, other: object) -> bool:
            if not union_type.has_instance(other) or other.tag != self.tag:
                return False
            return all(map(values_equal, _field_values(self), _field_values(other)))

        def __eq__(self: TaggedUnion, other: object) -> bool:
            if not isinstance(other, TaggedUnion):
                return NotImplemented
            return self.equals(other)

        def __ne__(self: TaggedUnion, other: object) -> bool:
            result = __eq__(self, other)
            return result if result is NotImplemented else not result

        union_type.equals = equals
        union_type.__eq__ = __eq__
        union_type.__ne__ = __ne__
        union_type.__hash__ = hash_value

    equality.derivation_id = 'equality'
    equality.with_custom_comparison = with_custom_comparison
    return equality


def with_custom_comparison(values_equal: Callable[[Any, Any], bool]) -> Callable[..., None]:
    """Build the equality derivation around ``values_equal(left, right)`` for fields.

    Values hash on their union and tag only, so any two values the comparison
    equates still hash alike.
    """
    return _create_derivation(values_equal, _hash_tag)


equality = _create_derivation(structural_equals, _hash_fields)
"""Derive structural equality.

``equality.with_custom_comparison(fn)`` builds the same derivation around a
custom ``fn(left, right) -> bool`` field comparison.
"""
