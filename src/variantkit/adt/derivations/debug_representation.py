"""Readable representations: ``Validation.Success(value: 42)``."""

from __future__ import annotations

import reprlib
from collections.abc import Sequence

from variantkit.adt.union import TaggedUnion

__all__ = ['debug_representation']


def short_name(type_id: str) -> str:
    """Drop the namespace from a type id: ``'variantkit:Validation'`` → ``'Validation'``."""
    return type_id.rsplit(':', 1)[-1]


def debug_representation(variants: Sequence[type[TaggedUnion]], union_type: type[TaggedUnion]) -> None:
    """Install ``to_string``, ``__repr__`` and ``__str__`` on the union.

    Fields render in constructor order using their own ``repr``, so nested
    union values render recursively. Self-referential values render as ``...``.
    """
    type_name = short_name(union_type.type_id)

    @reprlib.recursive_repr()
    def to_string(self: TaggedUnion) -> str:
        body = ', '.join(f'{name}: {getattr(self, name)!r}' for name in self.fields)
        return f'{type_name}.{self.tag}({body})'

    union_type.to_string = to_string
    union_type.__repr__ = to_string
    union_type.__str__ = to_string


debug_representation.derivation_id = 'debug_representation'
