"""Tagged unions: union(), define_method(), derive() and the derivations."""

from variantkit.adt import derivations
from variantkit.adt.union import TaggedUnion, define_method, define_methods, derive, union

__all__ = [
    'TaggedUnion',
    'define_method',
    'define_methods',
    'derivations',
    'derive',
    'union',
]
