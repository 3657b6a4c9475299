"""Generic derivations: equality, debug_representation, serialization."""

from variantkit.adt.derivations.debug_representation import debug_representation
from variantkit.adt.derivations.equality import equality
from variantkit.adt.derivations.serialization import decode, encode, serialization

__all__ = [
    'debug_representation',
    'decode',
    'encode',
    'equality',
    'serialization',
]
