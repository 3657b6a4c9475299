"""Maybe: Nothing | Just[T], an optional value."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from variantkit.adt import define_method, define_methods, union
from variantkit.adt.derivations import debug_representation, equality, serialization
from variantkit.assertions import assert_function

__all__ = ['Just', 'Maybe', 'Nothing']


Maybe = union(
    'variantkit:Maybe',
    {
        'Nothing': lambda: {},
        'Just': lambda value: {'value': value},
    },
    module=__name__,
).derive(equality, debug_representation, serialization)

Nothing = Maybe.Nothing
Just = Maybe.Just


def _nothing_map(self, transformation: Callable[[Any], Any]):
    assert_function('Maybe.Nothing#map', transformation)
    return self


def _just_map(self, transformation: Callable[[Any], Any]):
    assert_function('Maybe.Just#map', transformation)
    return Just(transformation(self.value))


def _nothing_chain(self, transformation: Callable[[Any], Any]):
    assert_function('Maybe.Nothing#chain', transformation)
    return self


def _just_chain(self, transformation: Callable[[Any], Any]):
    assert_function('Maybe.Just#chain', transformation)
    return transformation(self.value)


define_methods(Maybe, {
    'map': {'Nothing': _nothing_map, 'Just': _just_map},
    'chain': {'Nothing': _nothing_chain, 'Just': _just_chain},
    'get_or_else': {'Nothing': lambda self, default: default, 'Just': lambda self, default: self.value},
})


def _to_validation(self, fallback: Any = None):
    from variantkit.conversions import maybe_to_validation

    return maybe_to_validation(self, fallback)


define_method(Maybe, 'to_validation', default=_to_validation)

Maybe.of = staticmethod(Just)
