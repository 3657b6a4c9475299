"""Result: Error[E] | Ok[T], the short-circuiting sibling of Validation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from variantkit.adt import define_method, define_methods, union
from variantkit.adt.derivations import debug_representation, equality, serialization
from variantkit.assertions import assert_function

__all__ = ['Error', 'Ok', 'Result']


Result = union(
    'variantkit:Result',
    {
        'Error': lambda value: {'value': value},
        'Ok': lambda value: {'value': value},
    },
    module=__name__,
).derive(equality, debug_representation, serialization)

Error = Result.Error
Ok = Result.Ok

define_method(Result, 'value', required=True)


def _error_map(self, transformation: Callable[[Any], Any]):
    assert_function('Result.Error#map', transformation)
    return self


def _ok_map(self, transformation: Callable[[Any], Any]):
    assert_function('Result.Ok#map', transformation)
    return Ok(transformation(self.value))


def _error_map_error(self, transformation: Callable[[Any], Any]):
    assert_function('Result.Error#map_error', transformation)
    return Error(transformation(self.value))


def _ok_map_error(self, transformation: Callable[[Any], Any]):
    assert_function('Result.Ok#map_error', transformation)
    return self


def _error_chain(self, transformation: Callable[[Any], Any]):
    assert_function('Result.Error#chain', transformation)
    return self


def _ok_chain(self, transformation: Callable[[Any], Any]):
    assert_function('Result.Ok#chain', transformation)
    return transformation(self.value)


def _error_fold(self, on_error: Callable[[Any], Any], on_ok: Callable[[Any], Any]):
    assert_function('Result.Error#fold', on_error)
    assert_function('Result.Error#fold', on_ok)
    return on_error(self.value)


def _ok_fold(self, on_error: Callable[[Any], Any], on_ok: Callable[[Any], Any]):
    assert_function('Result.Ok#fold', on_error)
    assert_function('Result.Ok#fold', on_ok)
    return on_ok(self.value)


define_methods(Result, {
    'map': {'Error': _error_map, 'Ok': _ok_map},
    'map_error': {'Error': _error_map_error, 'Ok': _ok_map_error},
    'chain': {'Error': _error_chain, 'Ok': _ok_chain},
    'get_or_else': {'Error': lambda self, default: default, 'Ok': lambda self, default: self.value},
    'fold': {'Error': _error_fold, 'Ok': _ok_fold},
})


def _to_validation(self):
    from variantkit.conversions import result_to_validation

    return result_to_validation(self)


define_method(Result, 'to_validation', default=_to_validation)

Result.of = staticmethod(Ok)
