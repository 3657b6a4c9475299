"""Validation: Failure[F] | Success[S] with failure accumulation.

Unlike a short-circuiting Result, chaining ``apply`` (or ``concat``) over
several Failures combines all of their payloads, which must therefore form a
semigroup: values with a ``concat`` method, or lists, tuples and strings.

Example:
    ```python
    from variantkit.validation import Failure, Success

    def check_name(name):
        return Success(name) if name else Failure(['name is required'])

    def check_age(age):
        return Success(age) if age >= 0 else Failure(['age must be non-negative'])

    Success(lambda name: lambda age: {'name': name, 'age': age}) \\
        .apply(check_name('')) \\
        .apply(check_age(-1))
    # Validation.Failure(value: ['name is required', 'age must be non-negative'])
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from variantkit._diagnostics import deprecated
from variantkit.adt import define_method, define_methods, union
from variantkit.adt.derivations import debug_representation, equality, serialization
from variantkit.assertions import assert_function, assert_type, concat_values
from variantkit.errors import PartialityError

__all__ = ['Failure', 'Success', 'Validation', 'collect', 'from_maybe', 'from_nullable', 'from_result']


Validation = union(
    'variantkit:Validation',
    {
        'Failure': lambda value: {'value': value},
        'Success': lambda value: {'value': value},
    },
    module=__name__,
).derive(equality, debug_representation, serialization)

Failure = Validation.Failure
Success = Validation.Success

# Every variant carries `value`; the union itself has none.
define_method(Validation, 'value', required=True)


# --- map ---


def _failure_map(self, transformation: Callable[[Any], Any]):
    assert_function('Validation.Failure#map', transformation)
    return self


def _success_map(self, transformation: Callable[[Any], Any]):
    assert_function('Validation.Success#map', transformation)
    return Success(transformation(self.value))


# --- apply ---


def _failure_apply(self, other):
    assert_type(Validation, 'Validation.Failure#apply', other)
    if Failure.has_instance(other):
        return Failure(concat_values('Validation.Failure#apply', self.value, other.value))
    return self


def _success_apply(self, other):
    assert_type(Validation, 'Validation.Success#apply', other)
    if Failure.has_instance(other):
        return other
    return other.map(self.value)


# --- extraction ---


def _failure_unsafe_get(self):
    raise PartialityError(
        "Can't extract the value of a Failure.\n\n"
        'Failure does not contain a normal value - it contains an error.',
        alternatives=('get_or_else', 'fold', 'merge'),
    )


def _success_unsafe_get(self):
    return self.value


def _failure_get_or_else(self, default):
    return default


def _success_get_or_else(self, default):
    return self.value


# --- recovery and combination ---


def _failure_or_else(self, handler: Callable[[Any], Any]):
    assert_function('Validation.Failure#or_else', handler)
    return handler(self.value)


def _success_or_else(self, handler: Callable[[Any], Any]):
    assert_function('Validation.Success#or_else', handler)
    return self


def _failure_concat(self, other):
    assert_type(Validation, 'Validation.Failure#concat', other)
    if Failure.has_instance(other):
        return Failure(concat_values('Validation.Failure#concat', self.value, other.value))
    return self


def _success_concat(self, other):
    assert_type(Validation, 'Validation.Success#concat', other)
    return other


# --- folding and reshaping ---


def _failure_fold(self, on_failure: Callable[[Any], Any], on_success: Callable[[Any], Any]):
    assert_function('Validation.Failure#fold', on_failure)
    assert_function('Validation.Failure#fold', on_success)
    return on_failure(self.value)


def _success_fold(self, on_failure: Callable[[Any], Any], on_success: Callable[[Any], Any]):
    assert_function('Validation.Success#fold', on_failure)
    assert_function('Validation.Success#fold', on_success)
    return on_success(self.value)


def _failure_swap(self):
    return Success(self.value)


def _success_swap(self):
    return Failure(self.value)


def _failure_bimap(self, on_failure: Callable[[Any], Any], on_success: Callable[[Any], Any]):
    assert_function('Validation.Failure#bimap', on_failure)
    assert_function('Validation.Failure#bimap', on_success)
    return Failure(on_failure(self.value))


def _success_bimap(self, on_failure: Callable[[Any], Any], on_success: Callable[[Any], Any]):
    assert_function('Validation.Success#bimap', on_failure)
    assert_function('Validation.Success#bimap', on_success)
    return Success(on_success(self.value))


def _failure_map_failure(self, transformation: Callable[[Any], Any]):
    assert_function('Validation.Failure#map_failure', transformation)
    return Failure(transformation(self.value))


def _success_map_failure(self, transformation: Callable[[Any], Any]):
    assert_function('Validation.Success#map_failure', transformation)
    return self


define_methods(Validation, {
    'map': {'Failure': _failure_map, 'Success': _success_map},
    'apply': {'Failure': _failure_apply, 'Success': _success_apply},
    'unsafe_get': {'Failure': _failure_unsafe_get, 'Success': _success_unsafe_get},
    'get_or_else': {'Failure': _failure_get_or_else, 'Success': _success_get_or_else},
    'or_else': {'Failure': _failure_or_else, 'Success': _success_or_else},
    'concat': {'Failure': _failure_concat, 'Success': _success_concat},
    'fold': {'Failure': _failure_fold, 'Success': _success_fold},
    'swap': {'Failure': _failure_swap, 'Success': _success_swap},
    'bimap': {'Failure': _failure_bimap, 'Success': _success_bimap},
    'map_failure': {'Failure': _failure_map_failure, 'Success': _success_map_failure},
})


# --- shared across both variants ---


def _merge(self):
    """Return the payload, whichever variant holds it."""
    return self.value


@deprecated('`.get()` is deprecated, and has been renamed to `.unsafe_get()`.')
def _get(self):
    """Deprecated spelling of unsafe_get()."""
    return self.unsafe_get()


def _to_result(self):
    """Failure → Error, Success → Ok, keeping the payload."""
    from variantkit.conversions import validation_to_result

    return validation_to_result(self)


def _to_maybe(self):
    """Failure → Nothing, Success → Just(value); the failure payload is dropped."""
    from variantkit.conversions import validation_to_maybe

    return validation_to_maybe(self)


define_method(Validation, 'merge', default=_merge)
define_method(Validation, 'get', default=_get)
define_method(Validation, 'to_result', default=_to_result)
define_method(Validation, 'to_maybe', default=_to_maybe)

Validation.of = staticmethod(Success)


def collect(validations: Iterable[Any]):
    """Combine validations with concat, accumulating every Failure.

    Returns the accumulated Failure if any input failed, otherwise the last
    Success (``Success(None)`` for an empty input).

    Examples:
        >>> collect([Success(1), Failure(['a']), Failure(['b'])])
        Validation.Failure(value: ['a', 'b'])
        >>> collect([Success(1), Success(2)])
        Validation.Success(value: 2)
    """
    combined = Success(None)
    for validation in validations:
        combined = combined.concat(validation)
    return combined


def from_nullable(value: Any, fallback: Any = None):
    """Success(value) unless value is None, in which case Failure(fallback)."""
    if value is None:
        return Failure(fallback)
    return Success(value)


def from_result(result: Any):
    """Error(e) → Failure(e); Ok(v) → Success(v)."""
    from variantkit.conversions import result_to_validation

    return result_to_validation(result)


def from_maybe(maybe: Any, fallback: Any = None):
    """Nothing() → Failure(fallback); Just(v) → Success(v)."""
    from variantkit.conversions import maybe_to_validation

    return maybe_to_validation(maybe, fallback)
