"""Conversions between Validation, Result and Maybe.

Payloads pass through unchanged, except where the target has nowhere to keep
them (a Failure's payload is dropped when it becomes Nothing).
"""

from __future__ import annotations

from typing import Any

from variantkit.assertions import assert_type
from variantkit.maybe import Just, Maybe, Nothing
from variantkit.result import Error, Ok, Result
from variantkit.validation.validation import Failure, Success, Validation

__all__ = [
    'maybe_to_validation',
    'result_to_validation',
    'validation_to_maybe',
    'validation_to_result',
]


def validation_to_result(validation: Any) -> Any:
    """Failure(e) → Error(e); Success(v) → Ok(v)."""
    assert_type(Validation, 'validation_to_result', validation)
    return validation.match_with({
        'Failure': lambda failure: Error(failure.value),
        'Success': lambda success: Ok(success.value),
    })


def validation_to_maybe(validation: Any) -> Any:
    """Failure(_) → Nothing(); Success(v) → Just(v)."""
    assert_type(Validation, 'validation_to_maybe', validation)
    return validation.match_with({
        'Failure': lambda _: Nothing(),
        'Success': lambda success: Just(success.value),
    })


def result_to_validation(result: Any) -> Any:
    """Error(e) → Failure(e); Ok(v) → Success(v)."""
    assert_type(Result, 'result_to_validation', result)
    return result.match_with({
        'Error': lambda error: Failure(error.value),
        'Ok': lambda ok: Success(ok.value),
    })


def maybe_to_validation(maybe: Any, fallback: Any = None) -> Any:
    """Nothing() → Failure(fallback); Just(v) → Success(v)."""
    assert_type(Maybe, 'maybe_to_validation', maybe)
    return maybe.match_with({
        'Nothing': lambda _: Failure(fallback),
        'Just': lambda just: Success(just.value),
    })
