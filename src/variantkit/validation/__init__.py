"""Validation type: Failure, Success and module-level helpers."""

from variantkit.validation.validation import (
    Failure,
    Success,
    Validation,
    collect,
    from_maybe,
    from_nullable,
    from_result,
)

__all__ = [
    'Failure',
    'Success',
    'Validation',
    'collect',
    'from_maybe',
    'from_nullable',
    'from_result',
]
