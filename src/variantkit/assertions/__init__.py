"""Assertion utilities: argument preconditions for combinators."""

from variantkit.assertions.preconditions import assert_function, assert_semigroup, assert_type, concat_values

__all__ = [
    'assert_function',
    'assert_semigroup',
    'assert_type',
    'concat_values',
]
