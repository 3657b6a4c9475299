"""Error types raised by the ADT machinery and its combinators.

These are programmer errors, not domain errors: they surface immediately to the
caller and are never wrapped in a Validation.
"""

from __future__ import annotations

__all__ = [
    'AbstractInstanceError',
    'DefinitionError',
    'NoMatchError',
    'PartialityError',
    'PreconditionError',
    'SerializationError',
    'VariantkitError',
]


class VariantkitError(Exception):
    """Base class for every error raised by variantkit."""


# --- Call-time errors ---


class PreconditionError(VariantkitError, TypeError):
    """A combinator received an argument of the wrong kind."""

    def __init__(self, method: str, expected: str, received: object) -> None:
        self.method = method
        self.expected = expected
        self.received = received
        super().__init__(f'{method} expects {expected}, but was given {received!r}.')


class PartialityError(VariantkitError, TypeError):
    """A partial operation was used on a value it is not defined for."""

    def __init__(self, message: str, alternatives: tuple[str, ...] = ()) -> None:
        self.alternatives = alternatives
        if alternatives:
            names = ', '.join(f'`{name}`' for name in alternatives)
            message = f'{message}\n\nYou might consider using {names} instead, which are not partial.'
        super().__init__(message)


class AbstractInstanceError(VariantkitError, TypeError):
    """An abstract union member was reached instead of a concrete variant's."""

    def __init__(self, member: str, owner: str, message: str | None = None) -> None:
        self.member = member
        self.owner = owner
        super().__init__(message or f'`{member}` can’t be accessed in an abstract instance of {owner}.')


class NoMatchError(VariantkitError, ValueError):
    """match_with() found neither the tag nor a wildcard case."""

    def __init__(self, tag: str, cases: tuple[str, ...]) -> None:
        self.tag = tag
        self.cases = cases
        super().__init__(f'No case for variant {tag!r} (cases given: {", ".join(cases) or "none"}).')


class SerializationError(VariantkitError, ValueError):
    """Serialized data does not describe a value of the expected union."""


# --- Definition-time errors ---


class DefinitionError(VariantkitError, TypeError):
    """A union, variant constructor or method table is malformed."""
