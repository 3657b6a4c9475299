"""variantkit: closed tagged unions for Python, and a Validation type built on them.

Flat imports (preferred):
    from variantkit import Validation, Failure, Success
    from variantkit import union, define_method, derive

Submodule imports (for organization):
    from variantkit.adt import union, define_method, derive
    from variantkit.adt.derivations import equality, debug_representation, serialization
    from variantkit.validation import Validation, Failure, Success, collect
"""

# Configuration
from variantkit._config import Settings, get_config, init

# ADT core
from variantkit.adt import TaggedUnion, define_method, define_methods, derive, union
from variantkit.adt.derivations import debug_representation, decode, encode, equality, serialization

# Errors
from variantkit.errors import (
    AbstractInstanceError,
    DefinitionError,
    NoMatchError,
    PartialityError,
    PreconditionError,
    SerializationError,
    VariantkitError,
)

# Sibling types
from variantkit.maybe import Just, Maybe, Nothing
from variantkit.result import Error, Ok, Result

# Validation
from variantkit.validation import (
    Failure,
    Success,
    Validation,
    collect,
    from_maybe,
    from_nullable,
    from_result,
)

__all__ = [
    # Errors
    'AbstractInstanceError',
    'DefinitionError',
    # Sibling types
    'Error',
    # Validation
    'Failure',
    'Just',
    'Maybe',
    'NoMatchError',
    'Nothing',
    'Ok',
    'PartialityError',
    'PreconditionError',
    'Result',
    'SerializationError',
    # Configuration
    'Settings',
    'Success',
    # ADT core
    'TaggedUnion',
    'Validation',
    'VariantkitError',
    'collect',
    'debug_representation',
    'decode',
    'define_method',
    'define_methods',
    'derive',
    'encode',
    'equality',
    'from_maybe',
    'from_nullable',
    'from_result',
    'get_config',
    'init',
    'serialization',
    'union',
]
