"""Closed tagged unions with per-variant method tables.

A union is a frozen ``msgspec.Struct`` type that can never be instantiated
directly; each of its variants is a frozen ``msgspec.Struct`` subclass whose
fields come from the parameter list of the variant's constructor function.

Example:
    ```python
    from variantkit.adt import union, define_method

    Shape = union('example:Shape', {
        'Circle': lambda radius: {'radius': radius},
        'Rect': lambda width, height: {'width': width, 'height': height},
    })

    define_method(Shape, 'area', {
        'Circle': lambda self: 3.14159 * self.radius ** 2,
        'Rect': lambda self: self.width * self.height,
    })

    Shape.Rect(2, 3).area()
    # 6
    Shape.Circle.has_instance(Shape.Rect(2, 3))
    # False
    ```
"""

from __future__ import annotations

import inspect
from contextvars import ContextVar
from collections.abc import Callable, Mapping
from typing import Any

import msgspec
from msgspec.structs import force_setattr

from variantkit.errors import AbstractInstanceError, DefinitionError, NoMatchError

__all__ = ['TaggedUnion', 'define_method', 'define_methods', 'derive', 'union']

# Attributes every union and variant carries; fields and methods may not reuse them.
RESERVED_NAMES = frozenset({
    'derivations',
    'derive',
    'derived_members',
    'fields',
    'has_instance',
    'match_with',
    'methods',
    'tag',
    'type_id',
    'union',
    'variant',
    'variants',
})

WILDCARD = '_'

# Set while rebuilding a stored value, so the variant constructor is not run twice.
_rebuilding: ContextVar[bool] = ContextVar('variantkit_rebuilding', default=False)


class TaggedUnion(msgspec.Struct, frozen=True, eq=False):
    """Base of every union type and, through it, of every variant.

    Class attributes (filled in by :func:`union`):
        type_id: Namespaced type name, e.g. ``'variantkit:Validation'``.
        union: The union type itself (also reachable from its variants).
        variants: The variant types, in declaration order.
        tag: The variant name; None on the union type.
        fields: Field names of a variant, in constructor order.
        methods: Names of the methods installed on a variant.
        derivations: Identifiers of the derivations applied to the union.
        derived_members: Names the derivations installed on the union.
    """

    type_id = None
    union = None
    variants = ()
    tag = None
    fields = ()
    methods = frozenset()
    derivations = frozenset()
    derived_members = frozenset()

    def __post_init__(self) -> None:
        owner = type(self).type_id or type(self).__name__
        names = ', '.join(v.tag for v in type(self).variants) or 'none defined'
        raise AbstractInstanceError(
            'constructor',
            owner,
            f'{owner} is an abstract union and cannot be instantiated; use one of its variants ({names}).',
        )

    @classmethod
    def has_instance(cls, value: object) -> bool:
        """Return True if value belongs to this union (or to this variant, when called on one)."""
        return isinstance(value, cls)

    @classmethod
    def variant(cls, tag: str) -> type[TaggedUnion]:
        """Look up a variant of this union by tag.

        Raises:
            KeyError: If the union has no variant with that tag.
        """
        for variant in cls.variants:
            if variant.tag == tag:
                return variant
        raise KeyError(tag)

    @classmethod
    def derive(cls, *derivations: Callable[..., Any]) -> type[TaggedUnion]:
        """Apply derivations to the owning union and return it, for chaining."""
        return derive(cls, *derivations)

    def match_with(self, cases: Mapping[str, Callable[[Any], Any]]) -> Any:
        """Dispatch on this value's tag.

        ``cases`` maps tags to functions receiving the instance; the ``'_'`` key
        catches every tag without its own case.

        Raises:
            NoMatchError: If neither the tag nor the wildcard has a case.
        """
        if self.tag in cases:
            return cases[self.tag](self)
        if WILDCARD in cases:
            return cases[WILDCARD](self)
        raise NoMatchError(self.tag, tuple(cases))

    @classmethod
    def _rebuild(cls, values: Mapping[str, Any]) -> TaggedUnion:
        """Recreate a variant from stored field values without running its constructor."""
        token = _rebuilding.set(True)
        try:
            return cls(**values)
        finally:
            _rebuilding.reset(token)


def _variant_post_init(self: TaggedUnion) -> None:
    """Run the variant constructor over the initial field values and store its record."""
    if _rebuilding.get():
        return
    cls = type(self)
    record = cls._constructor(*(getattr(self, name) for name in cls.fields))
    if not isinstance(record, Mapping):
        msg = f'The constructor of {cls.__qualname__} must return a mapping of fields, got {record!r}'
        raise DefinitionError(msg)
    unknown = [name for name in record if name not in cls.fields]
    if unknown:
        msg = f'The constructor of {cls.__qualname__} returned undeclared fields: {", ".join(map(str, unknown))}'
        raise DefinitionError(msg)
    for name, value in record.items():
        if getattr(self, name) is not value:
            force_setattr(self, name, value)


def _check_name(kind: str, name: object) -> str:
    if not isinstance(name, str) or not name.isidentifier() or name.startswith('_'):
        msg = f'{kind} names must be public identifiers, got {name!r}'
        raise DefinitionError(msg)
    if name in RESERVED_NAMES:
        msg = f'{kind} name {name!r} is reserved'
        raise DefinitionError(msg)
    return name


def _field_specs(tag: str, constructor: object) -> list[tuple[Any, ...]]:
    """Derive msgspec field specs from a variant constructor's parameters."""
    if not callable(constructor):
        msg = f'The constructor for variant {tag!r} must be callable, got {constructor!r}'
        raise DefinitionError(msg)
    try:
        signature = inspect.signature(constructor)
    except (TypeError, ValueError) as exc:
        msg = f'Cannot read the parameters of the constructor for variant {tag!r}'
        raise DefinitionError(msg) from exc

    specs: list[tuple[Any, ...]] = []
    for param in signature.parameters.values():
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            msg = f'The constructor for variant {tag!r} may only take positional parameters, not {param}'
            raise DefinitionError(msg)
        _check_name('Field', param.name)
        if param.default is param.empty:
            specs.append((param.name, Any))
        else:
            specs.append((param.name, Any, param.default))
    return specs


def union(
    type_id: str,
    variants: Mapping[str, Callable[..., Mapping[str, Any]]],
    *,
    module: str | None = None,
) -> type[TaggedUnion]:
    """Define a closed tagged union.

    Args:
        type_id: Namespaced type name (``'namespace:Name'``); the part after the
            last colon names the generated class.
        variants: Variant name → constructor. A constructor's positional
            parameters declare the variant's fields; it returns a mapping of
            field name → value.
        module: ``__module__`` for the generated classes.

    Returns:
        The union type, with each variant available as an attribute.

    Raises:
        DefinitionError: If the type id, a variant name or a constructor is malformed.
    """
    if not isinstance(type_id, str) or not type_id:
        msg = f'A union needs a non-empty string type id, got {type_id!r}'
        raise DefinitionError(msg)
    name = type_id.rsplit(':', 1)[-1]
    if not name.isidentifier():
        msg = f'The type id {type_id!r} does not end in a valid class name'
        raise DefinitionError(msg)
    if not isinstance(variants, Mapping) or not variants:
        msg = f'Union {type_id!r} needs at least one variant'
        raise DefinitionError(msg)

    specs = {_check_name('Variant', tag): _field_specs(tag, constructor) for tag, constructor in variants.items()}
    module = module or __name__

    union_type = msgspec.defstruct(
        name,
        [],
        bases=(TaggedUnion,),
        module=module,
        frozen=True,
        eq=False,
        namespace={'type_id': type_id},
    )
    union_type.union = union_type

    members: list[type[TaggedUnion]] = []
    for tag, fields in specs.items():
        try:
            variant = msgspec.defstruct(
                tag,
                fields,
                bases=(union_type,),
                module=module,
                frozen=True,
                eq=False,
                namespace={
                    'tag': tag,
                    'fields': tuple(spec[0] for spec in fields),
                    '_constructor': staticmethod(variants[tag]),
                    '__post_init__': _variant_post_init,
                },
            )
        except TypeError as exc:
            msg = f'Cannot build variant {tag!r} of {type_id!r}: {exc}'
            raise DefinitionError(msg) from exc
        variant.__qualname__ = f'{name}.{tag}'
        setattr(union_type, tag, variant)
        members.append(variant)

    union_type.variants = tuple(members)
    return union_type


def _owning_union(value: object) -> type[TaggedUnion]:
    if not (isinstance(value, type) and issubclass(value, TaggedUnion) and value.union is not None):
        msg = f'Expected a union defined with union(), got {value!r}'
        raise DefinitionError(msg)
    return value.union


def _provides(variant: type[TaggedUnion], name: str) -> bool:
    return name in variant.fields or name in vars(variant)


def define_method(
    union_type: type[TaggedUnion],
    name: str,
    implementations: Mapping[str, Callable[..., Any]] | None = None,
    *,
    required: bool = False,
    default: Callable[..., Any] | None = None,
) -> None:
    """Install a method whose implementation differs per variant.

    Args:
        union_type: The union (or any of its variants).
        name: Method name.
        implementations: Variant tag → function taking the instance first.
        required: Only check that every variant provides the member, through
            the table, ``default`` or an existing member of the same name
            (such as a field). Nothing is installed on the union itself.
        default: Implementation for every variant missing from the table.

    Raises:
        DefinitionError: If any variant ends up without an implementation, the
            table names unknown variants, or the name clashes with a field or
            a derived member.
    """
    owner = _owning_union(union_type)
    _check_name('Method', name)
    if name in owner.derived_members:
        msg = f'Method `{name}` of {owner.type_id} is installed by a derivation and cannot vary per variant'
        raise DefinitionError(msg)
    table = dict(implementations or {})

    tags = [variant.tag for variant in owner.variants]
    unknown = [tag for tag in table if tag not in tags]
    if unknown:
        msg = f'Method `{name}` names unknown variants of {owner.type_id}: {", ".join(map(str, unknown))}'
        raise DefinitionError(msg)
    for tag, impl in [*table.items(), ('default', default)]:
        if impl is not None and not callable(impl):
            msg = f'The {tag} implementation of `{name}` must be callable, got {impl!r}'
            raise DefinitionError(msg)

    plan: dict[type[TaggedUnion], Callable[..., Any]] = {}
    missing: list[str] = []
    for variant in owner.variants:
        impl = table.get(variant.tag, default)
        if impl is not None:
            if name in variant.fields:
                msg = f'Method `{name}` would replace a field of {variant.__qualname__}'
                raise DefinitionError(msg)
            plan[variant] = impl
        elif not (required and _provides(variant, name)):
            missing.append(variant.tag)
    if missing:
        msg = f'Method `{name}` of {owner.type_id} is not defined for: {", ".join(missing)}'
        raise DefinitionError(msg)

    for variant, impl in plan.items():
        setattr(variant, name, impl)
        variant.methods = variant.methods | {name}


def derive(union_type: type[TaggedUnion], *derivations: Callable[..., Any]) -> type[TaggedUnion]:
    """Apply generic derivations to a union, once each.

    A derivation is called as ``derivation(variants, union)`` and installs
    shared behaviour on the union type. Derivations expose a
    ``derivation_id``; applying the same id twice is an error, as is a
    derivation installing a name some variant already defines as a method.

    Returns:
        The union type.
    """
    owner = _owning_union(union_type)
    for derivation in derivations:
        if not callable(derivation):
            msg = f'Derivations must be callable, got {derivation!r}'
            raise DefinitionError(msg)
        key = getattr(derivation, 'derivation_id', derivation)
        if key in owner.derivations:
            msg = f'Derivation {key!r} was already applied to {owner.type_id}'
            raise DefinitionError(msg)
        before = set(vars(owner))
        derivation(owner.variants, owner)
        installed = set(vars(owner)) - before
        clashes = sorted(name for variant in owner.variants for name in variant.methods & installed)
        if clashes:
            for name in installed:
                delattr(owner, name)
            msg = f'Derivation {key!r} would override methods of {owner.type_id}: {", ".join(clashes)}'
            raise DefinitionError(msg)
        owner.derivations = owner.derivations | {key}
        owner.derived_members = owner.derived_members | installed
    return owner


def define_methods(
    union_type: type[TaggedUnion],
    tables: Mapping[str, Mapping[str, Callable[..., Any]]],
) -> None:
    """Install several per-variant methods at once: ``{name: {tag: impl}}``.

    Every table is checked before anything is installed.
    """
    owner = _owning_union(union_type)
    tags = {variant.tag for variant in owner.variants}
    for name, table in tables.items():
        if name in owner.derived_members:
            msg = f'Method `{name}` of {owner.type_id} is installed by a derivation and cannot vary per variant'
            raise DefinitionError(msg)
        missing = sorted(tags - set(table))
        if missing:
            msg = f'Method `{name}` of {owner.type_id} is not defined for: {", ".join(missing)}'
            raise DefinitionError(msg)
        unknown = sorted(map(str, set(table) - tags))
        if unknown:
            msg = f'Method `{name}` names unknown variants of {owner.type_id}: {", ".join(unknown)}'
            raise DefinitionError(msg)
    for name, table in tables.items():
        define_method(owner, name, table)
