"""Tagged plain-data serialization for union values.

Serialized form:

    {'@@type': 'variantkit:Validation', '@@tag': 'Success', 'values': {'value': 42}}

Nested union values serialize to the same tagged form and are parsed back when
their union is among the parsers given to ``from_json``. Stored field values are
restored as they are; the variant constructor does not run a second time. Byte-level
``encode``/``decode`` go through ``msgspec.json``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeAlias

import msgspec

from variantkit.adt.union import TaggedUnion
from variantkit.errors import SerializationError

__all__ = ['TAG_KEY', 'TYPE_KEY', 'VALUES_KEY', 'decode', 'encode', 'serialization']

TYPE_KEY = '@@type'
TAG_KEY = '@@tag'
VALUES_KEY = 'values'

Parsers: TypeAlias = Mapping[str, type[TaggedUnion]] | Iterable[type[TaggedUnion]]


def serialize_value(value: Any) -> Any:
    """Turn a field value into plain data, serializing nested union values."""
    to_json = getattr(value, 'to_json', None)
    if callable(to_json) and not isinstance(value, type):
        return to_json()
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    if isinstance(value, Mapping):
        return {key: serialize_value(item) for key, item in value.items()}
    return value


def parse_value(parsers: Mapping[str, type[TaggedUnion]], value: Any) -> Any:
    """Inverse of serialize_value for the unions listed in parsers."""
    if isinstance(value, Mapping):
        type_id = value.get(TYPE_KEY)
        if isinstance(type_id, str) and type_id in parsers:
            return parsers[type_id].from_json(value, parsers)
        return {key: parse_value(parsers, item) for key, item in value.items()}
    if isinstance(value, list):
        return [parse_value(parsers, item) for item in value]
    return value


def _index_parsers(owner: type[TaggedUnion], parsers: Parsers | None) -> dict[str, type[TaggedUnion]]:
    if parsers is None:
        index = {}
    elif isinstance(parsers, Mapping):
        index = dict(parsers)
    else:
        index = {parser.type_id: parser for parser in parsers}
    index.setdefault(owner.type_id, owner)
    return index


def serialization(variants: Sequence[type[TaggedUnion]], union_type: type[TaggedUnion]) -> None:
    """Install ``to_json``/``serialize`` on values and ``from_json``/``deserialize`` on the union."""

    def to_json(self: TaggedUnion) -> dict[str, Any]:
        return {
            TYPE_KEY: self.type_id,
            TAG_KEY: self.tag,
            VALUES_KEY: {name: serialize_value(getattr(self, name)) for name in self.fields},
        }

    def from_json(cls: type[TaggedUnion], data: Any, parsers: Parsers | None = None) -> TaggedUnion:
        owner = cls.union
        if not isinstance(data, Mapping):
            msg = f'Expected a serialized {owner.type_id} mapping, got {data!r}'
            raise SerializationError(msg)
        if data.get(TYPE_KEY) != owner.type_id:
            msg = f'Expected a serialized {owner.type_id}, got type {data.get(TYPE_KEY)!r}'
            raise SerializationError(msg)

        tag = data.get(TAG_KEY)
        try:
            variant = owner.variant(tag)
        except KeyError:
            msg = f'{owner.type_id} has no variant {tag!r}'
            raise SerializationError(msg) from None

        values = data.get(VALUES_KEY)
        if not isinstance(values, Mapping):
            msg = f'Expected a mapping of field values for {owner.type_id}.{tag}, got {values!r}'
            raise SerializationError(msg)
        unknown = [name for name in values if name not in variant.fields]
        if unknown:
            msg = f'Unknown fields for {owner.type_id}.{tag}: {", ".join(map(str, unknown))}'
            raise SerializationError(msg)

        index = _index_parsers(owner, parsers)
        try:
            return variant._rebuild({name: parse_value(index, item) for name, item in values.items()})
        except TypeError as exc:
            msg = f'Cannot rebuild {owner.type_id}.{tag}: {exc}'
            raise SerializationError(msg) from exc

    union_type.to_json = to_json
    union_type.serialize = to_json
    union_type.from_json = classmethod(from_json)
    union_type.deserialize = classmethod(from_json)


serialization.derivation_id = 'serialization'


def encode(value: TaggedUnion) -> bytes:
    """Encode a union value (and anything nested in it) as JSON bytes."""
    try:
        return msgspec.json.encode(serialize_value(value))
    except (TypeError, msgspec.EncodeError) as exc:
        msg = f'Cannot encode {value!r} as JSON: {exc}'
        raise SerializationError(msg) from exc


def decode(union_type: type[TaggedUnion], data: bytes | str, parsers: Parsers | None = None) -> TaggedUnion:
    """Decode JSON produced by encode() back into a value of union_type."""
    try:
        plain = msgspec.json.decode(data)
    except msgspec.DecodeError as exc:
        msg = f'Invalid JSON for {union_type.type_id}: {exc}'
        raise SerializationError(msg) from exc
    return union_type.from_json(plain, parsers)
