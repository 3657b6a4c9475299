"""Tests for the equality and debug_representation derivations."""

import pytest
from hypothesis import given

from tests.strategies import validations
from variantkit import Failure, Just, Maybe, Nothing, Ok, Success, Validation, debug_representation, equality, union
from variantkit.adt.derivations.equality import structural_equals


class TestEquality:
    """Tests for structural equality and hashing."""

    def test_same_tag_same_value(self):
        assert Success(42) == Success(42)
        assert Failure(['e']) == Failure(['e'])

    def test_different_values(self):
        assert Success(42) != Success(43)

    def test_different_tags(self):
        assert Success(1) != Failure(1)

    def test_different_unions(self):
        """Values of different unions never compare equal, even with matching tags and fields."""
        assert Success(1) != Ok(1)
        assert not Success(1).equals(Ok(1))

    def test_non_union_values(self):
        assert Success(1) != 1
        assert not Success(1).equals(1)

    def test_nested_sequences_and_mappings(self):
        assert Success([1, [2, 3]]) == Success([1, [2, 3]])
        assert Success({'a': Success(1)}) == Success({'a': Success(1)})
        assert Success({'a': 1}) != Success({'b': 1})

    def test_list_and_tuple_differ(self):
        assert Success([1, 2]) != Success((1, 2))

    def test_nested_union_values(self):
        assert Success(Just(1)) == Success(Just(1))
        assert Success(Just(1)) != Success(Nothing())

    def test_payload_equals_method(self):
        """A payload with its own equals decides equality."""

        class CaseInsensitive:
            def __init__(self, text):
                self.text = text

            def equals(self, other):
                return self.text.lower() == other.text.lower()

        assert Success(CaseInsensitive('A')) == Success(CaseInsensitive('a'))

    @given(validations)
    def test_reflexive(self, validation):
        assert validation == validation
        assert validation.equals(validation)

    def test_hash(self):
        assert hash(Success(42)) == hash(Success(42))
        assert {Success(42): 'value'}[Success(42)] == 'value'
        assert len({Success(1), Success(1), Failure(1)}) == 2

    def test_unhashable_payload(self):
        with pytest.raises(TypeError):
            hash(Success([1]))

    def test_custom_comparison(self):
        Word = union(
            'tests:Word',
            {'Word': lambda text: {'text': text}},
        ).derive(equality.with_custom_comparison(lambda a, b: a.lower() == b.lower()))
        assert Word.Word('Hello') == Word.Word('HELLO')
        assert Word.Word('Hello') != Word.Word('World')

    def test_custom_comparison_keeps_hash_consistent(self):
        """Values a custom comparison equates hash alike, so sets and dicts agree with ==."""
        Word = union(
            'tests:Word',
            {'Word': lambda text: {'text': text}},
        ).derive(equality.with_custom_comparison(lambda a, b: a.lower() == b.lower()))
        upper, lower = Word.Word('X'), Word.Word('x')
        assert upper == lower
        assert hash(upper) == hash(lower)
        assert len({upper, lower}) == 1

    def test_structural_equals_fallback(self):
        assert structural_equals(1, 1.0)
        assert not structural_equals('a', 'b')
        assert structural_equals(int, int)


class TestDebugRepresentation:
    """Tests for repr(), str() and to_string()."""

    def test_success(self):
        assert repr(Success(42)) == 'Validation.Success(value: 42)'

    def test_failure(self):
        assert repr(Failure(['a'])) == "Validation.Failure(value: ['a'])"

    def test_str_and_to_string(self):
        assert str(Success('x')) == "Validation.Success(value: 'x')"
        assert Success('x').to_string() == str(Success('x'))

    def test_nested(self):
        assert repr(Success(Just(1))) == 'Validation.Success(value: Maybe.Just(value: 1))'

    def test_no_fields(self):
        assert repr(Nothing()) == 'Maybe.Nothing()'

    def test_field_order(self):
        Pair = union('tests:Pair', {'Pair': lambda left, right: {'left': left, 'right': right}})
        Pair.derive(debug_representation)
        assert repr(Pair.Pair(1, 2)) == 'Pair.Pair(left: 1, right: 2)'

    def test_self_reference(self):
        """Cycles through mutable payloads render as '...'."""
        items = []
        value = Success(items)
        items.append(value)
        assert repr(value) == 'Validation.Success(value: [...])'

    def test_sibling_types(self):
        assert repr(Ok(1)) == 'Result.Ok(value: 1)'
        assert Maybe.derivations == Validation.derivations
