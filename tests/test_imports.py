"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from variantkit work."""

    def test_validation_types(self) -> None:
        """Test importing Validation types from root."""
        from variantkit import Failure, Success, Validation, collect

        assert Success(42).unsafe_get() == 42
        assert Failure.has_instance(Failure('e'))
        assert Validation.of(1) == Success(1)
        assert collect([Success(1), Success(2)]) == Success(2)

    def test_adt_core(self) -> None:
        """Test importing the union machinery from root."""
        from variantkit import TaggedUnion, define_method, define_methods, derive, union

        assert issubclass(union('tests:Unit', {'Unit': lambda: {}}), TaggedUnion)
        assert callable(define_method)
        assert callable(define_methods)
        assert callable(derive)

    def test_sibling_types(self) -> None:
        """Test importing Result and Maybe from root."""
        from variantkit import Error, Just, Maybe, Nothing, Ok, Result

        assert Result.has_instance(Ok(1))
        assert Result.has_instance(Error('e'))
        assert Maybe.has_instance(Just(1))
        assert Maybe.has_instance(Nothing())

    def test_errors(self) -> None:
        """Every error type shares the package base class."""
        from variantkit import (
            AbstractInstanceError,
            DefinitionError,
            NoMatchError,
            PartialityError,
            PreconditionError,
            SerializationError,
            VariantkitError,
        )

        for error_type in (
            AbstractInstanceError,
            DefinitionError,
            NoMatchError,
            PartialityError,
            PreconditionError,
            SerializationError,
        ):
            assert issubclass(error_type, VariantkitError)


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_adt(self) -> None:
        from variantkit.adt import define_method, derive, union

        assert callable(union)
        assert callable(define_method)
        assert callable(derive)

    def test_derivations(self) -> None:
        from variantkit.adt.derivations import debug_representation, decode, encode, equality, serialization

        assert equality.derivation_id == 'equality'
        assert debug_representation.derivation_id == 'debug_representation'
        assert serialization.derivation_id == 'serialization'
        assert callable(encode)
        assert callable(decode)

    def test_validation(self) -> None:
        from variantkit.validation import Failure, Success, Validation, from_maybe, from_nullable, from_result

        assert Validation.variants == (Failure, Success)
        assert callable(from_maybe)
        assert callable(from_nullable)
        assert callable(from_result)

    def test_conversions(self) -> None:
        from variantkit.conversions import (
            maybe_to_validation,
            result_to_validation,
            validation_to_maybe,
            validation_to_result,
        )

        assert callable(maybe_to_validation)
        assert callable(result_to_validation)
        assert callable(validation_to_maybe)
        assert callable(validation_to_result)
