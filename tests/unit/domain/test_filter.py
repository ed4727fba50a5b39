"""Tests for the Filter capability.

Tests:
- FunctionFilter: blanket support for plain callables
- as_filter: conversion rules
- chaining methods and operators
"""

import pytest

from filterops import (
    And,
    ConversionError,
    Filter,
    FunctionFilter,
    InvalidFilterError,
    Not,
    Ok,
    Or,
    XOr,
    as_filter,
)
from filterops.application.probe import Probe
from tests.factories import EqTo, NonNegative, gt, lt


class TestFunctionFilter:
    """Tests for FunctionFilter (closures as filters)."""

    def test_wraps_callable(self) -> None:
        """Evaluates the wrapped callable."""
        flt = FunctionFilter(lambda a: a > 5)

        assert flt.evaluate(6) is True
        assert flt.evaluate(5) is False

    def test_filter_is_callable(self) -> None:
        """flt(value) is flt.evaluate(value)."""
        flt = FunctionFilter(lambda a: a == 1)

        assert flt(1) is True
        assert flt(2) is False

    def test_truthy_result_converted_to_bool(self) -> None:
        """Non-bool results are converted with bool()."""
        flt = FunctionFilter(lambda a: a % 2)

        assert flt.evaluate(3) is True
        assert flt.evaluate(4) is False

    def test_result_return_rejected(self) -> None:
        """A failable callable in a pure filter raises ConversionError."""
        flt = FunctionFilter(lambda _: Ok(False))

        with pytest.raises(ConversionError, match="Ok/Err"):
            flt.evaluate(1)

    def test_not_callable_raises(self) -> None:
        """FAIL-FIRST: non-callable rejected at construction."""
        with pytest.raises(InvalidFilterError, match="callable"):
            FunctionFilter(42)

    def test_zero_sized_value(self) -> None:
        """Filter over an empty value type is legal."""
        flt = FunctionFilter(lambda _: True)

        assert flt.evaluate(()) is True
        assert flt.evaluate(None) is True


class TestAsFilter:
    """Tests for as_filter conversion."""

    def test_filter_returned_unchanged(self) -> None:
        """Filters pass through as the same object."""
        flt = EqTo(1)

        assert as_filter(flt) is flt

    def test_callable_wrapped(self) -> None:
        """Plain callables become FunctionFilter."""
        flt = as_filter(lambda a: a == 1)

        assert isinstance(flt, FunctionFilter)
        assert flt.evaluate(1) is True

    def test_failable_rejected(self) -> None:
        """FailableFilter is not implicitly a Filter."""
        with pytest.raises(InvalidFilterError, match="pure chain"):
            as_filter(NonNegative())

    def test_not_callable_rejected(self) -> None:
        """Objects that are neither filters nor callables raise."""
        with pytest.raises(InvalidFilterError, match="Filter or callable"):
            as_filter("not a filter")

    def test_error_is_type_error(self) -> None:
        """InvalidFilterError is catchable as TypeError."""
        with pytest.raises(TypeError):
            as_filter(None)


class TestHandWrittenFilter:
    """Tests for user subclasses of Filter."""

    def test_eq_to(self) -> None:
        """Subclass evaluate() is used."""
        eq = EqTo(0)

        assert eq.evaluate(0) is True
        assert eq.evaluate(1) is False
        assert eq.evaluate(17) is False
        assert eq.evaluate(42) is False

    def test_combined_eq_to(self) -> None:
        """Subclasses get all chaining methods."""
        flt = EqTo(1).not_().and_not(EqTo(17))

        assert flt.evaluate(0) is True
        assert flt.evaluate(1) is False
        assert flt.evaluate(2) is True
        assert flt.evaluate(17) is False

    def test_abstract_evaluate(self) -> None:
        """Filter without evaluate() cannot be instantiated."""

        class Incomplete(Filter[int]):
            pass

        with pytest.raises(TypeError):
            Incomplete()


class TestChaining:
    """Tests for chaining methods."""

    def test_and(self) -> None:
        """and_ builds And."""
        flt = gt(1).and_(lt(7))

        assert isinstance(flt, And)
        assert flt.evaluate(1) is False
        assert flt.evaluate(3) is True
        assert flt.evaluate(6) is True
        assert flt.evaluate(9) is False

    def test_or(self) -> None:
        """or_ builds Or."""
        flt = EqTo(1).or_(EqTo(2))

        assert isinstance(flt, Or)
        assert flt.evaluate(1) is True
        assert flt.evaluate(2) is True
        assert flt.evaluate(7) is False

    def test_xor(self) -> None:
        """xor builds XOr."""
        flt = gt(3).xor(lt(7))

        assert isinstance(flt, XOr)
        assert flt.evaluate(1) is True
        assert flt.evaluate(3) is True
        assert flt.evaluate(4) is False
        assert flt.evaluate(6) is False
        assert flt.evaluate(9) is True

    def test_not(self) -> None:
        """not_ builds Not."""
        flt = EqTo(1).not_()

        assert isinstance(flt, Not)
        assert flt.evaluate(2) is True
        assert flt.evaluate(1) is False

    def test_chain_accepts_callables(self) -> None:
        """other may be a plain callable."""
        flt = as_filter(lambda a: a < 3).and_(lambda a: a > 1)

        assert flt.evaluate(0) is False
        assert flt.evaluate(2) is True
        assert flt.evaluate(3) is False

    def test_chain_rejects_failable(self) -> None:
        """other must not be a FailableFilter."""
        with pytest.raises(InvalidFilterError):
            gt(1).and_(NonNegative())

    def test_and3(self) -> None:
        """and3: self AND (a AND b)."""
        flt = gt(1).and3(lt(20), lambda a: a % 2 == 0)

        assert flt.evaluate(1) is False
        assert flt.evaluate(3) is False
        assert flt.evaluate(8) is True
        assert flt.evaluate(14) is True
        assert flt.evaluate(15) is False
        assert flt.evaluate(19) is False

    def test_or3(self) -> None:
        """or3: self OR (a OR b)."""
        flt = EqTo(1).or3(EqTo(2), EqTo(3))

        assert flt.evaluate(1) is True
        assert flt.evaluate(2) is True
        assert flt.evaluate(3) is True
        assert flt.evaluate(4) is False

    def test_and_not(self) -> None:
        """and_not: self AND NOT other."""
        flt = gt(10).and_not(lt(20))

        assert flt.evaluate(1) is False
        assert flt.evaluate(11) is False
        assert flt.evaluate(24) is True

    def test_or_not(self) -> None:
        """or_not: self OR NOT other."""
        flt = EqTo(1).or_not(EqTo(2))

        assert flt.evaluate(1) is True
        assert flt.evaluate(2) is False
        assert flt.evaluate(7) is True

    def test_nand(self) -> None:
        """nand: NOT (self AND other)."""
        flt = gt(10).nand(lt(20))

        assert flt.evaluate(1) is True
        assert flt.evaluate(11) is False
        assert flt.evaluate(14) is False
        assert flt.evaluate(25) is True

    def test_nor(self) -> None:
        """nor: NOT (self OR other)."""
        flt = EqTo(1).nor(EqTo(2))

        assert flt.evaluate(1) is False
        assert flt.evaluate(2) is False
        assert flt.evaluate(3) is True

    def test_bool_and(self) -> None:
        """bool_and combines with a constant."""
        assert EqTo(1).bool_and(True).evaluate(1) is True
        assert EqTo(1).bool_and(True).evaluate(0) is False
        assert EqTo(1).bool_and(False).evaluate(1) is False

    def test_bool_or(self) -> None:
        """bool_or combines with a constant."""
        assert EqTo(1).bool_or(True).evaluate(42) is True
        assert EqTo(1).bool_or(False).evaluate(42) is False
        assert EqTo(1).bool_or(False).evaluate(1) is True

    def test_map_input(self) -> None:
        """map_input evaluates on the mapped value."""
        flt = gt(3).map_input(len)

        assert flt.evaluate("abcd") is True
        assert flt.evaluate("abc") is False

    def test_map_input_not_callable(self) -> None:
        """FAIL-FIRST: mapper must be callable."""
        with pytest.raises(InvalidFilterError, match="mapper"):
            gt(3).map_input("len")

    def test_map_input_joins_chain(self) -> None:
        """A mapped filter joins a chain over the source type."""
        flt = gt(1).and_(lt(7).map_input(lambda x: x))

        assert flt.evaluate(1) is False
        assert flt.evaluate(3) is True
        assert flt.evaluate(9) is False


class TestOperators:
    """Tests for &, |, ^, ~ overloads."""

    def test_and_operator(self) -> None:
        """& is and_."""
        flt = gt(5) & lt(15)

        assert isinstance(flt, And)
        assert flt.evaluate(10) is True
        assert flt.evaluate(20) is False

    def test_or_operator(self) -> None:
        """| is or_."""
        flt = EqTo(1) | EqTo(2)

        assert flt.evaluate(2) is True
        assert flt.evaluate(3) is False

    def test_xor_operator(self) -> None:
        """^ is xor."""
        flt = EqTo(0) ^ (lambda a: a == 3)

        assert flt.evaluate(3) is True
        assert flt.evaluate(5) is False
        assert flt.evaluate(0) is True

    def test_invert_operator(self) -> None:
        """~ is not_."""
        flt = ~EqTo(1)

        assert flt.evaluate(1) is False
        assert flt.evaluate(2) is True

    def test_reflected_operators(self) -> None:
        """Plain callable on the left side still builds a filter."""
        flt = (lambda a: a > 5) & lt(15)

        assert isinstance(flt, And)
        assert flt.evaluate(10) is True

        flt = (lambda a: a == 1) | EqTo(2)
        assert flt.evaluate(1) is True

        flt = (lambda a: a == 1) ^ EqTo(1)
        assert flt.evaluate(1) is False

    def test_complex_expression(self) -> None:
        """((a > 5) AND NOT (a < 20)) OR a == 10."""
        flt = (gt(5) & ~lt(20)) | EqTo(10)

        assert flt.evaluate(21) is True
        assert flt.evaluate(10) is True
        assert flt.evaluate(11) is False
        assert flt.evaluate(5) is False


class TestScenarios:
    """Concrete scenarios."""

    def test_named_closures(self) -> None:
        """Three != closures chained with and_."""

        def not_eq_to_one(a: int) -> bool:
            return a != 1

        def not_eq_to_two(a: int) -> bool:
            return a != 2

        def not_eq_to_three(a: int) -> bool:
            return a != 3

        flt = as_filter(not_eq_to_one).and_(not_eq_to_two).and_(not_eq_to_three)

        assert flt.evaluate(21) is True
        assert flt.evaluate(10) is True
        assert flt.evaluate(2) is False
        assert flt.evaluate(1) is False
        assert flt.evaluate(3) is False

    def test_closure_inside_closure(self) -> None:
        """Filters can be evaluated inside other closures."""
        inner = gt(5).and_not(lt(20))
        flt = as_filter(lambda a: inner.evaluate(a)).or_(EqTo(10))

        assert flt.evaluate(21) is True
        assert flt.evaluate(10) is True
        assert flt.evaluate(11) is False

    def test_builtin_filter(self) -> None:
        """A Filter works as the predicate of builtins.filter."""
        in_range = gt(5) & lt(15)

        assert list(filter(in_range, range(21))) == [6, 7, 8, 9, 10, 11, 12, 13, 14]

    def test_probe_sees_every_value(self) -> None:
        """Leaf filters receive the original value unchanged."""
        probe = Probe(True)
        flt = probe & gt(0)

        flt.evaluate(3)
        flt.evaluate(-3)

        assert probe.calls == (3, -3)
