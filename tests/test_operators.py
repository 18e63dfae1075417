"""Tests for native 32-bit operator semantics and selector mapping."""

import pytest

from arithmetic import columns
from arithmetic.columns import VALUE_MASK
from arithmetic.operators import BinaryOperator, TernaryOperator
from tests.conftest import EDGE_VALUES

PAIRS = [(a, b) for a in EDGE_VALUES for b in EDGE_VALUES]


class TestBinarySemantics:

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_add_sub_mul_wrap(self, a: int, b: int) -> None:
        """ADD, SUB and MUL wrap silently at 2^32."""
        assert BinaryOperator.ADD.result(a, b) == (a + b) % 2**32
        assert BinaryOperator.SUB.result(a, b) == (a - b) % 2**32
        assert BinaryOperator.MUL.result(a, b) == (a * b) % 2**32

    def test_add_overflow(self) -> None:
        assert BinaryOperator.ADD.result(VALUE_MASK, 1) == 0
        assert BinaryOperator.SUB.result(0, 1) == VALUE_MASK
        assert BinaryOperator.MUL.result(0x10000, 0x10000) == 0

    @pytest.mark.parametrize("a", EDGE_VALUES)
    def test_div_mod_by_zero(self, a: int) -> None:
        """Division and modulo by zero are total and yield 0."""
        assert BinaryOperator.DIV.result(a, 0) == 0
        assert BinaryOperator.MOD.result(a, 0) == 0

    @pytest.mark.parametrize("a,b", [(a, b) for a, b in PAIRS if b != 0])
    def test_div_mod(self, a: int, b: int) -> None:
        assert BinaryOperator.DIV.result(a, b) == a // b
        assert BinaryOperator.MOD.result(a, b) == a % b

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_comparisons(self, a: int, b: int) -> None:
        """LT and GT are 0/1 and exactly one holds for distinct operands."""
        lt = BinaryOperator.LT.result(a, b)
        gt = BinaryOperator.GT.result(a, b)
        assert lt in (0, 1) and gt in (0, 1)
        if a == b:
            assert lt == 0 and gt == 0
        else:
            assert lt ^ gt == 1
            assert lt == int(a < b)

    @pytest.mark.parametrize("shift", [32, 33, 255, 0x10000, VALUE_MASK])
    @pytest.mark.parametrize("value", [0, 1, 0xDEADBEEF, VALUE_MASK])
    def test_large_shift_is_zero(self, shift: int, value: int) -> None:
        """Shift amounts >= 32 produce 0 instead of wrapping."""
        assert BinaryOperator.SHL.result(shift, value) == 0
        assert BinaryOperator.SHR.result(shift, value) == 0

    @pytest.mark.parametrize("shift", range(32))
    def test_shift(self, shift: int) -> None:
        """First operand is the amount, second the shifted value."""
        value = 0xDEADBEEF
        assert BinaryOperator.SHL.result(shift, value) == (value << shift) & VALUE_MASK
        assert BinaryOperator.SHR.result(shift, value) == value >> shift

    def test_random_against_reference(self, rng) -> None:
        for _ in range(500):
            a = rng.getrandbits(32)
            b = rng.getrandbits(32)
            assert BinaryOperator.ADD.result(a, b) == (a + b) & VALUE_MASK
            assert BinaryOperator.MUL.result(a, b) == (a * b) & VALUE_MASK
            assert BinaryOperator.DIV.result(a, b) == (a // b if b else 0)


class TestTernarySemantics:

    def test_addmod_example(self) -> None:
        assert TernaryOperator.ADDMOD.result(10, 20, 7) == 2

    def test_no_wrap_before_reduction(self) -> None:
        """Intermediate sums and products are exact, not truncated to 32 bits."""
        a = VALUE_MASK
        assert TernaryOperator.ADDMOD.result(a, a, 1000) == (2 * a) % 1000
        assert TernaryOperator.MULMOD.result(a, a, 1000003) == (a * a) % 1000003

    def test_submod_least_residue(self) -> None:
        assert TernaryOperator.SUBMOD.result(3, 10, 5) == 3
        assert TernaryOperator.SUBMOD.result(10, 3, 5) == 2
        assert TernaryOperator.SUBMOD.result(0, VALUE_MASK, VALUE_MASK) == 0

    @pytest.mark.parametrize("op", list(TernaryOperator))
    def test_zero_modulus(self, op: TernaryOperator) -> None:
        assert op.result(5, 7, 0) == 0

    @pytest.mark.parametrize("op", list(TernaryOperator))
    def test_result_below_modulus(self, op: TernaryOperator, rng) -> None:
        for _ in range(200):
            a, b, m = rng.getrandbits(32), rng.getrandbits(32), rng.getrandbits(32) or 1
            assert 0 <= op.result(a, b, m) < m


class TestSelectors:

    def test_row_filters_distinct(self) -> None:
        """No two operators share a selector column."""
        filters = [op.row_filter() for op in BinaryOperator] + [op.row_filter() for op in TernaryOperator]
        assert len(set(filters)) == len(filters)

    def test_row_filters_cover_selector_columns(self) -> None:
        filters = {op.row_filter() for op in BinaryOperator} | {op.row_filter() for op in TernaryOperator}
        assert filters == set(columns.SELECTOR_COLUMNS)

    def test_named_selectors(self) -> None:
        assert BinaryOperator.DIV.row_filter() == columns.IS_DIV
        assert BinaryOperator.SHR.row_filter() == columns.IS_SHR
        assert TernaryOperator.SUBMOD.row_filter() == columns.IS_SUBMOD
