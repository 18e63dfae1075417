"""Rows produced by to_rows() satisfy the arithmetic table constraints."""

import pytest

from arithmetic import BinaryOperator, Operation, TernaryOperator, columns
from constraints import (
    CONSTRAINT_REGISTRY,
    ArithmeticConstraints,
    RowContext,
    get_constraint_module,
)
from constraints.base import root_2exp_constraints, value_of
from primitives.field import FF
from tests.conftest import EDGE_VALUES

BINARY_CASES = [(op, a, b) for op in BinaryOperator for a in EDGE_VALUES for b in EDGE_VALUES]
TERNARY_EDGES = [0, 1, 7, 0xFFFF, 0x10000, 0xFFFFFFFF]
TERNARY_CASES = [
    (op, a, b, m)
    for op in TernaryOperator
    for a in TERNARY_EDGES
    for b in TERNARY_EDGES
    for m in TERNARY_EDGES
]


@pytest.mark.parametrize("op,a,b", BINARY_CASES)
def test_binary_rows_satisfy_constraints(op, a, b, arithmetic_constraints) -> None:
    row, next_row = Operation.binary(op, a, b).to_rows()
    assert arithmetic_constraints.check_rows(row, next_row)


@pytest.mark.parametrize("op,a,b,m", TERNARY_CASES)
def test_ternary_rows_satisfy_constraints(op, a, b, m, arithmetic_constraints) -> None:
    row, next_row = Operation.ternary(op, a, b, m).to_rows()
    assert arithmetic_constraints.check_rows(row, next_row)


def test_random_rows_satisfy_constraints(rng, arithmetic_constraints) -> None:
    for _ in range(30):
        a, b, m = rng.getrandbits(32), rng.getrandbits(32), rng.getrandbits(rng.choice([8, 16, 32]))
        for op in BinaryOperator:
            # small first operand exercises real shifts
            x = rng.randrange(40) if op in (BinaryOperator.SHL, BinaryOperator.SHR) else a
            assert arithmetic_constraints.check_rows(*Operation.binary(op, x, b).to_rows())
        for op in TernaryOperator:
            assert arithmetic_constraints.check_rows(*Operation.ternary(op, a, b, m).to_rows())


@pytest.mark.parametrize("op", [BinaryOperator.DIV, BinaryOperator.MOD, BinaryOperator.SHR])
def test_continuation_row_is_inert(op, arithmetic_constraints) -> None:
    """Seen as a current row, the continuation row activates no constraint."""
    _, next_row = Operation.binary(op, 5, 123456).to_rows()
    assert arithmetic_constraints.check_rows(next_row)


def test_div_by_zero_rows_satisfy_constraints(arithmetic_constraints) -> None:
    op = Operation.binary(BinaryOperator.DIV, 10, 0)
    assert op.result == 0
    row, next_row = op.to_rows()
    assert arithmetic_constraints.check_rows(row, next_row)


class TestTampering:
    """Silently wrong rows must be rejected."""

    @pytest.mark.parametrize("op", list(BinaryOperator))
    def test_wrong_binary_output(self, op, arithmetic_constraints) -> None:
        """Only the output limb changes; the carries keep their generated values."""
        row, next_row = Operation.binary(op, 3, 100).to_rows()
        row[columns.OUTPUT_REGISTER.start] += FF(1)
        assert not arithmetic_constraints.check_rows(row, next_row)

    def test_mul_top_carry_fixup_needs_range_checks(self, arithmetic_constraints) -> None:
        """A wrong MUL output can be balanced by the free top carry.

        The row identities alone accept it; the compensating carry lies
        outside [0, 2^16) and is rejected by the range lookups of the
        surrounding machine, which this table does not evaluate.
        """
        row, next_row = Operation.binary(BinaryOperator.MUL, 3, 100).to_rows()
        row[columns.OUTPUT_REGISTER.start + 1] += FF(1)
        row[columns.CARRY_REGISTER.start + 1] -= FF(1 << 16) ** -1
        assert arithmetic_constraints.check_rows(row, next_row)
        assert not 0 <= int(row[columns.CARRY_REGISTER.start + 1]) < 1 << 16

    @pytest.mark.parametrize("op", list(TernaryOperator))
    def test_wrong_ternary_output(self, op, arithmetic_constraints) -> None:
        row, next_row = Operation.ternary(op, 30, 100, 7).to_rows()
        row[columns.OUTPUT_REGISTER.start] += FF(1)
        assert not arithmetic_constraints.check_rows(row, next_row)

    def test_div_by_zero_nonzero_output(self, arithmetic_constraints) -> None:
        row, next_row = Operation.binary(BinaryOperator.DIV, 10, 0).to_rows()
        row[columns.OUTPUT_REGISTER.start] = 1
        row[columns.QUOTIENT_REGISTER.start] = 1
        assert not arithmetic_constraints.check_rows(row, next_row)

    def test_false_zero_flag(self, arithmetic_constraints) -> None:
        row, next_row = Operation.binary(BinaryOperator.MOD, 10, 3).to_rows()
        next_row[columns.MODULUS_IS_ZERO] = 1
        assert not arithmetic_constraints.check_rows(row, next_row)

    def test_two_selectors(self, arithmetic_constraints) -> None:
        row, next_row = Operation.binary(BinaryOperator.ADD, 1, 2).to_rows()
        row[columns.IS_SUB] = 1
        assert not arithmetic_constraints.check_rows(row, next_row)

    def test_missing_continuation_row(self, arithmetic_constraints) -> None:
        row, _ = Operation.binary(BinaryOperator.DIV, 100, 7).to_rows()
        assert not arithmetic_constraints.check_rows(row)


class TestConstraintHelpers:

    def test_value_of(self) -> None:
        assert value_of([FF(0x5678), FF(0x1234)]) == FF(0x12345678)

    def test_root_constraints_vanish(self) -> None:
        # 2^16 * 1 + (-2^16) = 0 with carry 1 on limb 0
        p = [FF(0) - FF(1 << 16), FF(1)]
        assert all(v == FF(0) for v in root_2exp_constraints(p, [FF(1)]))

    def test_row_context(self) -> None:
        row, next_row = Operation.binary(BinaryOperator.MOD, 9, 4).to_rows()
        ctx = RowContext(row, next_row)
        assert ctx.col(columns.IS_MOD) == FF(1)
        assert ctx.next_col(columns.MODULUS_IS_ZERO) == FF(0)
        assert value_of(ctx.limbs(columns.OUTPUT_REGISTER)) == FF(1)

    def test_registry(self) -> None:
        assert isinstance(get_constraint_module("arithmetic"), ArithmeticConstraints)
        assert set(CONSTRAINT_REGISTRY) >= {"addcy", "mul", "divmod", "modular"}
        with pytest.raises(KeyError):
            get_constraint_module("byte")

    def test_constraint_polynomial_vanishes(self) -> None:
        module = ArithmeticConstraints()
        row, next_row = Operation.ternary(TernaryOperator.MULMOD, 123, 456, 789).to_rows()
        assert module.constraint_polynomial(RowContext(row, next_row), FF(987654321)) == FF(0)
