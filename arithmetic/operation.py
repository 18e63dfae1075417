"""Operations and their translation into arithmetic trace rows.

An Operation is one operator applied to concrete 32-bit operands, with the
result computed once at construction. to_rows() allocates zero-filled rows,
sets the operator's selector and hands the rows to exactly one gadget:

    ADD, SUB, LT, GT         witness.addcy     1 row
    MUL                      witness.mul       1 row
    SHL                      witness.shift     1 row   (simulated by MUL)
    DIV, MOD                 witness.divmod    2 rows
    SHR                      witness.shift     2 rows  (simulated by DIV)
    ADDMOD, MULMOD, SUBMOD   witness.modular   2 rows

Usage:
    op = Operation.binary(BinaryOperator.DIV, 10, 3)
    row, next_row = op.to_rows()
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from arithmetic.columns import NUM_ARITH_COLUMNS, VALUE_MASK
from arithmetic.operators import BinaryOperator, TernaryOperator
from primitives.field import FFRow, zero_row
from witness import addcy, divmod, modular, mul, shift

logger = logging.getLogger(__name__)

Operator = Union[BinaryOperator, TernaryOperator]
Rows = Tuple[FFRow, Optional[FFRow]]


def _as_u32(name: str, value) -> int:
    # bool is an int subclass but never a valid operand
    if not isinstance(value, (int, np.integer)) or isinstance(value, (bool, np.bool_)):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    if value < 0 or value > VALUE_MASK:
        raise ValueError(f"{name} out of 32-bit range: {value}")
    return value


# --- Operations ---


class Operation:
    """Base of BinaryOperation and TernaryOperation.

    Build instances with Operation.binary() / Operation.ternary(), which
    compute the result. Constructing the dataclasses directly runs the same
    checks, so a stored result always matches the operator applied to the
    inputs.
    """

    operator: Operator
    result: int

    @staticmethod
    def binary(operator: BinaryOperator, input0: int, input1: int) -> "BinaryOperation":
        """Create a binary operation.

        For SHL and SHR, input0 is the shift amount and input1 the value.

        Raises:
            TypeError: If operator is not a BinaryOperator
            ValueError: If an operand is not a 32-bit unsigned int
        """
        _check_operator(operator, BinaryOperator)
        input0 = _as_u32("input0", input0)
        input1 = _as_u32("input1", input1)
        return BinaryOperation(operator, input0, input1, operator.result(input0, input1))

    @staticmethod
    def ternary(
        operator: TernaryOperator, input0: int, input1: int, input2: int
    ) -> "TernaryOperation":
        """Create a modular operation (input0 op input1) mod input2.

        Raises:
            TypeError: If operator is not a TernaryOperator
            ValueError: If an operand is not a 32-bit unsigned int
        """
        _check_operator(operator, TernaryOperator)
        input0 = _as_u32("input0", input0)
        input1 = _as_u32("input1", input1)
        input2 = _as_u32("input2", input2)
        return TernaryOperation(
            operator, input0, input1, input2, operator.result(input0, input1, input2)
        )

    def to_rows(self) -> Rows:
        """Translate into (row, next_row); next_row is None for one-row operators."""
        return to_rows(self)

    def _validate(self, *input_names: str) -> None:
        # frozen: normalized values are stored through object.__setattr__
        for name in input_names + ("result",):
            object.__setattr__(self, name, _as_u32(name, getattr(self, name)))
        expected = self.operator.result(*(getattr(self, name) for name in input_names))
        if self.result != expected:
            raise ValueError(
                f"{self.operator.name} result {self.result} does not match "
                f"the operator result {expected}"
            )


def _check_operator(operator, kind: type) -> None:
    if not isinstance(operator, kind):
        raise TypeError(f"expected a {kind.__name__}, got {operator!r}")


@dataclass(frozen=True)
class BinaryOperation(Operation):
    operator: BinaryOperator
    input0: int
    input1: int
    result: int

    def __post_init__(self) -> None:
        _check_operator(self.operator, BinaryOperator)
        self._validate("input0", "input1")


@dataclass(frozen=True)
class TernaryOperation(Operation):
    operator: TernaryOperator
    input0: int
    input1: int
    input2: int
    result: int

    def __post_init__(self) -> None:
        _check_operator(self.operator, TernaryOperator)
        self._validate("input0", "input1", "input2")


# --- Gadget Routing ---


def _new_row(operation: Operation) -> FFRow:
    row = zero_row(NUM_ARITH_COLUMNS)
    row[operation.operator.row_filter()] = 1
    return row


def _addcy_rows(op: BinaryOperation) -> Rows:
    row = _new_row(op)
    addcy.generate(row, op.operator.row_filter(), op.input0, op.input1)
    return row, None


def _mul_rows(op: BinaryOperation) -> Rows:
    row = _new_row(op)
    mul.generate(row, op.input0, op.input1)
    return row, None


def _shl_rows(op: BinaryOperation) -> Rows:
    row = _new_row(op)
    # The MUL encoding never writes to it; only handed over for the shared signature.
    scratch = zero_row(NUM_ARITH_COLUMNS)
    shift.generate(row, scratch, True, op.input0, op.input1, op.result)
    return row, None


def _divmod_rows(op: BinaryOperation) -> Rows:
    row = _new_row(op)
    next_row = zero_row(NUM_ARITH_COLUMNS)
    divmod.generate(row, next_row, op.operator.row_filter(), op.input0, op.input1, op.result)
    return row, next_row


def _shr_rows(op: BinaryOperation) -> Rows:
    row = _new_row(op)
    next_row = zero_row(NUM_ARITH_COLUMNS)
    shift.generate(row, next_row, False, op.input0, op.input1, op.result)
    return row, next_row


def _modular_rows(op: TernaryOperation) -> Rows:
    row = _new_row(op)
    next_row = zero_row(NUM_ARITH_COLUMNS)
    modular.generate(row, next_row, op.operator.row_filter(), op.input0, op.input1, op.input2)
    return row, next_row


ROW_GENERATORS: Dict[Operator, Callable[[Operation], Rows]] = {
    BinaryOperator.ADD: _addcy_rows,
    BinaryOperator.SUB: _addcy_rows,
    BinaryOperator.LT: _addcy_rows,
    BinaryOperator.GT: _addcy_rows,
    BinaryOperator.MUL: _mul_rows,
    BinaryOperator.SHL: _shl_rows,
    BinaryOperator.DIV: _divmod_rows,
    BinaryOperator.MOD: _divmod_rows,
    BinaryOperator.SHR: _shr_rows,
    TernaryOperator.ADDMOD: _modular_rows,
    TernaryOperator.MULMOD: _modular_rows,
    TernaryOperator.SUBMOD: _modular_rows,
}

_TWO_ROW_GENERATORS = (_divmod_rows, _shr_rows, _modular_rows)

# Operators whose rows include a continuation row, derived from the routing
TWO_ROW_OPERATORS = frozenset(
    op for op, generator in ROW_GENERATORS.items() if generator in _TWO_ROW_GENERATORS
)


def to_rows(operation: Operation) -> Rows:
    """Convert an operation into one or two rows of the arithmetic trace.

    Raises:
        KeyError: If no gadget is routed for the operation's operator
    """
    generator = ROW_GENERATORS[operation.operator]
    row, next_row = generator(operation)
    logger.debug(
        "%s -> %d row(s), result=%d",
        operation.operator.name,
        1 if next_row is None else 2,
        operation.result,
    )
    return row, next_row


def operations_to_rows(operations: Iterable[Operation]) -> List[Rows]:
    """Translate independent operations, keeping input order."""
    return [to_rows(op) for op in operations]
