"""Arithmetic operators and their native 32-bit semantics.

Each operator has two tables keyed by the enum: its result function and its
selector column. Adding an operator means adding a row to both (and to the
gadget routing table in arithmetic.operation); tests check all three are
exhaustive.
"""

from enum import Enum
from typing import Callable, Dict

from arithmetic import columns
from arithmetic.columns import VALUE_BITS, VALUE_MASK


class BinaryOperator(Enum):
    """Two-operand operators.

    SHL and SHR take (shift, value): input0 is the shift amount and input1
    the value being shifted. They are encoded through the MUL and DIV
    gadgets respectively.
    """
    ADD = 0
    MUL = 1
    SUB = 2
    DIV = 3
    MOD = 4
    LT = 5
    GT = 6
    SHL = 7
    SHR = 8

    def result(self, input0: int, input1: int) -> int:
        """Native 32-bit result of applying this operator."""
        return _BINARY_SEMANTICS[self](input0, input1)

    def row_filter(self) -> int:
        """Selector column for this operator."""
        return _BINARY_FILTERS[self]


class TernaryOperator(Enum):
    """Modular operators: (input0 op input1) mod input2."""
    ADDMOD = 0
    MULMOD = 1
    SUBMOD = 2

    def result(self, input0: int, input1: int, input2: int) -> int:
        """Reduced result, computed without 32-bit wraparound.

        A zero modulus yields 0, the same policy as BinaryOperator.MOD.
        """
        if input2 == 0:
            return 0
        return _TERNARY_SEMANTICS[self](input0, input1) % input2

    def row_filter(self) -> int:
        """Selector column for this operator."""
        return _TERNARY_FILTERS[self]


# --- Binary Semantics ---


def _div(input0: int, input1: int) -> int:
    if input1 == 0:
        return 0
    return input0 // input1


def _mod(input0: int, input1: int) -> int:
    if input1 == 0:
        return 0
    return input0 % input1


def _shl(shift: int, value: int) -> int:
    if shift >= VALUE_BITS:
        return 0
    return (value << shift) & VALUE_MASK


def _shr(shift: int, value: int) -> int:
    if shift >= VALUE_BITS:
        return 0
    return value >> shift


_BINARY_SEMANTICS: Dict[BinaryOperator, Callable[[int, int], int]] = {
    BinaryOperator.ADD: lambda a, b: (a + b) & VALUE_MASK,
    BinaryOperator.MUL: lambda a, b: (a * b) & VALUE_MASK,
    BinaryOperator.SUB: lambda a, b: (a - b) & VALUE_MASK,
    BinaryOperator.DIV: _div,
    BinaryOperator.MOD: _mod,
    BinaryOperator.LT: lambda a, b: int(a < b),
    BinaryOperator.GT: lambda a, b: int(a > b),
    BinaryOperator.SHL: _shl,
    BinaryOperator.SHR: _shr,
}

_BINARY_FILTERS: Dict[BinaryOperator, int] = {
    BinaryOperator.ADD: columns.IS_ADD,
    BinaryOperator.MUL: columns.IS_MUL,
    BinaryOperator.SUB: columns.IS_SUB,
    BinaryOperator.DIV: columns.IS_DIV,
    BinaryOperator.MOD: columns.IS_MOD,
    BinaryOperator.LT: columns.IS_LT,
    BinaryOperator.GT: columns.IS_GT,
    BinaryOperator.SHL: columns.IS_SHL,
    BinaryOperator.SHR: columns.IS_SHR,
}


# --- Ternary Semantics ---

_TERNARY_SEMANTICS: Dict[TernaryOperator, Callable[[int, int], int]] = {
    TernaryOperator.ADDMOD: lambda a, b: a + b,
    TernaryOperator.MULMOD: lambda a, b: a * b,
    TernaryOperator.SUBMOD: lambda a, b: a - b,
}

_TERNARY_FILTERS: Dict[TernaryOperator, int] = {
    TernaryOperator.ADDMOD: columns.IS_ADDMOD,
    TernaryOperator.MULMOD: columns.IS_MULMOD,
    TernaryOperator.SUBMOD: columns.IS_SUBMOD,
}
