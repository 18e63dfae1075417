"""Base classes for row-level constraint evaluation.

ConstraintContext gives constraint code access to the two-row window
(row, next_row) that a polynomial constraint of the arithmetic table can
reference. Constraint modules return a list of values; a window satisfies
the module iff every value is zero.

Example:
    def eval_constraint(ctx: ConstraintContext):
        is_add = ctx.col(columns.IS_ADD)
        return [is_add * (is_add - ONE)]

    eval_constraint(RowContext(row, next_row))
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from arithmetic.columns import LIMB_BASE, NUM_ARITH_COLUMNS
from primitives.field import FF, FFRow, zero_row

ZERO = FF(0)
ONE = FF(1)
LIMB_BASE_FF = FF(LIMB_BASE)


class ConstraintContext(ABC):
    """Uniform access to the current and next row of the trace."""

    @abstractmethod
    def col(self, index: int) -> FF:
        """Get column at current row."""
        pass

    @abstractmethod
    def next_col(self, index: int) -> FF:
        """Get column at next row (offset +1)."""
        pass

    def limbs(self, register: range) -> List[FF]:
        return [self.col(i) for i in register]

    def next_limbs(self, register: range) -> List[FF]:
        return [self.next_col(i) for i in register]


class RowContext(ConstraintContext):
    """Context over a produced (row, next_row) pair.

    A one-row operation has no continuation row of its own; the next row is
    taken as zero-filled, which is what the following trace row looks like
    to constraints that do not fire on it.
    """

    def __init__(self, row: FFRow, next_row: Optional[FFRow] = None):
        self._row = row
        self._next_row = next_row if next_row is not None else zero_row(NUM_ARITH_COLUMNS)

    def col(self, index: int) -> FF:
        return self._row[index]

    def next_col(self, index: int) -> FF:
        return self._next_row[index]


# --- Shared Identities ---


def value_of(limbs: List[FF]) -> FF:
    """Evaluate field limbs at X = 2^16."""
    acc = ZERO
    for limb in reversed(limbs):
        acc = acc * LIMB_BASE_FF + limb
    return acc


def root_2exp_constraints(p: List[FF], carries: List[FF]) -> List[FF]:
    """Values of p(X) - (X - 2^16) * c(X), coefficient by coefficient.

    All are zero iff carries exhibit 2^16 as a root of p. Missing carries are
    taken as zero.
    """
    result = []
    for k, p_k in enumerate(p):
        c_prev = carries[k - 1] if 0 < k <= len(carries) else ZERO
        c_k = carries[k] if k < len(carries) else ZERO
        result.append(p_k - c_prev + LIMB_BASE_FF * c_k)
    return result


def boolean(x: FF) -> FF:
    return x * (x - ONE)


class ConstraintModule(ABC):
    """Constraint evaluation for one gadget of the arithmetic table.

    Every returned value already carries its selector factor, so rows of
    other operators (and the selector-free continuation rows) evaluate to
    zero.
    """

    @abstractmethod
    def constraints(self, ctx: ConstraintContext) -> List[FF]:
        """Evaluate all constraints of this module on the window."""
        pass

    def constraint_polynomial(self, ctx: ConstraintContext, vc: FF) -> FF:
        """Combine all constraints with powers of the challenge vc."""
        return self._combine_constraints(self.constraints(ctx), vc)

    def _combine_constraints(self, constraints, vc):
        """Combine constraint list using standard accumulation pattern.

        Computes: ((constraints[0] * vc + constraints[1]) * vc + ...) + constraints[-1]
        """
        if len(constraints) == 1:
            return constraints[0]
        acc = constraints[0] * vc
        for i in range(1, len(constraints) - 1):
            acc = (acc + constraints[i]) * vc
        acc = acc + constraints[-1]
        return acc
