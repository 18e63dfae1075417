"""Constraints of the whole arithmetic table.

Combines the selector constraints with every gadget module. Used to check
that rows produced by arithmetic.to_rows() are accepted:

    row, next_row = Operation.binary(BinaryOperator.DIV, 10, 0).to_rows()
    assert ArithmeticConstraints().check_rows(row, next_row)
"""

from typing import List, Optional

from arithmetic.columns import SELECTOR_COLUMNS
from primitives.field import FF, FFRow
from .addcy import AddcyConstraints
from .base import ConstraintContext, ConstraintModule, RowContext, ZERO, boolean
from .divmod import DivmodConstraints
from .modular import ModularConstraints
from .mul import MulConstraints


class SelectorConstraints(ConstraintModule):
    """Each selector is boolean and at most one is set per row."""

    def constraints(self, ctx: ConstraintContext) -> List[FF]:
        selectors = [ctx.col(c) for c in SELECTOR_COLUMNS]
        total = ZERO
        for s in selectors:
            total = total + s
        return [boolean(s) for s in selectors] + [boolean(total)]


class ArithmeticConstraints(ConstraintModule):

    def __init__(self):
        self.modules: List[ConstraintModule] = [
            SelectorConstraints(),
            AddcyConstraints(),
            MulConstraints(),
            DivmodConstraints(),
            ModularConstraints(),
        ]

    def constraints(self, ctx: ConstraintContext) -> List[FF]:
        result = []
        for module in self.modules:
            result.extend(module.constraints(ctx))
        return result

    def evaluate_rows(self, row: FFRow, next_row: Optional[FFRow] = None) -> List[FF]:
        return self.constraints(RowContext(row, next_row))

    def check_rows(self, row: FFRow, next_row: Optional[FFRow] = None) -> bool:
        """True iff every constraint vanishes on (row, next_row)."""
        return all(v == ZERO for v in self.evaluate_rows(row, next_row))
