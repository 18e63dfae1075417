"""Constraints of the modular ternary operators (ADDMOD, MULMOD, SUBMOD).

Same shape as divmod with the wide quotient and f(a, b) in place of the
dividend: m*q + r - f(a, b) = 0 limb-wise unless m = 0.
"""

from typing import List

from arithmetic import columns
from primitives.field import FF
from witness.modular import modular_constr_poly
from .base import ConstraintContext, ConstraintModule
from .divmod import modulus_check_constraints

_FILTERS = [columns.IS_ADDMOD, columns.IS_MULMOD, columns.IS_SUBMOD]


class ModularConstraints(ConstraintModule):

    def constraints(self, ctx: ConstraintContext) -> List[FF]:
        in0 = ctx.limbs(columns.INPUT_REGISTER_0)
        in1 = ctx.limbs(columns.INPUT_REGISTER_1)
        modulus = ctx.limbs(columns.INPUT_REGISTER_2)
        out = ctx.limbs(columns.OUTPUT_REGISTER)
        quotient = ctx.limbs(columns.WIDE_QUOTIENT_REGISTER)

        result = []
        for row_filter in _FILTERS:
            sel = ctx.col(row_filter)
            constr_poly = modular_constr_poly(row_filter, in0, in1, modulus, out, quotient)
            for value in modulus_check_constraints(ctx, modulus, out, quotient, constr_poly):
                result.append(sel * value)
        return result
