"""Constraints of the truncated product (MUL, and SHL as in1 * in2).

Per limb: out_i - s_i - c_{i-1} + 2^16 * c_i = 0, with s the product
truncated to N_LIMBS coefficients. The top carry is free: it holds the bits
above 2^32 that the wrapping product discards.

SHL is bound to its shift amount only through the displacement in
INPUT_REGISTER_2, whose value is fixed by a lookup outside this table.
"""

from typing import List

from arithmetic import columns
from arithmetic.columns import N_LIMBS
from primitives.field import FF
from witness.utils import pol_mul_wide, pol_sub
from .base import ConstraintContext, ConstraintModule, root_2exp_constraints


class MulConstraints(ConstraintModule):

    def constraints(self, ctx: ConstraintContext) -> List[FF]:
        is_mul = ctx.col(columns.IS_MUL)
        is_shl = ctx.col(columns.IS_SHL)

        in0 = ctx.limbs(columns.INPUT_REGISTER_0)
        in1 = ctx.limbs(columns.INPUT_REGISTER_1)
        in2 = ctx.limbs(columns.INPUT_REGISTER_2)
        out = ctx.limbs(columns.OUTPUT_REGISTER)
        carries = ctx.limbs(columns.CARRY_REGISTER)

        result = []
        for sel, left, right in [(is_mul, in0, in1), (is_shl, in1, in2)]:
            truncated = pol_mul_wide(left, right)[:N_LIMBS]
            for value in root_2exp_constraints(pol_sub(out, truncated), carries):
                result.append(sel * value)
        return result
