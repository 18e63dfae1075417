"""Constraints of the carry/borrow chain (ADD, SUB, LT, GT).

Per limb, for the (x, y, z) triple of the active operator:
    z_i - x_i - y_i - c_{i-1} + 2^16 * c_i = 0
with boolean carries. For LT/GT the output is the final carry.
"""

from typing import List

from arithmetic import columns
from arithmetic.columns import N_LIMBS
from primitives.field import FF
from witness.utils import pol_add, pol_sub
from .base import ConstraintContext, ConstraintModule, boolean, root_2exp_constraints


class AddcyConstraints(ConstraintModule):

    def constraints(self, ctx: ConstraintContext) -> List[FF]:
        is_add = ctx.col(columns.IS_ADD)
        is_sub = ctx.col(columns.IS_SUB)
        is_lt = ctx.col(columns.IS_LT)
        is_gt = ctx.col(columns.IS_GT)

        in0 = ctx.limbs(columns.INPUT_REGISTER_0)
        in1 = ctx.limbs(columns.INPUT_REGISTER_1)
        out = ctx.limbs(columns.OUTPUT_REGISTER)
        carries = ctx.limbs(columns.CARRY_REGISTER)
        diff = ctx.limbs(columns.DIFF_REGISTER)

        # (filter, x, y, z) with x + y = z + c * 2^32
        chains = [
            (is_add, in0, in1, out),
            (is_sub, out, in1, in0),
            (is_lt, diff, in1, in0),
            (is_gt, diff, in0, in1),
        ]

        result = []
        for sel, x, y, z in chains:
            for value in root_2exp_constraints(pol_sub(z, pol_add(x, y)), carries):
                result.append(sel * value)

        any_filter = is_add + is_sub + is_lt + is_gt
        for c in carries:
            result.append(any_filter * boolean(c))

        # Comparison output is the final borrow, zero-extended
        cmp_filter = is_lt + is_gt
        result.append(cmp_filter * (out[0] - carries[N_LIMBS - 1]))
        for limb in out[1:]:
            result.append(cmp_filter * limb)

        return result
