"""Constraints of the division/modulo encoding (DIV, MOD, SHR).

With z = MODULUS_IS_ZERO and inv = MODULUS_INV from the next row:

    z * (z - 1) = 0
    b * inv - (1 - z) = 0          z = 1 iff b = 0
    z * b = 0
    (1 - z) * (b*q + r - a)        limb-wise, carries on the next row
    (1 - z) * (b - r - 1 - gap)    r < b once gap is range checked
    z * q_i = z * r_i = 0          zero divisor gives q = r = 0
    out_i - q_i (DIV, SHR)   or   out_i - r_i (MOD)

every value multiplied by the operator's selector.
"""

from typing import List

from arithmetic import columns
from arithmetic.columns import N_LIMBS
from primitives.field import FF
from witness.divmod import divmod_constr_poly
from .base import (
    ConstraintContext,
    ConstraintModule,
    ONE,
    boolean,
    root_2exp_constraints,
    value_of,
)


def modulus_check_constraints(
    ctx: ConstraintContext,
    modulus: List[FF],
    remainder: List[FF],
    quotient: List[FF],
    constr_poly: List[FF],
) -> List[FF]:
    """Unfiltered constraints shared by divmod and the modular operators."""
    is_zero = ctx.next_col(columns.MODULUS_IS_ZERO)
    inv = ctx.next_col(columns.MODULUS_INV)
    gap = ctx.next_limbs(columns.MODULUS_GAP_REGISTER)
    n_carries = len(constr_poly) - 1
    carries = ctx.next_limbs(columns.PRODUCT_CARRY_REGISTER)[:n_carries]

    m = value_of(modulus)
    not_zero = ONE - is_zero

    result = [
        boolean(is_zero),
        m * inv - not_zero,
        is_zero * m,
    ]
    result.extend(not_zero * v for v in root_2exp_constraints(constr_poly, carries))
    result.append(not_zero * (m - value_of(remainder) - ONE - value_of(gap)))
    result.extend(is_zero * limb for limb in quotient)
    result.extend(is_zero * limb for limb in remainder)
    return result


class DivmodConstraints(ConstraintModule):

    def constraints(self, ctx: ConstraintContext) -> List[FF]:
        is_div = ctx.col(columns.IS_DIV)
        is_mod = ctx.col(columns.IS_MOD)
        is_shr = ctx.col(columns.IS_SHR)

        in0 = ctx.limbs(columns.INPUT_REGISTER_0)
        in1 = ctx.limbs(columns.INPUT_REGISTER_1)
        in2 = ctx.limbs(columns.INPUT_REGISTER_2)
        out = ctx.limbs(columns.OUTPUT_REGISTER)
        quotient = ctx.limbs(columns.QUOTIENT_REGISTER)
        remainder = ctx.limbs(columns.REMAINDER_REGISTER)

        # (filter, dividend, divisor, limbs that must equal the output)
        variants = [
            (is_div, in0, in1, quotient),
            (is_mod, in0, in1, remainder),
            (is_shr, in1, in2, quotient),
        ]

        result = []
        for sel, dividend, divisor, selected in variants:
            constr_poly = divmod_constr_poly(dividend, divisor, quotient, remainder)
            for value in modulus_check_constraints(ctx, divisor, remainder, quotient, constr_poly):
                result.append(sel * value)
            for i in range(N_LIMBS):
                result.append(sel * (out[i] - selected[i]))
        return result
