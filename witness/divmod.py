"""Division/modulo gadget for DIV, MOD (and SHR, via witness.shift).

Spans two rows. For dividend a, divisor b, quotient q and remainder r:

    row:       in registers, out, q (QUOTIENT_REGISTER), r (REMAINDER_REGISTER)
    next_row:  carries of b*q + r - a (PRODUCT_CARRY_REGISTER),
               b - r - 1 (MODULUS_GAP_REGISTER),
               MODULUS_IS_ZERO, MODULUS_INV

A zero divisor makes the operation total: q = r = out = 0 and
MODULUS_IS_ZERO = 1, which switches off the product and remainder-bound
identities for the row. Every other aux column is left at zero.
"""

from typing import List

from arithmetic import columns
from primitives.field import FF, FFRow, write_limbs
from .utils import pol_add, pol_mul_wide, pol_remove_root_2exp, pol_sub, u32_to_limbs

_QUOTIENT_OUTPUT_FILTERS = (columns.IS_DIV, columns.IS_SHR)
_REMAINDER_OUTPUT_FILTERS = (columns.IS_MOD,)


def divmod_constr_poly(dividend: List, divisor: List, quotient: List, remainder: List) -> List:
    """Coefficients of b(X)*q(X) + r(X) - a(X); vanishes at 2^16."""
    return pol_sub(pol_add(pol_mul_wide(divisor, quotient), remainder), dividend)


def generate_modulus_check(next_row: FFRow, modulus: int, remainder: int) -> None:
    """Write the zero flag, modulus inverse and gap for r < modulus.

    Shared with the modular gadget: both need "modulus == 0 or r < modulus".
    """
    if modulus == 0:
        next_row[columns.MODULUS_IS_ZERO] = 1
        return
    next_row[columns.MODULUS_INV] = FF(modulus) ** -1
    gap = modulus - remainder - 1
    write_limbs(next_row, columns.MODULUS_GAP_REGISTER, u32_to_limbs(gap))


def generate_divmod(
    row: FFRow,
    next_row: FFRow,
    row_filter: int,
    dividend: int,
    divisor: int,
    result: int,
) -> None:
    """Encode dividend = divisor * quotient + remainder for values already in the input registers.

    Raises:
        ValueError: If row_filter is not a divmod filter, or result does not
            match the quotient/remainder selected by row_filter
    """
    if divisor == 0:
        quotient, remainder = 0, 0
    else:
        quotient, remainder = divmod(dividend, divisor)

    if row_filter in _QUOTIENT_OUTPUT_FILTERS:
        output = quotient
    elif row_filter in _REMAINDER_OUTPUT_FILTERS:
        output = remainder
    else:
        raise ValueError(f"divmod: unsupported filter {row_filter}")
    if output != result:
        raise ValueError(f"divmod: result {result} does not match encoded output {output}")

    write_limbs(row, columns.OUTPUT_REGISTER, u32_to_limbs(output))
    write_limbs(row, columns.QUOTIENT_REGISTER, u32_to_limbs(quotient))
    write_limbs(row, columns.REMAINDER_REGISTER, u32_to_limbs(remainder))

    if divisor != 0:
        constr_poly = divmod_constr_poly(
            u32_to_limbs(dividend),
            u32_to_limbs(divisor),
            u32_to_limbs(quotient),
            u32_to_limbs(remainder),
        )
        carries = pol_remove_root_2exp(constr_poly)
        write_limbs(next_row, columns.PRODUCT_CARRY_REGISTER, carries)

    generate_modulus_check(next_row, divisor, remainder)


def generate(
    row: FFRow,
    next_row: FFRow,
    row_filter: int,
    input0: int,
    input1: int,
    result: int,
) -> None:
    write_limbs(row, columns.INPUT_REGISTER_0, u32_to_limbs(input0))
    write_limbs(row, columns.INPUT_REGISTER_1, u32_to_limbs(input1))
    generate_divmod(row, next_row, row_filter, input0, input1, result)
