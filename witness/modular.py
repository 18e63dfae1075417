"""Modular ternary gadget for ADDMOD, MULMOD and SUBMOD.

For inputs a, b and modulus m, with f(a, b) in {a + b, a * b, a - b}
computed exactly (no 32-bit wraparound), the rows hold

    row:       a, b, m, out = r, quotient q (WIDE_QUOTIENT_REGISTER)
    next_row:  carries of m*q + r - f(a, b) (PRODUCT_CARRY_REGISTER),
               m - r - 1, MODULUS_IS_ZERO, MODULUS_INV

f(a, b) = m*q + r with 0 <= r < m. For SUBMOD the quotient is negative
when a < b and is stored as negated limbs. The limb polynomial of f is
built from the input limbs (a(X) * b(X) for MULMOD), so the constraint side
can rebuild it from the row alone.

m = 0 gives out = q = r = 0 with MODULUS_IS_ZERO set.
"""

from typing import Callable, Dict, List, Tuple

from arithmetic import columns
from arithmetic.columns import N_LIMBS
from primitives.field import FFRow, write_limbs
from .divmod import generate_modulus_check
from .utils import int_to_limbs, pol_add, pol_mul_wide, pol_remove_root_2exp, pol_sub, u32_to_limbs

# filter -> (exact integer op, limb polynomial op)
_OPS: Dict[int, Tuple[Callable[[int, int], int], Callable[[List[int], List[int]], List[int]]]] = {
    columns.IS_ADDMOD: (lambda a, b: a + b, pol_add),
    columns.IS_MULMOD: (lambda a, b: a * b, pol_mul_wide),
    columns.IS_SUBMOD: (lambda a, b: a - b, pol_sub),
}

QUOTIENT_LIMBS = 2 * N_LIMBS


def modular_constr_poly(
    row_filter: int,
    input0: List[int],
    input1: List[int],
    modulus: List[int],
    output: List[int],
    quotient: List[int],
) -> List[int]:
    """Coefficients of m(X)*q(X) + r(X) - f(a(X), b(X)); vanishes at 2^16."""
    _, pol_op = _OPS[row_filter]
    return pol_sub(pol_add(pol_mul_wide(modulus, quotient), output), pol_op(input0, input1))


def generate(
    row: FFRow,
    next_row: FFRow,
    row_filter: int,
    input0: int,
    input1: int,
    input2: int,
) -> None:
    """Fill the two rows of a modular operation.

    Raises:
        ValueError: If row_filter is not a modular filter
    """
    if row_filter not in _OPS:
        raise ValueError(f"modular: unsupported filter {row_filter}")
    int_op, _ = _OPS[row_filter]

    if input2 == 0:
        quotient, remainder = 0, 0
    else:
        quotient, remainder = divmod(int_op(input0, input1), input2)

    a_limbs = u32_to_limbs(input0)
    b_limbs = u32_to_limbs(input1)
    m_limbs = u32_to_limbs(input2)
    r_limbs = u32_to_limbs(remainder)
    q_limbs = int_to_limbs(quotient, QUOTIENT_LIMBS)

    write_limbs(row, columns.INPUT_REGISTER_0, a_limbs)
    write_limbs(row, columns.INPUT_REGISTER_1, b_limbs)
    write_limbs(row, columns.INPUT_REGISTER_2, m_limbs)
    write_limbs(row, columns.OUTPUT_REGISTER, r_limbs)
    write_limbs(row, columns.WIDE_QUOTIENT_REGISTER, q_limbs)

    if input2 != 0:
        constr_poly = modular_constr_poly(row_filter, a_limbs, b_limbs, m_limbs, r_limbs, q_limbs)
        write_limbs(next_row, columns.PRODUCT_CARRY_REGISTER, pol_remove_root_2exp(constr_poly))

    generate_modulus_check(next_row, input2, remainder)
