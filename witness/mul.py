"""Multiplication gadget for MUL (and SHL, via witness.shift).

With s(X) = a(X) * b(X) truncated to N_LIMBS coefficients, the row holds
carries c such that
    s_i + c_{i-1} = out_i + 2^16 * c_i
for every limb. The last carry absorbs everything above 2^32, which gives
the wrapping product.
"""

from typing import List

from arithmetic import columns
from arithmetic.columns import LIMB_BASE, N_LIMBS, VALUE_MASK
from primitives.field import FFRow, write_limbs
from .utils import pol_mul_wide, u32_to_limbs


def product_carries(left: List[int], right: List[int], output: List[int]) -> List[int]:
    """Carries of the truncated schoolbook product left * right == output.

    Raises:
        ValueError: If output is not the truncated product
    """
    truncated = pol_mul_wide(left, right)[:N_LIMBS]
    carries = []
    carry = 0
    for s_i, out_i in zip(truncated, output):
        total = s_i + carry - out_i
        if total % LIMB_BASE != 0:
            raise ValueError(f"mul: {left} * {right} does not truncate to {output}")
        carry = total // LIMB_BASE
        carries.append(carry)
    return carries


def generate_mul(row: FFRow, left: int, right: int) -> None:
    """Write the product of two values already placed in input registers."""
    output = (left * right) & VALUE_MASK
    write_limbs(row, columns.OUTPUT_REGISTER, u32_to_limbs(output))
    carries = product_carries(u32_to_limbs(left), u32_to_limbs(right), u32_to_limbs(output))
    write_limbs(row, columns.CARRY_REGISTER, carries)


def generate(row: FFRow, input0: int, input1: int) -> None:
    write_limbs(row, columns.INPUT_REGISTER_0, u32_to_limbs(input0))
    write_limbs(row, columns.INPUT_REGISTER_1, u32_to_limbs(input1))
    generate_mul(row, input0, input1)
