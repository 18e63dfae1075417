"""Carry/borrow chain gadget for ADD, SUB, LT and GT.

All four operators are encoded by the same limb identity
    x_i + y_i + c_{i-1} = z_i + 2^16 * c_i,     c_i in {0, 1}
i.e. x + y = z + c_{N-1} * 2^32, with (x, y, z) chosen per operator:

    ADD:  (in0,  in1, out)    out = in0 + in1 mod 2^32
    SUB:  (out,  in1, in0)    out = in0 - in1 mod 2^32
    LT:   (diff, in1, in0)    out = c_{N-1} = [in0 < in1]
    GT:   (diff, in0, in1)    out = c_{N-1} = [in0 > in1]

For LT/GT the final borrow is the comparison result; diff is the wrapped
difference that produces it.
"""

from typing import List, Tuple

from arithmetic import columns
from arithmetic.columns import LIMB_BASE, VALUE_MASK
from primitives.field import FFRow, write_limbs
from .utils import u32_to_limbs


def carry_chain(x: List[int], y: List[int], z: List[int]) -> List[int]:
    """Per-limb carries c with x + y = z + c_{N-1} * 2^32.

    Raises:
        ValueError: If some limb leaves a remainder modulo 2^16
    """
    carries = []
    carry = 0
    for x_i, y_i, z_i in zip(x, y, z):
        total = x_i + y_i + carry - z_i
        if total % LIMB_BASE != 0:
            raise ValueError(f"addcy: limb identity does not hold for {x} + {y} = {z}")
        carry = total // LIMB_BASE
        carries.append(carry)
    return carries


def _operands(row_filter: int, input0: int, input1: int) -> Tuple[int, int, int, int, int]:
    """Return (output, diff, x, y, z) for the operator selected by row_filter."""
    if row_filter == columns.IS_ADD:
        output = (input0 + input1) & VALUE_MASK
        return output, 0, input0, input1, output
    if row_filter == columns.IS_SUB:
        output = (input0 - input1) & VALUE_MASK
        return output, 0, output, input1, input0
    if row_filter == columns.IS_LT:
        diff = (input0 - input1) & VALUE_MASK
        return int(input0 < input1), diff, diff, input1, input0
    if row_filter == columns.IS_GT:
        diff = (input1 - input0) & VALUE_MASK
        return int(input0 > input1), diff, diff, input0, input1
    raise ValueError(f"addcy: unsupported filter {row_filter}")


def generate(row: FFRow, row_filter: int, input0: int, input1: int) -> None:
    """Fill inputs, output, carries and (for LT/GT) the difference."""
    output, diff, x, y, z = _operands(row_filter, input0, input1)

    write_limbs(row, columns.INPUT_REGISTER_0, u32_to_limbs(input0))
    write_limbs(row, columns.INPUT_REGISTER_1, u32_to_limbs(input1))
    write_limbs(row, columns.OUTPUT_REGISTER, u32_to_limbs(output))

    carries = carry_chain(u32_to_limbs(x), u32_to_limbs(y), u32_to_limbs(z))
    write_limbs(row, columns.CARRY_REGISTER, carries)

    if row_filter in (columns.IS_LT, columns.IS_GT):
        write_limbs(row, columns.DIFF_REGISTER, u32_to_limbs(diff))
