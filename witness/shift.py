"""Shift gadget: SHL simulated by MUL, SHR simulated by DIV.

The displacement 1 << shift (0 once shift >= 32) goes into INPUT_REGISTER_2.
SHL is then value * displacement mod 2^32 and SHR is value // displacement,
whose zero-divisor case yields the required 0 for large shifts.
"""

from arithmetic import columns
from arithmetic.columns import VALUE_BITS
from primitives.field import FFRow, write_limbs
from .divmod import generate_divmod
from .mul import generate_mul
from .utils import u32_to_limbs


def displacement(shift: int) -> int:
    """Multiplier/divisor that simulates a shift by `shift` bits."""
    if shift >= VALUE_BITS:
        return 0
    return 1 << shift


def generate(
    row: FFRow,
    next_row: FFRow,
    is_shl: bool,
    shift: int,
    value: int,
    result: int,
) -> None:
    """Fill a SHL row (next_row untouched) or a SHR row pair.

    Raises:
        ValueError: If the encoded output does not equal result
    """
    shifted_displacement = displacement(shift)

    write_limbs(row, columns.INPUT_REGISTER_0, u32_to_limbs(shift))
    write_limbs(row, columns.INPUT_REGISTER_1, u32_to_limbs(value))
    write_limbs(row, columns.INPUT_REGISTER_2, u32_to_limbs(shifted_displacement))

    if is_shl:
        generate_mul(row, value, shifted_displacement)
        output = [int(row[c]) for c in columns.OUTPUT_REGISTER]
        if output != u32_to_limbs(result):
            raise ValueError(f"shift: result {result} does not match encoded output {output}")
    else:
        generate_divmod(row, next_row, columns.IS_SHR, value, shifted_displacement, result)
