"""Goldilocks field GF(p) and trace row buffers.

Uses galois library for all field arithmetic. FF is the field type; a trace
row is a one-dimensional FF array.
"""

import galois
from typing import Iterable, List

# --- Field Construction ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

FF = galois.GF(GOLDILOCKS_PRIME)
"""Base field GF(p) - Goldilocks prime field."""

FFRow = FF  # One trace row (array of base field elements)


# --- Integer Conversion ---
# Gadgets work with signed Python ints (carries and quotients can be
# negative); they are reduced into [0, p) only when written to a row.


def to_field(value: int) -> FF:
    """Reduce a signed integer into a base field element."""
    return FF(value % GOLDILOCKS_PRIME)


def from_field(elem: FF) -> int:
    """Lift a field element to its signed representative in (-p/2, p/2]."""
    value = int(elem)
    if value > GOLDILOCKS_PRIME // 2:
        return value - GOLDILOCKS_PRIME
    return value


# --- Row Buffers ---


def zero_row(width: int) -> FFRow:
    """Allocate a zero-filled trace row of the given width."""
    return FF.Zeros(width)


def write_limbs(row: FFRow, columns: Iterable[int], limbs: List[int]) -> None:
    """Write signed integer limbs into consecutive row columns.

    Columns beyond len(limbs) are left untouched.

    Raises:
        ValueError: If there are more limbs than columns
    """
    columns = list(columns)
    if len(limbs) > len(columns):
        raise ValueError(f"{len(limbs)} limbs do not fit in {len(columns)} columns")
    for col, limb in zip(columns, limbs):
        row[col] = to_field(limb)
