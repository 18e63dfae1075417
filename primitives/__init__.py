"""Primitives - Low-level field building blocks."""

from primitives.field import (
    FF,
    FFRow,
    GOLDILOCKS_PRIME,
    from_field,
    to_field,
    write_limbs,
    zero_row,
)

__all__ = [
    # Field
    "FF",
    "FFRow",
    "GOLDILOCKS_PRIME",
    "to_field",
    "from_field",
    # Rows
    "zero_row",
    "write_limbs",
]
