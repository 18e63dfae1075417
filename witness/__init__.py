"""Witness generation gadgets for the arithmetic table.

Each gadget fills the operator-owned columns of one or two pre-allocated
rows from native 32-bit operands:

    addcy    carry/borrow chain (ADD, SUB, LT, GT)
    mul      truncated schoolbook product (MUL)
    divmod   quotient/remainder with zero-divisor flag (DIV, MOD)
    shift    SHL via mul, SHR via divmod
    modular  exact (a op b) mod m (ADDMOD, MULMOD, SUBMOD)

Selector columns are set by the caller, never by a gadget.
"""

from . import addcy, divmod, modular, mul, shift

__all__ = [
    'addcy',
    'divmod',
    'modular',
    'mul',
    'shift',
]
