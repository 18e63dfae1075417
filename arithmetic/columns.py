"""Column layout of the arithmetic table.

All indices are computed once at import and never mutated. 32-bit values are
stored as N_LIMBS little-endian limbs of LIMB_BITS bits each.

Layout:
    [selectors][in0][in1][in2][out][aux0][aux1][modulus_is_zero][modulus_inv]
"""

from typing import List

# --- Limb Geometry ---

VALUE_BITS = 32
LIMB_BITS = 16
N_LIMBS = VALUE_BITS // LIMB_BITS
LIMB_BASE = 1 << LIMB_BITS
VALUE_MASK = (1 << VALUE_BITS) - 1


# --- Selectors ---
# One boolean column per operator. Exactly one is set on an operation's first row.

IS_ADD = 0
IS_MUL = 1
IS_SUB = 2
IS_DIV = 3
IS_MOD = 4
IS_LT = 5
IS_GT = 6
IS_SHL = 7
IS_SHR = 8
IS_ADDMOD = 9
IS_MULMOD = 10
IS_SUBMOD = 11

SELECTOR_COLUMNS: List[int] = [
    IS_ADD,
    IS_MUL,
    IS_SUB,
    IS_DIV,
    IS_MOD,
    IS_LT,
    IS_GT,
    IS_SHL,
    IS_SHR,
    IS_ADDMOD,
    IS_MULMOD,
    IS_SUBMOD,
]

_START_REGISTERS = len(SELECTOR_COLUMNS)


# --- Registers ---

def _register(start: int, n_cols: int) -> range:
    return range(start, start + n_cols)


INPUT_REGISTER_0 = _register(_START_REGISTERS, N_LIMBS)
INPUT_REGISTER_1 = _register(INPUT_REGISTER_0.stop, N_LIMBS)
INPUT_REGISTER_2 = _register(INPUT_REGISTER_1.stop, N_LIMBS)
OUTPUT_REGISTER = _register(INPUT_REGISTER_2.stop, N_LIMBS)

# Double width so that a 64-bit quotient (MULMOD) or a carry vector fits.
AUX_REGISTER_0 = _register(OUTPUT_REGISTER.stop, 2 * N_LIMBS)
AUX_REGISTER_1 = _register(AUX_REGISTER_0.stop, 2 * N_LIMBS)

MODULUS_IS_ZERO = AUX_REGISTER_1.stop
MODULUS_INV = MODULUS_IS_ZERO + 1

NUM_ARITH_COLUMNS = MODULUS_INV + 1


# --- Gadget Sub-ranges ---
# Names used by the gadgets for the aux registers they own.

# addcy / mul: per-limb carry chain
CARRY_REGISTER = _register(AUX_REGISTER_0.start, N_LIMBS)
# addcy (LT/GT): in0 - in1 or in1 - in0 modulo 2^32
DIFF_REGISTER = _register(AUX_REGISTER_1.start, N_LIMBS)

# divmod: quotient and remainder on the first row
QUOTIENT_REGISTER = _register(AUX_REGISTER_0.start, N_LIMBS)
REMAINDER_REGISTER = _register(AUX_REGISTER_1.start, N_LIMBS)

# modular: quotient of up to 64 bits on the first row
WIDE_QUOTIENT_REGISTER = AUX_REGISTER_0

# divmod / modular, next row: product carries and (modulus - remainder - 1)
PRODUCT_CARRY_REGISTER = AUX_REGISTER_0
MODULUS_GAP_REGISTER = _register(AUX_REGISTER_1.start, N_LIMBS)
