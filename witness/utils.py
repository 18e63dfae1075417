"""Limb and limb-polynomial helpers shared by the gadgets.

A value v is represented by limbs v_i with v = sum(v_i * 2^(16*i)), i.e. as a
polynomial v(X) evaluated at X = 2^16. Identities between values are checked
limb-wise by exhibiting a carry polynomial c(X) with
    p(X) = (X - 2^16) * c(X)
which holds iff p(2^16) = 0.

Decomposition works on plain (signed) Python ints. The pol_* helpers only use
+, - and *, so the constraint side reuses them on FF limbs; they never mix
int literals into the coefficients.
"""

from typing import List

from arithmetic.columns import LIMB_BASE, LIMB_BITS, N_LIMBS

# --- Limb Decomposition ---


def u32_to_limbs(value: int) -> List[int]:
    """Split a 32-bit unsigned value into N_LIMBS little-endian limbs."""
    return int_to_limbs(value, N_LIMBS)


def int_to_limbs(value: int, n_limbs: int) -> List[int]:
    """Split a signed integer into n_limbs limbs sharing the value's sign.

    Negative values get negated limbs of their magnitude, so that
    limbs_to_int(int_to_limbs(v, n)) == v for both signs.

    Raises:
        ValueError: If |value| needs more than n_limbs limbs
    """
    sign = -1 if value < 0 else 1
    magnitude = abs(value)
    if magnitude >> (LIMB_BITS * n_limbs):
        raise ValueError(f"{value} does not fit in {n_limbs} limbs of {LIMB_BITS} bits")
    mask = LIMB_BASE - 1
    return [sign * ((magnitude >> (LIMB_BITS * i)) & mask) for i in range(n_limbs)]


def limbs_to_int(limbs: List[int]) -> int:
    """Evaluate a limb vector at X = 2^16."""
    value = 0
    for limb in reversed(limbs):
        value = value * LIMB_BASE + limb
    return value


# --- Limb Polynomials ---


def pol_add(a: List, b: List) -> List:
    n = min(len(a), len(b))
    return [x + y for x, y in zip(a, b)] + list(a[n:]) + list(b[n:])


def pol_sub(a: List, b: List) -> List:
    n = min(len(a), len(b))
    return [x - y for x, y in zip(a, b)] + list(a[n:]) + [-y for y in b[n:]]


def pol_mul_wide(a: List, b: List) -> List:
    """Full schoolbook product; result has len(a) + len(b) - 1 coefficients."""
    res = [None] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            term = x * y
            res[i + j] = term if res[i + j] is None else res[i + j] + term
    return res


def pol_remove_root_2exp(p: List[int]) -> List[int]:
    """Divide p(X) by (X - 2^16), returning the quotient coefficients.

    The quotient c satisfies, coefficient-wise,
        p_0 = -2^16 * c_0
        p_i = c_{i-1} - 2^16 * c_i      for 0 < i < len(p) - 1
        p_n = c_{n-1}
    These are exactly the per-limb carries of the identity p(2^16) = 0.

    Raises:
        ValueError: If 2^16 is not a root of p
    """
    carries = []
    carry = 0
    for coeff in p[:-1]:
        total = carry - coeff
        if total % LIMB_BASE != 0:
            raise ValueError(f"2^{LIMB_BITS} is not a root of {p}")
        carry = total // LIMB_BASE
        carries.append(carry)
    if carry != p[-1]:
        raise ValueError(f"2^{LIMB_BITS} is not a root of {p}")
    return carries
