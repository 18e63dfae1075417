"""Shared fixtures for the arithmetic table tests."""

import random
import sys
from pathlib import Path

import pytest

# tests/ is inside the repository root
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from arithmetic.columns import VALUE_MASK  # noqa: E402
from constraints import ArithmeticConstraints  # noqa: E402

# Operand values that hit limb and word boundaries
EDGE_VALUES = [0, 1, 2, 31, 32, 33, 0xFFFF, 0x10000, 0x7FFFFFFF, 0x80000000, VALUE_MASK - 1, VALUE_MASK]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(0xA817)


@pytest.fixture(scope="module")
def arithmetic_constraints() -> ArithmeticConstraints:
    return ArithmeticConstraints()
