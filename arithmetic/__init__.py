"""Arithmetic table: operators, operations and their trace rows."""

from arithmetic.columns import NUM_ARITH_COLUMNS, SELECTOR_COLUMNS
from arithmetic.operation import (
    BinaryOperation,
    Operation,
    ROW_GENERATORS,
    TWO_ROW_OPERATORS,
    TernaryOperation,
    operations_to_rows,
    to_rows,
)
from arithmetic.operators import BinaryOperator, TernaryOperator

__all__ = [
    # Operators
    "BinaryOperator",
    "TernaryOperator",
    # Operations
    "Operation",
    "BinaryOperation",
    "TernaryOperation",
    # Rows
    "to_rows",
    "operations_to_rows",
    "ROW_GENERATORS",
    "TWO_ROW_OPERATORS",
    # Layout
    "NUM_ARITH_COLUMNS",
    "SELECTOR_COLUMNS",
]
