"""Constraint evaluation modules.

Each gadget of the arithmetic table has a ConstraintModule that evaluates its
polynomial identities on a (row, next_row) window in readable Python code.
ArithmeticConstraints combines them with the selector constraints.
"""

from .addcy import AddcyConstraints
from .arithmetic_table import ArithmeticConstraints, SelectorConstraints
from .base import (
    ConstraintContext,
    ConstraintModule,
    RowContext,
)
from .divmod import DivmodConstraints
from .modular import ModularConstraints
from .mul import MulConstraints

# Registry mapping gadget names to constraint module classes
CONSTRAINT_REGISTRY: dict[str, type[ConstraintModule]] = {
    "selectors": SelectorConstraints,
    "addcy": AddcyConstraints,
    "mul": MulConstraints,
    "divmod": DivmodConstraints,
    "modular": ModularConstraints,
    "arithmetic": ArithmeticConstraints,
}


def get_constraint_module(name: str) -> ConstraintModule:
    """Get constraint module instance by name.

    Args:
        name: Gadget name (e.g., 'addcy', 'divmod') or 'arithmetic' for all

    Returns:
        ConstraintModule instance

    Raises:
        KeyError: If no constraint module is registered under name
    """
    if name in CONSTRAINT_REGISTRY:
        return CONSTRAINT_REGISTRY[name]()
    raise KeyError(
        f"No constraint module '{name}'. "
        f"Available: {list(CONSTRAINT_REGISTRY.keys())}"
    )


__all__ = [
    "ConstraintContext",
    "RowContext",
    "ConstraintModule",
    "SelectorConstraints",
    "AddcyConstraints",
    "MulConstraints",
    "DivmodConstraints",
    "ModularConstraints",
    "ArithmeticConstraints",
    "CONSTRAINT_REGISTRY",
    "get_constraint_module",
]
