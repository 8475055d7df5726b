"""
propsat/core/validators.py
==========================
Input validation for formulas handed to the Solver.

Validates:
    - every node is one of Constant / Var / Not / And / Or
    - every child slot holds a Formula
    - Constant values are real bools
    - Var names are non-empty strings that do not start with the reserved
      gate-name prefix (gate variables must stay distinct from user
      variables). Any other string is a legal name.

These validators run at the API boundary, not inside the encoder or the
search loop. Formula construction itself stays unchecked.

All validation failures raise InvalidFormulaError with the full list of
problems found, so a caller sees every bad node at once.
"""
from __future__ import annotations

from typing import List

from propsat.core.config import DEFAULT_GATE_PREFIX
from propsat.core.exceptions import InvalidFormulaError


def validate_var_name(name: object, gate_prefix: str = DEFAULT_GATE_PREFIX) -> List[str]:
    """Validate one variable name. Returns list of error strings."""
    if not isinstance(name, str):
        return [f"Variable name {name!r} is not a string"]
    if not name:
        return ["Variable name is empty"]
    if gate_prefix and name.startswith(gate_prefix):
        return [f"Variable name '{name}' uses the reserved gate prefix '{gate_prefix}'"]
    return []


def validate_formula(formula: object, gate_prefix: str = DEFAULT_GATE_PREFIX) -> List[str]:
    """Validate a whole formula tree. Returns list of error strings.

    Iterative, so arbitrarily deep trees are fine.
    """
    from propsat.symbolic.formula import And, Constant, Formula, Not, Or, Var

    errors: List[str] = []
    stack = [(formula, "root")]
    while stack:
        node, path = stack.pop()
        if not isinstance(node, Formula):
            errors.append(f"{path}: expected Formula, got {type(node).__name__}")
            continue
        if isinstance(node, Constant):
            if not isinstance(node.value, bool):
                errors.append(
                    f"{path}: Constant value must be bool, got {type(node.value).__name__}"
                )
        elif isinstance(node, Var):
            errors.extend(f"{path}: {e}" for e in validate_var_name(node.name, gate_prefix))
        elif isinstance(node, Not):
            stack.append((node.sub, f"{path}.sub"))
        elif isinstance(node, (And, Or)):
            stack.append((node.right, f"{path}.right"))
            stack.append((node.left, f"{path}.left"))
        else:
            errors.append(f"{path}: unsupported node type {type(node).__name__}")
    return errors


def assert_valid_formula(formula: object, gate_prefix: str = DEFAULT_GATE_PREFIX) -> None:
    """Raise InvalidFormulaError if ``formula`` fails validation."""
    errors = validate_formula(formula, gate_prefix)
    if errors:
        raise InvalidFormulaError(
            f"Formula failed validation with {len(errors)} error(s): {errors[0]}",
            errors=errors,
            context={"error_count": len(errors)},
        )
