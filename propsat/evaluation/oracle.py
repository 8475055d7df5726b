"""
propsat/evaluation/oracle.py
============================
Independent reference procedures for checking solver verdicts.

    truth_table_satisfiable(F)   enumerate all 2^n assignments of F's
                                 user variables (small n only)
    check_model(F, model)        does a solver witness actually satisfy F?
    z3_satisfiable(F)            cross-check with Z3, when installed

Z3 is optional. Without it the z3 helpers raise PropSatError; they
never fall back to another procedure.

Reference: De Moura & Bjørner (2008) "Z3: An Efficient SMT Solver".
"""
from __future__ import annotations

import itertools
import logging
from typing import Dict, Iterator, Mapping, Optional

from propsat.core.exceptions import PropSatError
from propsat.symbolic.formula import And, Constant, Formula, Not, Or, Var

logger = logging.getLogger(__name__)

# Z3 is optional — the cross-check is disabled if not installed
try:
    import z3

    Z3_AVAILABLE = True
except ImportError:  # pragma: no cover
    Z3_AVAILABLE = False
    logger.info("Z3 not installed. z3 cross-checks disabled. pip install z3-solver")

# 2^20 rows is already slow in pure Python
MAX_TRUTH_TABLE_VARIABLES = 20


# ─── TRUTH TABLE ──────────────────────────────────────────────────

def truth_table_models(formula: Formula) -> Iterator[Dict[str, bool]]:
    """Yield every total assignment of the user variables satisfying ``formula``.

    Rows are enumerated in binary order with False before True.

    Raises:
        PropSatError: if the formula has more than
            MAX_TRUTH_TABLE_VARIABLES variables.
    """
    names = formula.variables()
    if len(names) > MAX_TRUTH_TABLE_VARIABLES:
        raise PropSatError(
            f"Truth table over {len(names)} variables is too large "
            f"(limit {MAX_TRUTH_TABLE_VARIABLES})",
            context={"variables": len(names)},
        )
    for values in itertools.product((False, True), repeat=len(names)):
        row = dict(zip(names, values))
        if formula.evaluate(row):
            yield row


def truth_table_satisfiable(formula: Formula) -> bool:
    return next(truth_table_models(formula), None) is not None


def check_model(formula: Formula, model: Mapping[str, bool]) -> bool:
    """True if ``model`` satisfies ``formula``.

    Variables missing from ``model`` (the search never had to consult
    them) are filled with False. Extra keys such as gate variables are
    ignored.
    """
    row = {name: bool(model.get(name, False)) for name in formula.variables()}
    return formula.evaluate(row)


# ─── Z3 CROSS-CHECK ───────────────────────────────────────────────

def require_z3() -> None:
    """Raise PropSatError if Z3 is not installed."""
    if not Z3_AVAILABLE:
        raise PropSatError(
            "Z3 is required for this operation. pip install z3-solver",
            context={"feature": "z3"},
        )


def to_z3(formula: Formula, symbols: Optional[Dict[str, object]] = None):
    """Translate a Formula into a z3 BoolRef (post-order, iterative)."""
    require_z3()
    if symbols is None:
        symbols = {}
    done: Dict[int, object] = {}
    stack = [(formula, False)]
    while stack:
        node, expanded = stack.pop()
        children = node.children()
        if children and not expanded:
            stack.append((node, True))
            stack.extend((c, False) for c in children)
            continue
        if isinstance(node, Constant):
            term = z3.BoolVal(node.value)
        elif isinstance(node, Var):
            if node.name not in symbols:
                symbols[node.name] = z3.Bool(node.name)
            term = symbols[node.name]
        elif isinstance(node, Not):
            term = z3.Not(done[id(node.sub)])
        elif isinstance(node, And):
            term = z3.And(done[id(node.left)], done[id(node.right)])
        elif isinstance(node, Or):
            term = z3.Or(done[id(node.left)], done[id(node.right)])
        else:
            raise PropSatError(f"Cannot translate {type(node).__name__} to z3")
        done[id(node)] = term
    return done[id(formula)]


def z3_satisfiable(formula: Formula) -> bool:
    """Satisfiability of ``formula`` according to Z3."""
    require_z3()
    solver = z3.Solver()
    solver.add(to_z3(formula))
    verdict = solver.check()
    if verdict == z3.unknown:
        raise PropSatError("Z3 returned unknown", context={"reason": solver.reason_unknown()})
    return verdict == z3.sat
