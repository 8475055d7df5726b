"""
propsat/symbolic/dpll.py
========================
DPLL backtracking search over a CNF Conjunction.

Algorithm (Davis, Logemann & Loveland, 1962), in its plainest form:

    search(φ):
        φ' = simplify(φ, assignments)
        if φ' is ⊤: return True
        if φ' contains ⊥: return False
        pick the first literal of the first disjunction of φ'
        assignments[x] = polarity that satisfies that literal
        if search(φ'): return True
        assignments[x] = opposite polarity
        if search(φ'): return True
        del assignments[x]
        return False

There is no unit propagation beyond what simplify() does, no pure
literal rule, no clause learning and no restarts. Worst case is
exponential in the number of variables.

The recursion is run on an explicit decision stack so the depth of the
search is not limited by the interpreter's recursion limit. Each frame
remembers the conjunction it branched on, so popping a frame resumes
exactly where the recursive call would have returned.

Backtracking is scoped: a variable whose two values both failed is
removed from the assignment map before the parent frame flips its own
variable. Decisions made along an abandoned path therefore never leak
into a sibling branch, and the map reported after a satisfiable run
only holds decisions on the successful path.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from propsat.core.config import SearchConfig
from propsat.core.exceptions import SearchInvariantError
from propsat.core.types import DecisionKind, SearchStats, SearchTrace
from propsat.symbolic.cnf import Conjunction

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    formula:  Conjunction   # simplified conjunction the decision was taken on
    variable: str
    value:    bool          # first trial value
    flipped:  bool = False


class DPLLSolver:
    """Exhaustive binary backtracking over one Conjunction.

    The engine owns the conjunction and a single mutable assignment map
    for the life of a solve. It is not meant to be shared between
    concurrent queries: use one instance per query.

    Every open frame keeps the conjunction it branched on, so peak memory
    is O(depth × clauses) in the worst case, the same as a recursive
    search. Disjunctions that simplify() leaves untouched are shared
    between frames.

    Usage:
        solver = DPLLSolver(Conjunction.from_clauses([["a", "b"], ["-a"]]))
        assert solver.is_satisfiable()
        solver.get_assignments()   # {"a": False, "b": True}
    """

    def __init__(self, formula: Conjunction, config: Optional[SearchConfig] = None):
        self._formula = formula
        self._config = config or SearchConfig()
        self._assignments: Dict[str, bool] = {}
        self.stats = SearchStats()
        self.trace: Optional[SearchTrace] = None

    @property
    def formula(self) -> Conjunction:
        return self._formula

    def get_assignments(self) -> Mapping[str, bool]:
        """Read-only view of the assignment map.

        Meaningful only after is_satisfiable() returned True; variables
        the search never had to consult are absent.
        """
        return MappingProxyType(self._assignments)

    # ─── ENTRY POINT ───────────────────────────────────────────────

    def is_satisfiable(self) -> bool:
        """Decide satisfiability of the stored conjunction.

        Starts from the current assignment map (empty for a fresh engine).
        On True the map holds a witness.
        """
        self.stats.reset()
        self.trace = SearchTrace() if self._config.record_trace else None

        simplified = self._simplify(self._formula)
        result = self._search(simplified)

        logger.debug(
            "DPLL finished: %s after %d decisions, %d flips (max depth %d)",
            "SAT" if result else "UNSAT",
            self.stats.decisions,
            self.stats.flips,
            self.stats.max_depth,
        )
        return result

    # ─── SEARCH ────────────────────────────────────────────────────

    def _search(self, formula: Conjunction) -> bool:
        stack: List[_Frame] = []
        current = formula
        result: Optional[bool] = None

        while True:
            if result is None:
                simplified = self._simplify(current)
                if simplified.is_trivially_true():
                    result = True
                elif simplified.is_trivially_false():
                    result = False
                else:
                    variable, value = self.choose_variable(simplified)
                    stack.append(_Frame(simplified, variable, value))
                    self._assign(DecisionKind.DECIDE, variable, value, len(stack))
                    self.stats.decisions += 1
                    self.stats.max_depth = max(self.stats.max_depth, len(stack))
                    current = simplified
                    continue

            # A sub-search finished with ``result``: return into the parent frame.
            if not stack:
                return result
            if result:
                stack.pop()
                continue

            frame = stack[-1]
            if not frame.flipped:
                frame.flipped = True
                self._assign(DecisionKind.FLIP, frame.variable, not frame.value, len(stack))
                self.stats.flips += 1
                current = frame.formula
                result = None
                continue

            stack.pop()
            self._retract(frame.variable, len(stack) + 1)

    def _simplify(self, formula: Conjunction) -> Conjunction:
        self.stats.simplify_calls += 1
        return formula.simplify(self._assignments)

    def _assign(self, kind: DecisionKind, variable: str, value: bool, depth: int) -> None:
        self._assignments[variable] = value
        if self.trace is not None:
            self.trace.record(kind, variable, value, depth)
        logger.debug("%s %s = %s at depth %d", kind.value, variable, value, depth)

    def _retract(self, variable: str, depth: int) -> None:
        del self._assignments[variable]
        self.stats.retractions += 1
        if self.trace is not None:
            self.trace.record(DecisionKind.RETRACT, variable, None, depth)

    @staticmethod
    def choose_variable(formula: Conjunction) -> Tuple[str, bool]:
        """First literal of the first disjunction, and the value that
        satisfies it (True for x, False for ¬x)."""
        for disj in formula:
            for literal in disj:
                return literal.name, literal.required_value()
        raise SearchInvariantError(
            "No literal to branch on in a conjunction that is neither "
            "trivially true nor trivially false",
            context={"disjunctions": len(formula)},
        )
