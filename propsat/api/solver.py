"""
propsat/api/solver.py
=====================
Solver — the public entry point.

    Formula ──encode──▶ Conjunction ──DPLL──▶ verdict + assignment map

The formula is validated and encoded exactly once, in the constructor.
Each query then runs a fresh DPLL search.

Root assertion:
    The Tseytin encoding only states gate ↔ subformula; it does not say
    the whole formula must hold. With SearchConfig.assert_root (default)
    the unit clause (root) is appended before searching, so the verdict
    is the satisfiability of the input formula. With assert_root=False
    the raw encoding is searched as is; that encoding is always
    satisfiable (e.g. Constant(False) is "satisfied" by setting its gate
    false).
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from propsat.core.config import DEFAULT_CONFIG, PropSatConfig
from propsat.core.types import SatStatus, SolveResult
from propsat.core.validators import assert_valid_formula
from propsat.symbolic.cnf import Conjunction, Disjunction, Literal
from propsat.symbolic.dpll import DPLLSolver
from propsat.symbolic.formula import Formula, Var
from propsat.symbolic.tseytin import TseytinEncoding, encode

logger = logging.getLogger(__name__)


class Solver:
    """Satisfiability of one propositional formula.

    Usage:
        solver = Solver(And(Var("p"), Not(Var("q"))))
        if solver.is_satisfiable():
            solver.get_assignments()   # {"@t0": True, "p": True, ...}

        result = solver.solve()
        result.model                   # {"p": True, "q": False}

    Raises:
        InvalidFormulaError: if ``formula`` is not a well-typed tree or uses
            the reserved gate prefix in a variable name.
    """

    def __init__(self, formula: Formula, config: Optional[PropSatConfig] = None):
        self.config = config or DEFAULT_CONFIG
        assert_valid_formula(formula, self.config.encoder.gate_prefix)

        self._formula = formula
        self._encoding = encode(formula, self.config.encoder)
        self._cnf = self._build_search_cnf()
        self._engine = DPLLSolver(self._cnf, self.config.search)

        logger.debug(
            "Solver ready: root=%s, %d clauses", self._encoding.root, len(self._cnf)
        )

    def _build_search_cnf(self) -> Conjunction:
        cnf = Conjunction(self._encoding.cnf)
        if self.config.search.assert_root:
            cnf.add_disjunction(Disjunction([Literal(self._encoding.root)]))
        elif not isinstance(self._formula, Var):
            logger.warning(
                "Root gate '%s' is not asserted; the verdict is about the "
                "encoding, not the formula",
                self._encoding.root,
            )
        return cnf

    # ─── PROPERTIES ────────────────────────────────────────────────

    @property
    def formula(self) -> Formula:
        return self._formula

    @property
    def encoding(self) -> TseytinEncoding:
        return self._encoding

    @property
    def root(self) -> str:
        return self._encoding.root

    @property
    def cnf(self) -> Conjunction:
        """The conjunction actually searched (root unit clause included)."""
        return self._cnf

    # ─── QUERIES ───────────────────────────────────────────────────

    def is_satisfiable(self) -> bool:
        """True iff a satisfying assignment exists. Starts a fresh search."""
        self._engine = DPLLSolver(self._cnf, self.config.search)
        result = self._engine.is_satisfiable()
        logger.info(
            "Formula with %d variables, %d clauses: %s",
            len(self._formula.variables()),
            len(self._cnf),
            "SAT" if result else "UNSAT",
        )
        return result

    def get_assignments(self) -> Mapping[str, bool]:
        """Assignment map of the last search (gate variables included)."""
        return self._engine.get_assignments()

    def solve(self) -> SolveResult:
        """Run is_satisfiable() and package the outcome."""
        satisfiable = self.is_satisfiable()
        assignments = dict(self._engine.get_assignments())
        model: Dict[str, bool] = {}
        if satisfiable:
            model = {
                name: assignments[name]
                for name in self._formula.variables()
                if name in assignments
            }
        return SolveResult(
            status=SatStatus.SATISFIABLE if satisfiable else SatStatus.UNSATISFIABLE,
            model=model,
            assignments=assignments,
            stats=self._engine.stats,
            trace=self._engine.trace,
        )

    def user_assignments(self) -> Mapping[str, bool]:
        """get_assignments() without the gate variables."""
        wanted = set(self._formula.variables())
        return MappingProxyType(
            {k: v for k, v in self._engine.get_assignments().items() if k in wanted}
        )
