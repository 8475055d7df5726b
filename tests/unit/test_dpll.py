"""
tests/unit/test_dpll.py
=======================
Tests for propsat/symbolic/dpll.py — the backtracking search engine.

Tests cover:
    - trivial conjunctions (⊤ and ⊥)
    - first-literal branching and polarity choice
    - flip on failure, retraction after both values fail
    - scoped backtracking: no stale entries from abandoned branches
    - read-only assignment view, stats and decision trace
    - unreachable selection state raises SearchInvariantError
"""
import pytest
from propsat.core.config import SearchConfig
from propsat.core.exceptions import SearchInvariantError
from propsat.core.types import DecisionKind
from propsat.symbolic.cnf import Conjunction, Disjunction
from propsat.symbolic.dpll import DPLLSolver


def _satisfies(cnf, assignments):
    return all(
        any(lit.satisfied_by(assignments) for lit in disj)
        for disj in cnf
    )


class TestTrivial:
    def test_empty_conjunction_is_sat(self):
        solver = DPLLSolver(Conjunction())
        assert solver.is_satisfiable() is True
        assert dict(solver.get_assignments()) == {}

    def test_empty_disjunction_is_unsat(self):
        solver = DPLLSolver(Conjunction([Disjunction()]))
        assert solver.is_satisfiable() is False
        assert solver.stats.decisions == 0


class TestBranching:
    def test_choose_first_literal_positive(self):
        cnf = Conjunction.from_clauses([["x", "y"], ["-z"]])
        assert DPLLSolver.choose_variable(cnf) == ("x", True)

    def test_choose_first_literal_negated(self):
        cnf = Conjunction.from_clauses([["-x", "y"]])
        assert DPLLSolver.choose_variable(cnf) == ("x", False)

    def test_choose_without_literal_is_fatal(self):
        with pytest.raises(SearchInvariantError) as exc:
            DPLLSolver.choose_variable(Conjunction())
        assert exc.value.component == "dpll"

    def test_single_unit(self):
        solver = DPLLSolver(Conjunction.from_clauses([["-a"]]))
        assert solver.is_satisfiable()
        assert dict(solver.get_assignments()) == {"a": False}

    def test_flip_after_failure(self):
        cnf = Conjunction.from_clauses([["a", "b"], ["-a"]])
        solver = DPLLSolver(cnf)
        assert solver.is_satisfiable() is True
        assert dict(solver.get_assignments()) == {"a": False, "b": True}
        assert solver.stats.decisions == 2
        assert solver.stats.flips == 1

    def test_unsat_pair(self):
        solver = DPLLSolver(Conjunction.from_clauses([["a"], ["-a"]]))
        assert solver.is_satisfiable() is False
        assert solver.stats.flips == 1
        assert solver.stats.retractions == 1

    def test_deterministic(self, stale_entry_cnf):
        first = DPLLSolver(stale_entry_cnf)
        second = DPLLSolver(stale_entry_cnf)
        assert first.is_satisfiable() == second.is_satisfiable()
        assert dict(first.get_assignments()) == dict(second.get_assignments())


class TestScopedBacktracking:
    def test_abandoned_decision_does_not_leak(self, stale_entry_cnf):
        solver = DPLLSolver(stale_entry_cnf)
        assert solver.is_satisfiable() is True
        assignments = dict(solver.get_assignments())
        assert assignments == {"a": False, "b": True, "c": True}
        assert _satisfies(stale_entry_cnf, assignments)

    def test_unsat_leaves_empty_map(self):
        cnf = Conjunction.from_clauses([["a", "b"], ["a", "-b"], ["-a", "b"], ["-a", "-b"]])
        solver = DPLLSolver(cnf)
        assert solver.is_satisfiable() is False
        assert dict(solver.get_assignments()) == {}

    def test_trace_records_retraction_before_parent_flip(self, stale_entry_cnf):
        solver = DPLLSolver(stale_entry_cnf, SearchConfig(record_trace=True))
        solver.is_satisfiable()
        steps = [(s.kind, s.variable, s.value) for s in solver.trace.steps]
        assert steps == [
            (DecisionKind.DECIDE, "a", True),
            (DecisionKind.DECIDE, "c", True),
            (DecisionKind.FLIP, "c", False),
            (DecisionKind.RETRACT, "c", None),
            (DecisionKind.FLIP, "a", False),
            (DecisionKind.DECIDE, "b", True),
            (DecisionKind.DECIDE, "c", True),
        ]


class TestIntrospection:
    def test_assignments_view_is_read_only(self):
        solver = DPLLSolver(Conjunction.from_clauses([["a"]]))
        solver.is_satisfiable()
        with pytest.raises(TypeError):
            solver.get_assignments()["a"] = False

    def test_assignments_before_solve(self):
        assert dict(DPLLSolver(Conjunction()).get_assignments()) == {}

    def test_no_trace_by_default(self):
        solver = DPLLSolver(Conjunction.from_clauses([["a"]]))
        solver.is_satisfiable()
        assert solver.trace is None

    def test_max_depth(self):
        cnf = Conjunction.from_clauses([["a"], ["b"], ["c"]])
        solver = DPLLSolver(cnf)
        assert solver.is_satisfiable()
        assert solver.stats.max_depth == 3
