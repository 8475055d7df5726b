"""
tests/unit/test_formula.py
==========================
Tests for propsat/symbolic/formula.py: construction, metrics, rendering,
evaluation and the n-ary helpers.
"""
import dataclasses

import pytest
from propsat.symbolic.formula import (
    FALSE,
    TRUE,
    And,
    Constant,
    Not,
    Or,
    Var,
    conjoin,
    disjoin,
)


class TestConstruction:
    def test_nodes_compare_structurally(self, p, q):
        assert And(p, Not(q)) == And(Var("p"), Not(Var("q")))
        assert And(p, q) != Or(p, q)

    def test_nodes_are_hashable(self, p, q):
        assert len({And(p, q), And(Var("p"), Var("q")), Or(p, q)}) == 2

    def test_nodes_are_immutable(self, p):
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.name = "x"

    def test_operator_sugar(self, p, q):
        assert ~p == Not(p)
        assert (p & q) == And(p, q)
        assert (p | ~q) == Or(p, Not(q))

    def test_walk_is_preorder(self, p, q):
        f = And(p, Not(q))
        assert list(f.walk()) == [f, p, Not(q), q]


class TestCountNontrivial:
    def test_leaves_count_zero(self, p):
        assert p.count_nontrivial_subformulas() == 0
        assert TRUE.count_nontrivial_subformulas() == 0

    def test_counts_and_or_not(self, p, q):
        assert And(p, Not(q)).count_nontrivial_subformulas() == 2
        f = Or(And(p, q), Not(Constant(True)))
        assert f.count_nontrivial_subformulas() == 3

    def test_deep_chain_does_not_recurse(self, p):
        f = p
        for _ in range(5000):
            f = Not(f)
        assert f.count_nontrivial_subformulas() == 5000


class TestRendering:
    def test_leaves(self, p):
        assert str(p) == "p"
        assert str(TRUE) == "⊤"
        assert str(FALSE) == "⊥"

    def test_fully_parenthesized(self, nested_formula):
        assert str(nested_formula) == "¬((p ∧ q) ∨ r)"

    def test_negated_leaf(self, p):
        assert str(Not(p)) == "¬p"
        assert str(Not(Not(p))) == "¬¬p"

    def test_rendering_is_deterministic(self, nested_formula):
        assert str(nested_formula) == str(nested_formula)


class TestVariablesAndEvaluation:
    def test_variables_first_occurrence_order(self, p, q):
        assert And(q, Or(p, q)).variables() == ["q", "p"]

    def test_constants_have_no_variables(self):
        assert And(TRUE, FALSE).variables() == []

    def test_evaluate(self, p, q):
        f = Or(And(p, q), Not(p))
        assert f.evaluate({"p": True, "q": True}) is True
        assert f.evaluate({"p": True, "q": False}) is False
        assert f.evaluate({"p": False, "q": False}) is True

    def test_evaluate_missing_variable(self, p, q):
        with pytest.raises(KeyError):
            And(p, q).evaluate({"p": True})


class TestNaryHelpers:
    def test_empty(self):
        assert conjoin() == TRUE
        assert disjoin() == FALSE

    def test_single(self, p):
        assert conjoin(p) == p
        assert disjoin(p) == p

    def test_right_nested(self, p, q, r):
        assert conjoin(p, q, r) == And(p, And(q, r))
        assert disjoin(p, q, r) == Or(p, Or(q, r))
