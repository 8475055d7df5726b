"""
tests/conftest.py
==================
Shared pytest fixtures for all propsat tests.
"""

import random

import pytest
from propsat.symbolic.cnf import Conjunction
from propsat.symbolic.formula import And, Constant, Not, Or, Var


# ─── VARIABLES ────────────────────────────────────────────────────


@pytest.fixture
def p():
    return Var("p")


@pytest.fixture
def q():
    return Var("q")


@pytest.fixture
def r():
    return Var("r")


# ─── FORMULAS ─────────────────────────────────────────────────────


@pytest.fixture
def contradiction(p):
    """p ∧ ¬p"""
    return And(p, Not(p))


@pytest.fixture
def tautology(p):
    """p ∨ ¬p"""
    return Or(p, Not(p))


@pytest.fixture
def negated_conjunction(p, q):
    """¬(p ∧ q)"""
    return Not(And(p, q))


@pytest.fixture
def nested_formula(p, q, r):
    """¬((p ∧ q) ∨ r)"""
    return Not(Or(And(p, q), r))


# ─── CNF ──────────────────────────────────────────────────────────


@pytest.fixture
def stale_entry_cnf():
    """Satisfiable only via a = False, b = True, c = True.

    The a = True branch fails after deciding c; if c's value survived the
    backtrack, the a = False branch would wrongly come out UNSAT.
    """
    return Conjunction.from_clauses([
        ["a", "b"],
        ["-a", "c"],
        ["-a", "-c"],
        ["-b", "c"],
    ])


# ─── RANDOM FORMULAS ──────────────────────────────────────────────


def _random_formula(rng, names, depth):
    if depth == 0 or rng.random() < 0.2:
        if rng.random() < 0.1:
            return Constant(rng.random() < 0.5)
        return Var(rng.choice(names))
    kind = rng.choice(("not", "and", "or"))
    if kind == "not":
        return Not(_random_formula(rng, names, depth - 1))
    left = _random_formula(rng, names, depth - 1)
    right = _random_formula(rng, names, depth - 1)
    return And(left, right) if kind == "and" else Or(left, right)


@pytest.fixture
def random_formulas():
    """Factory: random_formulas(count, seed=0, names="pqrs", depth=5)."""

    def make(count, seed=0, names=("p", "q", "r", "s"), depth=5):
        rng = random.Random(seed)
        return [_random_formula(rng, list(names), depth) for _ in range(count)]

    return make
