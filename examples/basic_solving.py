"""
examples/basic_solving.py
=========================
Minimal propsat example: build ¬((p ∧ q) ∨ r), print it, its Tseytin
CNF, and a satisfying assignment.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from propsat import And, Not, Or, Solver, Var
from propsat.evaluation import check_model


def main():
    p, q, r = Var("p"), Var("q"), Var("r")
    formula = Not(Or(And(p, q), r))

    solver = Solver(formula)
    print(formula)
    print(solver.encoding.cnf)

    result = solver.solve()
    print(f"{result.status.value}: {result.model}")
    assert result.satisfiable, "¬((p ∧ q) ∨ r) is satisfiable"
    assert check_model(formula, result.model)

    contradiction = And(p, Not(p))
    assert not Solver(contradiction).is_satisfiable()
    print(f"{contradiction}: unsat")
    print("✓ Basic solving example passed.")


if __name__ == "__main__":
    main()
