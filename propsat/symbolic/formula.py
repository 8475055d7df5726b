"""
propsat/symbolic/formula.py
===========================
Propositional formula trees.

A Formula is one of five immutable node types:

    Constant(value)      ⊤ / ⊥
    Var(name)            a boolean variable
    Not(sub)             ¬sub
    And(left, right)     (left ∧ right)
    Or(left, right)      (left ∨ right)

Nodes are frozen dataclasses: hashable, compared structurally, and never
modified after construction. Children are owned by their parent.
Construction performs no validation; see propsat.core.validators for the
checks run at the Solver boundary.

Traversals that may run on large inputs (walk, count, variables) use an
explicit stack rather than Python recursion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Mapping


class Formula:
    """Base class of all formula nodes. Not instantiated directly."""

    __slots__ = ()

    def children(self) -> tuple:
        return ()

    def walk(self) -> Iterator["Formula"]:
        """Yield every node in pre-order: node, left subtree, right subtree."""
        stack: List[Formula] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def count_nontrivial_subformulas(self) -> int:
        """Number of And/Or/Not nodes. Var and Constant count 0."""
        return sum(1 for node in self.walk() if node.children())

    def variables(self) -> List[str]:
        """Distinct variable names in order of first occurrence."""
        seen = {}
        for node in self.walk():
            if isinstance(node, Var):
                seen.setdefault(node.name, None)
        return list(seen)

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        """Truth value under ``assignment``.

        Raises:
            KeyError: if a variable of the formula is not assigned.
        """
        raise NotImplementedError

    # Operator sugar: ~p, p & q, p | q

    def __invert__(self) -> "Not":
        return Not(self)

    def __and__(self, other: "Formula") -> "And":
        return And(self, other)

    def __or__(self, other: "Formula") -> "Or":
        return Or(self, other)


@dataclass(frozen=True)
class Constant(Formula):
    value: bool

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return self.value

    def __str__(self) -> str:
        return "⊤" if self.value else "⊥"


@dataclass(frozen=True)
class Var(Formula):
    name: str

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return assignment[self.name]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Not(Formula):
    sub: Formula

    def children(self) -> tuple:
        return (self.sub,)

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return not self.sub.evaluate(assignment)

    def __str__(self) -> str:
        return f"¬{self.sub}"


@dataclass(frozen=True)
class And(Formula):
    left: Formula
    right: Formula

    def children(self) -> tuple:
        return (self.left, self.right)

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return self.left.evaluate(assignment) and self.right.evaluate(assignment)

    def __str__(self) -> str:
        return f"({self.left} ∧ {self.right})"


@dataclass(frozen=True)
class Or(Formula):
    left: Formula
    right: Formula

    def children(self) -> tuple:
        return (self.left, self.right)

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return self.left.evaluate(assignment) or self.right.evaluate(assignment)

    def __str__(self) -> str:
        return f"({self.left} ∨ {self.right})"


TRUE = Constant(True)
FALSE = Constant(False)


def conjoin(*formulas: Formula) -> Formula:
    """Right-nested And over ``formulas``. No arguments gives ⊤."""
    if not formulas:
        return TRUE
    result = formulas[-1]
    for f in reversed(formulas[:-1]):
        result = And(f, result)
    return result


def disjoin(*formulas: Formula) -> Formula:
    """Right-nested Or over ``formulas``. No arguments gives ⊥."""
    if not formulas:
        return FALSE
    result = formulas[-1]
    for f in reversed(formulas[:-1]):
        result = Or(f, result)
    return result
