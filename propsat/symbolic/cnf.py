"""
propsat/symbolic/cnf.py
=======================
Conjunctive Normal Form values.

    CNF: conjunction of disjunctions of literals
    e.g. (a ∨ ¬b) ∧ (¬c ∨ d) ∧ (e)

Conventions the search engine relies on:
    - an empty Disjunction is ⊥ (nothing can satisfy it)
    - an empty Conjunction is ⊤ (nothing left to satisfy)

simplify() is the only reduction rule. Under a growing assignment it
shrinks a Conjunction toward one of those two fixed points, which is
the termination test of the DPLL search.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

LiteralSpec = Union["Literal", Tuple[str, bool], str]


@dataclass(frozen=True)
class Literal:
    """A variable or its negation: x / ¬x."""
    name: str
    negated: bool = False

    def negate(self) -> "Literal":
        return Literal(self.name, not self.negated)

    def required_value(self) -> bool:
        """Value the variable must take for this literal to hold."""
        return not self.negated

    def satisfied_by(self, assignments: Mapping[str, bool]) -> Optional[bool]:
        """True/False when the variable is assigned, None when it is free."""
        if self.name not in assignments:
            return None
        return assignments[self.name] == self.required_value()

    def __str__(self) -> str:
        return f"¬{self.name}" if self.negated else self.name

    @classmethod
    def coerce(cls, spec: LiteralSpec) -> "Literal":
        """Accept a Literal, a (name, negated) pair, or "x" / "-x"."""
        if isinstance(spec, Literal):
            return spec
        if isinstance(spec, str):
            if spec.startswith("-"):
                return cls(spec[1:], True)
            return cls(spec, False)
        name, negated = spec
        return cls(name, bool(negated))


class Disjunction:
    """Ordered OR of literals. Empty means ⊥."""

    __slots__ = ("_literals",)

    def __init__(self, literals: Iterable[Literal] = ()):
        self._literals: List[Literal] = list(literals)

    def add_literal(self, literal: Literal) -> None:
        self._literals.append(literal)

    @property
    def literals(self) -> Tuple[Literal, ...]:
        return tuple(self._literals)

    def is_empty(self) -> bool:
        return not self._literals

    def __len__(self) -> int:
        return len(self._literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self._literals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Disjunction):
            return NotImplemented
        return self._literals == other._literals

    def __str__(self) -> str:
        return "(" + " ∨ ".join(str(lit) for lit in self._literals) + ")"

    def __repr__(self) -> str:
        return f"Disjunction({self!s})"


class Conjunction:
    """Ordered AND of disjunctions, i.e. a CNF formula. Empty means ⊤."""

    __slots__ = ("_disjunctions",)

    def __init__(self, disjunctions: Iterable[Disjunction] = ()):
        self._disjunctions: List[Disjunction] = list(disjunctions)

    @classmethod
    def from_clauses(cls, clauses: Iterable[Iterable[LiteralSpec]]) -> "Conjunction":
        """Build from nested iterables, e.g. ``[["a", "-b"], [("c", True)]]``."""
        return cls(
            Disjunction(Literal.coerce(spec) for spec in clause)
            for clause in clauses
        )

    def add_disjunction(self, disjunction: Disjunction) -> None:
        self._disjunctions.append(disjunction)

    def extend(self, disjunctions: Iterable[Disjunction]) -> None:
        self._disjunctions.extend(disjunctions)

    @property
    def disjunctions(self) -> Tuple[Disjunction, ...]:
        return tuple(self._disjunctions)

    def variables(self) -> List[str]:
        """Distinct variable names in order of first occurrence."""
        seen = {}
        for disj in self._disjunctions:
            for lit in disj:
                seen.setdefault(lit.name, None)
        return list(seen)

    def literal_count(self) -> int:
        return sum(len(d) for d in self._disjunctions)

    # ─── TRIVIALITY ────────────────────────────────────────────────

    def is_trivially_true(self) -> bool:
        return not self._disjunctions

    def is_trivially_false(self) -> bool:
        return any(d.is_empty() for d in self._disjunctions)

    # ─── SIMPLIFICATION ────────────────────────────────────────────

    def simplify(self, assignments: Mapping[str, bool]) -> "Conjunction":
        """Reduce under a partial assignment. Returns a new Conjunction.

        For each disjunction:
          - any literal satisfied by ``assignments`` → drop the disjunction
          - otherwise keep only literals whose variable is unassigned;
            falsified literals disappear, possibly leaving an empty (⊥)
            disjunction behind

        No other minimisation is done. Neither ``self`` nor
        ``assignments`` is modified. A disjunction with no assigned
        literal is carried over as the same object, as the constructor does.
        """
        result = Conjunction()
        for disj in self._disjunctions:
            kept = Disjunction()
            satisfied = False
            touched = False
            for lit in disj:
                verdict = lit.satisfied_by(assignments)
                if verdict is None:
                    kept.add_literal(lit)
                elif verdict:
                    satisfied = True
                    break
                else:
                    touched = True
            if not satisfied:
                result.add_disjunction(kept if touched else disj)
        return result

    # ─── DUNDERS ───────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._disjunctions)

    def __iter__(self) -> Iterator[Disjunction]:
        return iter(self._disjunctions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Conjunction):
            return NotImplemented
        return self._disjunctions == other._disjunctions

    def __str__(self) -> str:
        return "(" + " ∧ ".join(str(d) for d in self._disjunctions) + ")"

    def __repr__(self) -> str:
        return f"Conjunction({self!s})"
