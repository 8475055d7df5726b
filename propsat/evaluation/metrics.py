"""
propsat/evaluation/metrics.py
=============================
Size metrics for Tseytin encodings.

The encoding is linear: every compound node contributes at most three
clauses, every Constant one, so

    clauses ≤ 3 × nontrivial_nodes + constants

clauses_per_node stays bounded (≤ 3) however deep the formula is, which
is what the benchmark tests assert.
"""
from __future__ import annotations

from dataclasses import dataclass

from propsat.symbolic.formula import Constant, Formula
from propsat.symbolic.tseytin import TseytinEncoding

MAX_CLAUSES_PER_GATE = 3


@dataclass(frozen=True)
class EncodingMetrics:
    nontrivial_nodes: int
    constants:        int
    variables:        int
    gates:            int
    clauses:          int
    literals:         int

    @classmethod
    def from_encoding(cls, formula: Formula, encoding: TseytinEncoding) -> "EncodingMetrics":
        return cls(
            nontrivial_nodes=formula.count_nontrivial_subformulas(),
            constants=sum(1 for n in formula.walk() if isinstance(n, Constant)),
            variables=len(formula.variables()),
            gates=len(encoding.gate_names),
            clauses=len(encoding.cnf),
            literals=encoding.cnf.literal_count(),
        )

    @property
    def clause_bound(self) -> int:
        return MAX_CLAUSES_PER_GATE * self.nontrivial_nodes + self.constants

    @property
    def clauses_per_node(self) -> float:
        nodes = self.nontrivial_nodes + self.constants
        return self.clauses / nodes if nodes > 0 else 0.0

    def within_linear_bound(self) -> bool:
        return self.clauses <= self.clause_bound
