"""propsat/symbolic — formulas, CNF, Tseytin encoding and DPLL search."""

from propsat.symbolic.formula import (
    FALSE,
    TRUE,
    And,
    Constant,
    Formula,
    Not,
    Or,
    Var,
    conjoin,
    disjoin,
)
from propsat.symbolic.cnf import Conjunction, Disjunction, Literal
from propsat.symbolic.tseytin import TseytinEncoding, encode, gate_name, get_cnf, reduce
from propsat.symbolic.dpll import DPLLSolver

__all__ = [
    "Formula",
    "Constant",
    "Var",
    "Not",
    "And",
    "Or",
    "TRUE",
    "FALSE",
    "conjoin",
    "disjoin",
    "Literal",
    "Disjunction",
    "Conjunction",
    "TseytinEncoding",
    "encode",
    "gate_name",
    "get_cnf",
    "reduce",
    "DPLLSolver",
]
