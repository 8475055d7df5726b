"""
propsat/__init__.py — Public API exports
"""

from propsat.api.solver import Solver
from propsat.core.config import (
    DEFAULT_CONFIG,
    EncoderConfig,
    PropSatConfig,
    SearchConfig,
)
from propsat.core.exceptions import (
    EncodingInvariantError,
    InvalidFormulaError,
    InvariantViolation,
    PropSatError,
    SearchInvariantError,
)
from propsat.core.types import (
    DecisionKind,
    DecisionStep,
    SatStatus,
    SearchStats,
    SearchTrace,
    SolveResult,
)
from propsat.symbolic.cnf import Conjunction, Disjunction, Literal
from propsat.symbolic.dpll import DPLLSolver
from propsat.symbolic.formula import And, Constant, Formula, Not, Or, Var
from propsat.symbolic.tseytin import TseytinEncoding, encode
from propsat.version import __version__

__all__ = [
    "Solver",
    "DPLLSolver",
    "Formula",
    "Constant",
    "Var",
    "Not",
    "And",
    "Or",
    "Literal",
    "Disjunction",
    "Conjunction",
    "TseytinEncoding",
    "encode",
    "PropSatConfig",
    "EncoderConfig",
    "SearchConfig",
    "DEFAULT_CONFIG",
    "SatStatus",
    "SolveResult",
    "SearchStats",
    "SearchTrace",
    "DecisionKind",
    "DecisionStep",
    "PropSatError",
    "InvalidFormulaError",
    "InvariantViolation",
    "EncodingInvariantError",
    "SearchInvariantError",
    "__version__",
]
