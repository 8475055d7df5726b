"""
propsat/evaluation/__init__.py
==============================
Reference oracles and encoding metrics.
"""

from propsat.evaluation.metrics import EncodingMetrics
from propsat.evaluation.oracle import (
    Z3_AVAILABLE,
    check_model,
    require_z3,
    to_z3,
    truth_table_models,
    truth_table_satisfiable,
    z3_satisfiable,
)

__all__ = [
    "EncodingMetrics",
    "Z3_AVAILABLE",
    "check_model",
    "require_z3",
    "to_z3",
    "truth_table_models",
    "truth_table_satisfiable",
    "z3_satisfiable",
]
