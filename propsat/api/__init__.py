"""propsat/api — public Solver facade."""

from propsat.api.solver import Solver

__all__ = ["Solver"]
