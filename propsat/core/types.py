"""
propsat/core/types.py
=====================
Result and bookkeeping types shared by the search engine and the
Solver facade. No imports from the symbolic layer, so every module
can depend on this one without cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


# ─────────────────────────────────────────────
#  ENUMERATIONS
# ─────────────────────────────────────────────

class SatStatus(Enum):
    SATISFIABLE   = "sat"
    UNSATISFIABLE = "unsat"


class DecisionKind(Enum):
    """What happened to a variable at one point of the search.

    DECIDE:  first trial value, the positive sense of the chosen literal
    FLIP:    the trial failed, the opposite value is tried
    RETRACT: both values failed, the entry is removed from the map
    """
    DECIDE  = "decide"
    FLIP    = "flip"
    RETRACT = "retract"


# ─────────────────────────────────────────────
#  SEARCH BOOKKEEPING
# ─────────────────────────────────────────────

@dataclass
class SearchStats:
    """Counters collected during one is_satisfiable() call."""
    decisions:      int = 0
    flips:          int = 0
    retractions:    int = 0
    simplify_calls: int = 0
    max_depth:      int = 0

    def reset(self) -> None:
        self.decisions = 0
        self.flips = 0
        self.retractions = 0
        self.simplify_calls = 0
        self.max_depth = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "decisions": self.decisions,
            "flips": self.flips,
            "retractions": self.retractions,
            "simplify_calls": self.simplify_calls,
            "max_depth": self.max_depth,
        }


@dataclass(frozen=True)
class DecisionStep:
    step_number: int
    kind:        DecisionKind
    variable:    str
    value:       Optional[bool]   # None for RETRACT
    depth:       int

    def __str__(self) -> str:
        if self.kind is DecisionKind.RETRACT:
            return f"[{self.step_number}] depth {self.depth}: retract {self.variable}"
        return (
            f"[{self.step_number}] depth {self.depth}: "
            f"{self.kind.value} {self.variable} = {self.value}"
        )


class SearchTrace:
    """Ordered log of decisions, flips and retractions."""

    def __init__(self):
        self._steps: List[DecisionStep] = []

    def record(
        self,
        kind: DecisionKind,
        variable: str,
        value: Optional[bool],
        depth: int,
    ) -> DecisionStep:
        step = DecisionStep(
            step_number=len(self._steps),
            kind=kind,
            variable=variable,
            value=value,
            depth=depth,
        )
        self._steps.append(step)
        return step

    @property
    def steps(self) -> List[DecisionStep]:
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def format(self) -> str:
        return "\n".join(str(s) for s in self._steps)


# ─────────────────────────────────────────────
#  SOLVE RESULT
# ─────────────────────────────────────────────

@dataclass
class SolveResult:
    """Structured result of Solver.solve().

    Attributes:
        status:      SATISFIABLE or UNSATISFIABLE.
        model:       Witness restricted to the input formula's own
                     variables. Variables the search never had to
                     consult are absent. Empty when unsatisfiable.
        assignments: Full assignment map at the end of the search,
                     gate variables included.
        stats:       Search counters.
        trace:       Decision trace, only when SearchConfig.record_trace.
    """
    status:      SatStatus
    model:       Dict[str, bool] = field(default_factory=dict)
    assignments: Dict[str, bool] = field(default_factory=dict)
    stats:       SearchStats = field(default_factory=SearchStats)
    trace:       Optional[SearchTrace] = None

    @property
    def satisfiable(self) -> bool:
        return self.status is SatStatus.SATISFIABLE

    def __bool__(self) -> bool:
        return self.satisfiable
