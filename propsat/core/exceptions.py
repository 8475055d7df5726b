"""
propsat/core/exceptions.py
==========================
Custom exception hierarchy for propsat.

All exceptions carry structured context so callers can
programmatically handle different failure modes.

Unsatisfiability is a result, never an exception. The only errors raised
on the intended-use path are boundary validation failures
(InvalidFormulaError) and internal invariant violations, which indicate a
defect in the encoder or the search engine and must not be recovered from.
"""

from __future__ import annotations
from typing import List, Optional


class PropSatError(Exception):
    """Base exception for all propsat errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidFormulaError(PropSatError):
    """Raised at the API boundary when a value handed to the solver is not
    a well-typed Formula tree, or uses the reserved gate-name prefix."""

    def __init__(self, message: str, errors: List[str], context: dict = None):
        super().__init__(message, context)
        self.errors = errors


class InvariantViolation(PropSatError):
    """Fatal internal defect. Continuing would silently produce a wrong
    CNF or a wrong verdict, so this is never caught inside propsat."""

    def __init__(self, message: str, component: str, context: dict = None):
        super().__init__(message, context)
        self.component = component


class EncodingInvariantError(InvariantViolation):
    """Raised when clause emission sees an operand that the flattening
    phase should have replaced with a Var reference."""

    def __init__(self, message: str, gate: str, context: dict = None):
        super().__init__(message, component="tseytin", context=context)
        self.gate = gate


class SearchInvariantError(InvariantViolation):
    """Raised when the DPLL engine reaches variable selection without a
    literal to branch on."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message, component="dpll", context=context)
