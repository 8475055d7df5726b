"""
propsat/symbolic/tseytin.py
===========================
Tseytin transformation: Formula → equisatisfiable CNF of linear size.

Naive CNF conversion (push negations, distribute ∨ over ∧) can blow up
exponentially. Tseytin instead names every compound subformula with a
fresh gate variable g and encodes only the local biconditional
g ↔ op(children), which costs at most three clauses per node.

Conversion steps:
    1. reduce():  flatten the tree into (gate, reduced_node) pairs, where
                  reduced_node is the original node with each child replaced
                  by a Var reference to that child's gate. User variables
                  are referenced as themselves and never renamed.
    2. get_cnf(): emit the clause set for each pair.

    reduced_node     clauses for gate g
    ─────────────    ───────────────────────────────────────
    Var(y), y ≠ g    (¬g ∨ y), (g ∨ ¬y)
    Var(y), y = g    none
    Not(y)           (¬g ∨ ¬y), (g ∨ y)
    And(l, r)        (¬g ∨ l), (¬g ∨ r), (g ∨ ¬l ∨ ¬r)
    Or(l, r)         (g ∨ ¬l), (g ∨ ¬r), (¬g ∨ l ∨ r)
    Constant(v)      (g) if v else (¬g)

The result is NOT constrained to make the root gate true. Whoever
consumes the encoding decides whether to assert it (see api.solver).

Gate numbering threads an index range through the traversal instead of
using a shared counter: a node with index i hands i + 1 to its left child
and i + 1 + gates(left) to its right child. Both phases use explicit
work-lists, so deep formulas do not hit the interpreter recursion limit.

Reference: Tseitin (1968), "On the complexity of derivation in
propositional calculus".
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from propsat.core.config import DEFAULT_GATE_PREFIX, EncoderConfig
from propsat.core.exceptions import EncodingInvariantError
from propsat.symbolic.cnf import Conjunction, Disjunction, Literal
from propsat.symbolic.formula import And, Constant, Formula, Not, Or, Var

logger = logging.getLogger(__name__)

GatePair = Tuple[str, Formula]


def gate_name(index: int, prefix: str = DEFAULT_GATE_PREFIX) -> str:
    return f"{prefix}{index}"


def _gate_spans(formula: Formula) -> Dict[int, int]:
    """Number of gates each subtree consumes, keyed by id(node).

    Every node except Var takes one gate. Post-order, iterative.
    """
    spans: Dict[int, int] = {}
    stack: List[Tuple[Formula, bool]] = [(formula, False)]
    while stack:
        node, expanded = stack.pop()
        if id(node) in spans:
            continue
        children = node.children()
        if expanded or not children:
            own = 0 if isinstance(node, Var) else 1
            spans[id(node)] = own + sum(spans[id(c)] for c in children)
        else:
            stack.append((node, True))
            stack.extend((c, False) for c in children)
    return spans


def _rebuild(gate: str, node: Formula, refs: Sequence[Var]) -> Formula:
    """Shallow copy of ``node`` with its children replaced by ``refs``."""
    if isinstance(node, Not):
        return Not(refs[0])
    if isinstance(node, And):
        return And(refs[0], refs[1])
    if isinstance(node, Or):
        return Or(refs[0], refs[1])
    raise EncodingInvariantError(
        f"Cannot flatten node of type {type(node).__name__} for gate '{gate}'",
        gate=gate,
        context={"node_type": type(node).__name__},
    )


# ─────────────────────────────────────────────
#  PHASE 1 — FLATTENING
# ─────────────────────────────────────────────

def reduce(
    formula: Formula,
    index: int = 0,
    gate_prefix: str = DEFAULT_GATE_PREFIX,
) -> List[GatePair]:
    """Flatten ``formula`` into (gate, reduced_node) pairs.

    Order is depth-first pre-order: the first pair always belongs to
    ``formula`` itself, followed by the pairs of the left subtree and
    then the right subtree. Gate indices start at ``index``.

    A bare Var yields the single identity pair (name, Var(name)).

    Examples:
        reduce(And(Var("p"), Not(Var("p"))))
        → [("@t0", And(Var("p"), Var("@t1"))),
           ("@t1", Not(Var("p")))]
    """
    if isinstance(formula, Var):
        return [(formula.name, formula)]

    spans = _gate_spans(formula)
    pairs: List[GatePair] = []
    stack: List[Tuple[Formula, int]] = [(formula, index)]

    while stack:
        node, i = stack.pop()
        gate = gate_name(i, gate_prefix)

        if isinstance(node, Constant):
            pairs.append((gate, node))
            continue

        refs: List[Var] = []
        pending: List[Tuple[Formula, int]] = []
        next_index = i + 1
        for child in node.children():
            if isinstance(child, Var):
                refs.append(child)
            else:
                refs.append(Var(gate_name(next_index, gate_prefix)))
                pending.append((child, next_index))
                next_index += spans[id(child)]

        pairs.append((gate, _rebuild(gate, node, refs)))
        # left subtree must be popped first
        stack.extend(reversed(pending))

    return pairs


# ─────────────────────────────────────────────
#  PHASE 2 — CLAUSE EMISSION
# ─────────────────────────────────────────────

def _clause(*literals: Literal) -> Disjunction:
    return Disjunction(literals)


def _operand(gate: str, node: Formula) -> str:
    if not isinstance(node, Var):
        raise EncodingInvariantError(
            f"Gate '{gate}' has a non-Var operand of type {type(node).__name__}",
            gate=gate,
            context={"operand_type": type(node).__name__},
        )
    return node.name


def gate_clauses(gate: str, node: Formula) -> List[Disjunction]:
    """Clauses encoding ``gate ↔ node`` for one reduced node."""
    g = Literal(gate)
    ng = g.negate()

    if isinstance(node, Var):
        if node.name == gate:
            return []
        y = Literal(node.name)
        return [_clause(ng, y), _clause(g, y.negate())]

    if isinstance(node, Constant):
        return [_clause(g if node.value else ng)]

    if isinstance(node, Not):
        y = Literal(_operand(gate, node.sub))
        return [_clause(ng, y.negate()), _clause(g, y)]

    if isinstance(node, And):
        left = Literal(_operand(gate, node.left))
        right = Literal(_operand(gate, node.right))
        return [
            _clause(ng, left),
            _clause(ng, right),
            _clause(g, left.negate(), right.negate()),
        ]

    if isinstance(node, Or):
        left = Literal(_operand(gate, node.left))
        right = Literal(_operand(gate, node.right))
        return [
            _clause(g, left.negate()),
            _clause(g, right.negate()),
            _clause(ng, left, right),
        ]

    raise EncodingInvariantError(
        f"Unknown node type {type(node).__name__} for gate '{gate}'",
        gate=gate,
        context={"node_type": type(node).__name__},
    )


def get_cnf(pairs: Sequence[GatePair]) -> Conjunction:
    """Union of the clause sets of every pair, in pair order."""
    cnf = Conjunction()
    for gate, node in pairs:
        cnf.extend(gate_clauses(gate, node))
    return cnf


# ─────────────────────────────────────────────
#  ONE-SHOT ENCODING
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class TseytinEncoding:
    """Both phases of one encoding run.

    Attributes:
        root:  name standing for the whole formula (first pair's gate).
        pairs: output of reduce().
        cnf:   output of get_cnf(); the root is not asserted.
    """
    root:  str
    pairs: Tuple[GatePair, ...]
    cnf:   Conjunction

    @property
    def gate_names(self) -> List[str]:
        return [gate for gate, node in self.pairs if node != Var(gate)]

    @property
    def clause_count(self) -> int:
        return len(self.cnf)


def encode(formula: Formula, config: Optional[EncoderConfig] = None) -> TseytinEncoding:
    """Run reduce() and get_cnf() on ``formula``."""
    cfg = config or EncoderConfig()
    pairs = reduce(formula, 0, cfg.gate_prefix)
    cnf = get_cnf(pairs)
    logger.debug(
        "Tseytin: %d pairs, %d clauses, root=%s",
        len(pairs), len(cnf), pairs[0][0],
    )
    return TseytinEncoding(root=pairs[0][0], pairs=tuple(pairs), cnf=cnf)
