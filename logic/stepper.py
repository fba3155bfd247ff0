# logic/stepper.py

"""
Progression of modification formulas by one time step.

Stepping a formula splits it into ``(now, later)`` alternatives, where
``now`` is the modification to apply to the current operation (or ``None``)
and ``later`` is the obligation from the next operation onwards. A formula
can be satisfied in several ways, so stepping returns a list; an empty list
means the formula cannot be satisfied at all.

Modifications are combined with ``compose``: ``a.compose(b)`` applies ``b``
first and then ``a``. Conjunction and the formula list both rely on it, so
they are only commutative if ``compose`` is.
"""

from __future__ import annotations
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from parser.ast_nodes import (
    Formula,
    Truth,
    Falsity,
    Atom,
    Or,
    And,
    Next,
    Until,
    Release,
)
from parser.simplifier import simplify

Alternative = Tuple[Optional[Any], Formula]
ListAlternative = Tuple[Optional[Any], Tuple[Formula, ...]]


def compose(outer: Optional[Any], inner: Optional[Any]) -> Optional[Any]:
    """``outer ∘ inner`` when both are present, else whichever one is."""
    if outer is None:
        return inner
    if inner is None:
        return outer
    return outer.compose(inner)


def finished(formula: Formula) -> bool:
    """Is ``formula`` satisfied if no further step happens?"""
    if isinstance(formula, (Truth, Release)): return True
    if isinstance(formula, (Falsity, Atom, Next, Until)): return False
    if isinstance(formula, And): return finished(formula.left) and finished(formula.right)
    if isinstance(formula, Or): return finished(formula.left) or finished(formula.right)
    raise TypeError(f"Unsupported formula type in finished: {formula!r}")


def step(formula: Formula) -> List[Alternative]:
    """Split ``formula`` into its ordered ``(now, later)`` alternatives.

    ``Or`` keeps the left alternatives before the right ones; ``And`` pairs
    every left alternative with every right alternative, left outermost, and
    composes the left modification on top of the right one. ``Until`` and
    ``Release`` are unfolded once and the unfolding is stepped.
    """
    if isinstance(formula, Truth):
        return [(None, formula)]
    if isinstance(formula, Falsity):
        return []
    if isinstance(formula, Atom):
        return [(formula.modification, Truth())]
    if isinstance(formula, Or):
        return step(formula.left) + step(formula.right)
    if isinstance(formula, And):
        rights = step(formula.right)
        return [
            (compose(now_l, now_r), simplify(And(later_l, later_r)))
            for now_l, later_l in step(formula.left)
            for now_r, later_r in rights
        ]
    if isinstance(formula, Next):
        return [(None, formula.operand)]
    if isinstance(formula, Until):
        return step(Or(formula.right, And(formula.left, Next(formula))))
    if isinstance(formula, Release):
        return step(And(formula.right, Or(formula.left, Next(formula))))
    raise TypeError(f"Unsupported formula type in step: {formula!r}")


def step_list(formulas: Sequence[Formula]) -> List[ListAlternative]:
    """Step every formula of an active list at once.

    The list holds one independent formula per open scope, innermost first.
    Each alternative picks one alternative per formula; the modifications
    are composed so that later entries of the list apply on top of earlier
    ones (``tail ∘ head``).
    """
    if not formulas:
        return [(None, ())]
    head, tail = formulas[0], formulas[1:]
    rest = step_list(tail)
    return [
        (compose(now_tail, now_head), (later_head,) + later_tail)
        for now_head, later_head in step(head)
        for now_tail, later_tail in rest
    ]


def atoms(formula: Formula) -> Iterator[Any]:
    """Yield the modifications of ``formula`` from left to right."""
    if isinstance(formula, Atom):
        yield formula.modification
    elif isinstance(formula, Next):
        yield from atoms(formula.operand)
    elif isinstance(formula, (Or, And, Until, Release)):
        yield from atoms(formula.left)
        yield from atoms(formula.right)
    elif not isinstance(formula, (Truth, Falsity)):
        raise TypeError(f"Unsupported formula type in atoms: {formula!r}")
