# parser/ast_nodes.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Abstract Syntax Tree node classes for temporal modification formulas

"""AST node classes for representing LTL modification formulas.

This module defines immutable and hashable node classes used to construct tree
representations of temporal formulas whose atoms are *modifications*: values
that describe one change applied at one step of an operation sequence. A
formula does not say what is true of a trace, it says where modifications
must be applied to it.

Node Types:
    Truth, Falsity: the modification that never fails / never applies
    Atom: apply one atomic modification at the current step
    Or, And: intuitionistic choice and simultaneous application
    Next: obligation deferred to the following step
    Until, Release: the binary temporal operators

Implication and negation are absent: a negated modification has no obvious
meaning. All nodes support the visitor design pattern for traversal and
transformation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_truth(self, n: Truth): ...

    def visit_falsity(self, n: Falsity): ...

    def visit_atom(self, n: Atom): ...

    def visit_or(self, n: Or): ...

    def visit_and(self, n: And): ...

    def visit_next(self, n: Next): ...

    def visit_until(self, n: Until): ...

    def visit_release(self, n: Release): ...


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all formula nodes.

    Provides the foundation for immutable formula trees with visitor pattern
    support. Concrete node types implement ``accept`` for visitor dispatch and
    ``__str__`` for the textual syntax understood by :func:`parser.parse`.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Truth(Formula):
    """The "do nothing" modification that never fails."""

    def accept(self, v: Visitor):
        return v.visit_truth(self)

    def __str__(self) -> str:
        return "true"


@dataclass(frozen=True, slots=True)
class Falsity(Formula):
    """The modification that never applies (always fails)."""

    def accept(self, v: Visitor):
        return v.visit_falsity(self)

    def __str__(self) -> str:
        return "false"


@dataclass(frozen=True, slots=True)
class Atom(Formula):
    """Apply an atomic modification at the current time step.

    Attributes:
        modification: Domain-supplied modification value (opaque to the engine)
    """

    modification: Any

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def __str__(self) -> str:
        return str(self.modification)


@dataclass(frozen=True, slots=True)
class Or(Formula):
    """Intuitionistic disjunction.

    Interpreted as branching into the timeline where the left disjunct holds
    and the one where the right disjunct holds. It does not introduce the
    branch where both hold.

    Attributes:
        left: Left disjunct
        right: Right disjunct
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} | {self.right})"


@dataclass(frozen=True, slots=True)
class And(Formula):
    """Apply both modifications.

    When both sides demand a modification at the same step, the two are
    composed with the modification type's ``compose``. If that composition is
    not commutative, neither is conjunction.

    Attributes:
        left: Left conjunct
        right: Right conjunct
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Next(Formula):
    """Assert that the operand holds from the next time step on.

    Attributes:
        operand: The deferred formula
    """

    operand: Formula

    def accept(self, v: Visitor):
        return v.visit_next(self)

    def __str__(self) -> str:
        return f"X({self.operand})"


@dataclass(frozen=True, slots=True)
class Until(Formula):
    """Left holds at least until right begins to hold, which must happen.

    ``Until(a, b)`` is equivalent to ``Or(b, And(a, Next(Until(a, b))))``.

    Attributes:
        left: Formula that holds while waiting
        right: Formula that must eventually hold
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_until(self)

    def __str__(self) -> str:
        return f"({self.left} U {self.right})"


@dataclass(frozen=True, slots=True)
class Release(Formula):
    """Right holds up to and including the point where left becomes true.

    If left never becomes true, right has to hold forever; this is the only
    formula that can be satisfied by running forever. ``Release(a, b)`` is
    equivalent to ``And(b, Or(a, Next(Release(a, b))))``.

    Attributes:
        left: Formula that releases the obligation
        right: Formula that holds until released
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_release(self)

    def __str__(self) -> str:
        return f"({self.left} R {self.right})"
