# logic/handlers.py

"""
Hooks a concrete operation domain supplies to the branching interpreter.

A domain gives every operation two meanings: its *default* semantics, used
when no modification applies at the current step, and its *modification*
semantics, which comes in one of two flavours:

  • Direct: atomic operations. Given a modification, either produce the
    modified result or report that the modification does not apply.
  • Nested: structural operations that wrap nested programs. The nested
    programs are interpreted with the active formulas propagated in, and a
    second hook reassembles their results and leftover formulas.

Worlds are opaque, immutable values owned by the domain (state, logs, ...).
Every branch of the search carries its own world.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Protocol, Sequence, Tuple, Union

from parser.ast_nodes import Formula

Formulas = Tuple[Formula, ...]
# (value, leftover formulas, world) produced by interpreting a program
Outcome = Tuple[Any, Formulas, Any]


class Composable(Protocol):
    """Modification values: ``a.compose(b)`` applies ``b``, then ``a``."""

    def compose(self, other: Any) -> Any: ...


class Runner(Protocol):
    """Interprets one nested program starting from ``world``.

    ``inner`` defaults to the active list at the structural operation;
    passing another list lets a reassembly hook thread the leftovers of one
    nested program into the next.
    """

    def __call__(self, world: Any, inner: Optional[Formulas] = None) -> Iterator[Outcome]: ...


@dataclass(frozen=True, slots=True)
class Direct:
    """Modification semantics of an atomic operation.

    Attributes:
        apply: ``apply(modification, operation, world)`` returns ``None`` when
            the modification is inapplicable, else ``(result, world)``
    """
    apply: Callable[[Any, Any, Any], Optional[Tuple[Any, Any]]]


@dataclass(frozen=True, slots=True)
class Nested:
    """Modification semantics of a structural operation.

    Attributes:
        unwrap: maps the active formula list to the nested programs to run
        rewrap: ``rewrap(runners, world)`` yields the operation's outcomes,
            one runner per nested program, in the order ``unwrap`` returned
    """
    unwrap: Callable[[Formulas], Sequence[Any]]
    rewrap: Callable[[Sequence[Runner], Any], Iterable[Outcome]]


Handler = Union[Direct, Nested]


class Domain(Protocol):
    """A closed set of operations and their two semantics."""

    def interpret(self, operation: Any, world: Any) -> Iterable[Tuple[Any, Any]]:
        """Default semantics of an atomic operation: ``(result, world)`` pairs.

        Yielding nothing is a failure in the domain and prunes the branch.
        """
        ...

    def modify(self, operation: Any) -> Handler:
        """Return the ``Direct`` or ``Nested`` handler for ``operation``.

        Raises:
            UnsupportedOperationError: if the operation is not in the domain
        """
        ...


def never_applicable(modification: Any, operation: Any, world: Any) -> None:
    """``Direct`` hook for operations no modification can touch."""
    return None
