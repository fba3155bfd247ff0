# model/state_writer.py

"""
State and log domain
====================

A small domain of effectful operations over a single state value and an
append-only text log, with modifications that rewrite writes to the state.

Atomic operations: ``Get``, ``Put``, ``Tell``.
Structural operations: ``Listen`` (run a program and also return the log it
produced) and ``Pass`` (run a program returning ``(value, fn)`` and rewrite
the log it produced with ``fn``).

Modifications only ever touch ``Put``:

  • MOD_A performs the write and logs it as ``[old-->new]``;
  • MOD_B swallows the write, leaving the state unchanged;
  • MOD_AB, the composition of different modifications, applies nowhere.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

from logic.exceptions import UnsupportedOperationError
from logic.handlers import Direct, Nested, never_applicable
from .program import Program


class Modification(Enum):
    MOD_A = "A"
    MOD_B = "B"
    MOD_AB = "AB"

    def compose(self, other: Modification) -> Modification:
        if self is other and self is not Modification.MOD_AB:
            return self
        return Modification.MOD_AB

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class StateLog:
    """World of the domain: current state and everything logged so far."""
    state: Any
    log: str = ""


@dataclass(frozen=True, slots=True)
class Get:
    pass


@dataclass(frozen=True, slots=True)
class Put:
    value: Any


@dataclass(frozen=True, slots=True)
class Tell:
    text: str


@dataclass(frozen=True, slots=True)
class Listen:
    program: Program


@dataclass(frozen=True, slots=True)
class Pass:
    program: Program


def _modify_put(modification: Modification, operation: Put, world: StateLog) -> Optional[Tuple[Any, StateLog]]:
    if modification is Modification.MOD_A:
        rewrite = f"[{world.state}-->{operation.value}]"
        return None, StateLog(operation.value, world.log + rewrite)
    if modification is Modification.MOD_B:
        return None, world
    return None


def _listen_rewrap(runners, world: StateLog):
    (inner,) = runners
    for value, formulas, after in inner(replace(world, log="")):
        yield (value, after.log), formulas, replace(after, log=world.log + after.log)


def _pass_rewrap(runners, world: StateLog):
    (inner,) = runners
    for (value, rewrite), formulas, after in inner(replace(world, log="")):
        yield value, formulas, replace(after, log=world.log + rewrite(after.log))


class StateWriterDomain:
    """Default and modification semantics of the state/log operations."""

    def interpret(self, operation: Any, world: StateLog) -> Iterator[Tuple[Any, StateLog]]:
        if isinstance(operation, Get):
            yield world.state, world
        elif isinstance(operation, Put):
            yield None, replace(world, state=operation.value)
        elif isinstance(operation, Tell):
            yield None, replace(world, log=world.log + operation.text)
        else:
            raise UnsupportedOperationError(self, operation)

    def modify(self, operation: Any):
        if isinstance(operation, Put):
            return Direct(_modify_put)
        if isinstance(operation, (Get, Tell)):
            return Direct(never_applicable)
        if isinstance(operation, Listen):
            return Nested(lambda formulas: (operation.program,), _listen_rewrap)
        if isinstance(operation, Pass):
            return Nested(lambda formulas: (operation.program,), _pass_rewrap)
        raise UnsupportedOperationError(self, operation)
