# model/program.py

"""
Program
=======

Sequences of abstract operations where later operations may depend on the
results of earlier ones. A program is either finished (``Pure``) or performs
one operation and continues with a function of its result (``Bind``).

Continuations are plain functions, so a program can be resumed any number of
times from the same point with different results. The branching interpreter
relies on that: each branch resumes the same continuation with its own
result.

Programs are usually written as generator functions:

    def trace():
        yield Put(1)
        value = yield Get()
        yield Tell(str(value))

    program = from_generator(trace)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

# Results sent so far, newest last: (earlier history, result)
_History = Tuple[Optional["_History"], Any]


@dataclass(frozen=True, slots=True)
class Program:
    """Base class of ``Pure`` and ``Bind``."""

    def bind(self, fn: Callable[[Any], Program]) -> Program:
        """Run this program, then the program ``fn`` builds from its value."""
        raise NotImplementedError

    def then(self, other: Program) -> Program:
        """Run this program, discard its value, then run ``other``."""
        return self.bind(lambda _: other)

    def map(self, fn: Callable[[Any], Any]) -> Program:
        """Transform the final value with ``fn``."""
        return self.bind(lambda value: Pure(fn(value)))


@dataclass(frozen=True, slots=True)
class Pure(Program):
    """A finished program with a final value."""
    value: Any = None

    def bind(self, fn: Callable[[Any], Program]) -> Program:
        return fn(self.value)


@dataclass(frozen=True, slots=True)
class Bind(Program):
    """Perform ``operation``, then continue with ``continuation(result)``."""
    operation: Any
    continuation: Callable[[Any], Program]

    def bind(self, fn: Callable[[Any], Program]) -> Program:
        continuation = self.continuation
        return Bind(self.operation, lambda result: continuation(result).bind(fn))


def perform(operation: Any) -> Program:
    """The program that performs ``operation`` and returns its result."""
    return Bind(operation, Pure)


def sequence(*programs: Program) -> Program:
    """Run ``programs`` in order; the value is the last program's value."""
    if not programs:
        return Pure()
    result = programs[-1]
    for program in reversed(programs[:-1]):
        result = program.then(result)
    return result


def from_generator(factory: Callable[..., Any], *args, **kwargs) -> Program:
    """Turn a generator function into a ``Program``.

    The generator yields operations (or whole programs) and receives their
    results; its return value is the program's value.

    The first resumption at a given point advances the live generator, so a
    single run costs one ``send`` per operation. Every further resumption at
    the same point (another branch) re-runs ``factory`` and replays the
    results seen on the way there, which costs one ``send`` per earlier
    operation. The generator must therefore be deterministic in those results
    and free of outside side effects.
    """

    def replay(history: Optional[_History]) -> Program:
        results = []
        node = history
        while node is not None:
            node, result = node
            results.append(result)

        gen = factory(*args, **kwargs)
        try:
            yielded = gen.send(None)
            for result in reversed(results):
                yielded = gen.send(result)
        except StopIteration as stop:
            return Pure(stop.value)
        return suspend(gen, yielded, history)

    def suspend(gen, yielded: Any, history: Optional[_History]) -> Program:
        live = [gen]

        def continue_with(result: Any) -> Program:
            resumed = (history, result)
            if not live:
                return replay(resumed)
            gen = live.pop()
            try:
                next_yielded = gen.send(result)
            except StopIteration as stop:
                return Pure(stop.value)
            return suspend(gen, next_yielded, resumed)

        if isinstance(yielded, Program):
            return yielded.bind(continue_with)
        return Bind(yielded, continue_with)

    return replay(None)
