# model/recording.py

"""
Recording domain
================

Operations that do nothing but leave a labelled entry in a log, and
modifications that are always applicable and record themselves next to the
entry. Useful to see exactly where a formula placed its modifications.

``Tag`` modifications compose by concatenation in application order:
``Tag(("a",)).compose(Tag(("b",)))`` applies ``b`` first, so it is
``Tag(("b", "a"))``.

``Both(first, second)`` is a structural operation running two nested
programs one after the other; the formulas left over by ``first`` are the
formulas ``second`` starts with.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from logic.exceptions import UnsupportedOperationError
from logic.handlers import Direct, Nested
from .program import Program

Log = Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Tag:
    names: Tuple[str, ...]

    @classmethod
    def of(cls, *names: str) -> Tag:
        return cls(tuple(names))

    def compose(self, other: Tag) -> Tag:
        return Tag(other.names + self.names)

    def __str__(self) -> str:
        return "+".join(self.names)


@dataclass(frozen=True, slots=True)
class Step:
    label: str


@dataclass(frozen=True, slots=True)
class Both:
    first: Program
    second: Program


def _tag_step(tag: Tag, operation: Step, log: Log):
    return operation.label, log + (f"{operation.label}[{tag}]",)


def _both_rewrap(runners, log: Log):
    first, second = runners
    for first_value, leftover, middle in first(log):
        for second_value, remaining, end in second(middle, leftover):
            yield (first_value, second_value), remaining, end


class RecordingDomain:
    """Every step logs its label; modified steps also log the applied tag."""

    def interpret(self, operation: Any, log: Log) -> Iterator[Tuple[Any, Log]]:
        if not isinstance(operation, Step):
            raise UnsupportedOperationError(self, operation)
        yield operation.label, log + (operation.label,)

    def modify(self, operation: Any):
        if isinstance(operation, Step):
            return Direct(_tag_step)
        if isinstance(operation, Both):
            return Nested(lambda formulas: (operation.first, operation.second), _both_rewrap)
        raise UnsupportedOperationError(self, operation)
