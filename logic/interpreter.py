# logic/interpreter.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Type

from parser.ast_nodes import Formula
from model.program import Program, Pure, Bind
from utils.logger import get_logger
from .exceptions import ModificationTypeError
from .handlers import Direct, Domain, Formulas, Nested, Outcome
from .pruning import ExplorationStats, PruneReason
from .stepper import atoms, finished, step_list

logger = get_logger()


@dataclass(frozen=True, slots=True)
class ModifyScope:
    """Structural operation: ``program`` runs with ``formula`` as innermost scope."""
    formula: Formula
    program: Program


def _fmt(formulas: Formulas) -> str:
    return "[" + ", ".join(str(f) for f in formulas) + "]"


@dataclass(slots=True)
class BranchingInterpreter:
    """
    Interprets a program under a list of active formulas, exploring every way
    the formulas can place modifications on its operations.

    Interpretation is a lazy depth-first search: ``interpret`` yields one
    ``(value, formulas, world)`` outcome per surviving branch, in the order
    the formulas enumerate their alternatives. Branches share nothing
    mutable; formula tuples and worlds are immutable values.
    """
    modification_type: Type[Any]
    domain: Domain
    stats: ExplorationStats = field(default_factory=ExplorationStats)

    def check_atoms(self, formula: Formula) -> None:
        for modification in atoms(formula):
            if not isinstance(modification, self.modification_type):
                raise ModificationTypeError(modification, self.modification_type)

    def interpret(self, program: Program, formulas: Formulas, world: Any) -> Iterator[Outcome]:
        # Explicit depth-first stack: one frame per pending Bind, holding the
        # outcomes of its operation not yet explored and its continuation.
        stack = []
        while True:
            if isinstance(program, Pure):
                yield program.value, formulas, world
            elif isinstance(program, Bind):
                stack.append((self._operation(program.operation, formulas, world), program.continuation))
            else:
                raise TypeError(f"Not a program: {program!r}")

            while stack:
                outcomes, continuation = stack[-1]
                outcome = next(outcomes, None)
                if outcome is None:
                    stack.pop()
                    continue
                result, formulas, world = outcome
                program = continuation(result)
                break
            else:
                return

    def _operation(self, operation: Any, formulas: Formulas, world: Any) -> Iterator[Outcome]:
        if isinstance(operation, ModifyScope):
            yield from self._scope(operation, formulas, world)
            return

        handler = self.domain.modify(operation)
        if isinstance(handler, Nested):
            yield from self._nested(handler, formulas, world)
        elif isinstance(handler, Direct):
            yield from self._direct(handler, operation, formulas, world)
        else:
            raise TypeError(f"Unsupported modification handler for {operation!r}: {handler!r}")

    def _prune(self, reason: PruneReason, describe: Callable[[], str]) -> None:
        self.stats.prune(reason)
        if logger.is_debug():
            logger.branch_pruned(reason.name, describe())

    def _scope(self, scope: ModifyScope, formulas: Formulas, world: Any) -> Iterator[Outcome]:
        self.check_atoms(scope.formula)
        self.stats.scopes_opened += 1
        depth = len(formulas) + 1
        if logger.is_debug():
            logger.scope_opened(str(scope.formula), depth)

        for value, after, next_world in self.interpret(scope.program, (scope.formula,) + formulas, world):
            done = finished(after[0])
            if logger.is_debug():
                logger.scope_closed(str(after[0]), depth, done)
            if done:
                yield value, after[1:], next_world
            else:
                self._prune(PruneReason.UNFINISHED_SCOPE, lambda: str(after[0]))

    def _nested(self, handler: Nested, formulas: Formulas, world: Any) -> Iterator[Outcome]:
        def runner_for(program: Program):
            def run(start: Any, inner: Optional[Formulas] = None) -> Iterator[Outcome]:
                return self.interpret(program, formulas if inner is None else inner, start)
            return run

        runners = [runner_for(program) for program in handler.unwrap(formulas)]
        yield from handler.rewrap(runners, world)

    def _direct(self, handler: Direct, operation: Any, formulas: Formulas, world: Any) -> Iterator[Outcome]:
        self.stats.steps += 1
        alternatives = step_list(formulas)
        self.stats.alternatives += len(alternatives)
        if logger.is_debug():
            logger.alternatives_computed(repr(operation), len(alternatives), _fmt(formulas))

        if not alternatives:
            self._prune(PruneReason.UNSATISFIABLE, lambda: _fmt(formulas))
            return

        for now, later in alternatives:
            if now is None:
                produced = False
                for result, next_world in self.domain.interpret(operation, world):
                    produced = True
                    yield result, later, next_world
                if not produced:
                    self._prune(PruneReason.DOMAIN_FAILURE, lambda: repr(operation))
                continue

            applied = handler.apply(now, operation, world)
            if applied is None:
                self._prune(PruneReason.INAPPLICABLE, lambda: f"{now} on {operation!r}")
                continue
            if logger.is_debug():
                logger.modification_applied(repr(operation), str(now))
            result, next_world = applied
            yield result, later, next_world
