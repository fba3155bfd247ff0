# logic/scopes.py

"""
Public entry points: tagging parts of a program with formulas and running
programs so that every formula ends up satisfied.

A scope is opened with ``open_scope(formula, program)``; the formula is the
innermost active obligation while ``program`` runs and must be finished when
it returns. ``run`` interprets a whole program and keeps the branches whose
remaining formulas are all finished. An empty result means that no placement
of the modifications satisfies the formulas.
"""

from typing import Any, Iterator, List, Optional, Sequence, Tuple, Type

from parser.ast_nodes import Atom, Falsity, Formula, Release, Truth, Until
from model.program import Program, perform
from utils.logger import get_logger
from .handlers import Domain
from .interpreter import BranchingInterpreter, ModifyScope
from .pruning import ExplorationStats, PruneReason
from .stepper import finished

logger = get_logger()


def somewhere(modification: Any) -> Formula:
    """Apply ``modification`` at exactly one step of the scope."""
    return Until(Truth(), Atom(modification))


def everywhere(modification: Any) -> Formula:
    """Apply ``modification`` at every step of the scope."""
    return Release(Falsity(), Atom(modification))


def open_scope(formula: Formula, program: Program) -> Program:
    """The program running ``program`` with ``formula`` as a new scope."""
    return perform(ModifyScope(formula, program))


def explore(
    modification_type: Type[Any],
    domain: Domain,
    program: Program,
    world: Any,
    initial_formulas: Sequence[Formula] = (),
    stats: Optional[ExplorationStats] = None,
) -> Iterator[Tuple[Any, Any]]:
    """Lazily yield ``(value, world)`` for every surviving branch.

    Args:
        modification_type: Type every atom must be an instance of; there is
            no default, callers state it explicitly
        domain: Semantics of the program's operations
        program: Program to interpret
        world: Initial domain world
        initial_formulas: Formulas active around the whole program,
            innermost first
        stats: Optional counters to fill in while exploring

    Raises:
        ModificationTypeError: an atom is not a ``modification_type``
    """
    interpreter = BranchingInterpreter(modification_type, domain)
    if stats is not None:
        interpreter.stats = stats
    formulas = tuple(initial_formulas)
    for formula in formulas:
        interpreter.check_atoms(formula)

    for value, remaining, final_world in interpreter.interpret(program, formulas, world):
        if all(finished(f) for f in remaining):
            interpreter.stats.outcomes += 1
            yield value, final_world
        else:
            interpreter.stats.prune(PruneReason.UNFINISHED_RUN)
            if logger.is_debug():
                logger.branch_pruned(
                    PruneReason.UNFINISHED_RUN.name,
                    ", ".join(str(f) for f in remaining if not finished(f)),
                )


def run(
    modification_type: Type[Any],
    domain: Domain,
    program: Program,
    world: Any,
    initial_formulas: Sequence[Formula] = (),
    stats: Optional[ExplorationStats] = None,
) -> List[Tuple[Any, Any]]:
    """Eager version of :func:`explore`."""
    stats = stats if stats is not None else ExplorationStats()
    results = list(explore(modification_type, domain, program, world, initial_formulas, stats))
    logger.debug(f"Run finished: {len(results)} outcome(s), {stats.total_pruned} pruned")
    return results


def run_default(
    modification_type: Type[Any],
    domain: Domain,
    program: Program,
    world: Any,
) -> List[Tuple[Any, Any]]:
    """:func:`run` with no formulas active outside the program's own scopes."""
    return run(modification_type, domain, program, world)
