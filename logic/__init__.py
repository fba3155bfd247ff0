# logic/__init__.py

"""Formula progression and the branching interpreter.

This package provides:
  • finished / step / step_list: progressing formulas by one step
  • BranchingInterpreter: interpretation of a program under active formulas
  • open_scope, somewhere, everywhere: building formula-scoped programs
  • explore / run / run_default: entry points that keep satisfied branches
  • Direct / Nested / Domain: the hooks a concrete operation domain supplies
"""

from .stepper import finished, step, step_list, compose, atoms
from .handlers import Direct, Nested, Domain, Composable, never_applicable
from .interpreter import BranchingInterpreter, ModifyScope
from .scopes import somewhere, everywhere, open_scope, explore, run, run_default
from .pruning import ExplorationStats, PruneReason
from .exceptions import UnsupportedOperationError, ModificationTypeError

__all__ = [
    "finished",
    "step",
    "step_list",
    "compose",
    "atoms",
    "Direct",
    "Nested",
    "Domain",
    "Composable",
    "never_applicable",
    "BranchingInterpreter",
    "ModifyScope",
    "somewhere",
    "everywhere",
    "open_scope",
    "explore",
    "run",
    "run_default",
    "ExplorationStats",
    "PruneReason",
    "UnsupportedOperationError",
    "ModificationTypeError",
]
