# logic/pruning.py

"""
Reasons a branch of the exploration is discarded, and counters for them.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict


class PruneReason(Enum):
    """Why a placement of modifications was abandoned."""
    UNSATISFIABLE = auto()  # the active formulas offered no alternative
    INAPPLICABLE = auto()  # the domain rejected the modification
    DOMAIN_FAILURE = auto()  # default semantics produced no result
    UNFINISHED_SCOPE = auto()  # a scope closed with an unfinished formula
    UNFINISHED_RUN = auto()  # the run ended with an unfinished formula


@dataclass(slots=True)
class ExplorationStats:
    """Counters collected while interpreting one program."""
    steps: int = 0
    alternatives: int = 0
    scopes_opened: int = 0
    outcomes: int = 0
    pruned: Dict[PruneReason, int] = field(default_factory=dict)

    def prune(self, reason: PruneReason) -> None:
        self.pruned[reason] = self.pruned.get(reason, 0) + 1

    @property
    def total_pruned(self) -> int:
        return sum(self.pruned.values())

    def as_dict(self) -> Dict:
        return {
            'steps': self.steps,
            'alternatives': self.alternatives,
            'scopes_opened': self.scopes_opened,
            'outcomes': self.outcomes,
            'pruned': {reason.name: count for reason, count in self.pruned.items()},
        }
