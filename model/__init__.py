# model/__init__.py

"""
Operation sequences and the concrete domains they run in:
the ``Program`` representation with its builders, a state/log domain with
the reference traces, and a recording domain that logs where modifications
land. These types support the interpreter without pulling in exploration
logic.
"""

from .program import Program, Pure, Bind, perform, sequence, from_generator
from .state_writer import (
    Modification,
    StateLog,
    StateWriterDomain,
    Get,
    Put,
    Tell,
    Listen,
    Pass,
)
from .recording import Tag, Step, Both, RecordingDomain
from .example_traces import EXAMPLE_TRACES

__all__ = [
    "Program",
    "Pure",
    "Bind",
    "perform",
    "sequence",
    "from_generator",
    "Modification",
    "StateLog",
    "StateWriterDomain",
    "Get",
    "Put",
    "Tell",
    "Listen",
    "Pass",
    "Tag",
    "Step",
    "Both",
    "RecordingDomain",
    "EXAMPLE_TRACES",
]
