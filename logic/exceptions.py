# logic/exceptions.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Caller errors raised by the exploration engine

"""Exceptions for misuse of the exploration engine.

Unsatisfiable formulas and inapplicable modifications are never errors: they
prune branches. These exceptions signal programs or formulas that cannot be
explored at all.
"""


class UnsupportedOperationError(TypeError):
    """Raised by a domain asked about an operation it does not define."""

    def __init__(self, domain, operation):
        self.operation = operation
        super().__init__(
            f"{type(domain).__name__} does not support operation {operation!r}"
        )


class ModificationTypeError(TypeError):
    """Raised when a formula's atom is not of the declared modification type."""

    def __init__(self, modification, expected: type):
        self.modification = modification
        self.expected = expected
        super().__init__(
            f"Atom {modification!r} is not a {expected.__name__} modification"
        )
