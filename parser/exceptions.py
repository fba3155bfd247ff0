# parser/exceptions.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for modification formula processing.

This module defines exceptions that can be raised while turning formula text
into formula trees. They are caller errors: the exploration engine itself
never raises them.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input formula does not conform to the formula grammar
    or contains other structural errors that prevent successful parsing.
    """

    pass


class UnknownAtomError(ParseError):
    """Raised when a formula names a modification the caller did not supply."""

    def __init__(self, name: str, known):
        self.name = name
        self.known = sorted(known)
        super().__init__(
            f"Unknown modification '{name}' (known: {', '.join(self.known) or 'none'})"
        )
