# parser/__init__.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Formula representation, parsing and simplification

"""Modification formula representation, parsing and simplification.

This package owns the formula tree (``ast_nodes``), the single-pass
simplifier that keeps progressed formulas small, and a textual syntax for
writing formulas without building trees by hand.

Core Functions:
    parse: Converts formula strings into formula trees, optionally resolving
        modification names to caller-supplied values
    parse_and_simplify: Parsing followed by simplification

Syntax:
    - Constants: true, false
    - Modification names: identifiers other than the reserved X F G U R
    - Prefix operators: X (next), F (eventually), G (always)
    - Binary operators: U (until), R (release), & (and), | (or)
    - Parenthetical grouping

Example:
    >>> from parser import parse
    >>> formula = parse("F MOD_A & G MOD_B", atoms=Modification.__members__)
"""

from typing import Any, Mapping, Optional

from .exceptions import ParseError, UnknownAtomError
from .grammar import _FormulaParser
from .simplifier import FormulaSimplifier, simplify
from . import ast_nodes as ast
from utils.logger import get_logger


class _AtomResolver(ast.Visitor):
    """Rebuilds a parsed formula with atom names replaced by modification values."""

    def __init__(self, atoms: Mapping[str, Any]):
        self._atoms = atoms

    def resolve(self, root: ast.Formula) -> ast.Formula:
        return root.accept(self)

    def visit_truth(self, n: ast.Truth) -> ast.Formula:
        return n

    def visit_falsity(self, n: ast.Falsity) -> ast.Formula:
        return n

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        try:
            return ast.Atom(self._atoms[n.modification])
        except KeyError:
            raise UnknownAtomError(n.modification, self._atoms.keys()) from None

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return ast.Or(n.left.accept(self), n.right.accept(self))

    def visit_and(self, n: ast.And) -> ast.Formula:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_next(self, n: ast.Next) -> ast.Formula:
        return ast.Next(n.operand.accept(self))

    def visit_until(self, n: ast.Until) -> ast.Formula:
        return ast.Until(n.left.accept(self), n.right.accept(self))

    def visit_release(self, n: ast.Release) -> ast.Formula:
        return ast.Release(n.left.accept(self), n.right.accept(self))


def parse(source: str, atoms: Optional[Mapping[str, Any]] = None) -> ast.Formula:
    """Parse a formula string into a formula tree.

    Uses a fresh parser instance for each invocation. Without ``atoms`` the
    resulting ``Atom`` nodes carry the modification *names*; with ``atoms``
    every name is looked up and replaced by the mapped modification value.

    Args:
        source: Formula string to parse
        atoms: Optional mapping from modification names to modification values
            (an ``Enum`` class's ``__members__`` works directly)

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula syntax is malformed
        UnknownAtomError: A name is missing from ``atoms``

    Example:
        >>> parse("X a U b")
        Until(left=Next(operand=Atom(modification='a')), right=Atom(modification='b'))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise
    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc

    if atoms is not None:
        result = _AtomResolver(atoms).resolve(result)
        logger.debug(f"Resolved modification names in {result}")

    return result


def parse_and_simplify(
    source: str, atoms: Optional[Mapping[str, Any]] = None
) -> ast.Formula:
    """Parse a formula string and apply one simplification pass.

    Args:
        source: Formula string to parse
        atoms: Optional mapping from modification names to modification values

    Returns:
        Simplified formula tree

    Raises:
        ParseError: Formula parsing fails
    """
    formula = parse(source, atoms)
    simplified = simplify(formula)
    get_logger().debug(f"Simplified {formula} to {simplified}")
    return simplified


__all__ = [
    "parse",
    "parse_and_simplify",
    "simplify",
    "FormulaSimplifier",
    "ParseError",
    "UnknownAtomError",
]
