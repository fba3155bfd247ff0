# parser/simplifier.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Truth/Falsity unit elimination for modification formulas

"""Straightforward simplification of modification formulas.

The simplifier knows how ``Truth`` and ``Falsity`` interact with conjunction
and disjunction and applies this knowledge bottom-up in a single pass:

    true & f   ->  f           f & true   ->  f
    false & f  ->  false       f & false  ->  false
    false | f  ->  f           f | false  ->  f

It recurses through ``Next``, ``Until`` and ``Release`` but does not compute
a normal form. Its only job is to keep the continuations produced by
stepping from growing without bound.

``true | f`` is kept as is: disjunction is intuitionistic, so
that formula offers two alternatives ("do nothing" and "apply f") and
collapsing it to ``true`` would drop one of them.
"""

from __future__ import annotations
from typing import Tuple
from . import ast_nodes as ast


class FormulaSimplifier(ast.Visitor):
    """Single-pass, non-fixpoint Truth/Falsity eliminator.

    Every visit method returns ``(formula, progress)``. When no rewrite fired
    anywhere below a node, the original node object is returned so that
    unchanged subtrees stay shared.
    """

    def simplify(self, root: ast.Formula) -> ast.Formula:
        """Return the simplified formula, or ``root`` itself if nothing changed."""
        result, progress = root.accept(self)
        return result if progress else root

    def visit_truth(self, n: ast.Truth) -> Tuple[ast.Formula, bool]:
        return n, False

    def visit_falsity(self, n: ast.Falsity) -> Tuple[ast.Formula, bool]:
        return n, False

    def visit_atom(self, n: ast.Atom) -> Tuple[ast.Formula, bool]:
        return n, False

    def visit_and(self, n: ast.And) -> Tuple[ast.Formula, bool]:
        left, pl = n.left.accept(self)
        right, pr = n.right.accept(self)

        if isinstance(left, ast.Truth):
            return right, True
        if isinstance(right, ast.Truth):
            return left, True
        if isinstance(left, ast.Falsity) or isinstance(right, ast.Falsity):
            return ast.Falsity(), True
        if pl or pr:
            return ast.And(left, right), True
        return n, False

    def visit_or(self, n: ast.Or) -> Tuple[ast.Formula, bool]:
        left, pl = n.left.accept(self)
        right, pr = n.right.accept(self)

        if isinstance(left, ast.Falsity):
            return right, True
        if isinstance(right, ast.Falsity):
            return left, True
        if pl or pr:
            return ast.Or(left, right), True
        return n, False

    def visit_next(self, n: ast.Next) -> Tuple[ast.Formula, bool]:
        operand, progress = n.operand.accept(self)
        if progress:
            return ast.Next(operand), True
        return n, False

    def visit_until(self, n: ast.Until) -> Tuple[ast.Formula, bool]:
        return self._recurse2(n, ast.Until)

    def visit_release(self, n: ast.Release) -> Tuple[ast.Formula, bool]:
        return self._recurse2(n, ast.Release)

    def _recurse2(self, n, node_type) -> Tuple[ast.Formula, bool]:
        left, pl = n.left.accept(self)
        right, pr = n.right.accept(self)
        if pl or pr:
            return node_type(left, right), True
        return n, False


_SIMPLIFIER = FormulaSimplifier()


def simplify(formula: ast.Formula) -> ast.Formula:
    """Simplify ``formula`` with a shared (stateless) simplifier instance."""
    return _SIMPLIFIER.simplify(formula)
