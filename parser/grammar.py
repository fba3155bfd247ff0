# parser/grammar.py
# This file is part of Modus - LTL-scheduled trace modification
#
# LALR(1) grammar and parser for modification formulas using SLY

"""Formula grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for LTL modification
formulas. The parser constructs formula trees from token streams provided by
the lexer, handling operator precedence and associativity.

Operator Precedence (lowest to highest):
- OR ('|'): left-associative
- AND ('&'): left-associative
- UNTIL ('U'), RELEASE ('R'): right-associative
- NEXT ('X'), EVENTUALLY ('F'), ALWAYS ('G'): prefix

``F f`` is sugar for ``true U f`` and ``G f`` for ``false R f``.
"""

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import (
    Formula,
    Truth,
    Falsity,
    Atom,
    Or,
    And,
    Next,
    Until,
    Release,
)
from .exceptions import ParseError
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for modification formulas.

    Atoms are produced with their name as the modification value; resolving
    names to real modification values is done by :func:`parser.parse`.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("right", "UNTIL", "RELEASE"),
        ("right", "NEXT", "EVENTUALLY", "ALWAYS"),
    )

    @_("expr")
    def start(self, p) -> Formula:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("NEXT expr")
    def expr(self, p) -> Formula:
        """Next-step operator."""
        return Next(p.expr)

    @_("EVENTUALLY expr")
    def expr(self, p) -> Formula:
        """Eventually: true until the operand."""
        return Until(Truth(), p.expr)

    @_("ALWAYS expr")
    def expr(self, p) -> Formula:
        """Always: false releases the operand."""
        return Release(Falsity(), p.expr)

    @_("expr UNTIL expr")
    def expr(self, p) -> Formula:
        return Until(p.expr0, p.expr1)

    @_("expr RELEASE expr")
    def expr(self, p) -> Formula:
        return Release(p.expr0, p.expr1)

    @_("expr AND expr")
    def expr(self, p) -> Formula:
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Formula:
        return Or(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Formula:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("constant")
    def expr(self, p) -> Formula:
        return p.constant

    @_("ID")
    def constant(self, p) -> Formula:
        """Modification name."""
        return Atom(p.ID)

    @_("TRUE")
    def constant(self, p) -> Formula:
        return Truth()

    @_("FALSE")
    def constant(self, p) -> Formula:
        return Falsity()

    def parse(self, text: str) -> Formula:
        """Parse formula text into a formula tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            result = super().parse(FormulaLexer().tokenize(text))

            if result is None and text.strip() == "":
                raise ParseError("Input formula is empty.")

            if result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(f"Successfully parsed formula into {type(result).__name__}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
