# parser/lexer.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Lexical analyzer for modification formula tokenization using SLY

"""Lexical analyzer for modification formula strings.

This module implements tokenization of LTL modification formulas, breaking
input strings into tokens for parser consumption.

Supported Tokens:
- Operators: &, |, (, )
- Keywords: X, F, G, U, R, true, false
- Identifiers: modification names
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for modification formula tokenization.

    Distinguishes between reserved temporal keywords and user-defined
    modification names. The single capital letters X, F, G, U and R are
    reserved and cannot be used as modification names.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "NEXT",
        "EVENTUALLY",
        "ALWAYS",
        "UNTIL",
        "RELEASE",
        "TRUE",
        "FALSE",
        "ID",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    # Keyword mapping: reassign token types for reserved words
    ID["X"] = "NEXT"
    ID["F"] = "EVENTUALLY"
    ID["G"] = "ALWAYS"
    ID["U"] = "UNTIL"
    ID["R"] = "RELEASE"
    ID["true"] = "TRUE"
    ID["false"] = "FALSE"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
