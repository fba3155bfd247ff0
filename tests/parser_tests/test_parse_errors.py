# tests/parser_tests/test_parse_errors.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Test suite for formula parser syntax validation and error handling

"""Test suite for formula parser error handling.

Every malformed input must surface as a ``ParseError``, whatever stage
(lexer, grammar, empty input) detected the problem.
"""

import pytest
from parser import parse, ParseError
from utils.logger import get_logger


class TestFormulaParserErrors:
    """Test cases for rejected formula text."""

    def setup_method(self):
        self.logger = get_logger()

    INVALID_SYNTAX_CASES = [
        ("", "Empty input"),
        ("   ", "Whitespace only"),
        ("(a", "Unclosed parenthesis"),
        ("a)", "Unopened parenthesis"),
        ("()", "Empty parentheses"),
        ("a & ", "Trailing operator"),
        ("a | | b", "Double operator"),
        ("a b", "Missing operator"),
        ("U a", "Binary operator used as prefix"),
        ("a X", "Prefix operator used as postfix"),
        ("X", "Prefix operator without operand"),
        ("a U", "Until without right operand"),
        ("F", "Eventually without operand"),
        ("a ! b", "Negation is not part of the syntax"),
        ("a -> b", "Implication is not part of the syntax"),
    ]

    @pytest.mark.parametrize("source, description", INVALID_SYNTAX_CASES)
    def test_invalid_syntax_raises(self, source, description):
        self.logger.debug(f"Expecting ParseError for {description}: {source!r}")
        with pytest.raises(ParseError):
            parse(source)

    def test_syntax_error_reports_token(self):
        with pytest.raises(ParseError, match="near 'b'"):
            parse("a b")

    def test_illegal_character_is_wrapped(self):
        with pytest.raises(ParseError, match="Illegal character"):
            parse("a ! b")
