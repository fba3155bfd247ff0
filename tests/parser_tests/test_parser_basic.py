# tests/parser_tests/test_parser_basic.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Test suite for formula parsing, precedence and atom resolution

"""Test suite for the formula parser.

Covers the construction of formula trees, operator precedence and
associativity, the F/G sugar and resolution of modification names.
"""

from enum import Enum

import pytest
from parser import parse, parse_and_simplify, UnknownAtomError
from parser.ast_nodes import Truth, Falsity, Atom, Or, And, Next, Until, Release
from utils.logger import get_logger

a, b, c = Atom("a"), Atom("b"), Atom("c")


class Mod(Enum):
    A = 1
    B = 2


class TestFormulaParser:
    """Test cases for formula tree construction."""

    def setup_method(self):
        self.logger = get_logger()

    PARSE_CASES = [
        # Constants and atoms
        ("true", Truth()),
        ("false", Falsity()),
        ("a", a),
        # Binary connectives
        ("a | b", Or(a, b)),
        ("a & b", And(a, b)),
        ("a U b", Until(a, b)),
        ("a R b", Release(a, b)),
        # Prefix operators and sugar
        ("X a", Next(a)),
        ("F a", Until(Truth(), a)),
        ("G a", Release(Falsity(), a)),
        ("X X a", Next(Next(a))),
        # Precedence: & over |
        ("a | b & c", Or(a, And(b, c))),
        ("a & b | c", Or(And(a, b), c)),
        # Precedence: U/R over &
        ("a & b U c", And(a, Until(b, c))),
        ("a U b | c", Or(Until(a, b), c)),
        # Precedence: prefix over U
        ("X a U b", Until(Next(a), b)),
        ("F a & G b", And(Until(Truth(), a), Release(Falsity(), b))),
        # Associativity
        ("a | b | c", Or(Or(a, b), c)),
        ("a & b & c", And(And(a, b), c)),
        ("a U b U c", Until(a, Until(b, c))),
        ("a R b U c", Release(a, Until(b, c))),
        # Parentheses
        ("(a | b) & c", And(Or(a, b), c)),
        ("X (a U b)", Next(Until(a, b))),
        ("(a U b) U c", Until(Until(a, b), c)),
    ]

    @pytest.mark.parametrize("source, expected", PARSE_CASES)
    def test_parse_structure(self, source, expected):
        self.logger.debug(f"Parsing: {source}")
        assert parse(source) == expected

    @pytest.mark.parametrize("source, _", PARSE_CASES)
    def test_round_trip(self, source, _):
        formula = parse(source)
        assert parse(str(formula)) == formula

    def test_atoms_resolved_from_enum_members(self):
        formula = parse("F A & X B", atoms=Mod.__members__)
        assert formula == And(Until(Truth(), Atom(Mod.A)), Next(Atom(Mod.B)))

    def test_atoms_resolved_from_mapping(self):
        assert parse("x U y", atoms={"x": 10, "y": 20}) == Until(Atom(10), Atom(20))

    def test_unknown_atom_raises(self):
        with pytest.raises(UnknownAtomError) as excinfo:
            parse("F A & F C", atoms=Mod.__members__)
        assert excinfo.value.name == "C"
        assert excinfo.value.known == ["A", "B"]

    def test_parse_and_simplify(self):
        assert parse_and_simplify("true & (a | false)") == a
        assert parse_and_simplify("X (true & a) U b") == Until(Next(a), b)
