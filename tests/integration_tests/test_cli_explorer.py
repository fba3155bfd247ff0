# tests/integration_tests/test_cli_explorer.py
# This file is part of Modus - LTL-scheduled trace modification
#
# End-to-end tests for the command-line explorer

"""End-to-end tests for ``run_explorer``.

The command-line entry point is driven through ``sys.argv``; it always ends
with ``SystemExit``, carrying 0 on success and an error message otherwise.
"""

import sys

import pytest
import run_explorer
from logic import ExplorationStats
from model import StateLog
from parser import ParseError


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["run_explorer.py", *args])
    with pytest.raises(SystemExit) as excinfo:
        run_explorer.main()
    return excinfo.value.code


class TestExploreTrace:
    """Library-level helpers used by the command line."""

    def test_explore_trace(self):
        stats = ExplorationStats()
        results = run_explorer.explore_trace("F MOD_A", "trace1", -1, stats)
        assert results == [
            (None, StateLog(2, "[-1-->1]12")),
            (None, StateLog(2, "1[1-->2]2")),
        ]
        assert stats.outcomes == 2

    def test_parse_formula_uses_modification_names(self):
        with pytest.raises(ParseError):
            run_explorer.parse_formula("F MOD_C")


class TestCommandLine:
    """The argparse front end."""

    def test_prints_every_branch(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "-f", "F MOD_A", "-t", "trace1") == 0
        out = capsys.readouterr().out
        assert "#1: value=None state=2 log='[-1-->1]12'" in out
        assert "#2: value=None state=2 log='1[1-->2]2'" in out

    def test_initial_state_option(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "-f", "F MOD_A", "-t", "trace2", "--initial-state", "7") == 0
        assert "log='[7-->1]1'" in capsys.readouterr().out

    def test_unsatisfiable_formula_exits_cleanly(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "-f", "G MOD_A", "-t", "trace1") == 0
        assert "#1" not in capsys.readouterr().out

    def test_bad_formula_reports_parse_error(self, monkeypatch):
        code = run_cli(monkeypatch, "-f", "F (MOD_A", "-t", "trace1")
        assert code.startswith("ERROR: failed to parse formula")

    def test_unknown_trace_rejected_by_argparse(self, monkeypatch):
        assert run_cli(monkeypatch, "-f", "F MOD_A", "-t", "trace9") == 2
