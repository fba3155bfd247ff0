#!/usr/bin/env python3
# run_explorer.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Command-line interface for exploring modification placements on the reference traces

import sys
import argparse
from typing import Any, List, Tuple

from logic import ExplorationStats, open_scope, run
from model import EXAMPLE_TRACES, Modification, StateLog, StateWriterDomain
from parser import parse, ParseError
from utils.logger import configure_logging, get_logger


def parse_formula(text: str):
    """Parse a formula over the state/log domain's modification names.

    Args:
        text: Formula text, e.g. "F MOD_A"

    Returns:
        The parsed formula with atoms resolved to ``Modification`` members

    Raises:
        ParseError: If the text is not a valid formula
    """
    return parse(text, atoms=Modification.__members__)


def explore_trace(formula_text: str, trace_name: str, initial_state: int,
                  stats: ExplorationStats) -> List[Tuple[Any, StateLog]]:
    """Run one reference trace with the formula scoped around it.

    Args:
        formula_text: Formula text
        trace_name: Key of ``EXAMPLE_TRACES``
        initial_state: Starting value of the state
        stats: Counters filled in during exploration

    Returns:
        The ``(value, world)`` pair of every surviving branch
    """
    formula = parse_formula(formula_text)
    program = open_scope(formula, EXAMPLE_TRACES[trace_name]())
    return run(Modification, StateWriterDomain(), program, StateLog(initial_state), stats=stats)


def print_results(results: List[Tuple[Any, StateLog]], stats: ExplorationStats) -> None:
    """Print every surviving branch and the exploration counters.

    Args:
        results: Surviving branches
        stats: Counters collected during exploration
    """
    logger = get_logger()

    if not results:
        logger.warning("No placement of the modifications satisfies the formula.")
    for index, (value, world) in enumerate(results, start=1):
        print(f"#{index}: value={value!r} state={world.state!r} log={world.log!r}")

    logger.info(f"\n📊 Steps interpreted: {stats.steps}")
    logger.info(f"📊 Alternatives considered: {stats.alternatives}")
    for reason, count in stats.pruned.items():
        logger.info(f"   ✂️  {reason.name}: {count}")
    logger.exploration_summary(len(results), stats.total_pruned)


def main():
    parser = argparse.ArgumentParser(
        description="Explore every placement of LTL-scheduled modifications on a reference trace"
    )
    parser.add_argument(
        "-f", "--formula",
        required=True,
        help="Formula over MOD_A, MOD_B, MOD_AB, e.g. 'F MOD_A'"
    )
    parser.add_argument(
        "-t", "--trace",
        choices=sorted(EXAMPLE_TRACES),
        default="trace1",
        help="Reference trace to modify (default: trace1)"
    )
    parser.add_argument(
        "--initial-state",
        type=int,
        default=-1,
        help="Initial state value (default: -1)"
    )
    parser.add_argument(
        "--graph",
        metavar="NAME",
        help="Also render the formula's progression tree to NAME.png"
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=3,
        help="Steps to unfold in the progression graph (default: 3)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print exploration counters"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every step, modification and pruned branch"
    )
    args = parser.parse_args()

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        logger.exploration_start(Modification.__name__, args.formula)
        stats = ExplorationStats()
        results = explore_trace(args.formula, args.trace, args.initial_state, stats)
        print_results(results, stats)

        if args.graph:
            from utils.progression_visualizer import visualize_progression

            visualize_progression(parse_formula(args.formula), args.graph, depth=args.depth)
    except ParseError as e:
        sys.exit(f"ERROR: failed to parse formula: {e}")
    except Exception as e:
        sys.exit(f"UNEXPECTED ERROR: {e}")

    sys.exit(0)


if __name__ == "__main__":
    main()
