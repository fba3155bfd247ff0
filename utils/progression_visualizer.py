# utils/progression_visualizer.py

import os
from typing import Dict

from graphviz import Digraph

from parser.ast_nodes import Falsity, Formula
from logic.stepper import finished, step
from utils.logger import get_logger

logger = get_logger()

VISUALIZATION_OUTPUT_FOLDER = "progression_visualizations"


def _node_color(formula: Formula) -> str:
    if isinstance(formula, Falsity):
        return "lightcoral"
    return "palegreen" if finished(formula) else "lightgrey"


def build_progression_graph(formula: Formula, depth: int = 3) -> Digraph:
    """
    Unfolds ``formula`` for ``depth`` steps and returns the tree of
    alternatives as a Graphviz digraph. Each node is a formula (green when
    it is finished), each edge one alternative, labelled with the
    modification applied at that step ("-" for none). Formulas reached more
    than once at the same depth share a node.
    """
    dot = Digraph(comment=f"Progression of {formula}")
    dot.attr(rankdir="LR", nodesep="0.4", ranksep="0.6")

    ids: Dict[tuple, str] = {}

    def node_for(f: Formula, level: int) -> str:
        key = (level, f)
        if key not in ids:
            ids[key] = f"n{len(ids)}"
            dot.node(ids[key], str(f), shape="box", style="filled", fillcolor=_node_color(f))
        return ids[key]

    frontier = [formula]
    node_for(formula, 0)
    for level in range(depth):
        next_frontier = []
        for current in frontier:
            source = node_for(current, level)
            alternatives = step(current)
            if not alternatives:
                dot.node(f"{source}_dead", "✗", shape="plaintext")
                dot.edge(source, f"{source}_dead", style="dotted")
                continue
            for now, later in alternatives:
                is_new = (level + 1, later) not in ids
                target = node_for(later, level + 1)
                dot.edge(source, target, label="-" if now is None else str(now))
                if is_new:
                    next_frontier.append(later)
        frontier = next_frontier

    return dot


def visualize_progression(formula: Formula, base_filename: str, depth: int = 3, fmt: str = "png") -> None:
    """
    Renders :func:`build_progression_graph` into the
    'progression_visualizations' folder.

    Args:
        formula: The formula to unfold.
        base_filename: The base name for the output file.
        depth: Number of steps to unfold.
        fmt: The output format for the image (e.g., "png", "svg").
    """
    dot = build_progression_graph(formula, depth)
    dot.format = fmt

    if not os.path.exists(VISUALIZATION_OUTPUT_FOLDER):
        try:
            os.makedirs(VISUALIZATION_OUTPUT_FOLDER)
            logger.info(f"Created directory for progression visualizations: {VISUALIZATION_OUTPUT_FOLDER}")
            output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
        except OSError as e:
            logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}. "
                         f"Saving to current directory instead.")
            output_path = base_filename
    else:
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    try:
        dot.render(output_path, view=False, cleanup=True)
        logger.info(f"Progression visualization saved to {output_path}.{fmt}")
    except Exception as e:
        logger.warning(f"Failed to render progression visualization to {output_path}.{fmt}: {e}. "
                       "Ensure Graphviz executables (dot) are in your system's PATH.")
