"""Breadth-first search for the fewest rolls from the first cell."""

from __future__ import annotations

import logging
from collections import deque
from types import MappingProxyType
from typing import Mapping

from snakes_solver.board import BoardGraph

logger = logging.getLogger(__name__)

START_CELL = 0
UNREACHABLE = -1


def shortest_distances(graph: BoardGraph) -> Mapping[int, int]:
    """Map every reachable cell to its minimum roll count from cell 0.

    Unreachable cells are absent. The returned mapping is read-only.
    """
    distances: dict[int, int] = {START_CELL: 0}
    queue = deque([START_CELL])

    while queue:
        cell = queue.popleft()
        for edge in graph.outgoing(cell):
            if edge.end not in distances:
                distances[edge.end] = distances[cell] + 1
                queue.append(edge.end)

    logger.debug("reached %d of %d cells", len(distances), graph.total_cells)
    return MappingProxyType(distances)


def min_rolls(distances: Mapping[int, int], final_cell: int) -> int:
    """Rolls needed to reach *final_cell*, or ``UNREACHABLE``."""
    return distances.get(final_cell, UNREACHABLE)


def solve(graph: BoardGraph) -> int:
    return min_rolls(shortest_distances(graph), graph.total_cells - 1)


def format_distances(distances: Mapping[int, int], total_cells: int) -> str:
    """One ``"<cell> <distance>"`` line per cell, ``None`` if unreachable."""
    lines = [f"{cell} {distances.get(cell)}" for cell in range(total_cells)]
    lines.append("=======")
    return "\n".join(lines)
