"""Board graph for Snakes & Ladders: one node per cell, one edge per die roll."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)

BOARD_SIZE = 100
DIE_FACES = 6


class InvalidCellIndex(ValueError):
    """A cell or roll value falls outside the board."""


@dataclass(frozen=True)
class Edge:
    """Rolling *roll* from *start* moves the player to *end*."""

    start: int
    end: int
    roll: int


class BoardGraph:
    """Directed graph of roll edges with outgoing and incoming views.

    Both views hold the same ``Edge`` objects; every insert and removal
    goes through ``add_edge`` / ``remove_edge`` so they never diverge.
    """

    def __init__(self, total_cells: int = BOARD_SIZE):
        if total_cells < 1:
            raise InvalidCellIndex(f"board needs at least one cell, got {total_cells}")
        self.total_cells = total_cells
        self._outgoing: list[list[Edge]] = [[] for _ in range(total_cells)]
        self._incoming: list[list[Edge]] = [[] for _ in range(total_cells)]

    @classmethod
    def initialized(cls, total_cells: int = BOARD_SIZE) -> BoardGraph:
        graph = cls(total_cells)
        graph.initialize()
        return graph

    def initialize(self) -> None:
        """Add an edge for every roll that stays on the board.

        Rolls that would overshoot the final cell are omitted.
        """
        for cell in range(self.total_cells):
            for roll in range(1, DIE_FACES + 1):
                if cell + roll < self.total_cells:
                    self.add_edge(cell, cell + roll, roll)

    # ── edges ────────────────────────────────────────────────────────

    def _check_cell(self, cell: int) -> None:
        if not 0 <= cell < self.total_cells:
            raise InvalidCellIndex(
                f"cell {cell} is outside the board [0, {self.total_cells})"
            )

    def add_edge(self, start: int, end: int, roll: int) -> Edge:
        self._check_cell(start)
        self._check_cell(end)
        if not 1 <= roll <= DIE_FACES:
            raise InvalidCellIndex(f"roll {roll} is outside [1, {DIE_FACES}]")
        edge = Edge(start, end, roll)
        self._outgoing[start].append(edge)
        self._incoming[end].append(edge)
        return edge

    def remove_edge(self, edge: Edge) -> None:
        """Drop *edge* from both views. Missing edges are ignored."""
        out = self._outgoing[edge.start]
        inc = self._incoming[edge.end]
        if edge in out:
            out.remove(edge)
        if edge in inc:
            inc.remove(edge)

    def outgoing(self, cell: int) -> list[Edge]:
        """Edges leaving *cell*, in increasing roll order."""
        self._check_cell(cell)
        return sorted(self._outgoing[cell], key=lambda e: e.roll)

    def incoming(self, cell: int) -> list[Edge]:
        self._check_cell(cell)
        return list(self._incoming[cell])

    def edges(self) -> list[Edge]:
        return [e for cell in range(self.total_cells) for e in self.outgoing(cell)]

    # ── shortcuts ────────────────────────────────────────────────────

    def add_shortcut(self, from_cell: int, to_cell: int) -> int:
        """Redirect every roll that lands on *from_cell* to *to_cell*.

        Works on a snapshot of the incoming edges, so edges added here
        (including a self-redirect) are not revisited. Returns the number
        of edges rewritten; zero means the call was a no-op.
        """
        self._check_cell(from_cell)
        self._check_cell(to_cell)

        arrivals = list(self._incoming[from_cell])
        for edge in arrivals:
            self.remove_edge(edge)
            self.add_edge(edge.start, to_cell, edge.roll)

        logger.debug(
            "shortcut %d -> %d rewrote %d edge(s)", from_cell, to_cell, len(arrivals)
        )
        return len(arrivals)

    # Ladders and snakes only differ in direction, which the graph ignores.
    add_ladder = add_shortcut
    add_snake = add_shortcut


def build_board(
    total_cells: int = BOARD_SIZE,
    ladders: Iterable[tuple[int, int]] = (),
    snakes: Iterable[tuple[int, int]] = (),
) -> BoardGraph:
    """Build a board and apply *ladders*, then *snakes*, in the given order.

    Pairs are 0-based ``(from, to)`` cells. Order matters when shortcuts
    chain, so it is kept exactly as given.
    """
    graph = BoardGraph.initialized(total_cells)
    for from_cell, to_cell in ladders:
        graph.add_ladder(from_cell, to_cell)
    for from_cell, to_cell in snakes:
        graph.add_snake(from_cell, to_cell)
    return graph
