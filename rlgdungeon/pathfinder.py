"""Dijkstra distance maps from the player over a hardness grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Callable, Sequence

from .heap import FibonacciHeap, HeapNode

UNREACHABLE = 2**31 - 1
IMMUTABLE_HARDNESS = 255

# (row offset, column offset), in the order neighbours are relaxed.
_NEIGHBOURS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))


@dataclass(eq=False)
class PathCell:
    """Distance to one cell and the cell it is reached from."""

    x: int
    y: int
    cost: int = UNREACHABLE
    from_x: int | None = None
    from_y: int | None = None
    node: HeapNode | None = field(default=None, repr=False)


class Pathfinder:
    """Distance maps over a grid of hardness values (rows of columns)."""

    def __init__(self, hardness: Sequence[Sequence[int]]) -> None:
        self.hardness = [list(row) for row in hardness]
        self.height = len(self.hardness)
        self.width = len(self.hardness[0]) if self.hardness else 0
        self.path = [
            [PathCell(x, y) for x in range(self.width)] for y in range(self.height)
        ]

    def cost(self, x: int, y: int) -> int:
        """Return the distance found to (x, y), or UNREACHABLE."""
        return self.path[y][x].cost

    def _reset(self) -> None:
        for row in self.path:
            for cell in row:
                cell.cost = UNREACHABLE
                cell.from_x = cell.from_y = None
                cell.node = None

    def _run(
        self,
        pc_x: int,
        pc_y: int,
        passable: Callable[[int], bool],
        step_cost: Callable[[int], int],
    ) -> None:
        self._reset()
        self.path[pc_y][pc_x].cost = 0
        heap = FibonacciHeap(key=attrgetter("cost"))
        for row in self.path:
            for cell in row:
                if passable(self.hardness[cell.y][cell.x]):
                    cell.node = heap.insert(cell)

        while heap:
            cell = heap.remove_min()
            cell.node = None
            if cell.cost == UNREACHABLE:
                continue
            new_cost = cell.cost + step_cost(self.hardness[cell.y][cell.x])
            for dr, dc in _NEIGHBOURS:
                r, c = cell.y + dr, cell.x + dc
                if not (0 <= r < self.height and 0 <= c < self.width):
                    continue
                neighbour = self.path[r][c]
                if neighbour.node is not None and neighbour.cost > new_cost:
                    neighbour.cost = new_cost
                    neighbour.from_x, neighbour.from_y = cell.x, cell.y
                    heap.decrease_key_no_replace(neighbour.node)

    def dijkstra_floor(self, pc_x: int, pc_y: int) -> None:
        """Distances over open cells (hardness 0), one per step."""
        self._run(pc_x, pc_y, lambda h: h == 0, lambda h: 1)

    def dijkstra_all(self, pc_x: int, pc_y: int) -> None:
        """Distances through rock; leaving a cell costs 1 + hardness // 85."""
        self._run(
            pc_x,
            pc_y,
            lambda h: h != IMMUTABLE_HARDNESS,
            lambda h: h // 85 + 1,
        )