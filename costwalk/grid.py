"""
Grid Lattice
============

Helpers for searching 2-D grids of per-cell entry costs.

Grids are written as text, one row per line, with whitespace-separated
cells. Integer cells are passable and cost their value to enter; anything
else (conventionally ``■``) is a wall:

    1  ■  1
    1  1  1
"""

import operator
from typing import Any, Mapping, NamedTuple

from costwalk.core.options import SearchOptions

WALL = "■"


class GridCell(NamedTuple):
    """A lattice position. Implements `Adjacent` with no bounds."""

    row: int
    col: int

    def adjacent(self) -> list["GridCell"]:
        """Orthogonal neighbours: right, left, down, up."""
        return [
            GridCell(self.row, self.col + 1),
            GridCell(self.row, self.col - 1),
            GridCell(self.row + 1, self.col),
            GridCell(self.row - 1, self.col),
        ]

    def manhattan(self, other: "GridCell") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)


def parse_grid(text: str) -> dict[GridCell, int]:
    """
    Parse a text grid into ``{cell: entry_cost}``; walls are omitted.

    Raises
    ------
    ValueError
        If a cell holds a negative cost.
    """
    grid: dict[GridCell, int] = {}
    for row, line in enumerate(text.strip().splitlines()):
        for col, token in enumerate(line.split()):
            try:
                cost = int(token)
            except ValueError:
                continue
            if cost < 0:
                raise ValueError(f"negative cost {cost} at row {row}, col {col}")
            grid[GridCell(row, col)] = cost
    return grid


def render_grid(values: Mapping[GridCell, Any]) -> str:
    """
    Render ``{cell: value}`` back to text, drawing missing cells as walls.

    Rendering starts at row and column 0, or further up and left when
    cells with negative coordinates are present. Pass ``cost_values(costs)``
    to draw the costs found by a search.
    """
    if not values:
        return ""
    min_row = min(0, min(cell.row for cell in values))
    min_col = min(0, min(cell.col for cell in values))
    max_row = max(cell.row for cell in values)
    max_col = max(cell.col for cell in values)
    lines = []
    for row in range(min_row, max_row + 1):
        line = ""
        for col in range(min_col, max_col + 1):
            value = values.get(GridCell(row, col))
            line += f"{WALL if value is None else value:>2} "
        lines.append(line)
    return "\n".join(lines) + "\n"


def grid_options(grid: Mapping[GridCell, int], *, bounded: bool = True) -> SearchOptions:
    """
    Additive search options over a parsed grid.

    Entering a cell adds its cost; walls and cells outside the grid are
    inadmissible. With ``bounded=False`` no ``edges`` callback is set and
    neighbours come from `GridCell.adjacent`, relying on ``accumulate`` to
    reject cells off the grid.
    """

    def accumulate(agg: int, from_cell: GridCell, to_cell: GridCell) -> tuple[int, bool]:
        cost = grid.get(to_cell)
        if cost is None:
            return agg, False
        return agg + cost, True

    def edges(cell: GridCell) -> list[GridCell]:
        return [to for to in cell.adjacent() if to in grid]

    return SearchOptions(
        accumulate=accumulate,
        less=operator.lt,
        edges=edges if bounded else None,
        state_type=GridCell,
    )
