"""
geopattern/patterns/tiling.py
Generic grid tiler with edge duplication

Only one grid is drawn, but the result must read as seamlessly tileable.
Cells on column 0 are repeated one grid-width to the right, cells on row 0
one grid-height down, and cell (0, 0) lands on all four corners:

    interior cells      x1
    edge (non-corner)   x2
    corner (0, 0)       x4
"""

from typing import Callable, Iterator, List, Tuple

from .base import Primitive

# factory(index, col, row) -> primitives for the cell at `index`
# placed at grid position (col, row)
CellFactory = Callable[[int, int, int], List[Primitive]]


def grid_cells(width: int, height: int) -> Iterator[Tuple[int, int, int]]:
    """Yield (index, x, y) row-major, index = y * width + x."""
    for y in range(height):
        for x in range(width):
            yield y * width + x, x, y


def placements(x: int, y: int, width: int, height: int,
               wrap_rows: bool = True, wrap_columns: bool = True) -> List[Tuple[int, int]]:
    """
    Grid positions at which cell (x, y) is emitted.

    The cell's own position comes first, then the column wrap, the row
    wrap and the far corner.
    """
    spots = [(x, y)]
    if wrap_columns and x == 0:
        spots.append((width, y))
    if wrap_rows and y == 0:
        spots.append((x, height))
    if wrap_columns and wrap_rows and x == 0 and y == 0:
        spots.append((width, height))
    return spots


def tile(width: int, height: int, factory: CellFactory,
         wrap_rows: bool = True, wrap_columns: bool = True) -> List[Primitive]:
    """
    Iterate the grid row-major and collect every cell's primitives,
    replicating border cells per the edge-duplication rule.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")

    primitives: List[Primitive] = []
    for index, x, y in grid_cells(width, height):
        for col, row in placements(x, y, width, height, wrap_rows, wrap_columns):
            primitives.extend(factory(index, col, row))
    return primitives
