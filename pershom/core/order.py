"""
pershom/core/order.py

Total order of the cells of a filtration.

Maps every (dimension, index) cell address to a unique column id and keeps,
per filtration position, the cell's filtration value. Column ids start at 1,
or at 2 when column/row 1 is reserved for the augmentation vertex used in
reduced homology. Positions are column ids with that offset removed, so they
always run 1..n.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

CellKey = Tuple[int, int]  # (dimension, index)


@dataclass(frozen=True)
class OrderEntry:
    """Cell placed at one filtration position."""
    value: Any
    dim: int
    index: int


@dataclass(frozen=True)
class TotalOrder:
    """
    Build-once lookup between cells and boundary matrix columns.

    Attributes:
        column_of: (dimension, index) -> column id
        entries: Cells by filtration position (entries[k] is position k + 1)
        offset: 1 if an augmentation column precedes the cells, else 0
    """
    column_of: Dict[CellKey, int]
    entries: Tuple[OrderEntry, ...]
    offset: int

    @staticmethod
    def build(cells: Iterable[Tuple[Any, int, int]], offset: int = 0) -> "TotalOrder":
        """
        Build a total order from cells already listed in filtration order.

        Args:
            cells: (value, dimension, index) triples in filtration order
            offset: Number of reserved leading columns

        Returns:
            TotalOrder with consecutive column ids starting at offset + 1
        """
        entries = tuple(OrderEntry(v, d, i) for v, d, i in cells)
        column_of = {(e.dim, e.index): k + 1 + offset for k, e in enumerate(entries)}
        if len(column_of) != len(entries):
            raise ValueError("Cell listed more than once in filtration order")
        return TotalOrder(column_of=column_of, entries=entries, offset=offset)

    def column(self, dim: int, index: int) -> int:
        """Get the column id of a cell."""
        return self.column_of[(dim, index)]

    def position(self, column: int) -> int:
        """Filtration position (1-based) of a column id."""
        return column - self.offset

    def entry(self, position: int) -> OrderEntry:
        """Cell at a filtration position."""
        if position < 1:
            raise KeyError(f"Position {position} is not a cell position")
        return self.entries[position - 1]

    def value(self, position: int) -> Any:
        """Filtration value at a position."""
        return self.entry(position).value

    def dimension(self, position: int) -> int:
        """Cell dimension at a position."""
        return self.entry(position).dim

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key) -> bool:
        return key in self.column_of
