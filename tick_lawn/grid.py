"""LawnGrid - maps grid cells to world coordinates."""
from __future__ import annotations


class LawnGrid:
    def __init__(
        self,
        columns: int,
        rows: int,
        cell_width: int,
        cell_height: int,
    ) -> None:
        self._columns = columns
        self._rows = rows
        self._cell_width = cell_width
        self._cell_height = cell_height

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cell_width(self) -> int:
        return self._cell_width

    @property
    def cell_height(self) -> int:
        return self._cell_height

    @property
    def width(self) -> int:
        return self._columns * self._cell_width

    @property
    def height(self) -> int:
        return self._rows * self._cell_height

    def contains(self, column: int, row: int) -> bool:
        return 0 <= column < self._columns and 0 <= row < self._rows

    def cell_origin(self, column: int, row: int) -> tuple[float, float]:
        if not self.contains(column, row):
            raise ValueError(
                f"({column}, {row}) out of bounds for "
                f"{self._columns}x{self._rows} grid"
            )
        return float(column * self._cell_width), float(row * self._cell_height)

    def lane_center(self, row: int) -> float:
        return row * self._cell_height + self._cell_height / 2

    def cell_at(self, x: float, y: float) -> tuple[int, int] | None:
        """Cell containing world point (x, y), or None when off the lawn."""
        column = int(x // self._cell_width)
        row = int(y // self._cell_height)
        if not self.contains(column, row):
            return None
        return column, row
