"""A list of rows of varying length."""

from __future__ import annotations

import operator
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class JaggedArray(Generic[T]):
    """Rows of values, each row with its own length.

    Rows are plain lists. Indexing returns the stored row itself, so items
    changed through it change the array.
    """

    def __init__(self, rows: Iterable[Iterable[T]] | int = ()) -> None:
        """Build from an iterable of rows, or from a count of empty rows."""
        if isinstance(rows, int):
            if rows < 0:
                raise ValueError(f"number of rows must not be negative, got {rows}")
            self._rows: list[list[T]] = [[] for _ in range(rows)]
        else:
            self._rows = [list(row) for row in rows]

    def _check_row(self, r_idx: int, what: str) -> int:
        r_idx = operator.index(r_idx)
        if not 0 <= r_idx < len(self._rows):
            raise IndexError(
                f"{what} - Row index ({r_idx}) out of bounds for {len(self._rows)} rows."
            )
        return r_idx

    @property
    def num_rows(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def total_elements(self) -> int:
        """Number of values over all rows."""
        return sum(len(row) for row in self._rows)

    @property
    def is_empty(self) -> bool:
        """True when there are no rows."""
        return not self._rows

    def num_cols(self, r_idx: int) -> int:
        """Length of row ``r_idx``."""
        return len(self._rows[self._check_row(r_idx, "num_cols")])

    def at(self, r_idx: int, c_idx: int) -> T:
        """Value at row ``r_idx``, column ``c_idx``, bounds checked."""
        row = self._rows[self._check_row(r_idx, "at (row)")]
        return row[self._check_col(row, r_idx, c_idx)]

    def set_at(self, r_idx: int, c_idx: int, value: T) -> None:
        """Replace the value at row ``r_idx``, column ``c_idx``, bounds checked."""
        row = self._rows[self._check_row(r_idx, "at (row)")]
        row[self._check_col(row, r_idx, c_idx)] = value

    @staticmethod
    def _check_col(row: list[T], r_idx: int, c_idx: int) -> int:
        c_idx = operator.index(c_idx)
        if not 0 <= c_idx < len(row):
            raise IndexError(
                f"JaggedArray.at - Column index ({c_idx}) out of bounds for row {r_idx} "
                f"with length {len(row)}."
            )
        return c_idx

    def add_row(self, row: Iterable[T]) -> None:
        """Append a row at the end."""
        self._rows.append(list(row))

    def insert_row(self, r_idx: int, row: Iterable[T]) -> None:
        """Insert a row before row ``r_idx``; ``r_idx`` may equal the row count."""
        r_idx = operator.index(r_idx)
        if not 0 <= r_idx <= len(self._rows):
            raise IndexError(
                f"insert_row - Row index for insertion ({r_idx}) out of bounds for "
                f"{len(self._rows)} rows."
            )
        self._rows.insert(r_idx, list(row))

    def remove_row(self, r_idx: int) -> list[T]:
        """Remove row ``r_idx`` and return it."""
        index = self._check_row(r_idx, "remove_row")
        return self._rows.pop(index)

    def add_element(self, r_idx: int, value: T) -> None:
        """Append ``value`` to the end of row ``r_idx``."""
        self._rows[self._check_row(r_idx, "add_element")].append(value)

    def clear(self) -> None:
        """Remove every row."""
        self._rows.clear()

    def __getitem__(self, r_idx: int) -> list[T]:
        r_idx = operator.index(r_idx)
        if not 0 <= r_idx < len(self._rows):
            raise IndexError(f"JaggedArray[] - Row index ({r_idx}) out of bounds.")
        return self._rows[r_idx]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[T]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JaggedArray):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"JaggedArray({self._rows!r})"

    def __str__(self) -> str:
        lines = [f"JaggedArray ({self.num_rows} rows, {self.total_elements} total elements):"]
        if self.is_empty:
            lines.append("  (empty)")
        for i, row in enumerate(self._rows):
            values = ", ".join(str(value) for value in row)
            lines.append(f"  [{i}] ({len(row)} elements): {{{values}}}")
        return "\n".join(lines) + "\n"