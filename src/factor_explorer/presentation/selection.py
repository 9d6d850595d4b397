"""Selector rows: the ordered factor picks that drive the chart and table."""

from __future__ import annotations

from dataclasses import dataclass, replace

MAX_SERIES = 5


@dataclass(frozen=True)
class SelectorRow:
    row_id: int
    factor_id: str | None = None


@dataclass(frozen=True)
class SelectionRows:
    """Immutable list of selector rows; every change returns a new instance."""

    rows: tuple[SelectorRow, ...] = ()
    next_id: int = 0
    limit: int = MAX_SERIES

    @classmethod
    def initial(cls, factor_id: str | None = None, limit: int = MAX_SERIES) -> "SelectionRows":
        return cls(limit=limit).add_row(factor_id)

    @property
    def is_full(self) -> bool:
        return len(self.rows) >= self.limit

    def add_row(self, factor_id: str | None = None) -> "SelectionRows":
        """Append a row; at the limit this is a no-op, not an error."""
        if self.is_full:
            return self
        row = SelectorRow(row_id=self.next_id, factor_id=factor_id)
        return replace(self, rows=self.rows + (row,), next_id=self.next_id + 1)

    def remove_row(self, row_id: int) -> "SelectionRows":
        return replace(self, rows=tuple(r for r in self.rows if r.row_id != row_id))

    def set_factor(self, row_id: int, factor_id: str | None) -> "SelectionRows":
        rows = tuple(
            replace(r, factor_id=factor_id) if r.row_id == row_id else r for r in self.rows
        )
        return replace(self, rows=rows)

    def selection(self) -> tuple[str, ...]:
        """Distinct picked factor ids in row order; empty rows are ignored."""
        picked: list[str] = []
        for row in self.rows:
            if row.factor_id and row.factor_id not in picked:
                picked.append(row.factor_id)
        return tuple(picked)

    def __len__(self) -> int:
        return len(self.rows)
