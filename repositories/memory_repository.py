"""
repositories.memory_repository - Shape repositories over in-process rows.

Holds raw row mappings (fixtures, a parsed file, a JSON payload) and
assembles them on every query, exactly like the SQL repositories do
with fetched rows.  A row that cannot be assembled therefore fails every
multi-row query that touches it.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Mapping, TypeVar

from aisc_shapes.errors import ShapeNotFoundError
from aisc_shapes.repository import RoundShapeRepository, ShapeRepository
from aisc_shapes.rows import shape_from_row, shapes_from_rows

S = TypeVar("S")


class _InMemoryShapeSource(Generic[S]):

    def __init__(self, variant: type[S], rows: Iterable[Mapping[str, Any]] = ()):
        self.variant = variant
        self._rows: list[Mapping[str, Any]] = list(rows)

    def add(self, row: Mapping[str, Any]) -> None:
        self._rows.append(row)

    def __len__(self) -> int:
        return len(self._rows)

    def all(self) -> list[S]:
        return shapes_from_rows(self._rows, self.variant)

    def shape_with_edi_std_nomenclature(self, edi_std_nomenclature: str) -> S:
        return self._first("edi_std_nomenclature", edi_std_nomenclature)

    def shape_with_aisc_manual_label(self, aisc_manual_label: str) -> S:
        return self._first("aisc_manual_label", aisc_manual_label)

    def _where_equal(self, column: str, value: Any) -> list[S]:
        return shapes_from_rows(
            (r for r in self._rows if r.get(column) == value), self.variant,
        )

    def _first(self, column: str, value: str) -> S:
        for row in self._rows:
            if row.get(column) == value:
                return shape_from_row(row, self.variant)
        raise ShapeNotFoundError(self.variant.__name__, column, value)


class InMemoryShapeRepository(_InMemoryShapeSource[S], ShapeRepository[S]):

    def __init__(self, variant: type[S], rows: Iterable[Mapping[str, Any]] = ()):
        if variant.is_round():
            raise ValueError(f"{variant.__name__} is round; use InMemoryRoundShapeRepository")
        super().__init__(variant, rows)

    def shapes_with_depth(self, depth: float) -> list[S]:
        return self._where_equal(self.variant.DEPTH, depth)

    def shapes_with_width(self, width: float) -> list[S]:
        return self._where_equal(self.variant.WIDTH, width)


class InMemoryRoundShapeRepository(_InMemoryShapeSource[S], RoundShapeRepository[S]):

    def __init__(self, variant: type[S], rows: Iterable[Mapping[str, Any]] = ()):
        if not variant.is_round():
            raise ValueError(f"{variant.__name__} is not round; use InMemoryShapeRepository")
        super().__init__(variant, rows)

    def shapes_with_diameter(self, diameter: float) -> list[S]:
        return self._where_equal(self.variant.DIAMETER, diameter)
