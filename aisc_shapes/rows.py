"""
aisc_shapes.rows - The inbound boundary: row-like objects → shapes.

A "row" is anything with ``get(name)`` returning a value or None:
a SQLAlchemy RowMapping, a dict parsed from CSV/JSON, a test fixture.
Only the fields the target variant declares are read.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, TypeVar

from aisc_shapes.builder import ShapeBuilder

S = TypeVar("S")


class RowLike(Protocol):
    def get(self, key: str, default: Any = None) -> Optional[Any]: ...


def builder_from_row(row: RowLike, variant: type) -> ShapeBuilder:
    """Feed every non-null declared field of *row* into a fresh builder."""
    builder = ShapeBuilder()
    for name in variant.field_names():
        value = row.get(name)
        if value is not None:
            builder.set(name, value)
    return builder


def shape_from_row(row: RowLike, variant: type[S]) -> S:
    return builder_from_row(row, variant).try_build(variant)


def shapes_from_rows(rows: Iterable[RowLike], variant: type[S]) -> list[S]:
    """Assemble every row; the first failure aborts the whole batch."""
    return [shape_from_row(row, variant) for row in rows]
