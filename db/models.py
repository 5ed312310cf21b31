"""
db.models - SQLAlchemy table declarations.

Tables
------
One table per shape variant (wide_flanges, pipes, …), generated from the
variant's own field list so the record type and its table cannot drift:

  • float fields → Float, T_F → Boolean, identifiers → String
  • required fields are NOT NULL, optional ones nullable
  • edi_std_nomenclature is the primary key, aisc_manual_label is unique
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Float, MetaData, String, Table

from aisc_shapes.fields import field_spec
from aisc_shapes.variants import VARIANTS, ShapeVariant


metadata = MetaData()


_COLUMN_TYPES = {
    float: Float,
    bool: Boolean,
    str: lambda: String(64),
}


def _shape_table(variant: type[ShapeVariant]) -> Table:
    required = set(variant.required_fields())
    columns = []
    for name in variant.field_names():
        spec = field_spec(name)
        columns.append(Column(
            name,
            _COLUMN_TYPES[spec.kind](),
            primary_key=(name == "edi_std_nomenclature"),
            unique=(name == "aisc_manual_label"),
            nullable=name not in required,
            comment=spec.label,
        ))
    return Table(variant.TABLE, metadata, *columns)


SHAPE_TABLES: dict[type[ShapeVariant], Table] = {v: _shape_table(v) for v in VARIANTS}


def table_for(variant: type[ShapeVariant]) -> Table:
    return SHAPE_TABLES[variant]
