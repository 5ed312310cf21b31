"""
import_engine.row_processor - Validate and transform one CSV row into a shape.

Single-responsibility: given a positional row and a session, either
return a frozen shape record ready to be inserted, or raise RowError.
The row goes through the same builder / try_build path as every other
data source, so a missing required property is reported by its AISC
label exactly as a repository query would report it.
"""

from __future__ import annotations

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from aisc_shapes.builder import ShapeBuilder
from aisc_shapes.errors import MissingPropertyError
from aisc_shapes.fields import field_spec
from aisc_shapes.variants import ShapeVariant
from db.models import table_for
from import_engine.field_map import COLUMN_INDEX, CSV_COLUMNS, TYPE_COLUMN, classify
from import_engine.values import parse_flag, parse_number, parse_text

_PARSERS = {float: parse_number, bool: parse_flag, str: parse_text}


class RowError(Exception):
    """Raised when a row cannot be imported."""
    pass


class RowProcessor:

    def process(
        self,
        session: Session,
        cells: list[str],
        replace: bool,
    ) -> ShapeVariant:
        """
        Classify one row, build and validate its shape, and clear the way
        for the insert.  Raises RowError on any problem.
        """
        if len(cells) < len(CSV_COLUMNS):
            raise RowError(f"Expected at least {len(CSV_COLUMNS)} columns, got {len(cells)}")

        type_code = cells[TYPE_COLUMN].strip()
        edi_nom = cells[COLUMN_INDEX["edi_std_nomenclature"]].strip()
        variant = classify(type_code, edi_nom)
        if variant is None:
            raise RowError(f"Unsupported shape type {type_code!r} ({edi_nom})")

        builder = self._builder(variant, cells)
        try:
            shape = builder.try_build(variant)
        except MissingPropertyError as exc:
            raise RowError(f"{variant.__name__} {edi_nom}: {exc}") from exc

        self._check_duplicate(session, shape, replace)
        return shape

    # ── Private helpers ────────────────────────────────────────────────

    @staticmethod
    def _builder(variant: type[ShapeVariant], cells: list[str]) -> ShapeBuilder:
        """Parse only the cells the variant declares."""
        builder = ShapeBuilder()
        for name in variant.field_names():
            spec = field_spec(name)
            raw = cells[COLUMN_INDEX[name]]
            try:
                value = _PARSERS[spec.kind](raw)
            except (ValueError, ZeroDivisionError):
                raise RowError(f"Bad value for {spec.label}: {raw!r}") from None
            if value is not None:
                builder.set(name, value)
        return builder

    @staticmethod
    def _check_duplicate(session: Session, shape: ShapeVariant, replace: bool) -> None:
        table = table_for(type(shape))
        clash = or_(
            table.c.edi_std_nomenclature == shape.edi_std_nomenclature,
            table.c.aisc_manual_label == shape.aisc_manual_label,
        )
        existing = session.execute(
            select(table.c.edi_std_nomenclature).where(clash).limit(1)
        ).first()
        if existing is None:
            return
        if not replace:
            raise RowError(
                f"Duplicate {type(shape).__name__} {shape.edi_std_nomenclature} "
                "(enable replace to overwrite)"
            )
        session.execute(delete(table).where(clash))
