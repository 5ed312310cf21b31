"""
import_engine.field_map - AISC CSV column layout ↔ shape variants.

Column 0 is ``Type``; columns 1-83 follow the shape field vocabulary
order exactly (see aisc_shapes.fields).  Anything after that is the
metric block and is ignored.
"""

from __future__ import annotations

from typing import Optional

from aisc_shapes.fields import FIELDS
from aisc_shapes.variants import (
    VARIANTS,
    HollowStructuralSection,
    RoundHollowStructuralSection,
    ShapeVariant,
)

TYPE_COLUMN = 0

# CSV header (imperial block) in file order
CSV_COLUMNS: tuple[str, ...] = ("Type",) + tuple(f.label for f in FIELDS)

# field name → column index
COLUMN_INDEX: dict[str, int] = {f.name: i for i, f in enumerate(FIELDS, start=1)}

# AISC Type code → variant; HSS is split by nomenclature below
TYPE_CODES: dict[str, type[ShapeVariant]] = {
    v.TYPE_CODE: v for v in VARIANTS if v.TYPE_CODE != "HSS"
}


def classify(type_code: str, edi_std_nomenclature: str) -> Optional[type[ShapeVariant]]:
    """
    Pick the variant for a CSV row, or None for an unsupported Type.

    HSS rows are rectangular when the nomenclature has two dimensions
    (HSS20X12X5/8) and round when it has one (HSS20.000X0.500).
    """
    code = type_code.strip().upper()
    if code == "HSS":
        dims = edi_std_nomenclature.upper().count("X")
        if dims == 2:
            return HollowStructuralSection
        if dims == 1:
            return RoundHollowStructuralSection
        return None
    return TYPE_CODES.get(code)
