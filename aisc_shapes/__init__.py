"""
aisc_shapes - Typed AISC steel shape records and their construction.

Public API:
    ShapeBuilder            → accumulate properties (with_<field>)
    try_build / builder.try_build(Variant) → validated, frozen record
    WideFlange, Pipe, …     → shape variants (see VARIANTS)
    ShapeRepository, RoundShapeRepository → query contract
    MissingPropertyError, ShapeNotFoundError → error kinds
"""

from aisc_shapes.errors import (                      # noqa: F401
    ShapeError,
    MissingPropertyError,
    ShapeNotFoundError,
    FieldTypeError,
    UnknownFieldError,
)
from aisc_shapes.fields import FIELDS, FieldSpec, field_spec, label_of   # noqa: F401
from aisc_shapes.assembly import try_build, missing_fields               # noqa: F401
from aisc_shapes.builder import ShapeBuilder                             # noqa: F401
from aisc_shapes.variants import (                    # noqa: F401
    ShapeVariant,
    WideFlange,
    MiscBeam,
    StructuralBeam,
    HPile,
    CeeChannel,
    MiscChannel,
    Angle,
    DoubleAngle,
    WideFlangeTee,
    MiscTee,
    StructuralTee,
    HollowStructuralSection,
    RoundHollowStructuralSection,
    Pipe,
    VARIANTS,
    variant_for_kind,
)
from aisc_shapes.rows import builder_from_row, shape_from_row, shapes_from_rows   # noqa: F401
from aisc_shapes.repository import (                  # noqa: F401
    BaseShapeRepository,
    ShapeRepository,
    RoundShapeRepository,
)
