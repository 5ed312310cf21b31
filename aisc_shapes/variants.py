"""
aisc_shapes.variants - Immutable shape record types.

Each variant is a frozen, keyword-only dataclass and doubles as its own
schema:

  • a field with no default is REQUIRED,
  • a field defaulting to None is OPTIONAL,
  • declaration order is the order required fields are checked in.

Class attributes tie the variant to its AISC ``Type`` code, its table,
and the columns its depth / width (or diameter) queries run against.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, ClassVar, Optional


@dataclass(frozen=True, kw_only=True)
class ShapeVariant:
    TYPE_CODE: ClassVar[str] = ""
    TABLE: ClassVar[str] = ""
    DEPTH: ClassVar[Optional[str]] = None
    WIDTH: ClassVar[Optional[str]] = None
    DIAMETER: ClassVar[Optional[str]] = None

    edi_std_nomenclature: str
    aisc_manual_label: str

    # ── Schema ─────────────────────────────────────────────────────────

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls))

    @classmethod
    def required_fields(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls) if _is_required(f))

    @classmethod
    def optional_fields(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls) if not _is_required(f))

    @classmethod
    def is_round(cls) -> bool:
        return cls.DIAMETER is not None

    @classmethod
    def describe(cls) -> dict:
        d = {
            "kind": cls.TABLE,
            "name": cls.__name__,
            "type_code": cls.TYPE_CODE,
            "required": list(cls.required_fields()),
            "optional": list(cls.optional_fields()),
        }
        if cls.is_round():
            d["diameter"] = cls.DIAMETER
        else:
            d["depth"] = cls.DEPTH
            d["width"] = cls.WIDTH
        return d

    # ── Serialisation ──────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


def _is_required(f: dataclasses.Field) -> bool:
    return f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING


# ── I-shaped beams ────────────────────────────────────────────────────

@dataclass(frozen=True, kw_only=True)
class WideFlange(ShapeVariant):
    TYPE_CODE = "W"
    TABLE = "wide_flanges"
    DEPTH = "d_lower"
    WIDTH = "bf"

    t_f: bool
    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    k1: float
    bf_2tf: float
    h_tw: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    wno: float
    sw1: float
    qf: float
    qw: float
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    wgi: float
    wgo: Optional[float] = None


@dataclass(frozen=True, kw_only=True)
class MiscBeam(ShapeVariant):
    TYPE_CODE = "M"
    TABLE = "misc_beams"
    DEPTH = "d_lower"
    WIDTH = "bf"

    t_f: Optional[bool] = None
    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    k1: float
    bf_2tf: float
    h_tw: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    wno: float
    sw1: float
    qf: float
    qw: float
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    wgi: Optional[float] = None


@dataclass(frozen=True, kw_only=True)
class StructuralBeam(ShapeVariant):
    TYPE_CODE = "S"
    TABLE = "structural_beams"
    DEPTH = "d_lower"
    WIDTH = "bf"

    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    bf_2tf: float
    h_tw: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    wno: float
    sw1: float
    qf: float
    qw: float
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    wgi: Optional[float] = None


@dataclass(frozen=True, kw_only=True)
class HPile(ShapeVariant):
    TYPE_CODE = "HP"
    TABLE = "h_piles"
    DEPTH = "d_lower"
    WIDTH = "bf"

    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    k1: float
    bf_2tf: float
    h_tw: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    wno: float
    sw1: float
    qf: float
    qw: float
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    wgi: float


# ── Channels ──────────────────────────────────────────────────────────

@dataclass(frozen=True, kw_only=True)
class _ChannelShape(ShapeVariant):
    DEPTH = "d_lower"
    WIDTH = "bf"

    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    x_lower: float
    eo: float
    xp: float
    b_t: float
    h_tw: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    wno: float
    sw1: float
    sw2: float
    sw3: float
    qf: float
    qw: float
    ro: float
    h_upper: float
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    wgi: Optional[float] = None


@dataclass(frozen=True, kw_only=True)
class CeeChannel(_ChannelShape):
    TYPE_CODE = "C"
    TABLE = "cee_channels"


@dataclass(frozen=True, kw_only=True)
class MiscChannel(_ChannelShape):
    TYPE_CODE = "MC"
    TABLE = "misc_channels"


# ── Angles ────────────────────────────────────────────────────────────

@dataclass(frozen=True, kw_only=True)
class Angle(ShapeVariant):
    TYPE_CODE = "L"
    TABLE = "angles"
    DEPTH = "d_lower"
    WIDTH = "b_lower"

    w_upper: float
    a_upper: float
    d_lower: float
    b_lower: float
    t_lower: float
    kdes: float
    kdet: float
    x_lower: float
    y_lower: float
    xp: float
    yp: float
    b_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    iz: float
    rz: float
    sz: float
    j_upper: float
    cw: float
    ro: float
    h_upper: Optional[float] = None
    tan_a: float
    iw: float
    za: float
    zb: float
    zc: float
    wa: float
    wb: float
    wc: float
    swa: float
    swb: Optional[float] = None
    swc: float
    sza: float
    szb: float
    szc: float
    pa: float
    pa_2: float
    pb: float


@dataclass(frozen=True, kw_only=True)
class DoubleAngle(ShapeVariant):
    TYPE_CODE = "2L"
    TABLE = "double_angles"
    DEPTH = "d_lower"
    WIDTH = "b_lower"

    w_upper: float
    a_upper: float
    d_lower: float
    b_lower: float
    t_lower: float
    y_lower: float
    yp: float
    b_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    ro: float
    h_upper: float


# ── Tees ──────────────────────────────────────────────────────────────

@dataclass(frozen=True, kw_only=True)
class WideFlangeTee(ShapeVariant):
    TYPE_CODE = "WT"
    TABLE = "wide_flange_tees"
    DEPTH = "d_lower"
    WIDTH = "bf"

    t_f: bool
    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    y_lower: float
    yp: float
    bf_2tf: float
    d_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    ro: float
    h_upper: float
    pa: float
    pb: float
    pc: float
    pd: float
    wgi: float
    wgo: Optional[float] = None


@dataclass(frozen=True, kw_only=True)
class MiscTee(ShapeVariant):
    TYPE_CODE = "MT"
    TABLE = "misc_tees"
    DEPTH = "d_lower"
    WIDTH = "bf"

    t_f: bool
    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    y_lower: float
    yp: float
    bf_2tf: float
    d_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    ro: float
    h_upper: float
    wgi: Optional[float] = None


@dataclass(frozen=True, kw_only=True)
class StructuralTee(ShapeVariant):
    TYPE_CODE = "ST"
    TABLE = "structural_tees"
    DEPTH = "d_lower"
    WIDTH = "bf"

    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    y_lower: float
    yp: float
    bf_2tf: float
    d_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    ro: float
    h_upper: float
    wgi: Optional[float] = None


# ── Hollow sections and pipe ──────────────────────────────────────────

@dataclass(frozen=True, kw_only=True)
class HollowStructuralSection(ShapeVariant):
    """Square / rectangular HSS."""

    TYPE_CODE = "HSS"
    TABLE = "hollow_structural_sections"
    DEPTH = "ht"
    WIDTH = "b_upper"

    w_upper: float
    a_upper: float
    ht: float
    h: float
    b_upper: float
    b_lower: float
    t_nom: float
    tdes: float
    b_tdes: float
    h_tdes: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    c_upper: float


@dataclass(frozen=True, kw_only=True)
class RoundHollowStructuralSection(ShapeVariant):
    TYPE_CODE = "HSS"
    TABLE = "round_hollow_structural_sections"
    DIAMETER = "od"

    w_upper: float
    a_upper: float
    od: float
    t_nom: float
    tdes: float
    d_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    c_upper: float


@dataclass(frozen=True, kw_only=True)
class Pipe(ShapeVariant):
    TYPE_CODE = "PIPE"
    TABLE = "pipes"
    DIAMETER = "od"

    w_upper: float
    a_upper: float
    od: float
    id: float
    t_nom: float
    tdes: float
    d_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float


# ── Registry ──────────────────────────────────────────────────────────

VARIANTS: tuple[type[ShapeVariant], ...] = (
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
)

_BY_KIND: dict[str, type[ShapeVariant]] = {v.TABLE: v for v in VARIANTS}


def variant_for_kind(kind: str) -> Optional[type[ShapeVariant]]:
    """Look a variant up by its table name (``wide_flanges``, ``pipes`` …)."""
    return _BY_KIND.get(kind.strip().lower())
