"""
aisc_shapes.fields - The fixed vocabulary of shape properties.

One entry per property column of the AISC Shapes Database v16.0
(imperial block, ``Type`` excluded), in file order.  ``name`` is the
Python key used by builders, records and SQL columns; ``label`` is the
AISC column header and is what error messages show.
"""

from __future__ import annotations

from dataclasses import dataclass

from aisc_shapes.errors import UnknownFieldError


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: type          # float, bool or str


def _num(name: str, label: str) -> FieldSpec:
    return FieldSpec(name, label, float)


FIELDS: tuple[FieldSpec, ...] = (
    # ── Identifiers ────────────────────────────────────────────────────
    FieldSpec("edi_std_nomenclature", "EDI_Std_Nomenclature", str),
    FieldSpec("aisc_manual_label", "AISC_Manual_Label", str),
    FieldSpec("t_f", "T_F", bool),

    # ── Weight, area, overall dimensions ───────────────────────────────
    _num("w_upper", "W"),
    _num("a_upper", "A"),
    _num("d_lower", "d"),
    _num("ddet", "ddet"),
    _num("ht", "Ht"),
    _num("h", "h"),
    _num("od", "OD"),
    _num("bf", "bf"),
    _num("bfdet", "bfdet"),
    _num("b_upper", "B"),
    _num("b_lower", "b"),
    _num("id", "ID"),

    # ── Thicknesses and fillets ────────────────────────────────────────
    _num("tw", "tw"),
    _num("twdet", "twdet"),
    _num("twdet_2", "twdet/2"),
    _num("tf", "tf"),
    _num("tfdet", "tfdet"),
    _num("t_lower", "t"),
    _num("t_nom", "tnom"),
    _num("tdes", "tdes"),
    _num("kdes", "kdes"),
    _num("kdet", "kdet"),
    _num("k1", "k1"),

    # ── Centroid / plastic neutral axis locations ──────────────────────
    _num("x_lower", "x"),
    _num("y_lower", "y"),
    _num("eo", "eo"),
    _num("xp", "xp"),
    _num("yp", "yp"),

    # ── Slenderness ratios ─────────────────────────────────────────────
    _num("bf_2tf", "bf/2tf"),
    _num("b_t", "b/t"),
    _num("b_tdes", "b/tdes"),
    _num("h_tw", "h/tw"),
    _num("h_tdes", "h/tdes"),
    _num("d_t", "D/t"),

    # ── Section properties ─────────────────────────────────────────────
    _num("ix", "Ix"),
    _num("zx", "Zx"),
    _num("sx", "Sx"),
    _num("rx", "rx"),
    _num("iy", "Iy"),
    _num("zy", "Zy"),
    _num("sy", "Sy"),
    _num("ry", "ry"),
    _num("iz", "Iz"),
    _num("rz", "rz"),
    _num("sz", "Sz"),
    _num("j_upper", "J"),
    _num("cw", "Cw"),
    _num("c_upper", "C"),
    _num("wno", "Wno"),
    _num("sw1", "Sw1"),
    _num("sw2", "Sw2"),
    _num("sw3", "Sw3"),
    _num("qf", "Qf"),
    _num("qw", "Qw"),
    _num("ro", "ro"),
    _num("h_upper", "H"),

    # ── Single-angle principal axes ────────────────────────────────────
    _num("tan_a", "tan(α)"),
    _num("iw", "Iw"),
    _num("za", "zA"),
    _num("zb", "zB"),
    _num("zc", "zC"),
    _num("wa", "wA"),
    _num("wb", "wB"),
    _num("wc", "wC"),
    _num("swa", "SwA"),
    _num("swb", "SwB"),
    _num("swc", "SwC"),
    _num("sza", "SzA"),
    _num("szb", "SzB"),
    _num("szc", "SzC"),

    # ── Torsion, perimeters, workable gages ────────────────────────────
    _num("rts", "rts"),
    _num("ho", "ho"),
    _num("pa", "PA"),
    _num("pa_2", "PA2"),
    _num("pb", "PB"),
    _num("pc", "PC"),
    _num("pd", "PD"),
    _num("t", "T"),
    _num("wgi", "WGi"),
    _num("wgo", "WGo"),
)

FIELD_INDEX: dict[str, FieldSpec] = {f.name: f for f in FIELDS}


def field_spec(name: str) -> FieldSpec:
    """Return the FieldSpec for *name* or raise UnknownFieldError."""
    try:
        return FIELD_INDEX[name]
    except KeyError:
        raise UnknownFieldError(name) from None


def label_of(name: str) -> str:
    return field_spec(name).label


def is_known(name: str) -> bool:
    return name in FIELD_INDEX
