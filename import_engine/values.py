"""
import_engine.values - Parse single AISC CSV cells.

The database marks "not applicable" with an en dash and writes many
detailing dimensions as fractions of an inch ("3/16", "1 1/16").
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Optional

# en dash, its UTF-8-read-as-cp1252 form, and plain hyphen
ABSENT_MARKERS = frozenset({"", "–", "â€“", "-"})


def is_absent(cell: str | None) -> bool:
    return cell is None or cell.strip() in ABSENT_MARKERS


def parse_number(cell: str | None) -> Optional[float]:
    """
    "13.7" → 13.7, "3/16" → 0.1875, "1 1/16" → 1.0625, "–" → None.
    Raises ValueError for anything else, including nan and inf.
    """
    if is_absent(cell):
        return None
    value = _parse_raw(cell)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {cell!r}")
    return value


def _parse_raw(cell: str) -> float:
    parts = cell.split()
    if len(parts) == 1:
        return float(Fraction(parts[0])) if "/" in parts[0] else float(parts[0])
    if len(parts) == 2 and "/" in parts[1] and "/" not in parts[0]:
        whole = Fraction(parts[0])
        frac = Fraction(parts[1])
        return float(whole - frac if whole < 0 else whole + frac)
    raise ValueError(f"not a number: {cell!r}")


def parse_flag(cell: str | None) -> Optional[bool]:
    """AISC T_F column: "T" / "F", anything else is absent."""
    if cell is None:
        return None
    v = cell.strip().upper()
    if v == "T":
        return True
    if v == "F":
        return False
    return None


def parse_text(cell: str | None) -> Optional[str]:
    if is_absent(cell):
        return None
    return cell.strip()
