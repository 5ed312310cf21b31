"""
import_engine.csv_parser - Low-level CSV reading and cleaning.

Responsibilities:
  • BOM removal (UTF-8 / UTF-8-SIG)
  • Header whitespace stripping
  • Positional rows: the AISC file repeats its headers for the metric
    block, so rows are lists, not dicts
"""

from __future__ import annotations

import csv
import io
from typing import Iterator, Optional


def prepare_reader(raw: str | bytes) -> Optional[tuple[list[str], Iterator[list[str]]]]:
    """
    Accept raw file content (bytes or str), clean it, and return
    ``(header, rows)``.  Returns None if content is empty.
    """
    text = _decode(raw)
    if not text or not text.strip():
        return None

    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if not header:
        return None

    return [h.strip() for h in header], reader


def _decode(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        # Strip UTF-8 BOM
        if raw.startswith(b"\xef\xbb\xbf"):
            raw = raw[3:]
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            # Older AISC releases ship as cp1252
            return raw.decode("cp1252", errors="replace")
    if raw.startswith("\ufeff"):
        return raw[1:]
    return raw
