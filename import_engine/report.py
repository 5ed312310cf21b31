"""
import_engine.report - What one CSV import run did.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ImportReport:
    total_rows: int = 0                 # non-blank data rows seen
    imported: int = 0
    skipped: int = 0
    by_shape: dict[str, int] = field(default_factory=dict)   # table → rows
    errors: list[dict] = field(default_factory=list)         # [{row, reason}]

    def add_imported(self, table: str):
        self.imported += 1
        self.by_shape[table] = self.by_shape.get(table, 0) + 1

    def add_error(self, row: int, reason: str):
        self.skipped += 1
        self.errors.append({"row": row, "reason": reason})

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        return f"{self.imported} imported, {self.skipped} skipped / {self.total_rows} rows"

    def to_dict(self, max_errors: int | None = None) -> dict:
        d = {
            "total_rows": self.total_rows,
            "imported": self.imported,
            "skipped": self.skipped,
            "by_shape": dict(self.by_shape),
        }
        d["errors"] = self.errors if max_errors is None else self.errors[:max_errors]
        if max_errors is not None and len(self.errors) > max_errors:
            d["errors_truncated"] = len(self.errors) - max_errors
        return d
