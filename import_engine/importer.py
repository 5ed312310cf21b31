"""
import_engine.importer - Load an AISC Shapes Database CSV into the shape tables.

csv_parser → row_processor → INSERT, all in one transaction with a
SAVEPOINT per row.  Ingest is per-row: a row that fails classification,
parsing, validation or its own INSERT is reported and skipped while the
rest of the file still goes in.  Only a failed commit aborts the run, and
then the report counts nothing as imported.
"""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.engine import get_session
from db.models import table_for
from import_engine.csv_parser import prepare_reader
from import_engine.field_map import CSV_COLUMNS
from import_engine.report import ImportReport
from import_engine.row_processor import RowError, RowProcessor

logger = logging.getLogger(__name__)

_FIRST_DATA_ROW = 2     # row 1 is the header


def run_import(
    file_content: str | bytes,
    *,
    replace_existing: bool = False,
) -> ImportReport:
    """
    Import *file_content* (bytes or str) and return an ImportReport.

    With ``replace_existing`` a row whose EDI name or AISC label is
    already stored overwrites it; otherwise such rows are skipped.
    """
    report = ImportReport()
    prepared = prepare_reader(file_content)
    if prepared is None:
        report.add_error(0, "CSV has no header row or is empty")
        return report

    header, rows = prepared
    expected = list(CSV_COLUMNS[:2])
    if header[:2] != expected:
        report.add_error(1, f"Not an AISC shapes CSV (header starts {header[:2]!r})")
        return report

    session = get_session()
    try:
        inserted = _insert_rows(session, rows, replace_existing, report)
        session.commit()
    except Exception as exc:
        session.rollback()
        logger.exception("Import aborted, nothing committed")
        report.add_error(0, f"Fatal import error: {exc}")
    else:
        for table_name in inserted:
            report.add_imported(table_name)
    finally:
        session.close()

    logger.info("Import: %s", report.summary())
    return report


def _insert_rows(
    session: Session,
    rows: Iterable[list[str]],
    replace: bool,
    report: ImportReport,
) -> list[str]:
    """Stage every good row; return the table name of each one staged."""
    processor = RowProcessor()
    inserted = []
    for row_no, cells in enumerate(rows, start=_FIRST_DATA_ROW):
        if not any(c.strip() for c in cells):
            continue
        report.total_rows += 1
        try:
            with session.begin_nested():
                shape = processor.process(session, cells, replace)
                table = table_for(type(shape))
                session.execute(table.insert().values(**shape.to_dict()))
        except RowError as exc:
            logger.debug("Row %d skipped: %s", row_no, exc)
            report.add_error(row_no, str(exc))
        except SQLAlchemyError as exc:
            logger.warning("Row %d failed: %s", row_no, exc)
            report.add_error(row_no, f"Unexpected: {exc}")
        else:
            inserted.append(table.name)
    return inserted
