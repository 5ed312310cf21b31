"""
import_engine - AISC Shapes Database CSV import pipeline.

Public API:
    run_import(file_content, replace_existing=False) → ImportReport
"""

from import_engine.importer import run_import        # noqa: F401
from import_engine.report import ImportReport        # noqa: F401
