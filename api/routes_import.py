"""
api.routes_import - Load AISC shape data over HTTP.

    POST /api/v1/import          the shapes CSV, uploaded or as the body
    GET  /api/v1/import/columns  the column layout the importer expects
"""

import logging

from flask import jsonify, request

import config
from api import api_bp
from import_engine import run_import
from import_engine.field_map import CSV_COLUMNS

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _uploaded_csv():
    """Bytes of the CSV from a 'csv_file' upload or the raw body, or None."""
    if request.mimetype == "multipart/form-data":
        upload = request.files.get("csv_file")
        return upload.read() if upload else None
    return request.get_data() or None


@api_bp.route("/import", methods=["POST"])
def api_import_shapes():
    """
    POST /api/v1/import?replace=1

    Rows whose EDI name or AISC label already exist are skipped unless
    replace is set.  Response is the ImportReport.
    """
    content = _uploaded_csv()
    if content is None:
        return jsonify({"error": "no CSV supplied (csv_file upload or text/csv body)"}), 400

    replace = request.args.get("replace", "0").strip().lower() in _TRUTHY
    report = run_import(content, replace_existing=replace)
    if report.errors:
        logger.info("Import via API: %d of %d rows rejected", report.skipped, report.total_rows)
    return jsonify(report.to_dict(max_errors=config.API_MAX_ERRORS))


@api_bp.route("/import/columns")
def api_import_columns():
    """Imperial header row, ``Type`` first."""
    return jsonify(list(CSV_COLUMNS))
