"""
api.errors - JSON error handlers for the API blueprint.
"""

import logging

from flask import jsonify

from aisc_shapes.errors import MissingPropertyError, ShapeNotFoundError
from api import api_bp

logger = logging.getLogger(__name__)


@api_bp.errorhandler(ShapeNotFoundError)
def api_shape_not_found(e: ShapeNotFoundError):
    return jsonify({"error": "not found", "detail": str(e)}), 404


@api_bp.errorhandler(MissingPropertyError)
def api_incomplete_shape(e: MissingPropertyError):
    # A stored row failed assembly; the whole query fails with it
    logger.error("Stored shape is incomplete: %s", e)
    return jsonify({"error": "incomplete shape data", "property": e.property_name,
                    "detail": str(e)}), 500


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(e):
    return jsonify({"error": "bad request", "detail": getattr(e, "description", "")}), 400


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
