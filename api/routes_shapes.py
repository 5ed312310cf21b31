"""
api.routes_shapes - /api/v1/shapes read endpoints.

Thin wrapper over the repositories: every response is the assembled,
validated shape records serialised with ``to_dict()``.
"""

from flask import abort, jsonify, request

from aisc_shapes.variants import VARIANTS, variant_for_kind
from api import api_bp
from repositories import repository_for

_AXES = ("depth", "width", "diameter")


def _variant_or_404(kind: str):
    variant = variant_for_kind(kind)
    if variant is None:
        abort(404)
    return variant


def _shapes_payload(shapes: list) -> dict:
    return {"total": len(shapes), "shapes": [s.to_dict() for s in shapes]}


@api_bp.route("/shapes")
def list_kinds():
    """GET /api/v1/shapes - every shape kind and its query axes."""
    return jsonify([v.describe() for v in VARIANTS])


@api_bp.route("/shapes/<kind>")
def list_shapes(kind: str):
    """
    GET /api/v1/shapes/{kind}?depth=|width=|diameter=

    Without a filter returns the whole collection.  Dimension filters
    match exactly; 8.0 does not match a stored 8.01.
    """
    variant = _variant_or_404(kind)
    repo = repository_for(variant)

    filters = {a: request.args[a] for a in _AXES if a in request.args}
    if not filters:
        return jsonify(_shapes_payload(repo.all()))
    if len(filters) > 1:
        abort(400, description="use only one of depth, width, diameter")

    axis, raw = next(iter(filters.items()))
    query = getattr(repo, f"shapes_with_{axis}", None)
    if query is None:
        abort(400, description=f"{kind} cannot be queried by {axis}")
    try:
        value = float(raw)
    except ValueError:
        abort(400, description=f"{axis} must be a number")

    return jsonify(_shapes_payload(query(value)))


@api_bp.route("/shapes/<kind>/edi/<path:edi_std_nomenclature>")
def get_by_edi(kind: str, edi_std_nomenclature: str):
    """GET /api/v1/shapes/{kind}/edi/{EDI_Std_Nomenclature}"""
    repo = repository_for(_variant_or_404(kind))
    return jsonify(repo.shape_with_edi_std_nomenclature(edi_std_nomenclature).to_dict())


@api_bp.route("/shapes/<kind>/label/<path:aisc_manual_label>")
def get_by_label(kind: str, aisc_manual_label: str):
    """GET /api/v1/shapes/{kind}/label/{AISC_Manual_Label}"""
    repo = repository_for(_variant_or_404(kind))
    return jsonify(repo.shape_with_aisc_manual_label(aisc_manual_label).to_dict())
