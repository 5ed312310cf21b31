#!/usr/bin/env python3
"""
AISC Shapes DB - Steel shape catalog service
=============================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from sqlalchemy import func, select

import config
from api import api_bp
from db import SHAPE_TABLES, get_session, init_db

logger = logging.getLogger(__name__)


def create_app(db_url: str | None = None) -> Flask:
    """Flask application factory."""

    app = Flask(__name__)
    app.secret_key = config.SECRET

    # ── Initialise database ─────────────────────────────────────────
    url = db_url or config.DB_URL
    init_db(url)
    logger.info("Database: %s", url)

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(404)
    def _404(e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(500)
    def _500(e):
        return jsonify({"error": "internal server error"}), 500

    return app


def count_shapes() -> int:
    session = get_session()
    try:
        return sum(
            session.execute(select(func.count()).select_from(t)).scalar_one()
            for t in SHAPE_TABLES.values()
        )
    finally:
        session.close()


def _seed_if_empty():
    """Auto-import the AISC CSV when the database is empty."""
    count = count_shapes()
    if count > 0:
        print(f"\n  Database has {count} shapes.")
        return

    if not config.CSV_SEED_PATH.exists():
        print(f"\n  No seed CSV at {config.CSV_SEED_PATH} - starting empty.")
        return

    print(f"\n  Database empty → auto-importing {config.CSV_SEED_PATH.name} …")
    from import_engine import run_import

    with open(config.CSV_SEED_PATH, "rb") as fh:
        report = run_import(fh.read())

    print(f"  Done: {report.summary()}")
    for kind, n in sorted(report.by_shape.items()):
        print(f"    {kind:<34} {n}")
    if report.errors:
        print(f"  First errors (max 10):")
        for err in report.errors[:10]:
            print(f"    Row {err['row']}: {err['reason']}")


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 56)
    print("  AISC Shapes DB")
    print("=" * 56)

    app = create_app()
    _seed_if_empty()

    print(f"\n  http://{config.HOST}:{config.PORT}/api/v1/shapes")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
