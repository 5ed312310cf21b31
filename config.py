"""
AISC Shapes DB - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR       = Path(__file__).resolve().parent
CSV_SEED_PATH  = Path(os.environ.get("SHAPESDB_CSV_SEED",
                                     BASE_DIR / "aisc-shapes-database-v16.0.csv"))

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("SHAPESDB_DB", f"sqlite:///{BASE_DIR / 'shapes.sqlite'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("SHAPESDB_HOST", "0.0.0.0")
PORT   = int(os.environ.get("SHAPESDB_PORT", "5000"))
DEBUG  = os.environ.get("SHAPESDB_DEBUG", "0") == "1"
SECRET = os.environ.get("SHAPESDB_SECRET", "shapesdb-dev-key-change-in-prod")

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("SHAPESDB_LOG_LEVEL", "INFO").upper()

# ── Import ─────────────────────────────────────────────────────────────
API_MAX_ERRORS = 100        # row errors echoed back by POST /import
