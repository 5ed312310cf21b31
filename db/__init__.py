"""
db - Database layer.

Public API:
    init_db()       → create engine + one table per shape variant
    get_session()   → new Session
    table_for()     → Table for a shape variant
"""

from db.engine import init_db, get_session                  # noqa: F401
from db.models import metadata, SHAPE_TABLES, table_for         # noqa: F401
