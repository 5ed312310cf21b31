"""
repositories.sql_repository - Shape repositories backed by SQLAlchemy.

One generic implementation serves every variant: the SELECT list and
the dimension columns come from the variant declaration.  Each call
opens its own session and closes it before assembling records, so
repositories can be shared across threads; pooling is the engine's.

Driver errors (sqlalchemy.exc.SQLAlchemyError) are not caught.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from aisc_shapes.errors import ShapeNotFoundError
from aisc_shapes.repository import RoundShapeRepository, ShapeRepository
from aisc_shapes.rows import shape_from_row, shapes_from_rows
from db.engine import get_session
from db.models import table_for

logger = logging.getLogger(__name__)

S = TypeVar("S")


class _SqlShapeSource(Generic[S]):

    def __init__(
        self,
        variant: type[S],
        session_factory: Callable[[], Session] = get_session,
    ):
        self.variant = variant
        self._table = table_for(variant)
        self._session_factory = session_factory

    # ── Contract: key lookups + all ────────────────────────────────────

    def all(self) -> list[S]:
        return self._fetch_all(self._select())

    def shape_with_edi_std_nomenclature(self, edi_std_nomenclature: str) -> S:
        return self._fetch_one("edi_std_nomenclature", edi_std_nomenclature)

    def shape_with_aisc_manual_label(self, aisc_manual_label: str) -> S:
        return self._fetch_one("aisc_manual_label", aisc_manual_label)

    # ── Private helpers ────────────────────────────────────────────────

    def _select(self) -> Select:
        cols = [self._table.c[name] for name in self.variant.field_names()]
        return select(*cols)

    def _where_equal(self, column: str, value: float) -> list[S]:
        return self._fetch_all(self._select().where(self._table.c[column] == value))

    def _fetch_all(self, stmt: Select) -> list[S]:
        session = self._session_factory()
        try:
            rows = session.execute(stmt).mappings().all()
        finally:
            session.close()
        logger.debug("%s: %d rows from %s", self.variant.__name__, len(rows), self._table.name)
        return shapes_from_rows(rows, self.variant)

    def _fetch_one(self, column: str, value: str) -> S:
        stmt = self._select().where(self._table.c[column] == value).limit(1)
        session = self._session_factory()
        try:
            row = session.execute(stmt).mappings().first()
        finally:
            session.close()
        if row is None:
            raise ShapeNotFoundError(self.variant.__name__, column, value)
        return shape_from_row(row, self.variant)


class SqlShapeRepository(_SqlShapeSource[S], ShapeRepository[S]):
    """SQL repository for shapes queried by depth and width."""

    def __init__(self, variant: type[S], session_factory: Callable[[], Session] = get_session):
        if variant.is_round():
            raise ValueError(f"{variant.__name__} is round; use SqlRoundShapeRepository")
        super().__init__(variant, session_factory)

    def shapes_with_depth(self, depth: float) -> list[S]:
        return self._where_equal(self.variant.DEPTH, depth)

    def shapes_with_width(self, width: float) -> list[S]:
        return self._where_equal(self.variant.WIDTH, width)


class SqlRoundShapeRepository(_SqlShapeSource[S], RoundShapeRepository[S]):
    """SQL repository for pipes and round HSS."""

    def __init__(self, variant: type[S], session_factory: Callable[[], Session] = get_session):
        if not variant.is_round():
            raise ValueError(f"{variant.__name__} is not round; use SqlShapeRepository")
        super().__init__(variant, session_factory)

    def shapes_with_diameter(self, diameter: float) -> list[S]:
        return self._where_equal(self.variant.DIAMETER, diameter)
