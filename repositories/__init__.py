"""
repositories - Concrete shape repositories.

Public API:
    repository_for(variant)          → SQL repository of the right flavour
    memory_repository_for(variant, rows) → in-memory equivalent
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Union

from sqlalchemy.orm import Session

from aisc_shapes.repository import RoundShapeRepository, ShapeRepository
from db.engine import get_session
from repositories.memory_repository import (           # noqa: F401
    InMemoryRoundShapeRepository,
    InMemoryShapeRepository,
)
from repositories.sql_repository import (              # noqa: F401
    SqlRoundShapeRepository,
    SqlShapeRepository,
)

AnyShapeRepository = Union[ShapeRepository, RoundShapeRepository]


def repository_for(
    variant: type,
    session_factory: Callable[[], Session] = get_session,
) -> AnyShapeRepository:
    if variant.is_round():
        return SqlRoundShapeRepository(variant, session_factory)
    return SqlShapeRepository(variant, session_factory)


def memory_repository_for(
    variant: type,
    rows: Iterable[Mapping[str, Any]] = (),
) -> AnyShapeRepository:
    if variant.is_round():
        return InMemoryRoundShapeRepository(variant, rows)
    return InMemoryShapeRepository(variant, rows)
