"""
aisc_shapes.repository - Storage-independent query contract.

Concrete sources (SQL, in-memory, …) live in the ``repositories``
package and implement one of the two contracts below:

    ShapeRepository       - shapes with a depth and a width axis
    RoundShapeRepository  - pipes and round HSS, queried by diameter

Single-shape lookups raise ShapeNotFoundError when nothing matches.
Multi-row queries compare dimensions with exact float equality and
fail as a whole if any row cannot be assembled.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

S = TypeVar("S")


class BaseShapeRepository(ABC, Generic[S]):
    """Queries every shape collection supports."""

    @abstractmethod
    def all(self) -> list[S]:
        """Every shape in the collection."""

    @abstractmethod
    def shape_with_edi_std_nomenclature(self, edi_std_nomenclature: str) -> S:
        """The one shape with this EDI code (e.g. ``W14X22``)."""

    @abstractmethod
    def shape_with_aisc_manual_label(self, aisc_manual_label: str) -> S:
        """The one shape with this AISC Manual label."""


class ShapeRepository(BaseShapeRepository[S]):

    @abstractmethod
    def shapes_with_depth(self, depth: float) -> list[S]:
        """Shapes whose depth equals *depth* exactly."""

    @abstractmethod
    def shapes_with_width(self, width: float) -> list[S]:
        """Shapes whose width equals *width* exactly."""


class RoundShapeRepository(BaseShapeRepository[S]):

    @abstractmethod
    def shapes_with_diameter(self, diameter: float) -> list[S]:
        """Shapes whose outside diameter equals *diameter* exactly."""
