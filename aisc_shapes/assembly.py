"""
aisc_shapes.assembly - Validate a field set and construct a shape record.

Pure functions over a builder and a target variant: no I/O, no logging,
no shared state.  Required fields are checked in the variant's declared
order and the first one missing raises MissingPropertyError.  Optional
fields that were never set stay None; nothing is defaulted to 0.0.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, TypeVar

from aisc_shapes.errors import MissingPropertyError
from aisc_shapes.fields import label_of

if TYPE_CHECKING:
    from aisc_shapes.builder import ShapeBuilder

S = TypeVar("S")


def try_build(builder: ShapeBuilder, variant: type[S]) -> S:
    """Return a *variant* record from *builder* or raise MissingPropertyError."""
    values = {}
    for f in dataclasses.fields(variant):
        if builder.is_set(f.name):
            values[f.name] = builder.get(f.name)
        elif _required(f):
            raise MissingPropertyError(f.name, label_of(f.name))
    return variant(**values)


def missing_fields(builder: ShapeBuilder, variant: type) -> list[str]:
    """Every required field of *variant* not set on *builder*, in order."""
    return [
        f.name for f in dataclasses.fields(variant)
        if _required(f) and not builder.is_set(f.name)
    ]


def _required(f: dataclasses.Field) -> bool:
    return f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
