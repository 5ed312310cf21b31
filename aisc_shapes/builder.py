"""
aisc_shapes.builder - Accumulate shape properties before validation.

A ShapeBuilder knows the property vocabulary but not the target shape.
Every vocabulary field gets a chainable ``with_<field>(value)`` setter:

    ShapeBuilder().with_edi_std_nomenclature("W14X22").with_d_lower(13.7)

Setters enforce the field's kind (float / bool / str) and overwrite any
previous value.  Which fields are *required* is decided later, by
``try_build(Variant)``.
"""

from __future__ import annotations

from typing import Any, Iterator, TypeVar

from aisc_shapes.assembly import try_build as _try_build
from aisc_shapes.errors import FieldTypeError
from aisc_shapes.fields import FIELDS, FieldSpec, field_spec

S = TypeVar("S")

_KIND_NAMES = {float: "a number", bool: "a boolean", str: "text"}


def _checked(spec: FieldSpec, value: Any) -> Any:
    """Return *value* coerced for *spec*, or raise FieldTypeError."""
    if spec.kind is float:
        # bool is an int subclass; T_F-style flags are not measurements
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldTypeError(spec.name, _KIND_NAMES[float], value)
        return float(value)
    if not isinstance(value, spec.kind):
        raise FieldTypeError(spec.name, _KIND_NAMES[spec.kind], value)
    return value


class ShapeBuilder:
    """
    Mutable, shape-agnostic set of named property values.

    Numeric fields take float, and an int is widened to float (a bool is
    refused).  T_F takes bool, identifiers take str, None is never a value.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    # ── Accumulation ───────────────────────────────────────────────────

    def set(self, name: str, value: Any) -> ShapeBuilder:
        """Set vocabulary field *name*.  Unknown names raise UnknownFieldError."""
        spec = field_spec(name)
        self._values[name] = _checked(spec, value)
        return self

    def update(self, values: dict[str, Any]) -> ShapeBuilder:
        for name, value in values.items():
            self.set(name, value)
        return self

    # ── Inspection ─────────────────────────────────────────────────────

    def get(self, name: str, default: Any = None) -> Any:
        field_spec(name)
        return self._values.get(name, default)

    def is_set(self, name: str) -> bool:
        return name in self._values

    def fields(self) -> dict[str, Any]:
        """Copy of the accumulated field set."""
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"ShapeBuilder({self._values!r})"

    # ── Assembly ───────────────────────────────────────────────────────

    def try_build(self, variant: type[S]) -> S:
        """Validate against *variant* and return the record."""
        return _try_build(self, variant)


def _make_setter(spec: FieldSpec):
    def setter(self: ShapeBuilder, value: Any) -> ShapeBuilder:
        return self.set(spec.name, value)

    setter.__name__ = f"with_{spec.name}"
    setter.__qualname__ = f"ShapeBuilder.with_{spec.name}"
    setter.__doc__ = f"Set ``{spec.name}`` (AISC ``{spec.label}``)."
    return setter


for _spec in FIELDS:
    setattr(ShapeBuilder, f"with_{_spec.name}", _make_setter(_spec))
del _spec
