"""
aisc_shapes.errors - Error kinds raised by the shape core.

Nothing in the core logs or swallows these; callers decide whether a
failure skips a row, fails a batch, or becomes an HTTP status.
Driver / I/O failures are never wrapped and propagate as-is.
"""

from __future__ import annotations


class ShapeError(Exception):
    """Base class for every error raised by the shape core."""


class MissingPropertyError(ShapeError):
    """A required property was not set when assembling a shape."""

    def __init__(self, property_name: str, label: str | None = None):
        self.property_name = property_name
        self.label = label or property_name
        super().__init__(f"The required property {self.label} was missing.")


class ShapeNotFoundError(ShapeError, LookupError):
    """A single-shape lookup matched no rows."""

    def __init__(self, shape: str, column: str, value: object):
        self.shape = shape
        self.column = column
        self.value = value
        super().__init__(f"No {shape} with {column} = {value!r}")


class FieldTypeError(ShapeError, TypeError):
    """A builder setter received a value of the wrong type."""

    def __init__(self, field_name: str, expected: str, value: object):
        self.field_name = field_name
        self.expected = expected
        self.value = value
        super().__init__(
            f"{field_name} expects {expected}, got {type(value).__name__} {value!r}"
        )


class UnknownFieldError(ShapeError, KeyError):
    """A field name outside the shape vocabulary."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(field_name)

    def __str__(self) -> str:
        return f"Unknown shape field {self.field_name!r}"
