"""Shared error types and input schemas."""

from bandproj.core.errors import (
    BandprojError,
    DimensionMismatchError,
    FormatError,
    SelectionError,
)
from bandproj.core.schemas import Selection, parse_index_spec

__all__ = [
    "BandprojError",
    "DimensionMismatchError",
    "FormatError",
    "SelectionError",
    "Selection",
    "parse_index_spec",
]
