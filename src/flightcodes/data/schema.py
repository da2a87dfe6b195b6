"""
Record types and column schema for labeled flight code files.

The loader binds CSV columns to Record fields through an ordered tuple of
ColumnSpec descriptors, one per Record field.
"""

from typing import NamedTuple

import polars as pl


class Record(NamedTuple):
    """One labeled row: a raw flight code and its IATA aircraft code."""
    code: str
    label: str


class ColumnSpec(NamedTuple):
    """Describes one source column: header name, polars dtype and position."""
    name: str
    dtype: type[pl.DataType]
    index: int


# Record fields in order: code <- column 0, label <- column 1
FLIGHT_CODE_SCHEMA: tuple[ColumnSpec, ...] = (
    ColumnSpec(name="FlightCode", dtype=pl.String, index=0),
    ColumnSpec(name="IATACode", dtype=pl.String, index=1),
)


__all__ = ["Record", "ColumnSpec", "FLIGHT_CODE_SCHEMA"]
