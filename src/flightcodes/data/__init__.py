"""Data source module: CSV loading and record schema."""

from flightcodes.data.schema import Record, ColumnSpec, FLIGHT_CODE_SCHEMA
from flightcodes.data.loader import CsvDataSource, load_records

__all__ = [
    "Record",
    "ColumnSpec",
    "FLIGHT_CODE_SCHEMA",
    "CsvDataSource",
    "load_records",
]
