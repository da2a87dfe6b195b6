"""
CSV data source for labeled flight codes.

Reads a comma-separated UTF-8 file with a header row into Records,
preserving file order.
"""

import io
from pathlib import Path

import polars as pl
from loguru import logger

from flightcodes.data.schema import FLIGHT_CODE_SCHEMA, ColumnSpec, Record
from flightcodes.utils.exceptions import FormatError

SEPARATOR = ","

# Quoted sections may hold separators; drop them before counting fields
QUOTED_FIELD = r'"[^"]*"'


class CsvDataSource:
    """
    Loads Records from a headed CSV file.

    Columns are bound by the schema descriptors: each ColumnSpec names the
    expected header, the polars dtype and the source column index. Every
    value is read as text; empty fields are kept as empty strings. Blank
    lines are ignored; any other row must have exactly one field per
    schema column.
    """

    def __init__(self, schema: tuple[ColumnSpec, ...] = FLIGHT_CODE_SCHEMA):
        self.schema = schema

    def _read_lines(self, path: Path) -> list[tuple[int, str]]:
        """Read the file as UTF-8 text, dropping blank lines."""
        # open() raises OSError for missing or unreadable paths
        with open(path, "rb") as handle:
            raw = handle.read()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"{path} is not valid UTF-8: {e}", path=str(path)) from e

        lines = [(n, line) for n, line in enumerate(text.splitlines(), start=1) if line.strip()]
        if not lines:
            raise FormatError(f"{path} is empty, expected a header row", path=str(path))
        return lines

    def _check_row_widths(self, lines: list[tuple[int, str]], path: Path) -> None:
        """Reject data rows with too few or too many fields."""
        rows = (
            pl.DataFrame(
                {"line_number": [n for n, _ in lines], "line": [line for _, line in lines]},
                schema={"line_number": pl.Int64, "line": pl.String},
            )
            .slice(1)
            .with_columns(
                (
                    pl.col("line")
                    .str.replace_all(QUOTED_FIELD, "")
                    .str.count_matches(SEPARATOR, literal=True)
                    + 1
                ).alias("fields")
            )
        )

        bad = rows.filter(pl.col("fields") != len(self.schema))
        if not bad.is_empty():
            first = bad.row(0, named=True)
            raise FormatError(
                f"{path}:{first['line_number']}: expected {len(self.schema)} fields, "
                f"found {first['fields']} ({len(bad)} malformed rows)",
                path=str(path),
            )

    def _read_frame(self, lines: list[tuple[int, str]], path: Path) -> pl.DataFrame:
        """Parse the non-blank lines into a string-typed DataFrame."""
        content = "\n".join(line for _, line in lines) + "\n"
        try:
            return pl.read_csv(
                io.BytesIO(content.encode("utf-8")),
                has_header=True,
                separator=SEPARATOR,
                infer_schema=False,
            )
        except pl.exceptions.PolarsError as e:
            raise FormatError(f"Failed to parse {path}: {e}", path=str(path)) from e

    def _validate_header(self, df: pl.DataFrame, path: Path) -> None:
        """Check the header against the schema names and column count."""
        expected = [spec.name for spec in sorted(self.schema, key=lambda s: s.index)]

        if len(df.columns) != len(self.schema):
            raise FormatError(
                f"{path}: expected {len(self.schema)} columns {expected}, "
                f"found {len(df.columns)} {df.columns}",
                path=str(path),
            )

        for spec in self.schema:
            actual = df.columns[spec.index]
            if actual != spec.name:
                raise FormatError(
                    f"{path}: column {spec.index} should be {spec.name!r}, found {actual!r}",
                    path=str(path),
                )

    def load(self, path: str | Path) -> list[Record]:
        """
        Load all records from a CSV file.

        Args:
            path: CSV file with a header row

        Returns:
            Records in file order

        Raises:
            OSError: If the file cannot be opened
            FormatError: If the header or any row does not match the schema
        """
        path = Path(path)
        lines = self._read_lines(path)
        df = self._read_frame(lines, path)
        self._validate_header(df, path)
        self._check_row_widths(lines, path)

        # Empty fields parse as null; they are literal empty strings here
        columns = [
            pl.col(df.columns[spec.index]).cast(spec.dtype).fill_null("")
            for spec in self.schema
        ]
        records = [Record(*row) for row in df.select(columns).iter_rows()]

        logger.info(f"Loaded {len(records):,} records from {path}")
        return records


def load_records(
    path: str | Path,
    schema: tuple[ColumnSpec, ...] = FLIGHT_CODE_SCHEMA,
) -> list[Record]:
    """Load labeled records from a CSV file."""
    return CsvDataSource(schema).load(path)


__all__ = ["CsvDataSource", "load_records"]
