"""Core Converter class - drives decode, flatten and write for one run."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import IO, Any

from pyjson2csv._constants import LINE_TERMINATOR
from pyjson2csv._errors import (
    ERR_MSG_NO_FLATTEN_PATH,
    ConfigurationError,
    WriteError,
)
from pyjson2csv._materializer import materialize_rows
from pyjson2csv._paths import detect_flatten_path, validate_field_path
from pyjson2csv._reader import iter_records
from pyjson2csv._utils import validate_delimiter
from pyjson2csv.schema import Options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """Counts reported by a finished conversion."""

    records: int = 0
    rows: int = 0


class Converter:
    """Convert a JSON array of objects into flattened CSV rows.

    All checks on ``options`` happen in the constructor, so a
    misconfigured run fails before any input is read or output written.
    """

    def __init__(self, options: Options) -> None:
        if not options.fields:
            raise ConfigurationError(
                "at least one field is required",
                "options.fields is empty",
            )
        validate_delimiter(options.delimiter)
        for field in options.fields:
            validate_field_path(field)

        flatten_path = detect_flatten_path(options.fields)
        if not flatten_path:
            raise ConfigurationError(
                ERR_MSG_NO_FLATTEN_PATH,
                f"no flatten array path in fields {[f.path for f in options.fields]!r}",
            )

        self._options = options
        self._flatten_path = flatten_path

    @property
    def flatten_path(self) -> str:
        return self._flatten_path

    def _write(self, writer: Any, row: list[str], what: str) -> None:
        try:
            writer.writerow(row)
        except (OSError, csv.Error) as exc:
            raise WriteError(
                f"failed to write csv {what}: {exc}",
                f"csv writer raised {type(exc).__name__} while writing {what}",
                wrapped=exc,
            ) from exc

    def run(self, source: IO[Any] | bytes | str, sink: IO[str]) -> Result:
        """Read JSON from ``source`` and write CSV to ``sink``.

        Raises:
            FormatError: If the input is not a well-formed array of objects.
            ShapeError: If a flatten array or one of its elements has the wrong type.
            TransformError: If a field transform fails.
            WriteError: If writing to ``sink`` fails.
        """
        options = self._options
        writer = csv.writer(
            sink,
            delimiter=options.delimiter,
            lineterminator=LINE_TERMINATOR,
        )
        logger.debug("flattening array at path %r", self._flatten_path)

        if options.add_header:
            self._write(writer, options.header, "header")

        records = 0
        rows = 0
        for record in iter_records(source):
            records += 1
            record_rows = materialize_rows(record, self._flatten_path, options.fields)
            if not record_rows:
                logger.debug("record %d produced no rows", records - 1)
            for row in record_rows:
                self._write(writer, row, "row")
            rows += len(record_rows)

        logger.debug("converted %d records into %d rows", records, rows)
        return Result(records=records, rows=rows)
