"""pyjson2csv - Convert JSON arrays of objects to flattened CSV rows."""

from __future__ import annotations

__version__ = "0.1.0"

import io
from typing import IO, Any

from pyjson2csv._constants import ARRAY_MARKER, DEFAULT_DELIMITER
from pyjson2csv._converter import Converter, Result
from pyjson2csv._errors import (
    ConfigurationError,
    ConversionError,
    FormatError,
    InvalidPathError,
    ShapeError,
    TransformError,
    WriteError,
)
from pyjson2csv.schema import Field, Options, Transform

__all__ = [
    "convert",
    "convert_string",
    "ARRAY_MARKER",
    "DEFAULT_DELIMITER",
    "Converter",
    "Field",
    "Options",
    "Result",
    "Transform",
    "ConversionError",
    "ConfigurationError",
    "InvalidPathError",
    "FormatError",
    "ShapeError",
    "TransformError",
    "WriteError",
]


def convert(
    source: IO[Any] | bytes | str,
    sink: IO[str],
    options: Options,
) -> Result:
    """Convert a JSON array of objects to CSV, flattening one nested array.

    Args:
        source: Binary file-like object (or the whole document as
            ``bytes``/``str``) holding a top-level JSON array of objects.
        sink: Text file-like object receiving the CSV output.
        options: Fields, delimiter and header settings. At least one
            field path must contain ``[*]``.

    Returns:
        Result with the number of records read and rows written.

    Raises:
        ConfigurationError: If the options cannot drive a run. Raised
            before anything is read or written.
        FormatError: If the input is not a well-formed array of objects.
        ShapeError: If a flatten array or one of its elements has the wrong type.
        TransformError: If a field transform fails.
        WriteError: If writing to ``sink`` fails.
    """
    return Converter(options).run(source, sink)


def convert_string(json_text: str | bytes, options: Options) -> str:
    """Convert a JSON document held in memory and return the CSV text.

    Raises:
        ConversionError: If conversion fails.
    """
    sink = io.StringIO()
    convert(json_text, sink, options)
    return sink.getvalue()
