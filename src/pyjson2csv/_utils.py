"""Validation helpers and CSV cell rendering."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pyjson2csv._constants import FIXED_NOTATION_MAX_EXPONENT, FIXED_NOTATION_MIN_EXPONENT
from pyjson2csv._errors import ConfigurationError

_FORBIDDEN_DELIMITERS = {"\r", "\n", '"'}


def validate_delimiter(delimiter: str) -> None:
    """Validate a CSV field delimiter."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ConfigurationError(
            "delimiter must be a single character",
            f"invalid delimiter {delimiter!r}",
        )
    if delimiter in _FORBIDDEN_DELIMITERS:
        raise ConfigurationError(
            "delimiter cannot be a quote or line break character",
            f"invalid delimiter {delimiter!r}",
        )


def json_type_name(value: Any) -> str:
    """Return the JSON type name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _strip_trailing_zeros(value: Decimal) -> Decimal:
    """Drop trailing zero digits without rounding (unlike ``normalize``)."""
    sign, digits, exponent = value.as_tuple()
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    return Decimal((sign, digits[:end], exponent + len(digits) - end))


def _format_decimal(value: Decimal) -> str:
    if not value.is_finite():
        return str(value)
    if not value:
        return "0"
    value = _strip_trailing_zeros(value)
    if FIXED_NOTATION_MIN_EXPONENT <= value.adjusted() <= FIXED_NOTATION_MAX_EXPONENT:
        return format(value, "f")
    return str(value)


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        return repr(value)
    # repr gives the shortest digits that round-trip
    return _format_decimal(Decimal(repr(value)))


def value_to_string(value: Any) -> str:
    """Render a decoded JSON value as a CSV cell.

    ``None`` (JSON null or an unresolvable path) renders as an empty
    string. Numbers use the shortest text that reproduces the value,
    without a fractional part when the value is integral, switching to
    scientific notation (``1E+400``) outside a small exponent window.
    Objects and arrays fall back to ``repr`` and are not meant to be parsed back.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return _format_decimal(value)
    if isinstance(value, float):
        return _format_float(value)
    return repr(value)
