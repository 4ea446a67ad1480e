"""Standard field transforms.

Each transform has the :data:`~pyjson2csv.schema.Transform` signature
``(value, original_record) -> value`` and can be attached to a
:class:`~pyjson2csv.schema.Field`.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from pyjson2csv._constants import TIMESTAMP_FORMAT
from pyjson2csv._utils import json_type_name, value_to_string
from pyjson2csv.schema import Transform


def bool_to_yes_no(value: Any, record: Mapping[str, Any]) -> Any:
    """Render booleans as ``"Yes"``/``"No"``; other values pass through."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return value


def format_unix_timestamp(value: Any, record: Mapping[str, Any]) -> Any:
    """Format Unix seconds as a UTC ``YYYY-MM-DD HH:MM:SS`` string.

    Fractional seconds are truncated. ``None`` renders as an empty string.

    Raises:
        TypeError: If the value is not a number.
    """
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"unsupported {json_type_name(value)} value for timestamp")
    ts = datetime.fromtimestamp(int(value), tz=timezone.utc)
    return ts.strftime(TIMESTAMP_FORMAT)


def items_summary(value: Any, record: Mapping[str, Any]) -> Any:
    """Summarize an array as ``"<n> Items"``, ``"Empty Array"`` or ``"Null Array"``."""
    if value is None:
        return "Null Array"
    if isinstance(value, (list, tuple)):
        if not value:
            return "Empty Array"
        return f"{len(value)} Items"
    return f"Unexpected Type: {json_type_name(value)}"


def join_values(separator: str = ";") -> Transform:
    """Return a transform joining the rendered items of an array with ``separator``.

    Non-array values render as an empty string.
    """

    def _join(value: Any, record: Mapping[str, Any]) -> Any:
        if not isinstance(value, (list, tuple)):
            return ""
        return separator.join(value_to_string(v) for v in value)

    _join.__name__ = f"join_values({separator!r})"
    return _join
