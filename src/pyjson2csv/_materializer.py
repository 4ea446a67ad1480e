"""Row materialization: one CSV row per element of the flatten array."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pyjson2csv._errors import ShapeError, TransformError
from pyjson2csv._paths import resolve, split_marker_path
from pyjson2csv._utils import json_type_name, value_to_string
from pyjson2csv.schema import Field


def _element_path(field: Field) -> str:
    """Path inside the array element for a field containing the marker."""
    parts = split_marker_path(field.path)
    return parts[1] if parts is not None else ""


def _reads_into_elements(fields: Sequence[Field]) -> bool:
    """True if any field addresses a path inside the array element."""
    for field in fields:
        if field.is_element_field and _element_path(field):
            return True
    return False


def _array_elements(
    record: Mapping[str, Any],
    array_path: str,
    require_objects: bool,
) -> list[Any]:
    """Return the elements of the flatten array, skipping nulls.

    Elements must be objects when ``require_objects`` is set; otherwise
    any non-null element is kept (fields such as ``tags[*]`` take the
    element itself as their value).
    """
    value = resolve(record, array_path)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ShapeError(
            f"value at flatten path {array_path!r} is not an array or null, "
            f"but {json_type_name(value)}",
            f"flatten path {array_path!r} resolved to {type(value).__name__}",
        )

    elements: list[Any] = []
    for i, item in enumerate(value):
        if item is None:
            continue
        if require_objects and not isinstance(item, Mapping):
            raise ShapeError(
                f"array element at path {array_path!r} index {i} is not a JSON object, "
                f"but {json_type_name(item)}",
                f"element {i} of {array_path!r} is {type(item).__name__}",
            )
        elements.append(item)
    return elements


def field_value(field: Field, record: Mapping[str, Any], element: Any) -> Any:
    """Resolve and transform the value of one field for one array element.

    Fields with a ``[*]`` marker resolve the text after the marker
    against the element; other fields resolve against the whole record.
    The transform always receives the whole record.
    """
    if field.is_element_field:
        value = resolve(element, _element_path(field))
    else:
        value = resolve(record, field.path)

    if field.transform is None:
        return value
    try:
        return field.transform(value, record)
    except Exception as exc:
        raise TransformError(
            f"failed to transform field {field.path!r}: {exc}",
            f"transform {getattr(field.transform, '__name__', field.transform)!r} "
            f"raised {type(exc).__name__} for field {field.path!r}: {exc}",
            wrapped=exc,
        ) from exc


def materialize_rows(
    record: Mapping[str, Any],
    array_path: str,
    fields: Sequence[Field],
) -> list[list[str]]:
    """Build the CSV rows for one source record.

    Args:
        record: The decoded source object.
        array_path: Path of the array to flatten, as returned by
            :func:`~pyjson2csv._paths.detect_flatten_path`.
        fields: Output fields in column order.

    Returns:
        One row per non-null array element, in array order. Empty when the
        array is null, missing, empty, or contains only nulls.

    Raises:
        ShapeError: If the array value or one of its elements has the wrong type.
        TransformError: If a field transform fails.
    """
    elements = _array_elements(record, array_path, _reads_into_elements(fields))
    rows: list[list[str]] = []
    for element in elements:
        rows.append([value_to_string(field_value(f, record, element)) for f in fields])
    return rows
