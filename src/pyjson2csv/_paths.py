"""Dotted path resolution and flatten-target detection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pyjson2csv._constants import ARRAY_MARKER, PATH_SEPARATOR
from pyjson2csv._errors import InvalidPathError
from pyjson2csv.schema import Field


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments, rejecting empty segments.

    An empty path yields no segments.
    """
    if not path:
        return []
    segments = path.split(PATH_SEPARATOR)
    for i, segment in enumerate(segments):
        if not segment:
            raise InvalidPathError(
                "invalid path: empty segment",
                f"path {path!r} has an empty segment at index {i}",
            )
    return segments


def resolve(container: Any, path: str) -> Any:
    """Resolve a dotted path against a decoded JSON value.

    Returns ``container`` itself for an empty path. A missing key, a null
    intermediate value, or a non-object value with segments still left
    to walk makes the path unresolvable, which yields ``None`` rather
    than an error.

    Raises:
        InvalidPathError: If the path contains an empty segment.
    """
    segments = split_path(path)
    current = container
    for segment in segments:
        if not isinstance(current, Mapping):
            return None
        if segment not in current:
            return None
        current = current[segment]
    return current


def split_marker_path(path: str) -> tuple[str, str] | None:
    """Split a path at the first ``[*]`` marker.

    Returns ``(array_path, element_path)`` with one trailing separator
    stripped from the array path and one leading separator stripped
    from the element path, or ``None`` if the path has no marker.
    """
    index = path.find(ARRAY_MARKER)
    if index == -1:
        return None
    array_path = path[:index]
    element_path = path[index + len(ARRAY_MARKER):]
    if array_path.endswith(PATH_SEPARATOR):
        array_path = array_path[:-1]
    if element_path.startswith(PATH_SEPARATOR):
        element_path = element_path[1:]
    return array_path, element_path


def detect_flatten_path(fields: Iterable[Field]) -> str:
    """Return the path of the array to flatten, or ``""`` if there is none.

    The first field containing ``[*]`` decides; later fields are not
    checked against it.
    """
    for field in fields:
        parts = split_marker_path(field.path)
        if parts is not None:
            return parts[0]
    return ""


def validate_field_path(field: Field) -> None:
    """Reject field paths with empty segments on either side of the marker."""
    parts = split_marker_path(field.path)
    if parts is None:
        split_path(field.path)
        return
    array_path, element_path = parts
    split_path(array_path)
    split_path(element_path)
