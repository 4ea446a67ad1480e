"""Streaming decoder for a top-level JSON array of objects.

Built on ijson events so that only one record is held in memory at a
time. Integers decode as ``int`` and other numbers as exact
``decimal.Decimal`` values.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import IO, Any

import ijson

from pyjson2csv._errors import (
    ERR_MSG_EXPECTED_ARRAY_END,
    ERR_MSG_EXPECTED_ARRAY_START,
    ERR_MSG_EXPECTED_OBJECT,
    ERR_MSG_INVALID_JSON,
    FormatError,
)

READ_CHUNK_SIZE = 64 * 1024

_CONTAINER_START = {"start_map", "start_array"}
_CONTAINER_END = {"end_map", "end_array"}
_SCALAR_TYPES = {"null": "null", "boolean": "boolean", "number": "number", "string": "string"}


class _PrefixedReader:
    """File-like reader that replays already-consumed data before the stream."""

    def __init__(self, prefix: bytes | str, stream: IO[Any]) -> None:
        self._prefix = prefix
        self._stream = stream

    def read(self, size: int = -1) -> bytes | str:
        if size == 0:
            return self._prefix[:0]
        if self._prefix:
            data, self._prefix = self._prefix, self._prefix[:0]
            return data
        return self._stream.read(size)


def _skip_blank_input(stream: IO[Any]) -> IO[Any] | None:
    """Return a reader positioned at the start of the input, or None if blank."""
    while True:
        chunk = stream.read(READ_CHUNK_SIZE)
        if not chunk:
            return None
        if chunk.strip():
            return _PrefixedReader(chunk, stream)


def _event_type_name(event: str) -> str:
    if event == "start_map":
        return "object"
    if event == "start_array":
        return "array"
    return _SCALAR_TYPES.get(event, event)


def _parse_events(source: IO[Any]) -> Iterator[tuple[str, str, Any]]:
    try:
        yield from ijson.parse(source)
    except ijson.IncompleteJSONError as exc:
        raise FormatError(
            ERR_MSG_EXPECTED_ARRAY_END,
            f"incomplete JSON input: {exc}",
            wrapped=exc,
        ) from exc
    except ijson.JSONError as exc:
        raise FormatError(
            f"{ERR_MSG_INVALID_JSON}: {exc}",
            f"ijson rejected input: {exc}",
            wrapped=exc,
        ) from exc


def iter_records(source: IO[Any] | bytes | str) -> Iterator[dict[str, Any]]:
    """Yield the objects of a top-level JSON array one at a time.

    ``source`` is a binary file-like object, or ``bytes``/``str`` holding
    the whole document. Blank input yields nothing, as does ``[]``.

    Raises:
        FormatError: If the top-level value is not an array, an entry is
            not an object, the array is not closed, or the JSON is invalid.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    if isinstance(source, bytes):
        source = io.BytesIO(source)

    reader = _skip_blank_input(source)
    if reader is None:
        return

    events = _parse_events(reader)
    _, event, _ = next(events)
    if event != "start_array":
        raise FormatError(
            ERR_MSG_EXPECTED_ARRAY_START,
            f"top-level JSON value is {_event_type_name(event)}, not array",
        )

    index = 0
    for prefix, event, value in events:
        if prefix == "" and event == "end_array":
            break
        if event != "start_map":
            raise FormatError(
                ERR_MSG_EXPECTED_OBJECT,
                f"array entry {index} is {_event_type_name(event)}, not object",
            )

        builder = ijson.ObjectBuilder()
        builder.event(event, value)
        depth = 1
        for prefix, event, value in events:
            builder.event(event, value)
            if event in _CONTAINER_START:
                depth += 1
            elif event in _CONTAINER_END:
                depth -= 1
                if depth == 0:
                    break
        yield builder.value
        index += 1

    # Drain the parser so trailing data after ']' is reported.
    for _ in events:
        pass
