"""Field and option types for JSON-to-CSV conversion."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pyjson2csv._constants import ARRAY_MARKER, DEFAULT_DELIMITER

Transform = Callable[[Any, Mapping[str, Any]], Any]
"""Field transform: ``(value, original_record) -> replacement value``.

Failure is reported by raising; the converter wraps the exception in
:class:`~pyjson2csv.TransformError`.
"""


@dataclass(frozen=True)
class Field:
    """A single output column.

    ``path`` is a dot-separated path into the source record. A path
    containing ``[*]`` addresses a field of the flattened array element,
    e.g. ``items[*].price``.
    """

    path: str
    header: str = ""
    transform: Transform | None = None

    @property
    def column_name(self) -> str:
        return self.header or self.path

    @property
    def is_element_field(self) -> bool:
        return ARRAY_MARKER in self.path


@dataclass(frozen=True)
class Options:
    """Configuration of a conversion run."""

    fields: tuple[Field, ...]
    delimiter: str = DEFAULT_DELIMITER
    add_header: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def header(self) -> list[str]:
        return [f.column_name for f in self.fields]
