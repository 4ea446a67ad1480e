"""Path syntax and output defaults for JSON-to-CSV conversion."""

ARRAY_MARKER = "[*]"
"""Path token marking the array whose elements become rows."""

PATH_SEPARATOR = "."
"""Separator between path segments."""

DEFAULT_DELIMITER = ","
"""Default CSV field delimiter."""

LINE_TERMINATOR = "\n"
"""Line terminator used for every CSV row."""

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Output format of :func:`~pyjson2csv.transformers.format_unix_timestamp`."""

FIXED_NOTATION_MIN_EXPONENT = -7
"""Smallest decimal exponent rendered without scientific notation."""

FIXED_NOTATION_MAX_EXPONENT = 20
"""Largest decimal exponent rendered without scientific notation."""
