"""Exception hierarchy for JSON-to-CSV conversion."""


class ConversionError(Exception):
    """Base exception for JSON-to-CSV conversion errors.

    Provides dual messaging: a user-facing message and internal
    details for logging, plus the underlying exception when one exists.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ConfigurationError(ConversionError):
    """Raised when the conversion options cannot drive a run."""


class InvalidPathError(ConfigurationError):
    """Raised when a field path is malformed (e.g. an empty segment)."""


class FormatError(ConversionError):
    """Raised when the input is not a well-formed array of JSON objects."""


class ShapeError(ConversionError):
    """Raised when the flatten array or one of its elements has the wrong type."""


class TransformError(ConversionError):
    """Raised when a field transform fails."""


class WriteError(ConversionError):
    """Raised when writing to the CSV output fails."""


# User-facing error message constants
ERR_MSG_NO_FLATTEN_PATH = (
    "flattening is the only supported mode: at least one field path must contain '[*]'"
)
ERR_MSG_EXPECTED_ARRAY_START = "expected start of JSON array '['"
ERR_MSG_EXPECTED_ARRAY_END = "unexpected end of input while expecting end of JSON array ']'"
ERR_MSG_EXPECTED_OBJECT = "expected JSON object as array entry"
ERR_MSG_INVALID_JSON = "failed to decode JSON input"
