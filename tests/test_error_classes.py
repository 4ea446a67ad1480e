"""Error class hierarchy tests."""

import pytest

from pyjson2csv._errors import (
    ConfigurationError,
    ConversionError,
    FormatError,
    InvalidPathError,
    ShapeError,
    TransformError,
    WriteError,
)


class TestConversionErrorBase:
    def test_str_returns_user_message(self):
        err = ConversionError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = ConversionError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = ConversionError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = ConversionError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_exception(self):
        assert isinstance(ConversionError("test"), Exception)


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        ConfigurationError,
        InvalidPathError,
        FormatError,
        ShapeError,
        TransformError,
        WriteError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_conversion_error(self, cls):
        assert issubclass(cls, ConversionError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_catchable_as_conversion_error(self, cls):
        with pytest.raises(ConversionError):
            raise cls("test")

    def test_invalid_path_is_configuration_error(self):
        assert issubclass(InvalidPathError, ConfigurationError)

    @pytest.mark.parametrize("cls", [FormatError, ShapeError, TransformError, WriteError])
    def test_runtime_errors_are_not_configuration_errors(self, cls):
        assert not issubclass(cls, ConfigurationError)
