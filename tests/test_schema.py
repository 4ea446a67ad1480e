"""Field and option type tests."""

import dataclasses

import pytest

from pyjson2csv import DEFAULT_DELIMITER
from pyjson2csv.schema import Field, Options


class TestField:
    def test_defaults(self):
        field = Field("id")
        assert field.header == ""
        assert field.transform is None

    def test_column_name_uses_header(self):
        assert Field("id", "User ID").column_name == "User ID"

    def test_column_name_falls_back_to_path(self):
        assert Field("address.city").column_name == "address.city"

    def test_is_element_field(self):
        assert Field("items[*].id").is_element_field is True
        assert Field("items.id").is_element_field is False

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Field("id").path = "other"


class TestOptions:
    def test_defaults(self):
        options = Options(fields=(Field("items[*]"),))
        assert options.delimiter == DEFAULT_DELIMITER == ","
        assert options.add_header is True

    def test_header(self):
        options = Options(fields=(Field("id", "ID"), Field("items[*].name")))
        assert options.header == ["ID", "items[*].name"]

    def test_fields_stored_as_tuple(self):
        fields = [Field("id"), Field("items[*].name")]
        options = Options(fields=fields)
        fields.append(Field("extra"))
        assert len(options.fields) == 2
