"""Shared test fixtures."""

import pytest

from pyjson2csv.schema import Field, Options

USERS_JSON = """
[
  {
    "user_id": 101,
    "user_name": "Alice Smith",
    "is_active": true,
    "address": {"city": "New York", "zip": "10001"},
    "items": [
      {"item_id": "A1", "price": 10.50, "quantity": 1, "tags": ["electronics"]},
      {"item_id": "B2", "price": 5.00, "quantity": 3, "tags": ["book", "fiction"]}
    ],
    "created_at": 1678886400
  },
  {
    "user_id": 102,
    "user_name": "Bob Johnson",
    "is_active": false,
    "address": {"city": "London", "zip": "SW1A 0AA"},
    "items": [
      {"item_id": "C3", "price": 2.20, "quantity": 5, "tags": ["stationery"]}
    ],
    "created_at": 1678972800
  },
  {
    "user_id": 103,
    "user_name": "Charlie Brown",
    "is_active": true,
    "address": null,
    "items": [],
    "created_at": null
  },
  {
    "user_id": 104,
    "user_name": "David Lee",
    "is_active": true,
    "address": {"city": "Tokyo"},
    "items": null,
    "created_at": 1679145600
  }
]
"""


@pytest.fixture
def users_json():
    return USERS_JSON


@pytest.fixture
def item_fields():
    return (
        Field("user_id", "User ID"),
        Field("address.city", "City"),
        Field("items[*].item_id", "Item ID"),
        Field("items[*].price", "Price"),
    )


@pytest.fixture
def item_options(item_fields):
    return Options(fields=item_fields)
