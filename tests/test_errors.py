# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for collection error classes."""

import pytest

from awj._errors import (
    CollectionError,
    EmptyCollectionError,
    ItemNotFoundError,
)


class TestCollectionError:
    """Tests for base CollectionError class."""

    def test_default_initialization(self):
        error = CollectionError()
        assert str(error) == "Collection error"
        assert error.message == "Collection error"
        assert error.details == {}

    def test_custom_message(self):
        error = CollectionError("Custom error message")
        assert str(error) == "Custom error message"

    def test_with_cause(self):
        cause = ValueError("Original error")
        error = CollectionError("Wrapped error", cause=cause)
        assert error.get_cause() is cause
        assert error.__cause__ is cause

    def test_to_dict_basic(self):
        error = CollectionError("Test error")
        assert error.to_dict() == {
            "error": "CollectionError",
            "message": "Test error",
        }

    def test_to_dict_with_details_and_cause(self):
        error = CollectionError(
            "Error", details={"field": "value"}, cause=ValueError("root")
        )
        result = error.to_dict(include_cause=True)
        assert result["details"] == {"field": "value"}
        assert result["cause"] == "ValueError('root')"

    def test_to_dict_omits_cause_by_default(self):
        error = CollectionError("Error", cause=ValueError("root"))
        assert "cause" not in error.to_dict()


class TestItemNotFoundError:
    def test_is_a_key_error(self):
        error = ItemNotFoundError.from_key("missing")
        assert isinstance(error, KeyError)
        assert isinstance(error, CollectionError)

    def test_str_is_not_quoted(self):
        error = ItemNotFoundError.from_key("missing")
        assert str(error) == "Item not found in collection (key: 'missing')"

    def test_details_carry_the_key(self):
        error = ItemNotFoundError.from_key(3)
        assert error.details == {"key": 3}

    def test_long_keys_are_truncated_in_message(self):
        error = ItemNotFoundError.from_key("x" * 200)
        assert error.message.endswith("...)")
        assert error.details["key"] == "x" * 200

    def test_can_be_caught_as_key_error(self):
        with pytest.raises(KeyError):
            raise ItemNotFoundError.from_key("k")


class TestEmptyCollectionError:
    def test_from_operation(self):
        error = EmptyCollectionError.from_operation("pop")
        assert str(error) == "pop() called on an empty collection"
        assert error.details == {"operation": "pop"}
        assert error.to_dict()["error"] == "EmptyCollectionError"

    def test_is_an_index_error(self):
        assert isinstance(EmptyCollectionError(), IndexError)
        assert str(EmptyCollectionError()) == "Collection is empty"
