# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "CollectionError",
    "EmptyCollectionError",
    "ItemNotFoundError",
)


class CollectionError(Exception):
    """Base class for every error raised by a collection."""

    default_message: ClassVar[str] = "Collection error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class ItemNotFoundError(CollectionError, KeyError):
    """Raised when a key does not map to a live entry."""

    default_message = "Item not found"

    @classmethod
    def from_key(cls, key: Any, *, message: str | None = None):
        key_repr = repr(key)
        if len(key_repr) > 50:
            key_repr = f"{key_repr[:50]}..."
        return cls(
            message or f"Item not found in collection (key: {key_repr})",
            details={"key": key},
        )


class EmptyCollectionError(CollectionError, IndexError):
    """Raised by positional access on an empty collection in strict mode."""

    default_message = "Collection is empty"

    @classmethod
    def from_operation(cls, operation: str):
        return cls(
            f"{operation}() called on an empty collection",
            details={"operation": operation},
        )
