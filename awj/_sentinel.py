# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, ClassVar, Final, TypeVar, Union

__all__ = (
    "MaybeUndefined",
    "Undefined",
    "UndefinedType",
    "Unset",
    "UnsetType",
    "is_sentinel",
    "is_unset",
)

T = TypeVar("T")


class _Marker:
    """Falsy, named, one-per-class marker value.

    Identity survives copy, deepcopy and pickling, so ``x is Undefined``
    stays a reliable test wherever the marker travels.
    """

    __slots__ = ()

    _name: ClassVar[str] = "Marker"
    _instance: ClassVar[_Marker | None] = None

    def __new__(cls):
        if cls.__dict__.get("_instance") is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self._name

    __str__ = __repr__

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        # pickled by reference to the module-level name
        return self._name


class UndefinedType(_Marker):
    """Marker for "there is no such entry".

    Returned by the positional accessors of a collection (``first``,
    ``last``, ``pop``, ``shift``, ``random``) when the collection is empty,
    so that an absent entry can never be confused with a stored ``None``.

    Example:
        >>> Collection().first() is Undefined
        True
    """

    __slots__ = ()
    _name = "Undefined"


class UnsetType(_Marker):
    """Marker for an optional argument the caller did not provide."""

    __slots__ = ()
    _name = "Unset"


Undefined: Final = UndefinedType()
"""No entry exists at the requested position."""
Unset: Final = UnsetType()
"""Argument was not provided."""

MaybeUndefined = Union[T, UndefinedType]


def is_sentinel(value: Any) -> bool:
    """Check if a value is either marker (Undefined or Unset)."""
    return isinstance(value, _Marker)


def is_unset(value: Any) -> bool:
    return value is Unset
