# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import functools
import logging
import random
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_serializer,
    field_validator,
)
from typing_extensions import Self

from ._errors import EmptyCollectionError, ItemNotFoundError
from ._sentinel import MaybeUndefined, Undefined, Unset, is_unset
from .config import settings

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

logger = logging.getLogger(__name__)

_rng = random.Random(settings.RANDOM_SEED)


__all__ = (
    "Collection",
    "reseed",
)


def reseed(seed: Any = Unset) -> None:
    """Re-seed the generator behind `Collection.random`.

    Without an argument the configured ``RANDOM_SEED`` is used again.
    """
    _rng.seed(settings.RANDOM_SEED if is_unset(seed) else seed)


def _is_int_key(key: Hashable) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _normalize_key(key: Hashable) -> Hashable:
    # True and 1 hash alike, so a bool key would shadow a renumbered position
    return int(key) if isinstance(key, bool) else key


def _next_int_key(items: Mapping[Hashable, Any]) -> int:
    return max((k + 1 for k in items if _is_int_key(k) and k >= 0), default=0)


def _renumber(entries: Iterable[tuple[Hashable, Any]]) -> dict[Hashable, Any]:
    """Rebuild entries in order, numbering integer keys from zero."""
    out: dict[Hashable, Any] = {}
    position = 0
    for key, value in entries:
        if _is_int_key(key):
            key = position
            position += 1
        out[key] = value
    return out


class Collection(BaseModel, Generic[T]):
    """An ordered, mutable, heterogeneous sequence of values.

    Entries live in an insertion-ordered mapping. Keys are either
    sequential integer positions (the default for pushed values) or
    arbitrary hashable keys such as strings, so a collection behaves like
    a list and a dict at the same time.

    Positional accessors (`first`, `last`, `pop`, `shift`, `random`)
    share one empty-collection contract: they return ``default`` when the
    caller passes one, otherwise `Undefined`, or raise
    `EmptyCollectionError` when ``settings.STRICT_EMPTY`` is on.

    ``T`` is a static hint only: values are never validated or coerced,
    so ``Collection[int]`` stores whatever it is given. Boolean keys are
    stored as the integers they equal. Instances are not thread-safe.

    Attributes:
        items (dict[Hashable, T]):
            The entries, in iteration order.
    """

    model_config = ConfigDict(extra="forbid")

    items: dict[Any, Any] = Field(
        default_factory=dict,
        title="Items",
        description="Ordered mapping of key to value.",
    )
    _next_key: int = PrivateAttr(default=0)

    def __init__(self, items: Any = None, /, **data: Any) -> None:
        if "items" not in data:
            data["items"] = items
        super().__init__(**data)

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        self._next_key = _next_int_key(self.items)

    @field_validator("items", mode="before")
    def _validate_items(cls, value: Any) -> dict[Hashable, Any]:
        """Coerces the constructor input into ordered entries.

        Lists and tuples are keyed by position, mappings keep their keys,
        another collection is copied, ``None`` means empty, and anything
        else becomes a single entry.
        """
        if value is None:
            return {}
        if isinstance(value, Collection):
            return dict(value.items)
        if isinstance(value, Mapping):
            return {_normalize_key(k): v for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return dict(enumerate(value))
        return {0: value}

    @field_serializer("items")
    def _serialize_items(self, value: dict[Hashable, Any]) -> Any:
        return self.to_array()

    # -- factories ---------------------------------------------------------

    @classmethod
    def new(cls, items: Any = None) -> Self:
        """Creates a collection, wrapping ``items`` if it is not a container."""
        return cls(items)

    @classmethod
    def wrap(cls, value: T) -> Self:
        """Creates a one-entry collection holding ``value`` as is.

        Unlike the constructor, lists and mappings are not unpacked.
        """
        return cls({0: value})

    @classmethod
    def from_items(cls, iterable: Iterable[T]) -> Self:
        """Creates a collection from any iterable, keyed by position."""
        return cls(list(iterable))

    # -- empty access ------------------------------------------------------

    def _on_empty(self, operation: str, default: Any) -> Any:
        if not is_unset(default):
            return default
        if settings.STRICT_EMPTY:
            raise EmptyCollectionError.from_operation(operation)
        logger.debug("%s() on empty collection, returning Undefined", operation)
        return Undefined

    # -- mutation ----------------------------------------------------------

    def push(self, item: T) -> Self:
        """Appends ``item`` at the next integer key."""
        self.items[self._next_key] = item
        self._next_key += 1
        return self

    def pop(self, default: Any = Unset) -> MaybeUndefined[T]:
        """Removes and returns the last entry."""
        if not self.items:
            return self._on_empty("pop", default)
        key, value = self.items.popitem()
        if _is_int_key(key) and key == self._next_key - 1:
            self._next_key -= 1
            logger.debug("pop released integer key %d", key)
        return value

    def shift(self, default: Any = Unset) -> MaybeUndefined[T]:
        """Removes and returns the first entry.

        Remaining integer keys are renumbered from zero in order; other keys
        are left alone.
        """
        if not self.items:
            return self._on_empty("shift", default)
        key = next(iter(self.items))
        value = self.items.pop(key)

        remaining = _renumber(self.items.items())
        self.items.clear()
        self.items.update(remaining)
        self._next_key = _next_int_key(self.items)
        logger.debug(
            "shift re-indexed collection, next integer key is %d",
            self._next_key,
        )
        return value

    def set(self, key: Hashable | None, value: T) -> Self:
        """Sets the entry at ``key``; a ``None`` key appends like `push`."""
        if key is None:
            return self.push(value)
        key = _normalize_key(key)
        self.items[key] = value
        if _is_int_key(key) and key >= self._next_key:
            self._next_key = key + 1
        return self

    def unset(self, key: Hashable) -> Self:
        """Removes the entry at ``key`` if there is one."""
        if self.has(key):
            del self.items[key]
        return self

    # -- access ------------------------------------------------------------

    def first(self, default: Any = Unset) -> MaybeUndefined[T]:
        if not self.items:
            return self._on_empty("first", default)
        return next(iter(self.items.values()))

    def last(self, default: Any = Unset) -> MaybeUndefined[T]:
        if not self.items:
            return self._on_empty("last", default)
        return next(reversed(self.items.values()))

    def get(self, key: Hashable, default: Any = Unset) -> T:
        """Returns the entry at ``key``.

        Args:
            key: The integer position or arbitrary key.
            default: Returned instead of raising when ``key`` is absent.

        Raises:
            ItemNotFoundError: If ``key`` is absent (or unhashable) and no
                default is given.
        """
        try:
            return self.items[key]
        except (KeyError, TypeError):
            if not is_unset(default):
                return default
            raise ItemNotFoundError.from_key(key) from None

    def random(self, default: Any = Unset) -> MaybeUndefined[T]:
        """Returns one entry chosen uniformly at random."""
        if not self.items:
            return self._on_empty("random", default)
        return _rng.choice(list(self.items.values()))

    def count(self) -> int:
        """Returns the number of live entries."""
        return len(self.items)

    def has(self, key: Hashable) -> bool:
        """Checks whether ``key`` maps to a live entry, even a ``None`` one."""
        try:
            return key in self.items
        except TypeError:
            return False

    def contains(self, value: Any) -> bool:
        """Checks whether any entry equals ``value``."""
        return any(v == value for v in self.items.values())

    def keys(self) -> list[Hashable]:
        return list(self.items)

    def values(self) -> list[T]:
        return list(self.items.values())

    def entries(self) -> list[tuple[Hashable, T]]:
        """Returns ``(key, value)`` pairs in order."""
        return list(self.items.items())

    def to_array(self) -> list[T] | dict[Hashable, T]:
        """Returns the entries as a plain value.

        Returns:
            list | dict: A list when the keys are exactly ``0..n-1`` in
                order, otherwise a dict copy with keys and order kept.
        """
        if all(
            _is_int_key(key) and key == position
            for position, key in enumerate(self.items)
        ):
            return list(self.items.values())
        return dict(self.items)

    def to_list(self) -> list[T]:
        return self.values()

    def to_dict(self) -> dict[Hashable, T]:
        return dict(self.items)

    # -- transformation ----------------------------------------------------

    def reverse(self) -> Self:
        """Returns a new collection with the entries in reverse order.

        Integer keys are renumbered from zero in the new order; other keys
        keep their association.
        """
        return type(self)(_renumber(reversed(self.items.items())))

    def map(
        self,
        fn: Callable[..., U],
        *,
        with_keys: bool = False,
    ) -> Collection[U]:
        """Returns a new collection of ``fn(value)`` under the same keys.

        With ``with_keys`` the callback is called as ``fn(value, key)``.
        The result is a plain `Collection`, since mapped values need not
        share the receiver's item type.
        """
        if with_keys:
            mapped = {k: fn(v, k) for k, v in self.items.items()}
        else:
            mapped = {k: fn(v) for k, v in self.items.items()}
        return Collection(mapped)

    def filter(
        self,
        fn: Callable[..., bool] | None = None,
        *,
        with_keys: bool = False,
    ) -> Self:
        """Returns a new collection of the entries ``fn`` accepts.

        Surviving entries keep their keys and order. Without ``fn`` the
        truthy values are kept.
        """
        if fn is None:
            kept = {k: v for k, v in self.items.items() if v}
        elif with_keys:
            kept = {k: v for k, v in self.items.items() if fn(v, k)}
        else:
            kept = {k: v for k, v in self.items.items() if fn(v)}
        return type(self)(kept)

    def reduce(self, fn: Callable[[A, T], A], initial: Any = Unset) -> A:
        """Folds ``fn(accumulator, value)`` over the entries, left to right.

        Without ``initial`` the first value seeds the accumulator. The raw
        accumulated value is returned.
        """
        if not is_unset(initial):
            return functools.reduce(fn, self.items.values(), initial)
        if not self.items:
            return self._on_empty("reduce", Unset)
        return functools.reduce(fn, self.items.values())

    def each(self, fn: Callable[..., Any], *, with_keys: bool = False) -> Self:
        """Calls ``fn(value)`` for every entry, in order, for side effects.

        The callback sees a snapshot of the entries taken before the first
        call. With ``with_keys`` it is called as ``fn(value, key)``.
        """
        for key, value in list(self.items.items()):
            if with_keys:
                fn(value, key)
            else:
                fn(value)
        return self

    # -- protocols ---------------------------------------------------------

    def __getitem__(self, key: Hashable) -> T:
        return self.get(key)

    def __setitem__(self, key: Hashable | None, value: T) -> None:
        self.set(key, value)

    def __delitem__(self, key: Hashable) -> None:
        self.unset(key)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return bool(self.items)

    def __iter__(self) -> Iterator[T]:
        """Iterates over the values in order."""
        return iter(list(self.items.values()))

    def __reversed__(self) -> Iterator[T]:
        return iter(list(reversed(self.items.values())))

    def __copy__(self) -> Self:
        """Shallow copy with its own entry storage."""
        copied = super().__copy__()
        copied.__dict__["items"] = dict(self.items)
        return copied

    def __eq__(self, other: object) -> bool:
        """Equal when both hold the same entries in the same order."""
        if not isinstance(other, Collection):
            return NotImplemented
        return list(self.items.items()) == list(other.items.items())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_array()!r})"
