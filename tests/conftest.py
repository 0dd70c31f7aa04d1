# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import pytest

from awj import Collection
from awj.config import CollectionSettings


@pytest.fixture
def collection():
    """An empty Collection."""
    return Collection.new()


@pytest.fixture
def mixed_collection():
    """Four positional entries followed by one string-keyed entry."""
    return Collection.new(
        {0: "item", 1: "item2", 2: "item3", 3: "item4", "key": "item5"}
    )


@pytest.fixture
def strict_empty(monkeypatch):
    """Switch positional access on empty collections to raising."""
    strict = CollectionSettings(_env_file=None, STRICT_EMPTY=True)
    monkeypatch.setattr("awj.collection.settings", strict)
    return strict


@pytest.fixture
def clean_env(monkeypatch):
    """Remove AWJ_* variables so settings fall back to defaults."""
    for name in ("AWJ_LOG_LEVEL", "AWJ_STRICT_EMPTY", "AWJ_RANDOM_SEED"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
