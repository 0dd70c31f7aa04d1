# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Test the singleton sentinel infrastructure."""

import copy
import pickle

import pytest

from awj._sentinel import (
    Undefined,
    UndefinedType,
    Unset,
    UnsetType,
    is_sentinel,
    is_unset,
)


class TestSingletonIdentity:
    def test_constructor_returns_the_singleton(self):
        assert UndefinedType() is Undefined
        assert UnsetType() is Unset
        assert Undefined is not Unset

    @pytest.mark.parametrize("sentinel", [Undefined, Unset])
    def test_identity_survives_copies(self, sentinel):
        assert copy.copy(sentinel) is sentinel
        assert copy.deepcopy(sentinel) is sentinel
        assert pickle.loads(pickle.dumps(sentinel)) is sentinel


class TestSentinelBehaviour:
    @pytest.mark.parametrize("sentinel", [Undefined, Unset])
    def test_falsy(self, sentinel):
        assert not sentinel

    def test_representation(self):
        assert repr(Undefined) == "Undefined"
        assert str(Unset) == "Unset"

    @pytest.mark.parametrize(
        "value, expected",
        [(Undefined, True), (Unset, True), (None, False), ([], False)],
    )
    def test_is_sentinel(self, value, expected):
        assert is_sentinel(value) is expected

    def test_is_unset(self):
        assert is_unset(Unset)
        assert not is_unset(Undefined)
        assert not is_unset(None)

    def test_markers_are_distinct_types(self):
        assert type(Undefined) is not type(Unset)
        assert UndefinedType() is not UnsetType()
