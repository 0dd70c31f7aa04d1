# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import CollectionError, EmptyCollectionError, ItemNotFoundError
from ._sentinel import Undefined, Unset, is_sentinel
from .collection import Collection, reseed
from .config import CollectionSettings, settings
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)


__all__ = (
    "__version__",
    "Collection",
    "CollectionError",
    "CollectionSettings",
    "EmptyCollectionError",
    "ItemNotFoundError",
    "Undefined",
    "Unset",
    "is_sentinel",
    "logger",
    "reseed",
    "settings",
)
