# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = (
    "CollectionSettings",
    "settings",
)


class CollectionSettings(BaseSettings, frozen=True):
    """Library settings with environment variable support.

    Every field can be set through an ``AWJ_``-prefixed environment
    variable, e.g. ``AWJ_STRICT_EMPTY=1`` or ``AWJ_RANDOM_SEED=42``.
    """

    model_config = SettingsConfigDict(
        env_prefix="AWJ_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        "WARNING",
        description="Level of the 'awj' package logger",
    )
    STRICT_EMPTY: bool = Field(
        False,
        description=(
            "Raise EmptyCollectionError on positional access to an empty "
            "collection instead of returning the Undefined sentinel"
        ),
    )
    RANDOM_SEED: int | None = Field(
        None,
        description="Seed for the generator behind Collection.random()",
    )

    _instance: ClassVar[Any] = None

    @field_validator("LOG_LEVEL", mode="before")
    def _validate_log_level(cls, value: Any) -> str:
        if isinstance(value, int):
            value = logging.getLevelName(value)
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)


settings = CollectionSettings()
CollectionSettings._instance = settings
