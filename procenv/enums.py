"""StrEnum definitions for type-safe constants."""

from enum import StrEnum


class JoinMode(StrEnum):
    """How join() treats an empty base mapping."""

    ALIAS = "alias"
    COPY = "copy"
