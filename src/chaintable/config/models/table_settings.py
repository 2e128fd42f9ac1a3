"""Hash table configuration model.

This module contains the sizing and hashing configuration used by
HashMap when no explicit settings are passed to its constructor.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chaintable.shared.constants import HashConstants, HashTableDefaults


class TableSettings(BaseModel):
    """Hash table configuration.

    This class manages the initial bucket count, the load factor that
    triggers a resize, and the constants of the key spreading function.
    """

    default_capacity: int = Field(
        default=HashTableDefaults.DEFAULT_CAPACITY,
        ge=0,
        description="Number of buckets a default-constructed table starts with",
    )
    load_factor: float = Field(
        default=HashTableDefaults.LOAD_FACTOR,
        gt=0.0,
        le=1.0,
        description="Resize before size / capacity would reach this ratio",
    )
    hash_seed: int = Field(
        default=HashConstants.SEED,
        description="Seed combined with each key's hash",
    )
    hash_multiplier: int = Field(
        default=HashConstants.MULTIPLIER,
        description="Multiplier applied to the seed before adding the key's hash",
    )


__all__ = ["TableSettings"]
