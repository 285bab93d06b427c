"""Data models for pool graph inputs."""

from poolgraph.models.pool import PoolTokenPair
from poolgraph.models.types import (
    BASE58_ADDRESS_PATTERN,
    Address,
    AddressLike,
    is_valid_address,
    normalize_address,
)

__all__ = [
    "Address",
    "AddressLike",
    "BASE58_ADDRESS_PATTERN",
    "PoolTokenPair",
    "is_valid_address",
    "normalize_address",
]
