"""Shared address types for pool graph models.

Token mints and pool addresses are base58 public keys. Upstream code may hand
us plain strings or public-key objects; both are converted to ``str`` once at
the edge so the graph only ever compares one concrete type.
"""

import re
from typing import Annotated, Any, TypeAlias

from pydantic import BeforeValidator, Field

# Base58 alphabet (no 0, O, I, l), 32 to 44 chars for a 32-byte key
BASE58_ADDRESS_PATTERN = r"^[1-9A-HJ-NP-Za-km-z]{32,44}$"

_BASE58_ADDRESS_RE = re.compile(BASE58_ADDRESS_PATTERN)

# Anything whose str() is the base58 address (str, Pubkey, ...)
AddressLike: TypeAlias = Any


def normalize_address(address: AddressLike, *, validate: bool = False) -> str:
    """Convert an address-like value to its canonical string form.

    Args:
        address: A base58 string or any object whose ``str()`` is the address
        validate: If True, raises ValueError for malformed addresses.
                  If False (default), returns the string form unchecked.

    Returns:
        The address as a plain string

    Raises:
        ValueError: If validate=True and the address is not valid base58
    """
    addr = address if isinstance(address, str) else str(address)

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {addr}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid base58 public key address."""
    if not isinstance(address, str):
        return False
    return _BASE58_ADDRESS_RE.match(address) is not None


def _coerce_address(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    return normalize_address(value)


# Base58 public key, coerced from key objects before pattern validation
Address = Annotated[
    str,
    Field(pattern=BASE58_ADDRESS_PATTERN, description="Base58 public key"),
    BeforeValidator(_coerce_address),
]
