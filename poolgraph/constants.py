"""Constants for pool graph route discovery.

Centralizes the route id delimiter and well-known token mints.
"""

from poolgraph.models.types import is_valid_address

# Joins two mints into a route id. Must not be a base58 character.
ROUTE_ID_DELIMITER = "-"


def _validate_mint_address(name: str, address: str) -> str:
    """Validate and return a token mint address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} mint: {address} (must be base58, 32-44 chars)")
    return address


# Well-known mainnet mints, validated at import time to catch typos early
SOL = _validate_mint_address("SOL", "So11111111111111111111111111111111111111112")
USDC = _validate_mint_address("USDC", "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")
USDT = _validate_mint_address("USDT", "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB")
MSOL = _validate_mint_address("mSOL", "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So")
ORCA = _validate_mint_address("ORCA", "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE")
