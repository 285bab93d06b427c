"""Pydantic model for pool edges supplied by the pool data source."""

from pydantic import BaseModel, ConfigDict, Field

from poolgraph.models.types import Address


class PoolTokenPair(BaseModel):
    """A pool and the two token mints it connects.

    Accepts both snake_case field names and the camelCase keys used by
    decoded pool accounts (``tokenMintA`` / ``tokenMintB``).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address: Address
    token_mint_a: Address = Field(alias="tokenMintA")
    token_mint_b: Address = Field(alias="tokenMintB")
