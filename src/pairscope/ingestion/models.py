"""Trade data models."""

from pydantic import BaseModel, Field


class Token(BaseModel):
    """A fungible asset referenced by a trade.

    Addresses are compared case-insensitively everywhere. The same token
    may appear in mixed case across records.
    """

    address: str = Field(description="Token contract address")
    symbol: str | None = Field(default=None, description="Display symbol, may be empty")
    name: str | None = Field(default=None, description="Display name")
    decimals: int = Field(default=18, description="Token decimals (amounts arrive pre-scaled)")

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        """Lower-cased address used for equality and ordering."""
        return self.address.lower()


class BalanceChange(BaseModel):
    """One side of a trade: the vault balance change for a single token."""

    token: Token
    amount: str | int = Field(default="0", description="Raw amount in token units")
    formatted_amount: str | float = Field(
        alias="formattedAmount",
        description="Human-scaled amount; may be unparseable",
    )
    vault_id: str | int | None = Field(default=None, alias="vaultId")

    model_config = {"frozen": True, "populate_by_name": True}


class Trade(BaseModel):
    """A single matched exchange event between two parties.

    Direction is never read off a sign bit. It is derived from which side
    holds the base token of the pair being charted.
    """

    id: str | int = Field(default="", description="Trade identifier")
    timestamp: int = Field(description="Execution time in UNIX seconds")
    input_change: BalanceChange = Field(alias="inputVaultBalanceChange")
    output_change: BalanceChange = Field(alias="outputVaultBalanceChange")
    order_hash: str | None = Field(default=None, alias="orderHash")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def tokens(self) -> tuple[Token, Token]:
        """(input token, output token)."""
        return self.input_change.token, self.output_change.token
