"""Swap request and response contracts.

A swap request embeds the quote response unchanged; it is the link
between the quote and swap phases.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from jupswap.codecs.payload import Base64Bytes
from jupswap.codecs.pubkey import Pubkey
from jupswap.contracts.base import ResponseModel, WireModel
from jupswap.contracts.quote import QuoteResponse
from jupswap.contracts.transaction_config import TransactionConfig


class SwapRequest(WireModel):
    """Body for ``/swap`` and ``/swap-instructions``."""

    user_public_key: Pubkey = Field(..., description="Wallet that signs and pays")
    quote_response: QuoteResponse
    config: TransactionConfig = Field(default_factory=TransactionConfig)

    def to_wire(self) -> dict[str, Any]:
        """Encode with the config options flattened into the top level."""
        body: dict[str, Any] = {
            "userPublicKey": str(self.user_public_key),
            "quoteResponse": self.quote_response.to_wire(),
        }
        body.update(self.config.to_wire())
        return body


class SwapResponse(ResponseModel):
    """Response of ``/swap``: one serialized, unsigned transaction."""

    swap_transaction: Base64Bytes = Field(..., description="Serialized transaction")
    last_valid_block_height: int
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None
    prioritization_type: Optional[dict[str, Any]] = None
    dynamic_slippage_report: Optional[dict[str, Any]] = None
    simulation_error: Optional[Any] = None


class AccountMeta(ResponseModel):
    """An account referenced by an instruction."""

    pubkey: Pubkey
    is_signer: bool
    is_writable: bool


class Instruction(ResponseModel):
    """A single program instruction."""

    program_id: Pubkey
    accounts: list[AccountMeta]
    data: Base64Bytes


class SwapInstructionsResponse(ResponseModel):
    """Response of ``/swap-instructions``: the transaction split into parts."""

    token_ledger_instruction: Optional[Instruction] = None
    compute_budget_instructions: list[Instruction]
    setup_instructions: list[Instruction]
    swap_instruction: Instruction
    cleanup_instruction: Optional[Instruction] = None
    other_instructions: list[Instruction] = Field(default_factory=list)
    address_lookup_table_addresses: list[Pubkey] = Field(default_factory=list)
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None

    @field_validator("other_instructions", "address_lookup_table_addresses", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def instructions(self) -> list[Instruction]:
        """All instructions in execution order."""
        ordered = list(self.compute_budget_instructions)
        ordered.extend(self.setup_instructions)
        if self.token_ledger_instruction is not None:
            ordered.append(self.token_ledger_instruction)
        ordered.append(self.swap_instruction)
        if self.cleanup_instruction is not None:
            ordered.append(self.cleanup_instruction)
        ordered.extend(self.other_instructions)
        return ordered
