"""Route plan contracts: the ordered hops of a quoted swap."""

from typing import Optional

from pydantic import Field

from jupswap.codecs.pubkey import Pubkey
from jupswap.contracts.base import ResponseModel, U64String


class SwapInfo(ResponseModel):
    """A single AMM hop."""

    amm_key: Pubkey = Field(..., description="AMM / pool address")
    label: str = Field(..., description="DEX label (Raydium, Orca, ...)")
    input_mint: Pubkey = Field(..., description="Mint going into the AMM")
    output_mint: Pubkey = Field(..., description="Mint coming out of the AMM")
    in_amount: U64String = Field(..., description="Estimated input amount into the AMM")
    out_amount: U64String = Field(..., description="Estimated output amount from the AMM")

    # Not present in lite API responses
    fee_amount: Optional[U64String] = Field(None, description="Fee charged by the AMM")
    fee_mint: Optional[Pubkey] = Field(None, description="Mint the fee is charged in")


class RoutePlanStep(ResponseModel):
    """A hop plus its share of the routed amount.

    Shares within one plan are rounded by the service and may not sum
    to exactly 100.
    """

    swap_info: SwapInfo
    percent: int = Field(..., ge=0, le=100, description="Share of the route in percent")
    bps: Optional[int] = Field(None, ge=0, le=10_000, description="Share in basis points")


# Topologically sorted; order is significant
RoutePlan = list[RoutePlanStep]
