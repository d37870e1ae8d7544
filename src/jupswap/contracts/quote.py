"""Quote request and response contracts.

The caller-facing ``QuoteRequest`` is turned into flat query parameters by
``QuoteRequest.to_query_params``. The conversion is one-way: query
parameters are never parsed back into a request.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from jupswap.codecs.pubkey import Pubkey
from jupswap.contracts.base import U64_MAX, DecimalString, ResponseModel, U64String
from jupswap.contracts.route_plan import RoutePlan


class SwapMode(str, Enum):
    """Which side of the swap is fixed."""

    EXACT_IN = "ExactIn"  # amount is the input; slippage applies to output
    EXACT_OUT = "ExactOut"  # amount is the output; slippage applies to input


class InstructionVersion(str, Enum):
    """Swap program instruction version."""

    V1 = "V1"
    V2 = "V2"


def _query_value(value: Any) -> str:
    """Render a JSON-mode value as a query string token."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QuoteRequest(BaseModel):
    """Request for a swap quote and route plan."""

    input_mint: Pubkey = Field(..., description="Mint of the token being sold")
    output_mint: Pubkey = Field(..., description="Mint of the token being bought")
    amount: int = Field(
        ..., ge=0, le=U64_MAX, description="Input or output amount (per swap_mode) in base units"
    )
    slippage_bps: int = Field(
        default=50, ge=0, le=10_000, description="Slippage tolerance in basis points"
    )
    swap_mode: Optional[SwapMode] = Field(None, description="Service default is ExactIn")

    # Routing controls
    dexes: Optional[str] = Field(None, description="Comma-separated DEX labels to use")
    excluded_dexes: Optional[str] = Field(
        None, description="Comma-separated DEX labels to skip"
    )
    restrict_intermediate_tokens: Optional[bool] = Field(
        None, description="Only route through tokens with stable liquidity"
    )
    only_direct_routes: Optional[bool] = Field(None, description="Single-hop routes only")
    as_legacy_transaction: Optional[bool] = Field(
        None, description="Route must fit a legacy transaction"
    )
    platform_fee_bps: Optional[int] = Field(None, ge=0, le=10_000)
    max_accounts: Optional[int] = Field(
        None, gt=0, description="Rough cap on accounts used by the route"
    )
    instruction_version: Optional[InstructionVersion] = None
    dynamic_slippage: Optional[bool] = None
    prefer_liquid_dexes: Optional[bool] = None

    # Extra query arguments; named fields above override them
    quote_args: Optional[dict[str, str]] = None

    @field_validator("dexes", "excluded_dexes", mode="before")
    @classmethod
    def _join_dex_labels(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return ",".join(value)
        return value

    @field_validator("quote_args", mode="before")
    @classmethod
    def _stringify_quote_args(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): _query_value(v) for k, v in value.items()}
        return value

    @classmethod
    def _wire_key(cls, key: str) -> str:
        """Map a snake_case field name to its query token; pass others through."""
        if key in cls.model_fields and key != "quote_args":
            return to_camel(key)
        return key

    def to_query_params(self) -> dict[str, str]:
        """Flatten into query parameters.

        Extra ``quote_args`` are merged first, then named fields are written
        over them so a named field always wins on conflict.
        """
        params: dict[str, str] = {}

        for key, value in (self.quote_args or {}).items():
            params[self._wire_key(key)] = value

        named = self.model_dump(mode="json", exclude_none=True, exclude={"quote_args"})
        for name, value in named.items():
            params[to_camel(name)] = _query_value(value)

        return params


class PlatformFee(ResponseModel):
    """Platform fee collected on the swap."""

    amount: U64String
    fee_bps: int = Field(..., ge=0, le=10_000)


class QuoteResponse(ResponseModel):
    """Best quote with the route to execute it.

    Passed verbatim into a swap request.
    """

    input_mint: Pubkey
    in_amount: U64String
    output_mint: Pubkey
    out_amount: U64String
    other_amount_threshold: U64String = Field(
        ..., description="Min out for ExactIn, max in for ExactOut"
    )
    swap_mode: SwapMode
    slippage_bps: int = Field(..., ge=0, le=10_000)
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: DecimalString
    route_plan: RoutePlan
    context_slot: Optional[int] = None
    time_taken: Optional[float] = None

    @property
    def is_exact_in(self) -> bool:
        return self.swap_mode == SwapMode.EXACT_IN

    @property
    def min_out_amount(self) -> int:
        """Minimum output after slippage (out_amount for ExactOut)."""
        return self.other_amount_threshold if self.is_exact_in else self.out_amount

    @property
    def max_in_amount(self) -> int:
        """Maximum input after slippage (in_amount for ExactIn)."""
        return self.in_amount if self.is_exact_in else self.other_amount_threshold

    @property
    def dex_path(self) -> list[str]:
        """DEX labels along the route, in order."""
        return [step.swap_info.label for step in self.route_plan]
