"""Request and response contracts for the swap API.

These Pydantic models define the wire interface of the quote, swap and
swap-instructions endpoints.
"""

from jupswap.contracts.base import ResponseModel, U64String, WireModel
from jupswap.contracts.quote import (
    InstructionVersion,
    PlatformFee,
    QuoteRequest,
    QuoteResponse,
    SwapMode,
)
from jupswap.contracts.route_plan import RoutePlan, RoutePlanStep, SwapInfo
from jupswap.contracts.swap import (
    AccountMeta,
    Instruction,
    SwapInstructionsResponse,
    SwapRequest,
    SwapResponse,
)
from jupswap.contracts.transaction_config import (
    AutoComputeUnitPrice,
    AutoMultiplierFee,
    ComputeUnitPrice,
    ComputeUnitPriceMicroLamports,
    DynamicSlippageSettings,
    PrioritizationFee,
    PrioritizationFeeLamports,
    PriorityLevel,
    PriorityLevelFee,
    TransactionConfig,
    decode_compute_unit_price,
    decode_prioritization_fee,
    encode_compute_unit_price,
    encode_prioritization_fee,
)

__all__ = [
    # Base
    "WireModel",
    "ResponseModel",
    "U64String",
    # Quote
    "SwapMode",
    "InstructionVersion",
    "QuoteRequest",
    "QuoteResponse",
    "PlatformFee",
    "RoutePlan",
    "RoutePlanStep",
    "SwapInfo",
    # Transaction config
    "TransactionConfig",
    "DynamicSlippageSettings",
    "PriorityLevel",
    "PrioritizationFee",
    "PrioritizationFeeLamports",
    "AutoMultiplierFee",
    "PriorityLevelFee",
    "ComputeUnitPrice",
    "ComputeUnitPriceMicroLamports",
    "AutoComputeUnitPrice",
    "decode_prioritization_fee",
    "encode_prioritization_fee",
    "decode_compute_unit_price",
    "encode_compute_unit_price",
    # Swap
    "SwapRequest",
    "SwapResponse",
    "SwapInstructionsResponse",
    "Instruction",
    "AccountMeta",
]
