"""Swap transaction construction options.

Every option is optional. An unset option is left out of the request body
entirely so the service applies its own default; an explicit ``False`` or
``0`` is sent as-is.

Two options carry values whose shape is not tagged on the wire and is
inferred from the JSON structure instead:

Prioritization fee (``prioritizationFeeLamports``)::

    10000                                        fixed lamports
    {"autoMultiplier": 2, "maxLamports": 5000}   auto estimate times multiplier
    {"priorityLevelWithMaxLamports":
        {"priorityLevel": "veryHigh", "maxLamports": 5000}}   priority tier

``maxLamports`` is optional in both mapping shapes.

Compute unit price (``computeUnitPriceMicroLamports``)::

    500      fixed micro-lamports per compute unit
    "auto"   service estimate
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import Field, PlainSerializer, PlainValidator

from jupswap.codecs.pubkey import Pubkey
from jupswap.contracts.base import WireModel
from jupswap.exceptions import UnrecognizedConfigShape

AUTO_MULTIPLIER_KEY = "autoMultiplier"
PRIORITY_LEVEL_KEY = "priorityLevelWithMaxLamports"
MAX_LAMPORTS_KEY = "maxLamports"
AUTO_COMPUTE_UNIT_PRICE = "auto"


class PriorityLevel(str, Enum):
    """Named priority tiers. Closed set; unknown names are rejected."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"
    UNSAFE_MAX = "unsafeMax"


# ======================
# Prioritization fee
# ======================


@dataclass(frozen=True)
class PrioritizationFeeLamports:
    """Fixed fee in lamports."""

    lamports: int


@dataclass(frozen=True)
class AutoMultiplierFee:
    """Service-estimated fee scaled by ``multiplier``, optionally capped."""

    multiplier: int
    max_lamports: Optional[int] = None


@dataclass(frozen=True)
class PriorityLevelFee:
    """Fee for a named priority tier, optionally capped."""

    priority_level: PriorityLevel
    max_lamports: Optional[int] = None


PrioritizationFee = Union[PrioritizationFeeLamports, AutoMultiplierFee, PriorityLevelFee]


def _is_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _read_lamports(value: Any, what: str) -> int:
    if not _is_number(value) or value < 0:
        raise UnrecognizedConfigShape(f"{what} must be a non-negative integer, got {value!r}")
    return value


def _read_cap(record: dict) -> Optional[int]:
    if record.get(MAX_LAMPORTS_KEY) is None:
        return None
    return _read_lamports(record[MAX_LAMPORTS_KEY], MAX_LAMPORTS_KEY)


def decode_prioritization_fee(value: Any) -> PrioritizationFee:
    """Infer the fee shape from its JSON value.

    Shapes are tried in order: bare number, auto multiplier, priority tier.

    Raises:
        UnrecognizedConfigShape: if no shape matches or the tier is unknown
    """
    if isinstance(value, (PrioritizationFeeLamports, AutoMultiplierFee, PriorityLevelFee)):
        return value

    if _is_number(value):
        return PrioritizationFeeLamports(_read_lamports(value, "lamports"))

    if isinstance(value, dict):
        if AUTO_MULTIPLIER_KEY in value:
            return AutoMultiplierFee(
                multiplier=_read_lamports(value[AUTO_MULTIPLIER_KEY], AUTO_MULTIPLIER_KEY),
                max_lamports=_read_cap(value),
            )

        if PRIORITY_LEVEL_KEY in value:
            tier = value[PRIORITY_LEVEL_KEY]
            if not isinstance(tier, dict):
                raise UnrecognizedConfigShape(f"{PRIORITY_LEVEL_KEY} must be an object")
            try:
                level = PriorityLevel(tier.get("priorityLevel"))
            except ValueError as e:
                raise UnrecognizedConfigShape(
                    f"Unknown priority level: {tier.get('priorityLevel')!r}"
                ) from e
            return PriorityLevelFee(priority_level=level, max_lamports=_read_cap(tier))

    raise UnrecognizedConfigShape(f"Unrecognized prioritization fee: {value!r}")


def encode_prioritization_fee(fee: PrioritizationFee) -> Union[int, dict[str, Any]]:
    """Encode a fee in the wire shape matching its variant."""
    if isinstance(fee, PrioritizationFeeLamports):
        return fee.lamports

    if isinstance(fee, AutoMultiplierFee):
        encoded: dict[str, Any] = {AUTO_MULTIPLIER_KEY: fee.multiplier}
        if fee.max_lamports is not None:
            encoded[MAX_LAMPORTS_KEY] = fee.max_lamports
        return encoded

    if isinstance(fee, PriorityLevelFee):
        tier: dict[str, Any] = {"priorityLevel": fee.priority_level.value}
        if fee.max_lamports is not None:
            tier[MAX_LAMPORTS_KEY] = fee.max_lamports
        return {PRIORITY_LEVEL_KEY: tier}

    raise TypeError(f"Not a prioritization fee: {type(fee).__name__}")


# ======================
# Compute unit price
# ======================


@dataclass(frozen=True)
class ComputeUnitPriceMicroLamports:
    """Fixed price per compute unit."""

    micro_lamports: int


@dataclass(frozen=True)
class AutoComputeUnitPrice:
    """Let the service estimate the price."""


ComputeUnitPrice = Union[ComputeUnitPriceMicroLamports, AutoComputeUnitPrice]


def decode_compute_unit_price(value: Any) -> ComputeUnitPrice:
    """Infer the compute unit price shape: bare number, then ``"auto"``.

    Raises:
        UnrecognizedConfigShape: if neither shape matches
    """
    if isinstance(value, (ComputeUnitPriceMicroLamports, AutoComputeUnitPrice)):
        return value
    if _is_number(value):
        return ComputeUnitPriceMicroLamports(_read_lamports(value, "micro_lamports"))
    if value == AUTO_COMPUTE_UNIT_PRICE:
        return AutoComputeUnitPrice()
    raise UnrecognizedConfigShape(f"Unrecognized compute unit price: {value!r}")


def encode_compute_unit_price(price: ComputeUnitPrice) -> Union[int, str]:
    if isinstance(price, ComputeUnitPriceMicroLamports):
        return price.micro_lamports
    if isinstance(price, AutoComputeUnitPrice):
        return AUTO_COMPUTE_UNIT_PRICE
    raise TypeError(f"Not a compute unit price: {type(price).__name__}")


PrioritizationFeeField = Annotated[
    PrioritizationFee,
    PlainValidator(decode_prioritization_fee),
    PlainSerializer(encode_prioritization_fee, when_used="json"),
]

ComputeUnitPriceField = Annotated[
    ComputeUnitPrice,
    PlainValidator(decode_compute_unit_price),
    PlainSerializer(encode_compute_unit_price, when_used="json"),
]


# ======================
# Transaction config
# ======================


class DynamicSlippageSettings(WireModel):
    """Bounds for service-computed slippage."""

    min_bps: Optional[int] = Field(None, ge=0, le=10_000)
    max_bps: Optional[int] = Field(None, ge=0, le=10_000)


class TransactionConfig(WireModel):
    """Options that shape the swap transaction the service builds."""

    # SOL handling
    wrap_and_unwrap_sol: Optional[bool] = Field(
        None, description="Wrap SOL input / unwrap SOL output (service default: true)"
    )
    allow_optimized_wrapped_sol_token_account: Optional[bool] = None

    # Accounts
    fee_account: Optional[Pubkey] = Field(
        None, description="Token account collecting the platform fee"
    )
    destination_token_account: Optional[Pubkey] = Field(
        None, description="Token account receiving the output (default: user ATA)"
    )
    tracking_account: Optional[Pubkey] = None
    program_authority_id: Optional[int] = None

    # Fees and compute budget
    compute_unit_price_micro_lamports: Optional[ComputeUnitPriceField] = None
    prioritization_fee_lamports: Optional[PrioritizationFeeField] = None
    dynamic_compute_unit_limit: Optional[bool] = Field(
        None, description="Simulate to size the compute unit limit instead of a fixed limit"
    )

    # Slippage override
    dynamic_slippage: Optional[DynamicSlippageSettings] = None

    # Transaction format
    as_legacy_transaction: Optional[bool] = None
    use_shared_accounts: Optional[bool] = None
    use_token_ledger: Optional[bool] = None
    skip_user_accounts_rpc_calls: Optional[bool] = None
    blockhash_slots_to_expiry: Optional[int] = Field(None, ge=0)
