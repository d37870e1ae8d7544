"""Jupiter swap API client: quote, swap and swap-instructions contracts."""

from jupswap.client import JupiterSwapApiClient, create_client
from jupswap.codecs import Pubkey, decode_payload, decode_pubkey, encode_payload, encode_pubkey
from jupswap.contracts import (
    QuoteRequest,
    QuoteResponse,
    SwapInstructionsResponse,
    SwapMode,
    SwapRequest,
    SwapResponse,
    TransactionConfig,
)
from jupswap.exceptions import (
    DeserializationError,
    InvalidIdentifier,
    JupiterError,
    MalformedPayload,
    RequestFailed,
    UnrecognizedConfigShape,
)

__version__ = "0.1.0"

__all__ = [
    "JupiterSwapApiClient",
    "create_client",
    "Pubkey",
    "encode_pubkey",
    "decode_pubkey",
    "encode_payload",
    "decode_payload",
    "QuoteRequest",
    "QuoteResponse",
    "SwapMode",
    "SwapRequest",
    "SwapResponse",
    "SwapInstructionsResponse",
    "TransactionConfig",
    "JupiterError",
    "RequestFailed",
    "DeserializationError",
    "InvalidIdentifier",
    "MalformedPayload",
    "UnrecognizedConfigShape",
]
