"""Assembly of API calls and parsing of their responses.

Nothing here performs I/O. ``build_*`` functions describe a request; the
transport executes it, checks the status with ``check_status`` and hands
the body to the matching ``parse_*`` function.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from jupswap.contracts.quote import QuoteRequest, QuoteResponse
from jupswap.contracts.swap import SwapInstructionsResponse, SwapRequest, SwapResponse
from jupswap.exceptions import RequestFailed

logger = logging.getLogger(__name__)

QUOTE_PATH = "/quote"
SWAP_PATH = "/swap"
SWAP_INSTRUCTIONS_PATH = "/swap-instructions"

Payload = Union[bytes, str, dict]


@dataclass(frozen=True)
class ApiCall:
    """A fully formed logical request."""

    method: str
    path: str
    params: Optional[dict[str, str]] = None
    body: Optional[dict[str, Any]] = None


def build_quote_call(request: QuoteRequest) -> ApiCall:
    """GET /quote with the request flattened into query parameters."""
    params = request.to_query_params()
    logger.debug(
        f"Quote call: {params.get('amount')} {params.get('inputMint')} -> "
        f"{params.get('outputMint')} ({params.get('slippageBps')} bps)"
    )
    return ApiCall(method="GET", path=QUOTE_PATH, params=params)


def build_swap_call(
    request: SwapRequest, extra_args: Optional[dict[str, str]] = None
) -> ApiCall:
    """POST /swap; ``extra_args`` are sent as query parameters."""
    logger.debug(f"Swap call for {request.user_public_key}")
    return ApiCall(
        method="POST",
        path=SWAP_PATH,
        params=dict(extra_args) if extra_args else None,
        body=request.to_wire(),
    )


def build_swap_instructions_call(request: SwapRequest) -> ApiCall:
    """POST /swap-instructions."""
    logger.debug(f"Swap instructions call for {request.user_public_key}")
    return ApiCall(method="POST", path=SWAP_INSTRUCTIONS_PATH, body=request.to_wire())


def check_status(status: int, body: Union[bytes, str]) -> None:
    """Raise ``RequestFailed`` for any non-2xx status, keeping the body raw."""
    if not 200 <= status < 300:
        logger.warning(f"Swap API returned status {status}")
        raise RequestFailed(status, body)


def parse_quote_response(payload: Payload) -> QuoteResponse:
    """Raises ``DeserializationError`` if the body is not a quote response."""
    return QuoteResponse.from_wire(payload)


def parse_swap_response(payload: Payload) -> SwapResponse:
    """Raises ``DeserializationError`` if the body is not a swap response."""
    return SwapResponse.from_wire(payload)


def parse_swap_instructions_response(payload: Payload) -> SwapInstructionsResponse:
    """Raises ``DeserializationError`` if the body is not a swap-instructions response."""
    return SwapInstructionsResponse.from_wire(payload)
