"""Async HTTP client for the Jupiter swap API.

API docs: https://dev.jup.ag/docs/swap-api

Each method issues exactly one request. Retries, rate limiting and
signing are left to the caller.
"""

import logging
from typing import Optional

import httpx

from jupswap.config import Settings, get_settings
from jupswap.contracts.quote import QuoteRequest, QuoteResponse
from jupswap.contracts.swap import SwapInstructionsResponse, SwapRequest, SwapResponse
from jupswap.orchestrator import (
    ApiCall,
    build_quote_call,
    build_swap_call,
    build_swap_instructions_call,
    check_status,
    parse_quote_response,
    parse_swap_instructions_response,
    parse_swap_response,
)

logger = logging.getLogger(__name__)

# Jupiter API endpoints
JUPITER_LITE_API = "https://lite-api.jup.ag/swap/v1"
JUPITER_PRO_API = "https://api.jup.ag/swap/v1"


class JupiterSwapApiClient:
    """Client for the quote, swap and swap-instructions endpoints."""

    def __init__(
        self,
        base_url: str = JUPITER_LITE_API,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API base URL, e.g. https://lite-api.jup.ag/swap/v1
            api_key: Optional API key, sent as the x-api-key header
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _get_headers(self) -> dict:
        """Get API headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    async def _execute(self, call: ApiCall) -> bytes:
        """Send one request and return the raw body of a 2xx response."""
        url = f"{self.base_url}{call.path}"
        logger.debug(f"{call.method} {url}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.request(
                call.method,
                url,
                headers=self._get_headers(),
                params=call.params,
                json=call.body,
            )

        check_status(response.status_code, response.content)
        return response.content

    async def quote(self, request: QuoteRequest) -> QuoteResponse:
        """Get the best quote and route plan."""
        body = await self._execute(build_quote_call(request))
        quote = parse_quote_response(body)
        logger.info(
            f"Quote: {quote.in_amount} {quote.input_mint} -> {quote.out_amount} "
            f"{quote.output_mint} via {' > '.join(quote.dex_path) or 'no route'}"
        )
        return quote

    async def swap(
        self, request: SwapRequest, extra_args: Optional[dict[str, str]] = None
    ) -> SwapResponse:
        """Get a serialized swap transaction for the quoted route."""
        body = await self._execute(build_swap_call(request, extra_args))
        response = parse_swap_response(body)
        logger.info(
            f"Swap transaction built ({len(response.swap_transaction)} bytes, "
            f"valid until block {response.last_valid_block_height})"
        )
        return response

    async def swap_instructions(self, request: SwapRequest) -> SwapInstructionsResponse:
        """Get the swap as individual instructions."""
        body = await self._execute(build_swap_instructions_call(request))
        response = parse_swap_instructions_response(body)
        logger.info(f"Swap instructions built ({len(response.instructions)} instructions)")
        return response


def create_client(settings: Optional[Settings] = None) -> JupiterSwapApiClient:
    """Create a client from settings (environment by default)."""
    settings = settings or get_settings()
    return JupiterSwapApiClient(
        base_url=settings.base_url,
        api_key=settings.api_key,
        timeout=settings.timeout_seconds,
    )
