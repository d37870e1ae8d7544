"""Pytest configuration and fixtures."""

import base64
import os

import pytest

# Keep a developer's .env / environment out of the tests
os.environ.pop("JUPITER_API_KEY", None)
os.environ.pop("JUPITER_API_BASE_URL", None)

from constants import (
    AMM_KEY,
    COMPUTE_BUDGET_PROGRAM,
    LOOKUP_TABLE,
    SOL_MINT,
    SWAP_TX_BYTES,
    TOKEN_PROGRAM,
    USDC_MINT,
    USER_KEY,
)


@pytest.fixture
def quote_response_data() -> dict:
    """A single-hop USDC -> SOL quote as the service returns it."""
    return {
        "inputMint": USDC_MINT,
        "inAmount": "1000000",
        "outputMint": SOL_MINT,
        "outAmount": "6535963",
        "otherAmountThreshold": "6503283",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "platformFee": None,
        "priceImpactPct": "0.0000123456789",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": AMM_KEY,
                    "label": "Whirlpool",
                    "inputMint": USDC_MINT,
                    "outputMint": SOL_MINT,
                    "inAmount": "1000000",
                    "outAmount": "6535963",
                    "feeAmount": "100",
                    "feeMint": USDC_MINT,
                },
                "percent": 100,
                "bps": 10000,
            }
        ],
        "contextSlot": 299283763,
        "timeTaken": 0.00312,
        "swapUsdValue": "1.0001",
    }


@pytest.fixture
def swap_response_data() -> dict:
    return {
        "swapTransaction": base64.b64encode(SWAP_TX_BYTES).decode(),
        "lastValidBlockHeight": 279632475,
        "prioritizationFeeLamports": 9999,
        "computeUnitLimit": 388876,
        "prioritizationType": {"computeBudget": {"microLamports": 25715, "estimatedMicroLamports": 785154}},
        "dynamicSlippageReport": None,
        "simulationError": None,
    }


def _instruction(program_id: str, data: bytes, accounts: list) -> dict:
    return {
        "programId": program_id,
        "accounts": accounts,
        "data": base64.b64encode(data).decode(),
    }


@pytest.fixture
def swap_instructions_data() -> dict:
    user_signer = {"pubkey": USER_KEY, "isSigner": True, "isWritable": True}
    return {
        "computeBudgetInstructions": [
            _instruction(COMPUTE_BUDGET_PROGRAM, bytes([2, 0x40, 0x0D, 0x03, 0x00]), []),
        ],
        "setupInstructions": [
            _instruction(
                TOKEN_PROGRAM,
                bytes([1]),
                [user_signer, {"pubkey": SOL_MINT, "isSigner": False, "isWritable": False}],
            ),
        ],
        "swapInstruction": _instruction(
            "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4",
            b"\xe5\x17\xcb\x97\x7a\xe3\xad\x2a",
            [user_signer, {"pubkey": AMM_KEY, "isSigner": False, "isWritable": True}],
        ),
        "addressLookupTableAddresses": [LOOKUP_TABLE],
        "prioritizationFeeLamports": 0,
        "computeUnitLimit": 200000,
    }
